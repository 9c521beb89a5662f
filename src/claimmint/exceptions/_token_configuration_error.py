class TokenConfigurationError(Exception):
    """Signing keys or token settings are missing or invalid."""

from ._token_settings import TokenSettings

__all__ = ["TokenSettings"]

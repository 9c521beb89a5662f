from ._token_service import TokenService

__all__ = ["TokenService"]

from ._claims_validator import ClaimsValidator, validate_claims

__all__ = ["ClaimsValidator", "validate_claims"]

from ._claim_dict import ClaimDict, ClaimMap
from ._claims import Claims

__all__ = ["ClaimDict", "ClaimMap", "Claims"]

from ._max_age import MIN_MAX_AGE, MaxAge, max_age_map
from ._sign_option import SignOption, SignOptionFunc, apply_sign_options

__all__ = [
    "MIN_MAX_AGE",
    "MaxAge",
    "SignOption",
    "SignOptionFunc",
    "apply_sign_options",
    "max_age_map",
]

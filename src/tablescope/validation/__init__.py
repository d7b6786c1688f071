from tablescope.validation.rules import ALL_RULES
from tablescope.validation.validator import validate

__all__ = ["ALL_RULES", "validate"]

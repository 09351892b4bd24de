"""
Validator catalogue for Propcheck.

Ready-made PropertyValidator implementations grouped by the kind of value
they check.
"""

from .collection import (
    HasMaxNumberOfElementsValidator,
    HasMinNumberOfElementsValidator,
    HasNumberOfElementsValidator,
    IsEmptyValidator,
    IsNotEmptyValidator,
)
from .common import (
    IsDefinedValidator,
    IsEqualValidator,
    IsInValidator,
    IsNotNullValidator,
    PredicateValidator,
)
from .date import IsAfterValidator, IsBeforeValidator
from .strings import (
    ContainsValidator,
    IsBooleanStringValidator,
    IsLowercaseValidator,
    IsNumericStringValidator,
    IsUppercaseValidator,
    MatchesValidator,
)
from .type_checks import IsBooleanValidator, IsDateValidator, IsNumberValidator, IsStringValidator

__all__ = [
    # Collection
    "IsNotEmptyValidator",
    "IsEmptyValidator",
    "HasNumberOfElementsValidator",
    "HasMinNumberOfElementsValidator",
    "HasMaxNumberOfElementsValidator",
    # Common
    "IsDefinedValidator",
    "IsNotNullValidator",
    "IsEqualValidator",
    "IsInValidator",
    "PredicateValidator",
    # Date
    "IsBeforeValidator",
    "IsAfterValidator",
    # String
    "ContainsValidator",
    "IsBooleanStringValidator",
    "IsLowercaseValidator",
    "IsNumericStringValidator",
    "IsUppercaseValidator",
    "MatchesValidator",
    # Type
    "IsNumberValidator",
    "IsStringValidator",
    "IsBooleanValidator",
    "IsDateValidator",
]

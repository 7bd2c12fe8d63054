"""fieldrules: declarative validation rules for data-model fields."""

from fieldrules.exceptions import RuleConfigurationError
from fieldrules.validation import (
    AllowedValueSwitchValidator,
    DataTypeValidator,
    EmailValidator,
    LengthValidator,
    MissingValuePolicy,
    RegExpValidator,
    RequiredValidator,
    ValidationResult,
    ValidationRule,
    ValidationService,
)

__all__ = [
    "AllowedValueSwitchValidator",
    "DataTypeValidator",
    "EmailValidator",
    "LengthValidator",
    "MissingValuePolicy",
    "RegExpValidator",
    "RequiredValidator",
    "RuleConfigurationError",
    "ValidationResult",
    "ValidationRule",
    "ValidationService",
]

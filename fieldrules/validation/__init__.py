"""Validation rules for data-model fields.

Rules are configured once and evaluated per write: each holds an ordered
list of conditions that must all pass. Built-in variants cover length
bounds, patterns, email format, required values, allowed value
transitions and data-type shapes.
"""

from fieldrules.validation.base import Condition, ValidationRule
from fieldrules.validation.results import ValidationResult
from fieldrules.validation.service import ValidationService
from fieldrules.validation.shapes import (
    Primitive,
    PrimitiveKind,
    Shape,
    build_shape,
    check_shape,
)
from fieldrules.validation.state import RuleState
from fieldrules.validation.validators import (
    AllowedValueSwitchValidator,
    DataTypeValidator,
    EmailValidator,
    LengthValidator,
    MissingValuePolicy,
    RegExpValidator,
    RequiredValidator,
    Transition,
)

__all__ = [
    "AllowedValueSwitchValidator",
    "Condition",
    "DataTypeValidator",
    "EmailValidator",
    "LengthValidator",
    "MissingValuePolicy",
    "Primitive",
    "PrimitiveKind",
    "RegExpValidator",
    "RequiredValidator",
    "RuleState",
    "Shape",
    "Transition",
    "ValidationResult",
    "ValidationRule",
    "ValidationService",
    "build_shape",
    "check_shape",
]

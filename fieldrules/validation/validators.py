"""Built-in rule variants.

Each variant parses its parameter bag with a pydantic model and supplies a
fixed list of conditions. Conditions receive the per-call RuleState, add a
message when they have something to explain, and return a plain bool.
"""

import math
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from fieldrules.config import get_settings
from fieldrules.const import (
    EMAIL_PATTERN,
    INVALID_EMAIL_MESSAGE,
    LONGER_THAN_MESSAGE,
    NO_LENGTH_MESSAGE,
    REQUIRED_MESSAGE,
    SHORTER_THAN_MESSAGE,
)
from fieldrules.exceptions import RuleConfigurationError, get_error_human_message
from fieldrules.utils.logging import get_logger
from fieldrules.validation.base import Condition, ValidationRule
from fieldrules.validation.shapes import Shape, build_shape, check_shape
from fieldrules.validation.state import RuleState

logger = get_logger(__name__)

__all__ = [
    "AllowedValueSwitchValidator",
    "DataTypeValidator",
    "EmailValidator",
    "LengthValidator",
    "MissingValuePolicy",
    "RegExpValidator",
    "RequiredValidator",
    "Transition",
]


# ============================================================================
# Length
# ============================================================================


class LengthParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    min: int | None = Field(default=None, description="Smallest accepted size")
    max: int | None = Field(default=None, description="Largest accepted size")


class LengthValidator(ValidationRule):
    """Checks that len(value) lies between min and max, both inclusive.

    Either bound may be omitted. Both bounds are checked on every call so a
    failing value reports every bound it violates.
    """

    name = "length"
    params_model = LengthParams

    def default_conditions(self) -> list[Condition]:
        return [self._check_length]

    def _check_length(self, state: RuleState) -> bool:
        try:
            size = len(state.value)
        except TypeError:
            state.add_message(NO_LENGTH_MESSAGE.format(value=state.value))
            return False

        match = True
        if self.config.min is not None and size < self.config.min:
            match = False
            state.add_message(
                SHORTER_THAN_MESSAGE.format(value=state.value, min=self.config.min)
            )
        if self.config.max is not None and size > self.config.max:
            match = False
            state.add_message(
                LONGER_THAN_MESSAGE.format(value=state.value, max=self.config.max)
            )
        return match


# ============================================================================
# Pattern matching
# ============================================================================


class RegExpParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    rule: re.Pattern = Field(description="Pattern the value must contain a match for")


class RegExpValidator(ValidationRule):
    """Checks that a string value matches the configured pattern.

    Matching uses re.search, so the pattern must carry its own anchors when
    the whole value has to match. Fails silently: no message is added.
    """

    name = "regexp"
    params_model = RegExpParams

    def default_conditions(self) -> list[Condition]:
        return [self._check_pattern]

    def _check_pattern(self, state: RuleState) -> bool:
        if not isinstance(state.value, str):
            return False
        return self.config.rule.search(state.value) is not None


class EmailValidator(ValidationRule):
    """Checks that the value looks like an email address."""

    name = "email"

    def __init__(self, parameters: Mapping[str, Any] | None = None, **options: Any):
        super().__init__(parameters, **options)
        self._pattern_rule = RegExpValidator(rule=EMAIL_PATTERN)

    def default_conditions(self) -> list[Condition]:
        return [self._check_email]

    def _check_email(self, state: RuleState) -> bool:
        if not self._pattern_rule.is_valid(None, state.value):
            state.add_message(INVALID_EMAIL_MESSAGE.format(value=state.value))
            return False
        return True


# ============================================================================
# Required
# ============================================================================


class MissingValuePolicy(BaseModel):
    """Which values RequiredValidator counts as not provided.

    None is always missing. The defaults reproduce plain falsy checks on
    scalars, while empty lists and dicts still count as provided.
    """

    model_config = ConfigDict(frozen=True)

    treat_empty_string_as_missing: bool = True
    treat_zero_as_missing: bool = True
    treat_false_as_missing: bool = True
    treat_empty_collection_as_missing: bool = False

    @classmethod
    def from_settings(cls) -> "MissingValuePolicy":
        """Build the default policy from REQUIRED_* environment settings."""
        rules = get_settings().rules
        return cls(
            treat_zero_as_missing=rules.required_zero_is_missing,
            treat_false_as_missing=rules.required_false_is_missing,
        )

    def is_missing(self, value: Any) -> bool:
        if value is None:
            return True
        if isinstance(value, bool):
            return self.treat_false_as_missing and value is False
        if isinstance(value, int | float):
            is_zero = value == 0 or (isinstance(value, float) and math.isnan(value))
            return self.treat_zero_as_missing and is_zero
        if isinstance(value, str):
            return self.treat_empty_string_as_missing and value == ""
        if isinstance(value, list | tuple | set | frozenset | dict):
            return self.treat_empty_collection_as_missing and len(value) == 0
        return False


class RequiredParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    policy: MissingValuePolicy | None = None


class RequiredValidator(ValidationRule):
    """Checks that a value was provided."""

    name = "required"
    params_model = RequiredParams

    def __init__(self, parameters: Mapping[str, Any] | None = None, **options: Any):
        super().__init__(parameters, **options)
        self.policy = self.config.policy or MissingValuePolicy.from_settings()

    def default_conditions(self) -> list[Condition]:
        return [self._check_present]

    def _check_present(self, state: RuleState) -> bool:
        if self.policy.is_missing(state.value):
            state.add_message(REQUIRED_MESSAGE)
            return False
        return True


# ============================================================================
# Allowed value transitions
# ============================================================================


class Transition(BaseModel):
    """One allowed move: from a previous value to any of the listed values."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    from_: Any = Field(alias="from")
    to: list[Any] = Field(default_factory=list)


class AllowedValueSwitchParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    matches: list[Transition] = Field(default_factory=list)


def _same(a: Any, b: Any) -> bool:
    """Equality that keeps booleans apart from 0 and 1."""
    return a == b and isinstance(a, bool) == isinstance(b, bool)


class AllowedValueSwitchValidator(ValidationRule):
    """Checks that (previous_value -> value) is an allowed transition.

    Example:
        >>> rule = AllowedValueSwitchValidator(
        ...     matches=[{"from": "open", "to": ["scheduled", "closed"]}]
        ... )
        >>> rule.is_valid("open", "closed")
        True
        >>> rule.is_valid("closed", "open")
        False

    A failed transition adds no message.
    """

    name = "allowed-value-switch"
    params_model = AllowedValueSwitchParams

    def default_conditions(self) -> list[Condition]:
        return [self._check_transition]

    def _check_transition(self, state: RuleState) -> bool:
        for transition in self.config.matches:
            if _same(transition.from_, state.previous_value) and any(
                _same(state.value, allowed) for allowed in transition.to
            ):
                return True
        logger.debug(
            "Transition not allowed",
            rule=self.name,
            previous_value=state.previous_value,
            value=state.value,
        )
        return False


# ============================================================================
# Data type shape
# ============================================================================


class DataTypeValidator(ValidationRule):
    """Checks that a mapping has exactly the declared fields and types.

    Parameters are the shape itself: field names mapped to str, int/float
    (any number), bool, or a nested mapping of the same form.

    Example:
        >>> rule = DataTypeValidator({"name": str, "person": {"age": int}})
        >>> rule.is_valid(None, {"name": "Ada", "person": {"age": 36}})
        True
    """

    name = "data-type"

    def _parse_parameters(self, parameters: Mapping[str, Any] | None) -> Shape:
        try:
            return build_shape(parameters or {})
        except TypeError as e:
            raise RuleConfigurationError(self.name, get_error_human_message(e)) from e

    @property
    def shape(self) -> Shape:
        return self.config

    def default_conditions(self) -> list[Condition]:
        return [self._check_shape]

    def _check_shape(self, state: RuleState) -> bool:
        errors = check_shape(self.shape, state.value)
        if errors:
            state.add_message("; ".join(errors))
            return False
        return True

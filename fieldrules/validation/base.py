"""Rule base class: an ordered list of conditions evaluated with AND semantics.

A rule is configured once with a parameter bag and evaluated many times.
Each evaluation creates a fresh RuleState, runs the conditions in order and
stops at the first one that returns exactly False.
"""

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from fieldrules.config import get_settings
from fieldrules.exceptions import RuleConfigurationError, get_error_human_message
from fieldrules.utils.logging import get_logger
from fieldrules.validation.results import ValidationResult
from fieldrules.validation.state import RuleState

logger = get_logger(__name__)

__all__ = [
    "Condition",
    "ValidationRule",
]

Condition = Callable[[RuleState], Any]


class ValidationRule:
    """Configurable validator made of pass/fail conditions.

    Subclasses provide their fixed checks through default_conditions() and,
    when they take parameters, a pydantic params_model used to parse the bag.
    Custom rules can be built from the base class with add_condition().

    Example:
        >>> rule = ValidationRule()
        >>> rule.add_condition(lambda state: state.value != "forbidden")
        >>> rule.is_valid(None, "forbidden")
        False
    """

    name = "validation-rule"
    params_model: type[BaseModel] | None = None

    def __init__(self, parameters: Mapping[str, Any] | None = None, **options: Any):
        """Initialize the rule with its configuration.

        Args:
            parameters: Parameter bag interpreted by the rule's conditions
            **options: Extra parameters, merged over the bag

        Raises:
            RuleConfigurationError: If params_model rejects the parameters
        """
        if options:
            parameters = {**(parameters or {}), **options}
        self.parameters = parameters
        self.config = self._parse_parameters(parameters)
        self.conditions: list[Condition] = list(self.default_conditions())
        self._state = RuleState()

    def _parse_parameters(self, parameters: Mapping[str, Any] | None) -> Any:
        if self.params_model is None:
            return parameters
        try:
            return self.params_model.model_validate(parameters or {})
        except ValidationError as e:
            raise RuleConfigurationError(self.name, get_error_human_message(e)) from e

    def default_conditions(self) -> list[Condition]:
        """Conditions every instance of this rule starts with."""
        return []

    @property
    def params(self) -> Mapping[str, Any] | None:
        return self.parameters

    @property
    def value(self) -> Any:
        """Value validated by the last call."""
        return self._state.value

    @property
    def previous_value(self) -> Any:
        """Previous value supplied to the last call."""
        return self._state.previous_value

    def validate(self, previous_value: Any = None, value: Any = None) -> ValidationResult:
        """Evaluate all conditions against a value.

        Args:
            previous_value: The value being replaced, if any
            value: The new value to validate

        Returns:
            ValidationResult holding the outcome and the collected message
        """
        state = RuleState(value=value, previous_value=previous_value)
        self._state = state

        success = True
        for index, condition in enumerate(self.conditions):
            if condition(state) is False:
                logger.debug(
                    "Condition failed", rule=self.name, condition_index=index
                )
                success = False
                break

        result = ValidationResult(
            success=success, message=state.message, validator_name=self.name
        )
        if result.failed and get_settings().rules.log_failures:
            logger.info("Validation failed", rule=self.name, reason=result.message)
        return result

    def is_valid(self, previous_value: Any = None, value: Any = None) -> bool:
        """Check whether the value passes every condition.

        Args:
            previous_value: The value being replaced, if any
            value: The new value to validate

        Returns:
            True if no condition returned False
        """
        return self.validate(previous_value, value).success

    def get_message(self) -> str:
        """Retrieve the message accumulated during the last call."""
        return self._state.message

    def add_message(self, fragment: str) -> None:
        """Append a fragment to the current message."""
        self._state.add_message(fragment)

    def add_condition(self, condition: Condition) -> None:
        """Append a condition to the end of the list."""
        self.conditions.append(condition)

    def remove_condition(self, index: int) -> None:
        """Remove the condition at index.

        Raises:
            IndexError: If there is no condition at index
        """
        del self.conditions[index]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(params={self.parameters!r})"

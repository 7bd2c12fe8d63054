"""Outcome of evaluating one rule against one value."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationResult:
    """What a single rule evaluation decided.

    Attributes:
        success: True when every condition of the rule passed
        message: Diagnostic text added by the conditions during this call,
            empty when the rule passed or failed silently
        validator_name: Name of the rule that produced the result
    """

    success: bool
    message: str
    validator_name: str

    @property
    def failed(self) -> bool:
        return not self.success

    def __bool__(self) -> bool:
        return self.success

    def format_error(self) -> str:
        """Render a failed evaluation as a titled section of an error report.

        Returns empty string for a passing evaluation.
        """
        if self.success:
            return ""
        return f"## {self.validator_name} Errors\n```\n{self.message}\n```"

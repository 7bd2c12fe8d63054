"""Error types and message formatting for rule misconfiguration.

Validation failures are never exceptions: they are reported through
ValidationResult. The errors here signal programmer mistakes in the
parameters a rule was constructed with.
"""

from pydantic import ValidationError


class RuleConfigurationError(ValueError):
    """Raised when a rule is constructed with malformed parameters."""

    def __init__(self, rule_name: str, message: str):
        self.rule_name = rule_name
        self.message = message
        super().__init__(f"[{rule_name}] {message}")


def _format_pydantic_error(error: ValidationError) -> str:
    """Format pydantic ValidationError messages."""
    parts = []
    for detail in error.errors():
        location = ".".join(str(loc) for loc in detail.get("loc", ()))
        if location:
            parts.append(f"Invalid parameter '{location}': {detail['msg']}")
        else:
            parts.append(f"Invalid parameters: {detail['msg']}")
    return "\n".join(parts)


ERROR_TYPES = {
    ValidationError: _format_pydantic_error,
    RuleConfigurationError: lambda e: e.message,
    TypeError: lambda e: f"Invalid parameter type: {e!s}",
    ValueError: lambda e: str(e),
}


def get_error_human_message(error: Exception) -> str:
    """
    Get user-friendly error message based on exception type.

    Args:
        error: The exception to format

    Returns:
        Formatted error message suitable for logs and developers
    """
    for error_type, handler in ERROR_TYPES.items():
        if isinstance(error, error_type):
            return handler(error)
    return str(error)

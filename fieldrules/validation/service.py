"""Validation service for running the rules attached to model fields.

A model owns a mapping of field name to an ordered list of rules. The
service runs every rule of every written field and aggregates the results.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from fieldrules.utils.logging import get_logger
from fieldrules.validation.base import ValidationRule
from fieldrules.validation.results import ValidationResult

logger = get_logger(__name__)


class ValidationService:
    """Runs per-field rules and aggregates their results.

    Every rule of a field runs, even after one has failed, so the report
    lists all broken constraints. A field is valid only if all its rules pass.
    """

    def __init__(self, rules: Mapping[str, Sequence[ValidationRule]]):
        """Initialize service with the rules of each field.

        Args:
            rules: Mapping of field name to the rules applied to it
        """
        self.rules = {field: list(field_rules) for field, field_rules in rules.items()}

    def validate_field(
        self, field: str, previous_value: Any = None, value: Any = None
    ) -> list[ValidationResult]:
        """Run all rules attached to a field.

        Args:
            field: Field name
            previous_value: Value currently stored for the field
            value: Value about to be written

        Returns:
            One ValidationResult per rule, in rule order. Empty for unknown fields.
        """
        return [
            rule.validate(previous_value, value) for rule in self.rules.get(field, [])
        ]

    def validate_all(
        self,
        previous: Mapping[str, Any] | None,
        values: Mapping[str, Any],
    ) -> dict[str, list[ValidationResult]]:
        """Validate every written field that has rules.

        Args:
            previous: Stored document, or None when creating a new one
            values: Fields being written

        Returns:
            Dictionary mapping field name to its rule results
        """
        previous = previous or {}
        results = {
            field: self.validate_field(field, previous.get(field), value)
            for field, value in values.items()
            if field in self.rules
        }
        if self.has_errors(results):
            logger.debug(
                "Fields failed validation",
                fields=sorted(f for f, r in results.items() if any(x.failed for x in r)),
            )
        return results

    def has_errors(self, results: dict[str, list[ValidationResult]]) -> bool:
        """Check if any rule failed.

        Args:
            results: Dictionary of per-field results

        Returns:
            True if any rule of any field reported failure
        """
        return any(r.failed for field_results in results.values() for r in field_results)

    def get_messages(self, results: dict[str, list[ValidationResult]]) -> dict[str, list[str]]:
        """Collect failure messages per field.

        Args:
            results: Dictionary of per-field results

        Returns:
            Field name to the messages of its failed rules. Fields without
            failures are left out. Rules that fail silently contribute an
            empty string.
        """
        messages = {}
        for field, field_results in results.items():
            failed = [r.message for r in field_results if r.failed]
            if failed:
                messages[field] = failed
        return messages

    def format_error_report(self, results: dict[str, list[ValidationResult]]) -> str:
        """Format errors for surfacing to a user or a log.

        Args:
            results: Dictionary of per-field results

        Returns:
            Formatted error report string, empty when everything passed
        """
        sections = []
        for field, field_results in results.items():
            failed = [r for r in field_results if r.failed]
            if failed:
                body = "\n\n".join(r.format_error() for r in failed)
                sections.append(f"# {field}\n{body}")
        return "\n\n".join(sections)

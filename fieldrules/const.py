"""Constants used throughout the rule engine."""

import re

# Local-part, then a domain with a known TLD or a dotted-quad IP, then an optional port
EMAIL_PATTERN = re.compile(
    r"^[-a-z0-9~!$%^&*_=+}{'?]+(\.[-a-z0-9~!$%^&*_=+}{'?]+)*"
    r"@([a-z0-9_][-a-z0-9_]*(\.[-a-z0-9_]+)*"
    r"\.(aero|arpa|biz|com|coop|edu|gov|info|int|mil|museum|name|net|org|pro|travel|mobi|[a-z][a-z])"
    r"|([0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}))"
    r"(:[0-9]{1,5})?\Z",
    re.IGNORECASE,
)

# Diagnostic message templates
SHORTER_THAN_MESSAGE = "{value} is shorter than {min}"
LONGER_THAN_MESSAGE = "{value} is longer than {max}"
NO_LENGTH_MESSAGE = "{value} has no length"
INVALID_EMAIL_MESSAGE = "{value} is not a valid email address"
REQUIRED_MESSAGE = "A value is required and was not provided"
UNEXPECTED_FIELD_MESSAGE = "unexpected field '{path}'"
MISSING_FIELD_MESSAGE = "missing field '{path}'"
TYPE_MISMATCH_MESSAGE = "field '{path}' should be of type {kind}"
NOT_AN_OBJECT_MESSAGE = "expected an object at '{path}'"

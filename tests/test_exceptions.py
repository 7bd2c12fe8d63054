"""Tests for configuration error formatting."""

import pytest
from pydantic import BaseModel, ValidationError

from fieldrules.exceptions import RuleConfigurationError, get_error_human_message


class _Params(BaseModel):
    min: int


class TestGetErrorHumanMessage:
    """Tests for get_error_human_message()."""

    def test_pydantic_error_names_parameter(self):
        with pytest.raises(ValidationError) as exc_info:
            _Params.model_validate({"min": "abc"})

        message = get_error_human_message(exc_info.value)

        assert message.startswith("Invalid parameter 'min':")

    def test_rule_configuration_error(self):
        error = RuleConfigurationError("length", "bad bounds")
        assert get_error_human_message(error) == "bad bounds"
        assert str(error) == "[length] bad bounds"
        assert isinstance(error, ValueError)

    def test_type_error(self):
        message = get_error_human_message(TypeError("unsupported type marker"))
        assert message == "Invalid parameter type: unsupported type marker"

    def test_key_error_uses_plain_text(self):
        assert get_error_human_message(KeyError("min")) == "'min'"

    def test_unknown_error(self):
        assert get_error_human_message(RuntimeError("boom")) == "boom"

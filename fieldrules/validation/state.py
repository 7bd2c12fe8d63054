"""Per-call evaluation state shared by a rule's conditions."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class RuleState:
    """Values under validation plus the messages collected for one call.

    Attributes:
        value: The new value being validated
        previous_value: The value being replaced, None when not supplied
        messages: Message fragments in the order conditions added them
    """

    value: Any = None
    previous_value: Any = None
    messages: list[str] = field(default_factory=list)

    def add_message(self, fragment: str) -> None:
        self.messages.append(fragment)

    @property
    def message(self) -> str:
        return "".join(self.messages)

"""Choice prompt port."""

from typing import Protocol


class ChoicePrompt(Protocol):
    """Port for asking the user to pick one entry of a menu."""

    def choose(self, message: str, choices: list[tuple[str, str]]) -> str:
        """Ask the user to pick from (label, value) pairs and return the chosen value."""
        ...

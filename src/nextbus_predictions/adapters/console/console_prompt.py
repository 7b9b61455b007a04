"""Console adapter for numbered choice menus."""

import sys
from collections.abc import Callable
from typing import TextIO


class ConsolePrompt:
    """Asks the user to pick a menu entry by number on the terminal."""

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: TextIO | None = None,
    ) -> None:
        """Initialize with the input function and output stream to use."""
        self._input = input_func
        self._output = output or sys.stdout

    def choose(self, message: str, choices: list[tuple[str, str]]) -> str:
        """Print a numbered menu and return the value of the picked entry.

        Re-asks until a valid number is entered.

        Raises:
            ValueError: If there is nothing to choose from.
        """
        if not choices:
            raise ValueError(f"No choices available for: {message}")

        print(f"\n{message}:", file=self._output)
        for index, (label, _) in enumerate(choices, 1):
            print(f"  {index:>3}. {label}", file=self._output)

        while True:
            answer = self._input(f"Choose 1-{len(choices)}: ").strip()
            if answer.isdigit() and 1 <= int(answer) <= len(choices):
                return choices[int(answer) - 1][1]
            print(f"Please enter a number between 1 and {len(choices)}.", file=self._output)

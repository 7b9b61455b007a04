"""Console adapters."""

from nextbus_predictions.adapters.console.console_prompt import ConsolePrompt

__all__ = ["ConsolePrompt"]

"""Document client port."""

from typing import Any, Protocol


class DocumentClient(Protocol):
    """Port for fetching parsed documents from the prediction service."""

    async def request(self, command: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """Issue one command and return the parsed response document."""
        ...

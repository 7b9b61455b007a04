"""HTTP client for NextBus web service requests."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from nextbus_predictions.adapters.api_request_logger import log_api_request
from nextbus_predictions.adapters.nextbus_api.constants import (
    DEFAULT_HEADERS,
    ERROR_ELEMENT,
    PARAM_COMMAND,
    TEXT_KEY,
    WEB_SERVICES_URI,
    Command,
)
from nextbus_predictions.adapters.nextbus_api.normalizer import parse_document, to_list
from nextbus_predictions.domain.errors import ServiceError
from nextbus_predictions.domain.models.error_details import ErrorDetails

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

GENERIC_FAILURE_REASON = "request failed"


class NextBusHttpClient:
    """HTTP client for the NextBus XML feed.

    Holds no state besides the session and base URL, so clients for different
    endpoints can be used side by side.
    """

    def __init__(self, session: "ClientSession", base_url: str = WEB_SERVICES_URI) -> None:
        """Initialize with an aiohttp session and the feed endpoint."""
        self._session = session
        self._base_url = base_url

    @property
    def base_url(self) -> str:
        return self._base_url

    @staticmethod
    def _build_params(command: Command, params: dict[str, str | None] | None) -> dict[str, str]:
        """Build query parameters, leaving out unset values."""
        query = {PARAM_COMMAND: command.value}
        for key, value in (params or {}).items():
            if value is not None:
                query[key] = str(value)
        return query

    async def _handle_response(
        self, response: "ClientResponse", command: Command
    ) -> dict[str, Any]:
        """Handle a feed response."""
        if response.status != 200:
            # Error pages are not guaranteed to be valid UTF-8
            response_text = (await response.read()).decode("utf-8", "replace")
            logger.warning(
                f"NextBus returned status {response.status} for {command.value}: "
                f"{response_text[:200]}"
            )
            raise ServiceError(
                ErrorDetails(
                    reason=f"NextBus returned HTTP {response.status} for {command.value}",
                    status_code=response.status,
                )
            )

        body = await response.read()
        document = parse_document(body)
        self._raise_for_error_element(document, command)
        return document

    @staticmethod
    def _raise_for_error_element(document: dict[str, Any], command: Command) -> None:
        """Raise when the service reports an error inside a 200 response."""
        errors = to_list(document.get(ERROR_ELEMENT))
        if not errors:
            return

        error = errors[0]
        if isinstance(error, dict):
            reason = error.get(TEXT_KEY, "")
            should_retry = error.get("shouldRetry", "false") == "true"
        else:
            reason = str(error)
            should_retry = False

        logger.warning(f"NextBus reported an error for {command.value}: {reason}")
        raise ServiceError(
            ErrorDetails(
                reason=reason or GENERIC_FAILURE_REASON,
                status_code=200,
                should_retry=should_retry,
            )
        )

    async def request(
        self, command: Command | str, params: dict[str, str | None] | None = None
    ) -> dict[str, Any]:
        """Issue a single command against the feed.

        Args:
            command: Feed command, as a Command member or its string value.
            params: Short parameter codes (a, r, s, t) mapped to values.

        Returns:
            Parsed response document.

        Raises:
            ValueError: If the command is not a known feed command.
            ServiceError: On network failure, non-200 status, unparseable body
                or an error reported by the service.
        """
        command = Command(command)
        query = self._build_params(command, params)

        log_api_request("GET", self._base_url, params=query, headers=DEFAULT_HEADERS)

        try:
            async with self._session.get(
                self._base_url, params=query, headers=DEFAULT_HEADERS
            ) as response:
                return await self._handle_response(response, command)
        except (aiohttp.ClientError, OSError) as e:
            logger.warning(f"Error requesting {command.value} from NextBus: {e}")
            raise ServiceError(ErrorDetails(reason=str(e) or GENERIC_FAILURE_REASON)) from e

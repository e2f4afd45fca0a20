"""HTTP client for the remote column-mapping service."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from rosterimport.core.config import MappingServiceConfig
from rosterimport.core.exceptions import MappingServiceError, SessionExpiredError
from rosterimport.core.types import JsonDict
from rosterimport.models.mapping import MappingRequest, MappingSuggestion

logger = logging.getLogger(__name__)

DEFAULT_ERROR = "Failed to get column mappings"


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return DEFAULT_ERROR
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return DEFAULT_ERROR


class HttpMappingService:
    """IMappingService that POSTs headers and sample rows with a bearer token.

    Pass ``client`` to share a connection pool or to inject a mock transport.
    No timeout is applied unless the config sets one.
    """

    def __init__(self, config: MappingServiceConfig | None = None,
                 client: httpx.AsyncClient | None = None) -> None:
        self._config = config or MappingServiceConfig()
        self._client = client
        self._url = self._config.base_url.rstrip("/") + self._config.path

    async def suggest(self, request: MappingRequest, access_token: str) -> MappingSuggestion:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {access_token}",
        }
        payload = request.to_payload()
        logger.info("Requesting column mappings for %d headers", len(request.headers))

        if self._client is not None:
            return await self._post(self._client, payload, headers)
        async with httpx.AsyncClient(timeout=httpx.Timeout(self._config.timeout)) as client:
            return await self._post(client, payload, headers)

    async def _post(self, client: httpx.AsyncClient, payload: JsonDict,
                    headers: dict[str, str]) -> MappingSuggestion:
        try:
            response = await client.post(self._url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("Mapping service unreachable: %s", exc)
            raise MappingServiceError(f"Could not reach the mapping service: {exc}") from exc

        if response.status_code in (401, 403):
            raise SessionExpiredError(response.status_code)
        if not response.is_success:
            message = _error_message(response)
            logger.warning("Mapping service returned %d: %s", response.status_code, message)
            raise MappingServiceError(message, status_code=response.status_code)

        try:
            return MappingSuggestion.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise MappingServiceError("Mapping service returned an invalid response") from exc

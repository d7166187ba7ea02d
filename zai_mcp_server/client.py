"""
HTTP client for the z.ai API.

Sends exactly one authenticated JSON POST per call and classifies failures into
UpstreamHTTPError (non-2xx answer), TransportError (the API could not be reached)
and InvalidResponseError (2xx answer without a JSON body). Nothing is retried.
"""

import time
from typing import Any, Dict, Optional

import httpx
import structlog

from .config import ZaiConfig
from .constants import CONTENT_TYPE_JSON, REQUEST_TIMEOUT
from .exceptions import InvalidResponseError, TransportError, UpstreamHTTPError
from .models import OutboundRequest

logger = structlog.get_logger(__name__)


class ZaiClient:
    """Thin async client for the z.ai REST API."""

    def __init__(
        self,
        config: ZaiConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            config: z.ai API configuration (base URL and API key)
            transport: Optional httpx transport, used to mock the upstream in tests
        """
        self.base_url = config.base_url.rstrip("/")
        self._api_key = config.api_key or ""
        self._transport = transport

    def build_headers(self) -> Dict[str, str]:
        """Headers sent with every request."""
        return {
            "Content-Type": CONTENT_TYPE_JSON,
            "Authorization": f"Bearer {self._api_key}",
        }

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def send(self, request: OutboundRequest) -> Any:
        """Send a request to the z.ai API and return the decoded JSON body.

        Args:
            request: Outbound request built by a tool

        Returns:
            The parsed JSON response

        Raises:
            UpstreamHTTPError: If the API answers with a non-2xx status
            TransportError: If the API cannot be reached
            InvalidResponseError: If a 2xx answer is not valid JSON
        """
        url = self.url_for(request.path)
        logger.debug("Calling z.ai API", url=url, method=request.method)
        start_time = time.time()

        try:
            async with httpx.AsyncClient(
                timeout=REQUEST_TIMEOUT, transport=self._transport
            ) as client:
                response = await client.request(
                    request.method,
                    url,
                    json=request.body,
                    headers=self.build_headers(),
                )
        except httpx.RequestError as e:
            logger.warning("z.ai API unreachable", url=url, error=str(e))
            raise TransportError(str(e) or type(e).__name__, cause=e) from e

        duration = time.time() - start_time

        if not response.is_success:
            logger.warning(
                "z.ai API returned an error",
                url=url,
                status=response.status_code,
                duration=f"{duration:.2f}s",
            )
            raise UpstreamHTTPError(response.status_code, response.text)

        logger.info(
            "z.ai API call completed",
            path=request.path,
            status=response.status_code,
            duration=f"{duration:.2f}s",
        )

        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(str(e), cause=e) from e

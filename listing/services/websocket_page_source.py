"""WebSocket page source for the search backend."""

import asyncio
import json
import logging
from typing import Union

import websockets

from listing.domain import PageResponse, ResultItem, SearchCriteria
from listing.services.errors import PageFetchError

logger = logging.getLogger("Listing.WebSocketPageSource")


class WebSocketPageSource:
    """Fetches result pages with one request/response exchange per page."""

    def __init__(
        self,
        uri: str = "ws://localhost:8765",
        page_size: int = 50,
        max_size: int = 5 * 1024 * 1024,
        open_timeout: float = 5,
    ):
        self.uri = uri
        self.page_size = page_size
        self.max_size = max_size
        self.open_timeout = open_timeout

    def build_request(self, criteria: SearchCriteria, cursor: int) -> dict:
        request = {"action": "search"}
        request.update(criteria.to_request())
        request["offset"] = cursor * self.page_size
        request["limit"] = self.page_size
        return request

    async def fetch_page(self, criteria: SearchCriteria, cursor: int) -> PageResponse:
        request = self.build_request(criteria, cursor)
        logger.debug(f"Requesting offset {request['offset']} from {self.uri}")

        try:
            async with websockets.connect(
                self.uri, max_size=self.max_size, open_timeout=self.open_timeout
            ) as websocket:
                await websocket.send(json.dumps(request))
                response = await websocket.recv()
        except (OSError, asyncio.TimeoutError, websockets.exceptions.WebSocketException) as e:
            raise PageFetchError(f"Could not reach {self.uri}: {e}") from e

        return self.parse_response(response)

    @staticmethod
    def parse_response(message: Union[str, bytes]) -> PageResponse:
        """Turn a backend message into a PageResponse.

        Args:
            message: Raw JSON message

        Returns:
            PageResponse with the decoded items

        Raises:
            PageFetchError: On error responses or malformed payloads
        """
        try:
            data = json.loads(message)
        except json.JSONDecodeError as e:
            raise PageFetchError(f"Malformed response: {e}") from e

        if not isinstance(data, dict):
            raise PageFetchError("Malformed response: expected an object")

        msg_type = data.get("type")
        if msg_type == "error":
            raise PageFetchError(data.get("message", "Unknown backend error"))
        if msg_type != "search_results":
            raise PageFetchError(f"Unexpected response type: {msg_type}")

        try:
            items = tuple(ResultItem.from_dict(item) for item in data.get("items", []))
        except (KeyError, TypeError) as e:
            raise PageFetchError(f"Malformed result item: {e}") from e

        return PageResponse(
            items=items,
            has_more=data.get("has_more"),
            total_count=data.get("total_count"),
        )

"""Page sources for the search controller."""

from .errors import PageFetchError
from .memory_page_source import MemoryPageSource
from .websocket_page_source import WebSocketPageSource

__all__ = ["MemoryPageSource", "PageFetchError", "WebSocketPageSource"]

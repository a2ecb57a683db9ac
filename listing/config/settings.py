"""Application settings configuration."""

from dataclasses import dataclass
from typing import Optional

import yaml


@dataclass(frozen=True)
class SearchSettings:
    query_debounce_ms: int = 500
    filter_debounce_ms: int = 100
    page_size: int = 50
    scroll_threshold: int = 500
    page_cooldown_ms: int = 1000


@dataclass(frozen=True)
class SourceSettings:
    websocket_uri: str = "ws://localhost:8765"
    max_message_size: int = 5 * 1024 * 1024


@dataclass(frozen=True)
class WindowSettings:
    default_width: int = 900
    default_height: int = 800


@dataclass(frozen=True)
class AppSettings:
    search: SearchSettings
    source: SourceSettings
    window: WindowSettings

    @classmethod
    def default(cls) -> "AppSettings":
        return cls(
            search=SearchSettings(),
            source=SourceSettings(),
            window=WindowSettings(),
        )

    @classmethod
    def load(cls, path: Optional[str] = None) -> "AppSettings":
        if path is None:
            path = "settings.yml"

        config = cls._load_yaml(path)
        return cls(
            search=SearchSettings(
                query_debounce_ms=config.get("query_debounce_ms", 500),
                filter_debounce_ms=config.get("filter_debounce_ms", 100),
                page_size=config.get("page_size", 50),
                scroll_threshold=config.get("scroll_threshold", 500),
                page_cooldown_ms=config.get("page_cooldown_ms", 1000),
            ),
            source=SourceSettings(
                websocket_uri=config.get("websocket_uri", "ws://localhost:8765"),
                max_message_size=config.get(
                    "max_message_size", 5 * 1024 * 1024
                ),
            ),
            window=WindowSettings(
                default_width=config.get("default_width", 900),
                default_height=config.get("default_height", 800),
            ),
        )

    @staticmethod
    def _load_yaml(path: str) -> dict:
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            return {}
        except yaml.YAMLError:
            return {}
        return data if isinstance(data, dict) else {}

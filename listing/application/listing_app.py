"""Main listing application."""

import logging
import random
from typing import List, Optional

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, Gio, GLib

from listing.config import AppSettings
from listing.core.di_container import AppContainer
from listing.core.glib_scheduler import GLibScheduler
from listing.domain import Ruleset, SearchCategory
from listing.services import MemoryPageSource
from listing.windows.listing_window import ListingWindow

logger = logging.getLogger("Listing.UI")

DEMO_WORDS = [
    "night", "sky", "blue", "zero", "echo", "drive", "paper", "moon",
    "flare", "river", "neon", "storm", "glass", "summer", "rain", "heart",
]


def demo_items(count: int = 500, seed: int = 7) -> List[dict]:
    """Generate a reproducible catalogue for offline runs."""
    rng = random.Random(seed)
    rulesets = [r.value for r in Ruleset if r is not Ruleset.ANY]
    statuses = [
        SearchCategory.RANKED.value,
        SearchCategory.LOVED.value,
        SearchCategory.QUALIFIED.value,
        SearchCategory.PENDING.value,
        SearchCategory.GRAVEYARD.value,
    ]
    items = []
    for index in range(count):
        items.append(
            {
                "id": index + 1,
                "title": " ".join(rng.sample(DEMO_WORDS, 2)).title(),
                "artist": rng.choice(DEMO_WORDS).title() + " Project",
                "ruleset": rng.choice(rulesets),
                "status": rng.choice(statuses),
                "ranked": count - index,
                "plays": rng.randint(0, 100000),
                "rating": round(rng.uniform(0, 10), 2),
                "difficulty": round(rng.uniform(1, 8), 2),
                "favourites": rng.randint(0, 5000),
            }
        )
    return items


class ListingApp(Adw.Application):
    """Main application"""

    def __init__(self):
        super().__init__(
            application_id="org.listing.Search",
            flags=Gio.ApplicationFlags.HANDLES_COMMAND_LINE,
        )
        self.config_path: Optional[str] = None
        self.demo = False
        self.main_window: Optional[ListingWindow] = None

        self.add_main_option(
            "demo",
            ord("d"),
            GLib.OptionFlags.NONE,
            GLib.OptionArg.NONE,
            "Serve results from a built-in catalogue",
            None,
        )
        self.add_main_option(
            "config",
            ord("c"),
            GLib.OptionFlags.NONE,
            GLib.OptionArg.STRING,
            "Path to settings.yml",
            "PATH",
        )

    def do_command_line(self, command_line):
        options = command_line.get_options_dict().end().unpack()
        self.demo = bool(options.get("demo"))
        self.config_path = options.get("config")
        self.activate()
        return 0

    def do_activate(self):
        if self.main_window is None:
            self.main_window = ListingWindow(self, self._create_container())
        self.main_window.present()

    def _create_container(self) -> AppContainer:
        settings = AppSettings.load(self.config_path)
        page_source = None
        if self.demo:
            logger.info("Using built-in demo catalogue")
            page_source = MemoryPageSource(
                demo_items(),
                page_size=settings.search.page_size,
                latency_ms=300,
            )
        return AppContainer.create(
            settings=settings,
            page_source=page_source,
            scheduler=GLibScheduler(),
        )


def main():
    app = ListingApp()
    return app.run(None)

"""Persistent bookmark store backed by a single JSON config file."""

import logging
from pathlib import Path
from typing import List, Optional

from rapidfuzz import fuzz

from .io import load_config, save_config
from .models import Bookmark, ITEMS_KEY
from .utils import hash_url

logger = logging.getLogger(__name__)


def _is_subsequence(needle: str, haystack: str) -> bool:
    it = iter(haystack)
    return all(ch in it for ch in needle)


class Store:
    """The full bookmark list, loaded and saved wholesale on every call.

    There is no locking: two processes writing the same file race and the
    last write wins.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def get_items(self) -> List[Bookmark]:
        """Load every stored bookmark, in stored order. A missing file has none."""
        data = load_config(self.path)
        items = [Bookmark.from_dict(x) for x in data.get(ITEMS_KEY) or []]
        logger.debug("loaded %d items from %s", len(items), self.path)
        return items

    def save_items(self, items: List[Bookmark]) -> None:
        """Replace the stored list with ``items``.

        Other top-level keys in the config file are left alone.

        Args:
            items: The complete bookmark list to persist.
        """
        data = load_config(self.path)
        data[ITEMS_KEY] = [x.to_dict() for x in items]
        save_config(self.path, data)
        logger.debug("saved %d items to %s", len(items), self.path)

    def get_item(self, url: str) -> Optional[Bookmark]:
        """Find the item whose normalized URL matches ``url``.

        Args:
            url: Any spelling of the URL; it is normalized and hashed first.

        Returns:
            The stored bookmark, or None.
        """
        h = hash_url(url)
        for item in self.get_items():
            if item.hash == h:
                return item
        return None

    def add_item(self, item: Bookmark) -> None:
        """Append ``item`` and save. No duplicate check happens here."""
        items = self.get_items()
        items.append(item)
        self.save_items(items)

    def remove_item(self, item: Bookmark) -> None:
        """Drop every stored bookmark with the same url as ``item`` and save."""
        items = [x for x in self.get_items() if x.url != item.url]
        self.save_items(items)

    def get_collections(self) -> List[str]:
        """Distinct collection names, in first-seen order."""
        seen = []
        for item in self.get_items():
            if item.collection not in seen:
                seen.append(item.collection)
        return seen

    def get_collection_items(self, collection: str) -> List[Bookmark]:
        """Bookmarks filed under exactly ``collection``."""
        return [x for x in self.get_items() if x.collection == collection]

    def fuzzy_search_collections(self, text: Optional[str]) -> List[str]:
        """Collections whose name contains the characters of ``text`` in order.

        Args:
            text: Typed search text; empty or None returns every collection.

        Returns:
            Matching names ranked by rapidfuzz WRatio, best first.
        """
        collections = self.get_collections()
        if not text:
            return collections
        needle = text.lower()
        scored = [
            (c, fuzz.WRatio(needle, c.lower()))
            for c in collections
            if _is_subsequence(needle, c.lower())
        ]
        scored.sort(key=lambda x: x[1], reverse=True)
        return [c for c, _ in scored]

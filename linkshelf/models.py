"""Data models for the bookmark shelf."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional


def _config_home() -> Path:
    if os.environ.get("XDG_CONFIG_HOME"):
        return Path(os.environ["XDG_CONFIG_HOME"])
    if os.name == "nt" and os.environ.get("APPDATA"):
        return Path(os.environ["APPDATA"])
    return Path.home() / ".config"


def default_config() -> Path:
    """Store file: $LINKSHELF_CONFIG, else <user config dir>/linkshelf/config.json."""
    return Path(os.environ.get("LINKSHELF_CONFIG", str(_config_home() / "linkshelf" / "config.json")))


ITEMS_KEY = "items"
CREATE_COLLECTION_PREFIX = "create collection: "


@dataclass
class Bookmark:
    """A stored bookmark.

    ``hash`` is derived from the normalized URL and doubles as the dedup key.
    Keys found on disk that the model does not know about are kept in
    ``extra`` so they survive a load/save cycle.
    """

    url: str
    hash: str = ""
    collection: str = ""
    title: str = ""
    created: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Bookmark":
        known = {"url", "hash", "collection", "title", "created"}
        return cls(
            url=data.get("url", ""),
            hash=data.get("hash", ""),
            collection=data.get("collection", ""),
            title=data.get("title") or "",
            created=data.get("created"),
            extra={k: v for k, v in data.items() if k not in known},
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain record, dropping empty optional values."""
        data: Dict[str, Any] = {
            "hash": self.hash,
            "url": self.url,
            "collection": self.collection,
            "title": self.title,
        }
        if self.created:
            data["created"] = self.created
        data.update({k: v for k, v in self.extra.items() if v not in (None, "", []) and k not in data})
        return data

"""I/O operations for the bookmark shelf config file."""

import os
import json
from pathlib import Path
from typing import Dict, Any


def load_config(path: Path) -> Dict[str, Any]:
    """Read the JSON config file. A missing file reads as empty."""
    if not path.exists():
        return {}
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    return json.loads(text)


def save_config(path: Path, data: Dict[str, Any]) -> None:
    """Write the config file as pretty-printed JSON.

    Parent directories are created and the write is atomic, so a crash
    leaves either the old or the new file.

    Args:
        path: Config file location.
        data: Whole config document; the bookmark list lives under ``items``.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    atomic_write(path, json.dumps(data, indent=2, ensure_ascii=False) + "\n")


def atomic_write(path: Path, data: str) -> None:
    """Atomically write text to file."""
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(data, encoding="utf-8")
    os.replace(tmp, path)

"""Command implementations for the bookmark shelf."""

import sys
import logging
import webbrowser
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Any
from urllib.parse import urlsplit

from rich.style import Style
from rich.text import Text
from rich.tree import Tree

from .meta import fetch_item_meta
from .models import Bookmark
from .pickers import select_collection, select_item, input_title, input_url
from .prompts import Prompter
from .store import Store
from .utils import console, die, info, iso_now, is_uri, hash_url, truncate

logger = logging.getLogger(__name__)


def create_item(meta: Dict[str, Any], collection: str) -> Bookmark:
    """Build a bookmark from fetched metadata."""
    item = Bookmark.from_dict(dict(meta))
    item.hash = hash_url(item.url)
    item.collection = collection
    item.created = iso_now()
    return item


def cmd_add(args, store: Store, prompter: Prompter) -> None:
    """Add a new bookmark.

    Rejects malformed and already stored URLs, then fetches the page title
    while the user picks a collection, and asks for the final title.

    Args:
        args: Parsed command line arguments (``url`` may be None).
        store: Bookmark store to add to.
        prompter: Selection provider for the interactive questions.
    """
    url = (args.url or "").strip() or input_url(prompter).strip()
    if not is_uri(url):
        die("The provided url is not valid")
    existing = store.get_item(url)
    if existing:
        die(f"The provided url has already been added to {existing.collection}")

    # fetch_item_meta bounds itself; an aborted prompt must not wait on it
    pool = ThreadPoolExecutor(max_workers=1)
    try:
        pending = pool.submit(fetch_item_meta, url)
        collection = select_collection(store, prompter, create_new=True)
        with console.status("Fetching metadata"):
            meta = pending.result()
    finally:
        pool.shutdown(wait=False)

    item = create_item(meta, collection)
    item.title = input_title(prompter, item.title)
    store.add_item(item)
    logger.debug("added %s to %s", item.url, item.collection)
    info("Following item has been added!")


def cmd_remove(args, store: Store, prompter: Prompter) -> None:
    """Remove a bookmark."""
    collection = select_collection(store, prompter)
    item = select_item(store, prompter, collection)
    store.remove_item(item)
    info("Bookmark removed!")


def cmd_open(args, store: Store, prompter: Prompter) -> None:
    """Open a bookmark in the browser."""
    collection = select_collection(store, prompter)
    item = select_item(store, prompter, collection)
    ok = webbrowser.open(item.url)
    print(item.url)
    if not ok:
        print("shelf: warning: system did not acknowledge opening browser", file=sys.stderr)


def build_tree(store: Store) -> Tree:
    """Collections as branches, one leaf per bookmark linking to its URL."""
    tree = Tree(Text("collections", style="bold"))
    branches: Dict[str, Tree] = {}
    for item in store.get_items():
        if item.collection not in branches:
            branches[item.collection] = tree.add(Text(item.collection))
        host = urlsplit(item.url).hostname or item.url
        leaf = Text.assemble(
            (truncate(item.title), "green"),
            ": ",
            (f"{host}/…", Style(color="blue", link=item.url)),
        )
        branches[item.collection].add(leaf)
    return tree


def cmd_list(args, store: Store, prompter: Prompter) -> None:
    """Show a tree of all collections and bookmarks."""
    console.print(build_tree(store))

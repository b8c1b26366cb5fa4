"""Interactive flows for picking a collection, an item, a title or a URL."""

import logging
from typing import List

from .models import Bookmark, CREATE_COLLECTION_PREFIX
from .prompts import Prompter
from .store import Store
from .utils import die

logger = logging.getLogger(__name__)


def collection_choices(store: Store, text: str, create_new: bool = False) -> List[str]:
    """Fuzzy matches for ``text``, plus a "create collection" entry when allowed."""
    choices = store.fuzzy_search_collections(text)
    if text and create_new:
        choices.append(CREATE_COLLECTION_PREFIX + text)
    return choices


def select_collection(store: Store, prompter: Prompter, create_new: bool = False) -> str:
    """Ask for an existing collection, or a new one when ``create_new`` is set.

    The choices follow the typed text through the store's fuzzy search. With
    ``create_new`` a "create collection: <text>" entry is offered too, and the
    prefix is stripped from the answer.

    Args:
        store: Store whose collections are offered.
        prompter: Selection provider to ask with.
        create_new: Allow naming a collection that does not exist yet.

    Returns:
        The chosen collection name.
    """
    if not create_new and not store.get_collections():
        die("There are no collections yet, add a bookmark first")

    def validate(val: str) -> bool:
        if not val:
            return False
        if create_new and val.startswith(CREATE_COLLECTION_PREFIX):
            return len(val) > len(CREATE_COLLECTION_PREFIX)
        return val in store.get_collections()

    answer = prompter.autocomplete(
        "Choose a new/existing collection" if create_new else "Choose a collection",
        lambda text: collection_choices(store, text or "", create_new),
        validate=validate,
    )
    if answer.startswith(CREATE_COLLECTION_PREFIX):
        answer = answer[len(CREATE_COLLECTION_PREFIX):]
    logger.debug("selected collection %r", answer)
    return answer


def select_item(store: Store, prompter: Prompter, collection: str) -> Bookmark:
    """Pick an item by title. Identical titles resolve to the first one listed.

    Args:
        store: Store to read the collection from.
        prompter: Selection provider to ask with.
        collection: Collection whose items are listed.

    Returns:
        The chosen bookmark.
    """
    items = store.get_collection_items(collection)
    if not items:
        die(f"The collection {collection} is empty")
    choices = [x.title for x in items]
    answer = prompter.choose("Open an item", choices)
    item = items[choices.index(answer)]
    logger.debug("selected item %s", item.url)
    return item


def input_title(prompter: Prompter, suggested: str = "") -> str:
    """Ask for the title, offering the scraped one as default. Empty answers are refused."""
    return prompter.text("What should the title be?", default=suggested or "", validate=lambda v: len(v) > 0)


def input_url(prompter: Prompter) -> str:
    """Ask for the URL to bookmark. Empty answers are refused."""
    return prompter.text("Enter your url", validate=lambda v: len(v) > 0)

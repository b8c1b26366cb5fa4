"""Shared fixtures: a temp-file store and a scripted selection provider."""

import pytest

from linkshelf.models import Bookmark
from linkshelf.store import Store
from linkshelf.utils import hash_url


class Rejected(Exception):
    """Raised when a scripted answer fails the prompt's validation."""


class ScriptedPrompter:
    """Replays canned answers in order instead of reading the terminal.

    A ``None`` answer to a text prompt accepts the default.
    """

    def __init__(self, *answers):
        self.answers = list(answers)
        self.calls = []
        self.sources = []

    def _next(self, kind, message):
        self.calls.append((kind, message))
        if not self.answers:
            raise AssertionError(f"no scripted answer for {kind} prompt: {message}")
        return self.answers.pop(0)

    def text(self, message, default="", validate=None):
        answer = self._next("text", message)
        if answer is None:
            answer = default
        if validate and not validate(answer):
            raise Rejected(answer)
        return answer

    def autocomplete(self, message, source, validate=None):
        self.sources.append(source)
        answer = self._next("autocomplete", message)
        if validate and not validate(answer):
            raise Rejected(answer)
        return answer

    def choose(self, message, choices):
        answer = self._next("choose", message)
        if answer not in choices:
            raise Rejected(answer)
        return answer


def make_item(url, collection, title="", **extra):
    return Bookmark(url=url, hash=hash_url(url), collection=collection, title=title, extra=extra)


@pytest.fixture
def store(tmp_path):
    return Store(tmp_path / "linkshelf" / "config.json")


@pytest.fixture
def filled_store(store):
    store.save_items([
        make_item("https://example.com/a", "work", "Design doc"),
        make_item("https://example.com/b", "work", "Roadmap"),
        make_item("https://news.ycombinator.com", "fun", "Hacker News"),
    ])
    return store

"""Command line interface for the bookmark shelf."""

import os
import sys
import logging
import argparse
from typing import List, Optional

from .commands import cmd_add, cmd_remove, cmd_open, cmd_list
from .models import default_config
from .prompts import TerminalPrompter
from .store import Store
from .utils import err


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="shelf", description="CLI bookmark organizer")
    sp = ap.add_subparsers(dest="cmd")

    p = sp.add_parser(
        "add", help="Add a new bookmark, you can pass the url here or we'll ask for it"
    )
    p.add_argument("url", nargs="?")
    p.set_defaults(func=cmd_add)

    p = sp.add_parser("remove", help="Remove a bookmark")
    p.set_defaults(func=cmd_remove)

    p = sp.add_parser("open", help="Open a bookmark")
    p.set_defaults(func=cmd_open)

    p = sp.add_parser("list", help="Show a tree of all collections and bookmarks")
    p.set_defaults(func=cmd_list)

    return ap


def main(argv: Optional[List[str]] = None) -> None:
    logging.basicConfig(
        level=os.environ.get("LINKSHELF_LOG", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ap = build_parser()
    args = ap.parse_args(argv)
    if not getattr(args, "func", None):
        ap.print_help()
        return

    store = Store(default_config())
    try:
        args.func(args, store, TerminalPrompter())
    except (KeyboardInterrupt, EOFError):
        err("aborted")
        sys.exit(130)


if __name__ == "__main__":
    main()

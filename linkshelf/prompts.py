"""Selection providers: the only place that talks to the terminal interactively."""

from typing import Callable, List, Optional, Protocol

from prompt_toolkit import prompt
from prompt_toolkit.application.current import get_app
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.shortcuts import radiolist_dialog
from prompt_toolkit.validation import Validator

Source = Callable[[str], List[str]]
Check = Callable[[str], bool]


class Prompter(Protocol):
    """What commands need from an interactive session."""

    def text(self, message: str, default: str = "", validate: Optional[Check] = None) -> str:
        ...

    def autocomplete(self, message: str, source: Source, validate: Optional[Check] = None) -> str:
        ...

    def choose(self, message: str, choices: List[str]) -> str:
        ...


class SourceCompleter(Completer):
    """Offer whatever ``source`` returns for the text typed so far."""

    def __init__(self, source: Source):
        self.source = source

    def get_completions(self, document, complete_event):
        text = document.text
        for choice in self.source(text):
            yield Completion(choice, start_position=-len(text))


def _validator(check: Optional[Check]) -> Optional[Validator]:
    if check is None:
        return None
    return Validator.from_callable(check, error_message="Please enter a valid value", move_cursor_to_end=True)


def _open_completions() -> None:
    get_app().current_buffer.start_completion(select_first=False)


class TerminalPrompter:
    """prompt_toolkit-backed prompts."""

    def text(self, message: str, default: str = "", validate: Optional[Check] = None) -> str:
        return prompt(f"? {message} ", default=default or "", validator=_validator(validate))

    def autocomplete(self, message: str, source: Source, validate: Optional[Check] = None) -> str:
        return prompt(
            f"? {message} ",
            completer=SourceCompleter(source),
            complete_while_typing=True,
            validator=_validator(validate),
            validate_while_typing=False,
            pre_run=_open_completions,
        )

    def choose(self, message: str, choices: List[str]) -> str:
        result = radiolist_dialog(title=message, values=[(c, c) for c in choices]).run()
        if result is None:
            raise KeyboardInterrupt
        return result

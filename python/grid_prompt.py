"""
Line input for the status bar (save-as names, search queries, formulas).

A Prompt is a small state machine fed one key at a time. The owner keeps
running its own event loop and routes keys here while the prompt is active.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

import readchar


class PromptState(Enum):
    """Where the prompt is in its life cycle."""

    ACTIVE = "active"
    SUBMITTED = "submitted"
    CANCELLED = "cancelled"


# Called after every key while the prompt is still active: (key, buffer)
StepFn = Callable[[str, str], None]


def is_cancel_key(key: str) -> bool:
    """ESC, or an Alt-chord readchar reports as ESC + key."""
    if key == readchar.key.ESC:
        return True
    return key.startswith(readchar.key.ESC) and len(key) == 2


class Prompt:
    """
    Collect one line of text.

    Printable keys append, Backspace removes the last character, Enter
    submits and ESC cancels. An empty submission counts as no answer.
    """

    def __init__(self, message: str, on_key: StepFn | None = None, initial: str = "") -> None:
        self.message = message
        self.on_key = on_key
        self.buffer = initial
        self.state = PromptState.ACTIVE

    @property
    def active(self) -> bool:
        return self.state == PromptState.ACTIVE

    @property
    def result(self) -> str | None:
        """The submitted text, or None if cancelled, empty or unfinished."""
        if self.state != PromptState.SUBMITTED or not self.buffer:
            return None
        return self.buffer

    def handle_key(self, key: str) -> PromptState:
        if not self.active:
            return self.state

        if key in (readchar.key.ENTER, readchar.key.CR, readchar.key.LF):
            self.state = PromptState.SUBMITTED
            return self.state
        if is_cancel_key(key):
            self.buffer = ""
            self.state = PromptState.CANCELLED
            return self.state

        if key == readchar.key.BACKSPACE:
            self.buffer = self.buffer[:-1]
        elif len(key) == 1 and key.isprintable():
            self.buffer += key

        if self.on_key is not None:
            self.on_key(key, self.buffer)
        return self.state

    def render(self) -> str:
        return f"{self.message}{self.buffer}"

"""
Application states and the stack that hosts them.

The host application keeps a stack of AppState objects. Input actions go to
the state on top of the stack; its apply() returns a transition result that
tells the stack what to do next:

    Keep        stay on this state
    PopState    drop this state, revealing the one below
    PushState   put a new state on top
    Replace     swap this state for another
    QuitApp     end the application

HelpState is the read-only help screen: it lists the registered verbs and
where they are configured, scrolls with the movement keys, and goes away on
<esc>.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .actions import Action, Back, MoveSelection, Quit
from .area import ScrollableArea
from .config import VERB_NAME_WIDTH, default_location
from .console import console
from .markup import HelpText
from .surface import Surface
from .verbs import VerbStore


@dataclass(frozen=True)
class Keep:
    pass


@dataclass(frozen=True)
class PopState:
    pass


@dataclass(frozen=True)
class QuitApp:
    pass


@dataclass(frozen=True)
class PushState:
    state: AppState


@dataclass(frozen=True)
class Replace:
    state: AppState


TransitionResult = Keep | PopState | QuitApp | PushState | Replace


class AppState(ABC):
    """Contract shared by every state the host can stack."""

    @abstractmethod
    def apply(self, action: Action) -> TransitionResult:
        """Handle one input action and describe the resulting transition."""

    @abstractmethod
    def display(self, surface: Surface, verb_store: VerbStore) -> None:
        """Draw the state into the surface."""

    @abstractmethod
    def write_status(self, surface: Surface) -> None:
        """Write the one-line status hint."""


def build_help_lines(verb_store: VerbStore) -> list[str]:
    """Build the rendered help text, one entry per terminal line."""
    text = HelpText()
    text.md("")
    text.md(" **helpoverlay** lets you explore directory trees")
    text.md("    and launch various commands on files.")
    text.md("")
    text.md(" `<esc>` gets you back to the previous state.")
    text.md(" `/pattern` filters the tree by file names.")
    text.md("    Use `<enter>` to freeze the filtering.")
    text.md(" Typing a file key selects the relevant file.")
    text.md(" Typing a file key, space, then a verb executes the verb on the file.")
    text.md("")
    text.md(" Current Verbs:")
    for key, verb in verb_store:
        text.md(f"{verb.name:>{VERB_NAME_WIDTH}} : `{key}` => {verb.description_text()}")
    text.md("")
    text.md(f' Verbs are configured in "{default_location()}".')
    return text.lines


class HelpState(AppState):
    """Scrollable help screen listing the registered verbs."""

    STATUS_HINT = "Hit <esc> to get back to the previous state"

    def __init__(self, _about: str = "", height: int | None = None):
        if height is None:
            height = console.size.height
        # row 0 holds the input line, the last row the status
        self.area = ScrollableArea(1, max(1, height - 2))

    def apply(self, action: Action) -> TransitionResult:
        if isinstance(action, Back):
            return PopState()
        if isinstance(action, Quit):
            return QuitApp()
        if isinstance(action, MoveSelection):
            self.area.try_scroll(action.dy)
        return Keep()

    def display(self, surface: Surface, verb_store: VerbStore) -> None:
        lines = build_help_lines(verb_store)
        self.area.set_content_length(len(lines))
        surface.write_lines(self.area, lines)

    def write_status(self, surface: Surface) -> None:
        surface.write_status_text(self.STATUS_HINT)


class StateStack:
    """Stack of application states, driven by transition results."""

    def __init__(self, initial: AppState):
        self.states: list[AppState] = [initial]

    def __len__(self) -> int:
        return len(self.states)

    @property
    def top(self) -> AppState:
        return self.states[-1]

    def apply(self, action: Action) -> bool:
        """Dispatch an action to the top state and apply its transition.

        Returns False once the application should exit: either the state
        asked to quit or the last state was popped.
        """
        result = self.top.apply(action)
        if isinstance(result, QuitApp):
            return False
        if isinstance(result, PopState):
            self.states.pop()
            return bool(self.states)
        if isinstance(result, PushState):
            self.states.append(result.state)
        elif isinstance(result, Replace):
            self.states[-1] = result.state
        return True

    def display(self, surface: Surface, verb_store: VerbStore) -> None:
        """Draw the top state and its status line."""
        self.top.display(surface, verb_store)
        self.top.write_status(surface)

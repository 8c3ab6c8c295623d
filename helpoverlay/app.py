"""
Textual host for the help overlay.

HelpApp owns the state stack. Key bindings are translated into actions, the
top state applies them, and the stack's transition decides whether the app
keeps running. After every action the top state redraws into a Surface whose
frame (body + status) is pushed into the Static widgets.

Layout (mirrors the rows HelpState expects):

    row 0          header / input line
    rows 1..h-2    help body (scrollable)
    row h-1        status hint
"""

from __future__ import annotations

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from .actions import Action, Back, MoveSelection, Quit
from .states import HelpState, StateStack
from .surface import Surface
from .verbs import VerbStore


class HelpApp(App):
    """Full-screen help viewer."""

    CSS = """
    Screen {
        layout: vertical;
    }
    #header {
        height: 1;
        background: #1a1a2e;
    }
    #body {
        height: 1fr;
    }
    #status {
        height: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "back", "Back", priority=True),
        Binding("q", "quit_app", "Quit", priority=True),
        Binding("ctrl+q", "quit_app", "Quit", show=False, priority=True),
        Binding("up", "move(-1)", "Up", show=False, priority=True),
        Binding("down", "move(1)", "Down", show=False, priority=True),
        Binding("pageup", "page(-1)", "Page up", show=False, priority=True),
        Binding("pagedown", "page(1)", "Page down", show=False, priority=True),
        Binding("home", "move(-1000000)", "Top", show=False, priority=True),
        Binding("end", "move(1000000)", "Bottom", show=False, priority=True),
    ]

    def __init__(self, verb_store: VerbStore, about: str = ""):
        super().__init__()
        self.verb_store = verb_store
        self.about = about
        self.surface = Surface()
        self.stack: StateStack | None = None

    def compose(self) -> ComposeResult:
        yield Static("[bold]helpoverlay[/bold]", id="header")
        yield Static(id="body")
        yield Static(id="status")

    def on_mount(self) -> None:
        width, height = self.size
        self.surface.resize(width, height)
        self.stack = StateStack(HelpState(self.about, height=height))
        self._redraw()

    def on_resize(self, event: events.Resize) -> None:
        self.surface.resize(event.size.width, event.size.height)
        self._redraw()

    def _redraw(self) -> None:
        if self.stack is None:
            return
        self.stack.display(self.surface, self.verb_store)
        self.query_one("#body", Static).update(self.surface.body)
        self.query_one("#status", Static).update(self.surface.status)

    def dispatch_action(self, action: Action) -> None:
        """Feed an action to the state stack and redraw, or exit."""
        if self.stack is None:
            return
        if not self.stack.apply(action):
            self.exit()
            return
        self._redraw()

    def action_back(self) -> None:
        self.dispatch_action(Back())

    def action_quit_app(self) -> None:
        self.dispatch_action(Quit())

    def action_move(self, dy: int) -> None:
        self.dispatch_action(MoveSelection(dy))

    def action_page(self, direction: int) -> None:
        if self.stack is None:
            return
        area = getattr(self.stack.top, "area", None)
        page = area.page_size if area is not None else 1
        self.dispatch_action(MoveSelection(direction * page))

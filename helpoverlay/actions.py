"""
Input actions understood by application states.

The input layer (the Textual key bindings in app.py) decodes raw key presses
into one of these values before any state sees them. The set is closed: a
state's apply() only has to handle these types, and is free to treat most of
them as no-ops.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Back:
    """Leave the current state and return to the previous one."""


@dataclass(frozen=True)
class Quit:
    """Terminate the application."""


@dataclass(frozen=True)
class MoveSelection:
    """Move the selection (or the viewport, for read-only states) by dy rows."""

    dy: int


@dataclass(frozen=True)
class Select:
    """Select the entry bound to a key."""

    key: str


@dataclass(frozen=True)
class OpenSelection:
    pass


@dataclass(frozen=True)
class RunVerb:
    """Invoke a verb by name on the current selection."""

    name: str


@dataclass(frozen=True)
class PatternEdit:
    """Replace the current filtering pattern."""

    pattern: str


@dataclass(frozen=True)
class FixPattern:
    pass


@dataclass(frozen=True)
class Next:
    pass


@dataclass(frozen=True)
class Help:
    pass


Action = (
    Back
    | Quit
    | MoveSelection
    | Select
    | OpenSelection
    | RunVerb
    | PatternEdit
    | FixPattern
    | Next
    | Help
)

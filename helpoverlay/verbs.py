"""
Verb registry for the help screen.

A verb is a named, user-invocable operation bound to a trigger key. This
module only holds verb *metadata* (name, what it runs, a description); the
code that actually executes verbs lives with the host application. The help
screen reads the registry every frame, so whatever is registered here is what
the user sees listed.

The registry keeps insertion order: verbs are listed on the help screen in
the order they were added, builtins first.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypedDict


@dataclass(frozen=True)
class Verb:
    """A user-invocable operation.

    `exec_pattern` is what the verb runs (an internal ":command" or a shell
    command line with {file} placeholders). `description` is optional; when
    it's missing the help screen shows the exec pattern as code instead.
    """

    name: str
    exec_pattern: str
    description: str | None = None

    def description_text(self) -> str:
        if self.description:
            return self.description
        return f"`{self.exec_pattern}`"


class BuiltinVerbInfo(TypedDict):
    """Type definition for a builtin verb entry."""

    key: str  # Trigger key typed after the file key (e.g. "e")
    name: str  # Display name shown in the help screen
    exec_pattern: str  # What gets executed
    description: str | None  # One-line description, or None to show exec_pattern


# Verbs every installation starts with. Users can add their own on top of
# these through VerbStore.add().
BUILTIN_VERBS: list[BuiltinVerbInfo] = [
    {
        "key": "b",
        "name": "back",
        "exec_pattern": ":back",
        "description": "revert to the previous state (mapped to <esc>)",
    },
    {
        "key": "c",
        "name": "cd",
        "exec_pattern": ":cd",
        "description": "change directory and quit",
    },
    {
        "key": "f",
        "name": "focus",
        "exec_pattern": ":focus",
        "description": "display the directory (mapped to <enter>)",
    },
    {
        "key": "o",
        "name": "open",
        "exec_pattern": ":open",
        "description": "open file according to OS settings (mapped to <enter>)",
    },
    {
        "key": "p",
        "name": "parent",
        "exec_pattern": ":parent",
        "description": "move to the parent directory",
    },
    {
        "key": "q",
        "name": "quit",
        "exec_pattern": ":quit",
        "description": "quit the application",
    },
    {
        "key": "h",
        "name": "toggle_hidden",
        "exec_pattern": ":toggle_hidden",
        "description": "toggle showing hidden files",
    },
]


class VerbStore:
    """Insertion-ordered mapping from trigger key to Verb."""

    def __init__(self):
        self.verbs: dict[str, Verb] = {}

    @classmethod
    def with_builtins(cls) -> "VerbStore":
        store = cls()
        for info in BUILTIN_VERBS:
            store.add(
                info["key"],
                Verb(info["name"], info["exec_pattern"], info["description"]),
            )
        return store

    def add(self, key: str, verb: Verb) -> None:
        """Register a verb under a trigger key.

        Raises:
            ValueError: if the key is empty or already bound to another verb.
        """
        if not key:
            raise ValueError("verb key must not be empty")
        if key in self.verbs:
            raise ValueError(f"key {key!r} is already bound to verb {self.verbs[key].name!r}")
        self.verbs[key] = verb

    def get(self, key: str) -> Verb | None:
        return self.verbs.get(key)

    def __iter__(self) -> Iterator[tuple[str, Verb]]:
        return iter(self.verbs.items())

    def __len__(self) -> int:
        return len(self.verbs)

    def __contains__(self, key: object) -> bool:
        return key in self.verbs

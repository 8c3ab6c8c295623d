from rich.text import Text

from .app import HelpApp
from .console import console
from .states import HelpState, build_help_lines
from .surface import Surface
from .verbs import VerbStore


def print_help(verb_store: VerbStore) -> None:
    """Print the whole help text once, for non-interactive output.

    The surface is made wide enough for the longest line, so nothing is
    cropped when the console reports its default piped width.
    """
    lines = build_help_lines(verb_store)
    longest = max((Text.from_ansi(line).cell_len for line in lines), default=0)
    surface = Surface(console=console, width=max(console.width, longest))
    # header and status rows are part of the height HelpState expects
    state = HelpState(height=len(lines) + 2)
    state.area.set_content_length(len(lines))
    surface.write_lines(state.area, lines)
    state.write_status(surface)


def main():
    verb_store = VerbStore.with_builtins()

    # Piped or redirected output gets a plain dump instead of the TUI
    if not console.is_terminal:
        print_help(verb_store)
        return

    HelpApp(verb_store).run()


if __name__ == "__main__":
    main()

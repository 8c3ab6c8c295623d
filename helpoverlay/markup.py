"""
Minimal markup renderer for the help screen.

The help text is written in a two-token dialect:

    **text**   bold
    `text`     inline code, drawn on a dark grey background with one space
               of padding on each side

There is no nesting and no escaping. Each source line is turned into a plain
string carrying ANSI SGR sequences, which the Surface later feeds to
`rich.text.Text.from_ansi`.

Substitution order:
  Bold spans are replaced first, then code spans are replaced on the result,
  so in "`a**b**c`" the code span ends up wrapping an already-bold "b". Keep
  this order when touching the patterns.

Unmatched delimiters (a lone backtick, a single "**") never match either
pattern and are left in the output untouched.

Bold spans close with a full reset, code spans with a background reset
(ESC[49m).
"""

import re

from rich.color import Color
from rich.console import ColorSystem
from rich.style import Style

from .config import CODE_BACKGROUND_LEVEL

BOLD_PATTERN = re.compile(r"\*\*([^*]+)\*\*")
CODE_PATTERN = re.compile(r"`([^`]+)`")

RESET = "\x1b[0m"


def _sgr_on(style: Style) -> str:
    # Style.render wraps text as "<on>text<reset>"; cutting at a marker
    # character leaves just the opening sequence.
    rendered = style.render("\0", color_system=ColorSystem.EIGHT_BIT)
    return rendered.split("\0", 1)[0]


BOLD_STYLE = Style(bold=True)
# 232 is the first step of the 256-colour grayscale ramp
CODE_STYLE = Style(bgcolor=Color.from_ansi(232 + CODE_BACKGROUND_LEVEL))

BOLD_ON = _sgr_on(BOLD_STYLE)
CODE_ON = _sgr_on(CODE_STYLE)
BOLD_OFF = RESET
# background only, so a code span inside a bold span keeps the bold
CODE_OFF = _sgr_on(Style(bgcolor=Color.default()))


def _bold(match: re.Match) -> str:
    return f"{BOLD_ON}{match.group(1)}{BOLD_OFF}"


def _code(match: re.Match) -> str:
    return f"{CODE_ON} {match.group(1)} {CODE_OFF}"


def render_markup(line: str) -> str:
    """Render one markup line to an ANSI-styled string."""
    line = BOLD_PATTERN.sub(_bold, line)
    return CODE_PATTERN.sub(_code, line)


class HelpText:
    """Ordered, append-only list of rendered help lines."""

    def __init__(self):
        self.lines: list[str] = []

    def __len__(self) -> int:
        return len(self.lines)

    def md(self, line: str) -> None:
        """Render a markup line and append it."""
        self.lines.append(render_markup(line))

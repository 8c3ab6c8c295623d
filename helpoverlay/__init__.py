"""helpoverlay - scrollable help screen state for terminal applications"""

from .actions import (
    Action,
    Back,
    FixPattern,
    Help,
    MoveSelection,
    Next,
    OpenSelection,
    PatternEdit,
    Quit,
    RunVerb,
    Select,
)
from .area import ScrollableArea
from .config import (
    CONFIG_FILE,
    DEFAULT_CONFIG,
    HELPOVERLAY_DIR,
    default_location,
    get_int_setting,
    get_setting,
    load_config,
)
from .console import console
from .markup import HelpText, render_markup
from .states import (
    AppState,
    HelpState,
    Keep,
    PopState,
    PushState,
    QuitApp,
    Replace,
    StateStack,
    TransitionResult,
    build_help_lines,
)
from .surface import Surface
from .verbs import BUILTIN_VERBS, Verb, VerbStore

__all__ = [
    # Actions
    "Action",
    "Back",
    "FixPattern",
    "Help",
    "MoveSelection",
    "Next",
    "OpenSelection",
    "PatternEdit",
    "Quit",
    "RunVerb",
    "Select",
    # Area
    "ScrollableArea",
    # Config
    "CONFIG_FILE",
    "DEFAULT_CONFIG",
    "HELPOVERLAY_DIR",
    "default_location",
    "get_int_setting",
    "get_setting",
    "load_config",
    # Console
    "console",
    # Markup
    "HelpText",
    "render_markup",
    # States
    "AppState",
    "HelpState",
    "Keep",
    "PopState",
    "PushState",
    "QuitApp",
    "Replace",
    "StateStack",
    "TransitionResult",
    "build_help_lines",
    # Surface
    "Surface",
    # Verbs
    "BUILTIN_VERBS",
    "Verb",
    "VerbStore",
]

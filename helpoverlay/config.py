import json
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .console import console

# Load environment variables from .env file
load_dotenv()

# Configuration Defaults
DEFAULT_CONFIG = {
    "CODE_BACKGROUND_LEVEL": "2",
    "VERB_NAME_WIDTH": "14",
}

# File Paths
HELPOVERLAY_DIR = Path(os.getenv("HELPOVERLAY_DIR", str(Path.home() / ".helpoverlay")))
CONFIG_FILE = Path(os.getenv("HELPOVERLAY_CONFIG_FILE", str(HELPOVERLAY_DIR / "config.json")))


def default_location() -> Path:
    """Return the location of the active configuration file.

    Only used for display: the help screen tells the user where verbs and
    settings are configured.
    """
    return CONFIG_FILE


def load_config(filepath: Path | None = None) -> dict[str, Any]:
    """Load configuration from file"""
    path = filepath or CONFIG_FILE
    if path.exists():
        try:
            with open(path) as f:
                config: dict[str, Any] = json.load(f)
                return config
        except (OSError, ValueError) as e:
            console.print(f"[yellow]Warning: Could not load config file: {e}[/yellow]")
    return {}


def get_setting(key: str, default: str) -> str:
    """Get setting with priority: Env Var > Config File > Default"""
    # 1. Environment Variable
    env_val = os.getenv(key)
    if env_val:
        return env_val

    # 2. Config File
    config = load_config()
    if key in config:
        return str(config[key])

    # 3. Default
    return default


def get_int_setting(
    key: str, default: int, minimum: int | None = None, maximum: int | None = None
) -> int:
    """Get integer setting with priority: Env Var > Config File > Default.

    Values that don't parse, or fall outside [minimum, maximum] when bounds are
    given, produce a warning and the default.
    """
    value = get_setting(key, str(default))
    try:
        number = int(value)
    except ValueError:
        console.print(
            f"[yellow]Warning: Invalid integer value for {key}: {value}, using default {default}[/yellow]"
        )
        return default
    if (minimum is not None and number < minimum) or (maximum is not None and number > maximum):
        console.print(
            f"[yellow]Warning: {key}={number} is out of range, using default {default}[/yellow]"
        )
        return default
    return number


# Initialize Configuration
# 256-colour grayscale ramp has 24 steps (indices 232-255)
CODE_BACKGROUND_LEVEL = get_int_setting(
    "CODE_BACKGROUND_LEVEL", int(DEFAULT_CONFIG["CODE_BACKGROUND_LEVEL"]), minimum=0, maximum=23
)
VERB_NAME_WIDTH = get_int_setting(
    "VERB_NAME_WIDTH", int(DEFAULT_CONFIG["VERB_NAME_WIDTH"]), minimum=1
)

"""
Settings for the Augury CLI.

Values come from the process environment, optionally seeded from
~/.augury/.env. The real environment always wins over the file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Default config directory
AUGURY_DIR = Path.home() / ".augury"
AUGURY_ENV = AUGURY_DIR / ".env"

DEFAULT_HRP = "erd"


@dataclass(frozen=True)
class Settings:
    hrp: str = DEFAULT_HRP
    caller: Optional[str] = None


def load_settings(env_path: Optional[Path] = None) -> Settings:
    """
    Load settings from the environment.

    Args:
        env_path: Path to .env file (default: ~/.augury/.env)

    Returns:
        Settings with the bech32 human-readable part and default caller
    """
    env_path = env_path or AUGURY_ENV

    if env_path.exists():
        load_dotenv(env_path, override=False)

    hrp = os.environ.get("AUGURY_HRP") or DEFAULT_HRP
    caller = os.environ.get("AUGURY_CALLER") or None
    return Settings(hrp=hrp.strip().lower(), caller=caller)

"""CLI command handlers."""

from .generate import cmd_generate
from .normalize import cmd_normalize
from .phases import cmd_phases
from .show import cmd_show

__all__ = [
    "cmd_generate",
    "cmd_normalize",
    "cmd_phases",
    "cmd_show",
]

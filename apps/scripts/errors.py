# apps/scripts/errors.py
from __future__ import annotations

from typing import Iterable, Sequence


class ScriptError(Exception):
    """Base class for script composition failures."""


class ResolutionError(ScriptError, LookupError):
    """A named script can't be located in any registered directory."""

    def __init__(self, name: str, dirs: Iterable[str] = ()):
        self.name = name
        self.dirs = [str(d) for d in dirs]
        super().__init__(name)

    def __str__(self) -> str:
        searched = ", ".join(self.dirs) or "(no directories registered)"
        return f"Script {self.name} can't be located (searched: {searched})."


class CycleError(ScriptError):
    """A script was re-entered while its dependencies were still being included."""

    def __init__(self, chain: Sequence[str]):
        self.chain = list(chain)
        super().__init__(" -> ".join(self.chain))

    def __str__(self) -> str:
        return f"Circular script dependency: {' -> '.join(self.chain)}"


class ConfigurationError(ScriptError, ValueError):
    """CDN entry or URL template that can't produce a usable URL."""

    def __init__(self, key: str, message: str):
        self.key = key
        self.message = message
        super().__init__(f"{key}: {message}")

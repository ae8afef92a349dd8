# apps/scripts/core/repository.py
from __future__ import annotations

from typing import Dict, List, Optional

POSITION_FIRST = "first"
POSITION_MIDDLE = "middle"
POSITION_LAST = "last"

POSITIONS = (POSITION_FIRST, POSITION_MIDDLE, POSITION_LAST)

INDENT = "    "


def _trim_blank_lines(lines: List[str]) -> List[str]:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def _indent(lines: List[str], depth: int) -> List[str]:
    prefix = INDENT * max(depth, 0)
    return [prefix + line if line.strip() else "" for line in lines]


class Repository:
    """
    Accumulateur de fragments pour un groupe logique (ex: "jquery").

    Les fragments sont rangés dans trois seaux (first/middle/last) et rendus
    toujours dans cet ordre, l'ordre d'insertion étant conservé dans un seau.
    """

    def __init__(self, name: str, *, eol: str = "\n"):
        self.name = name
        self.eol = eol
        self.wrapper: Optional[str] = None
        self.wrap_size = 1
        self.included = False
        self.scripts: Dict[str, List[List[str]]] = {}

    def __repr__(self) -> str:
        return f"<Repository {self.name!r}>"

    def clear(self) -> "Repository":
        self.scripts = {}
        self.included = False
        return self

    def add(self, content: str, position: Optional[str] = None) -> "Repository":
        position = position or POSITION_LAST
        if position not in POSITIONS:
            raise ValueError(f"Position inconnue: {position!r} (attendu: {', '.join(POSITIONS)})")
        if not content:
            return self
        # splitlines() couvre \r\n, \r et \n
        lines = _trim_blank_lines(str(content).splitlines())
        if lines:
            self.scripts.setdefault(position, []).append(lines)
        return self

    def lines(self) -> List[str]:
        out: List[str] = []
        for position in POSITIONS:
            for fragment in self.scripts.get(position, []):
                out.extend(fragment)
        return out

    def render(self) -> str:
        lines = self.lines()
        if not lines:
            return ""
        if self.wrapper and "%s" in self.wrapper:
            body = self.eol.join(_indent(lines, self.wrap_size))
            wrapper = self.eol.join(self.wrapper.strip("\r\n").splitlines())
            return wrapper.replace("%s", self.eol + body + self.eol, 1)
        return self.eol.join(lines)

    __str__ = render

    def get_content(self) -> Optional[str]:
        """Rendu unique: les appels suivants ne renvoient rien."""
        if self.included:
            return None
        self.included = True
        return self.render()

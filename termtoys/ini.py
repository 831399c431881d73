"""Typed settings read from ``name=value`` lines.

Each setting has a default whose type (int or str) decides how values
are parsed.  Lines starting with ``#`` or ``;`` and empty lines are
ignored.
"""

from __future__ import annotations

import re
from typing import Dict, Iterator, List, Mapping, Union

Value = Union[int, str]

_INT = re.compile(r"[+-]?\d+")


class IniError(ValueError):
    """A settings line that names no known setting or has a bad value."""


class IniSettings:
    """A fixed set of named int or str settings with defaults."""

    def __init__(self, defaults: Mapping[str, Value]) -> None:
        for name, value in defaults.items():
            if not isinstance(value, (int, str)):
                raise TypeError(f"setting {name!r} must default to an int or str")
        self._defaults: Dict[str, Value] = dict(defaults)
        self._values: Dict[str, Value] = dict(defaults)

    def __getitem__(self, name: str) -> Value:
        return self._values[name]

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def as_dict(self) -> Dict[str, Value]:
        """A copy of the current values."""
        return dict(self._values)

    def set_line(self, line: str) -> str:
        """Apply one ``name=value`` (or ``name value``) line; return the name set."""
        for name, default in self._defaults.items():
            if not line.startswith(name):
                continue
            rest = line[len(name):]
            if rest.startswith("="):
                rest = rest[1:]
            elif rest and not rest[0].isspace():
                continue
            value = rest.lstrip()
            if isinstance(default, int):
                match = _INT.match(value)
                if not match:
                    raise IniError(f"{name} needs an integer, got {value!r}")
                self._values[name] = int(match.group())
            else:
                self._values[name] = value
            return name
        raise IniError(f"variable in line {line!r} not recognized")

    def load(self, path: str) -> List[str]:
        """Apply every line of the file at ``path``.

        Bad lines are skipped; a message for each is returned.  A missing
        file raises :class:`OSError`.
        """
        problems: List[str] = []
        with open(path, encoding="utf-8") as f:
            for lineno, raw in enumerate(f, 1):
                line = raw.rstrip("\r\n")
                if not line or line[0] in "#;":
                    continue
                try:
                    self.set_line(line)
                except IniError as exc:
                    problems.append(f"{path}:{lineno}: {exc}")
        return problems

    def reset(self) -> None:
        """Restore every setting to its default."""
        self._values = dict(self._defaults)

    def describe(self) -> str:
        """One ``index: name=value`` line per setting."""
        return "".join(
            f"{i}: {name}={value}\n" for i, (name, value) in enumerate(self._values.items())
        )
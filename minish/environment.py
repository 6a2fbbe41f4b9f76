"""The shell's variable table and helpers for validating variable names."""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator

_NAME_START = frozenset(string.ascii_letters + "_")
_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_")


class Environment:
    """An ordered list of ``NAME=value`` entries, as handed to child programs."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = list(entries)

    def index_of(self, name: str) -> int | None:
        """Return the position of ``name``'s entry, or None if it is not set."""
        prefix = name + "="
        for index, entry in enumerate(self._entries):
            if entry.startswith(prefix):
                return index
        return None

    def lookup(self, name: str) -> str | None:
        """Return the value of ``name``, or None if it is not set."""
        index = self.index_of(name)
        if index is None:
            return None
        return self._entries[index][len(name) + 1 :]

    def get(self, name: str) -> str:
        """Return the value of ``name``, or an empty string if it is not set."""
        value = self.lookup(name)
        return "" if value is None else value

    def set(self, name: str, value: str | None = None) -> None:
        """Set ``name`` to ``value`` (empty when None), appending it if new."""
        entry = f"{name}={'' if value is None else value}"
        index = self.index_of(name)
        if index is None:
            self._entries.append(entry)
        else:
            self._entries[index] = entry

    def unset(self, name: str) -> None:
        """Remove ``name`` if it is set; do nothing otherwise."""
        index = self.index_of(name)
        if index is not None:
            del self._entries[index]

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Environment({self._entries!r})"


def is_valid_identifier(text: str) -> bool:
    """Return True if the part of ``text`` before any ``=`` is a valid name."""
    if not text or text[0] not in _NAME_START:
        return False
    name = text.split("=", 1)[0]
    return all(char in _NAME_CHARS for char in name[1:])


def is_integer(text: str) -> bool:
    """Return True if ``text`` is a non-empty run of ASCII digits."""
    return bool(text) and all(char in string.digits for char in text)


def split_assignment(arg: str) -> tuple[str, str]:
    """Split ``NAME=value`` at the first ``=`` into name and value."""
    name, sep, value = arg.partition("=")
    if not sep:
        raise ValueError(f"not an assignment: {arg!r}")
    return name, value
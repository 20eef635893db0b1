"""The shell's environment: an ordered list of ``NAME=value`` lines."""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping

from .words import has_prefix, split_on

PATH_PREFIX = "PATH="


class Environment:
    """An ordered collection of ``NAME=value`` entries.

    Entries are matched by prefix. Setting a variable appends a new entry
    without removing earlier ones.
    """

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = list(entries)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "Environment":
        """Build an environment from a name-to-value mapping."""
        return cls(f"{name}={value}" for name, value in mapping.items())

    def lookup(self, prefix: str) -> str | None:
        """Return the rest of the first entry starting with ``prefix``, or None."""
        for entry in self._entries:
            if has_prefix(entry, prefix):
                return entry[len(prefix):]
        return None

    def path_dirs(self) -> list[str]:
        """Return the directories listed in ``PATH``, or an empty list."""
        value = self.lookup(PATH_PREFIX)
        return [] if value is None else split_on(value, ":")

    def set(self, name: str, value: str | None) -> None:
        """Append the entry ``name=value``.

        Raises ValueError when the name or the value is missing.
        """
        if name is None or value is None:
            raise ValueError("setenv needs a name and a value")
        self._entries.append(f"{name}={value}")

    def unset(self, prefix: str) -> int:
        """Remove every entry starting with ``prefix``; return how many went."""
        kept = [entry for entry in self._entries if not has_prefix(entry, prefix)]
        removed = len(self._entries) - len(kept)
        self._entries = kept
        return removed

    def contains(self, prefix: str) -> bool:
        """Return True when some entry starts with ``prefix``."""
        return any(has_prefix(entry, prefix) for entry in self._entries)

    def lines(self) -> list[str]:
        """Return a copy of the entries in order."""
        return list(self._entries)

    def as_dict(self) -> dict[str, str]:
        """Return the entries as a mapping; the first entry for a name wins."""
        result: dict[str, str] = {}
        for entry in self._entries:
            name, sep, value = entry.partition("=")
            if sep:
                result.setdefault(name, value)
        return result

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Environment({self._entries!r})"
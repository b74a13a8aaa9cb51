"""Snapshot of the raw fields of a decoded RDAP object."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


class DecodeData:
    """Raw field values of an RDAP object at decode time, plus decoding notes.

    Field names are RDAP names ("port43"), not attribute names. The snapshot is
    independent of the object's attributes and is not kept in sync with them.
    """

    def __init__(
        self,
        values: Mapping[str, Any] | None = None,
        known: Iterable[str] | None = None,
        notes: Mapping[str, Iterable[str]] | None = None,
    ) -> None:
        self._values: dict[str, Any] = dict(values or {})
        self._known: set[str] = set(known or ())
        self._notes: dict[str, list[str]] = {
            name: list(items) for name, items in (notes or {}).items()
        }

    def notes(self, name: str) -> list[str]:
        """Return the warnings recorded while decoding field ``name``."""
        return list(self._notes.get(name, ()))

    def value(self, name: str) -> Any:
        """Return the raw value of field ``name``, or None if it was absent."""
        return self._values.get(name)

    def fields(self) -> list[str]:
        """Return the names of all decoded fields, known and unknown."""
        return list(self._values)

    def unknown_fields(self) -> list[str]:
        """Return the names of decoded fields that are not known."""
        return [name for name in self._values if name not in self._known]

    def __str__(self) -> str:
        lines = [
            f" !!!{name}: {note}"
            for name, items in self._notes.items()
            for note in items
        ]
        return "[" + "".join(f"\n{line}" for line in lines) + "\n"

    def __repr__(self) -> str:
        return f"DecodeData(fields={self.fields()!r})"
"""Parsing of bootstrap Service Registry files."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlsplit


class BootstrapFileError(ValueError):
    """Raised when a Service Registry file cannot be parsed."""


_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _is_valid_url(raw: str) -> bool:
    if any(ord(c) < 0x20 or c == "\x7f" for c in raw):
        return False
    if _BAD_ESCAPE.search(raw):
        return False
    if raw.startswith(":"):
        return False
    if not _SCHEME.match(raw) and ":" in raw.split("/", 1)[0]:
        return False
    try:
        urlsplit(raw).port
    except ValueError:
        return False
    return True


def _field(doc: dict[str, Any], name: str) -> Any:
    if name in doc:
        return doc[name]
    lowered = name.lower()
    for key, value in doc.items():
        if key.lower() == lowered:
            return value
    return None


def _string(value: Any, what: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise BootstrapFileError(f"Malformed bootstrap ({what} is not a string)")
    return value


def _list(value: Any, what: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise BootstrapFileError(f"Malformed bootstrap ({what} is not an array)")
    return value


@dataclass
class RegistryFile:
    """A bootstrap registry file such as dns.json or object-tags.json."""

    description: str = ""
    publication: str = ""
    version: str = ""
    entries: dict[str, list[str]] = field(default_factory=dict)
    """Map of service entries to their RDAP base URLs."""
    json: bytes = b""

    @classmethod
    def from_json(cls, document: bytes | str) -> RegistryFile:
        """Parse a registry document; unparsable URLs are skipped."""
        raw = document.encode() if isinstance(document, str) else bytes(document)
        try:
            doc = json.loads(raw)
        except ValueError as exc:
            raise BootstrapFileError(f"Invalid JSON: {exc}") from exc

        if doc is None:
            doc = {}
        if not isinstance(doc, dict):
            raise BootstrapFileError("Malformed bootstrap (not a JSON object)")

        result = cls(
            description=_string(_field(doc, "description"), "description"),
            publication=_string(_field(doc, "publication"), "publication"),
            version=_string(_field(doc, "version"), "version"),
            json=raw,
        )

        for service in _list(_field(doc, "services"), "services"):
            parts = [
                [_string(item, "service item") for item in _list(part, "service part")]
                for part in _list(service, "service")
            ]
            if len(parts) == 2:
                entries, raw_urls = parts
            elif len(parts) == 3:
                entries, raw_urls = parts[1], parts[2]
            else:
                raise BootstrapFileError("Malformed bootstrap (bad services array)")

            urls = [url for url in raw_urls if _is_valid_url(url)]
            if urls:
                for entry in entries:
                    result.entries[entry] = list(urls)

        return result
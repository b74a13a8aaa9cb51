"""Bootstrap lookups of Autonomous System numbers."""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass, field

from rdap.bootstrap.file import BootstrapFileError, RegistryFile
from rdap.bootstrap.question import Answer, Question

_MAX_ASN = 2**32 - 1
_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class _ASNRange:
    """A range of AS numbers and their RDAP base URLs."""

    min_asn: int
    max_asn: int
    urls: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        if self.min_asn == self.max_asn:
            return f"AS{self.min_asn}"
        return f"AS{self.min_asn}-AS{self.max_asn}"


def _parse_uint32(text: str) -> int:
    if not _DIGITS.fullmatch(text):
        raise ValueError(f"invalid AS number {text!r}")
    value = int(text)
    if value > _MAX_ASN:
        raise ValueError(f"AS number {text!r} out of range")
    return value


def parse_asn(asn: str) -> int:
    """Parse an AS number such as "AS1234", "as1234" or "1234"."""
    return _parse_uint32(asn.lower().lstrip("as"))


def parse_asn_range(text: str) -> tuple[int, int]:
    """Parse "1234" or "1234-5678" into an ordered (min, max) pair."""
    parts = text.split("-")
    if len(parts) not in (1, 2):
        raise ValueError("Malformed ASN range")
    min_asn = _parse_uint32(parts[0])
    max_asn = _parse_uint32(parts[1]) if len(parts) == 2 else min_asn
    if min_asn > max_asn:
        min_asn, max_asn = max_asn, min_asn
    return min_asn, max_asn


class ASNRegistry:
    """Maps AS numbers to RDAP base URLs, from an asn.json document."""

    def __init__(self, document: bytes | str) -> None:
        try:
            self.file = RegistryFile.from_json(document)
        except BootstrapFileError as exc:
            raise BootstrapFileError(f"Error parsing ASN registry: {exc}") from exc

        ranges = []
        for entry, urls in self.file.entries.items():
            try:
                min_asn, max_asn = parse_asn_range(entry)
            except ValueError:
                continue
            ranges.append(_ASNRange(min_asn, max_asn, urls))
        ranges.sort(key=lambda r: r.min_asn)
        self._ranges = ranges

    def lookup(self, question: Question) -> Answer:
        """Return the RDAP base URLs for an AS number query.

        Raises ValueError if the query is not an AS number.
        """
        asn = parse_asn(question.query)
        index = bisect.bisect_left(self._ranges, asn, key=lambda r: r.max_asn)

        entry = ""
        urls: list[str] = []
        if index < len(self._ranges):
            candidate = self._ranges[index]
            if candidate.min_asn <= asn <= candidate.max_asn:
                entry = str(candidate)
                urls = list(candidate.urls)

        return Answer(query=str(asn), entry=entry, urls=urls)
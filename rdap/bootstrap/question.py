"""Bootstrap questions, answers and registry types."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field


class RegistryType(enum.Enum):
    """A bootstrap registry type."""

    DNS = 0
    IPV4 = 1
    IPV6 = 2
    ASN = 3
    SERVICE_PROVIDER = 4

    def __str__(self) -> str:
        return _LABELS[self]

    def filename(self) -> str:
        """Return the registry's JSON document filename."""
        return _FILENAMES[self]


_LABELS = {
    RegistryType.DNS: "dns",
    RegistryType.IPV4: "ipv4",
    RegistryType.IPV6: "ipv6",
    RegistryType.ASN: "asn",
    RegistryType.SERVICE_PROVIDER: "serviceprovider",
}

_FILENAMES = {
    RegistryType.ASN: "asn.json",
    RegistryType.DNS: "dns.json",
    RegistryType.IPV4: "ipv4.json",
    RegistryType.IPV6: "ipv6.json",
    RegistryType.SERVICE_PROVIDER: "object-tags.json",
}


@dataclass(frozen=True)
class Question:
    """A bootstrap query."""

    registry_type: RegistryType = RegistryType.DNS
    query: str = ""
    timeout: float | None = None
    """Seconds allowed for any network transfer; None means no limit."""

    def with_timeout(self, timeout: float | None) -> Question:
        """Return a copy of the question with ``timeout``."""
        return dataclasses.replace(self, timeout=timeout)


@dataclass
class Answer:
    """The result of bootstrapping a single query."""

    query: str = ""
    """The query as looked up, after any canonicalisation."""
    entry: str = ""
    """The matching service entry, or an empty string if none matched."""
    urls: list[str] = field(default_factory=list)
    """RDAP base URLs."""
"""Bootstrap lookups of IPv4 and IPv6 addresses and networks."""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass, field

from rdap.bootstrap.file import BootstrapFileError, RegistryFile
from rdap.bootstrap.question import Answer, Question

_DIGITS = re.compile(r"[0-9]+")

_Network = ipaddress.IPv4Network | ipaddress.IPv6Network


@dataclass(frozen=True)
class _NetEntry:
    network: _Network
    urls: list[str] = field(default_factory=list)


def _parse_cidr(text: str) -> _Network:
    """Parse "address/prefix" strictly, returning the masked network."""
    address, sep, prefix = text.partition("/")
    if not sep or "%" in address or not _DIGITS.fullmatch(prefix):
        raise ValueError(f"invalid CIDR address: {text}")
    try:
        ip = ipaddress.ip_address(address)
    except ValueError:
        raise ValueError(f"invalid CIDR address: {text}") from None
    length = int(prefix)
    if length > ip.max_prefixlen:
        raise ValueError(f"invalid CIDR address: {text}")
    return ipaddress.ip_network((ip, length), strict=False)


class NetRegistry:
    """Maps IP networks to RDAP base URLs, from an ipv4.json or ipv6.json document."""

    def __init__(self, document: bytes | str, ip_version: int) -> None:
        if ip_version not in (4, 6):
            raise ValueError(f"Unknown IP version {ip_version}")
        self.ip_version = ip_version

        try:
            self.file = RegistryFile.from_json(document)
        except BootstrapFileError as exc:
            raise BootstrapFileError(f"Error parsing net registry file: {exc}") from exc

        self._networks: dict[int, dict[object, _NetEntry]] = {}
        for cidr in sorted(self.file.entries):
            try:
                network = _parse_cidr(cidr)
            except ValueError:
                continue
            if network.version != ip_version:
                continue
            by_address = self._networks.setdefault(network.prefixlen, {})
            by_address.setdefault(
                network.network_address, _NetEntry(network, self.file.entries[cidr])
            )

    def lookup(self, question: Question) -> Answer:
        """Return the RDAP base URLs of the longest matching network.

        The query is an address ("192.0.2.0", "2001:db8::") or a CIDR range
        ("192.0.2.0/25"). Raises ValueError for unparsable queries or queries
        of the other IP version.
        """
        text = question.query
        if "/" not in text:
            text = f"{text}/{32 if self.ip_version == 4 else 128}"

        lookup_net = _parse_cidr(text)
        if lookup_net.version != self.ip_version:
            raise ValueError("Lookup address has wrong IP protocol")

        address = lookup_net.network_address
        for mask in sorted(self._networks, reverse=True):
            if mask > lookup_net.prefixlen:
                continue
            key = ipaddress.ip_network((address, mask), strict=False).network_address
            entry = self._networks[mask].get(key)
            if entry is not None:
                return Answer(query=text, entry=str(entry.network), urls=list(entry.urls))

        return Answer(query=text)
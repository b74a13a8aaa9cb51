"""RDAP response objects common to all object classes, and Autnum."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from rdap.decode_data import DecodeData


def _rdap(name: str) -> dict[str, str]:
    return {"rdap": name}


@dataclass
class Link:
    """A link to another resource on the Internet."""

    value: str = ""
    rel: str = ""
    href: str = ""
    href_lang: list[str] = field(default_factory=list, metadata=_rdap("hreflang"))
    title: str = ""
    media: str = ""
    type: str = ""
    decode_data: DecodeData | None = None


@dataclass
class Notice:
    """Information about the entire RDAP response."""

    title: str = ""
    type: str = ""
    description: list[str] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    decode_data: DecodeData | None = None


@dataclass
class Remark:
    """Information about the containing RDAP object."""

    title: str = ""
    type: str = ""
    description: list[str] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    decode_data: DecodeData | None = None


@dataclass
class Event:
    """An event which has occurred, or may occur in the future."""

    action: str = field(default="", metadata=_rdap("eventAction"))
    actor: str = field(default="", metadata=_rdap("eventActor"))
    date: str = field(default="", metadata=_rdap("eventDate"))
    links: list[Link] = field(default_factory=list)
    decode_data: DecodeData | None = None


@dataclass
class PublicID:
    """A public identifier mapped to an object class."""

    type: str = ""
    identifier: str = ""
    decode_data: DecodeData | None = None


@dataclass
class Autnum:
    """An Autonomous System registration; a topmost RDAP response object."""

    lang: str = ""
    conformance: list[str] = field(
        default_factory=list, metadata=_rdap("rdapConformance")
    )
    object_class_name: str = ""
    notices: list[Notice] = field(default_factory=list)

    handle: str = ""
    start_autnum: int | None = None
    end_autnum: int | None = None
    ip_version: str = field(default="", metadata=_rdap("ipVersion"))
    name: str = ""
    type: str = ""
    status: list[str] = field(default_factory=list)
    country: str = ""
    entities: list[Any] = field(default_factory=list)
    remarks: list[Remark] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    port43: str = ""
    events: list[Event] = field(default_factory=list)
    decode_data: DecodeData | None = None
import json

import pytest

from rdap.bootstrap.file import BootstrapFileError
from rdap.bootstrap.net_registry import NetRegistry
from rdap.bootstrap.question import Question

AFRINIC = ["https://rdap.afrinic.net/rdap/", "http://rdap.afrinic.net/rdap/"]
RIPE = ["https://rdap.db.ripe.net/"]

IPV4_JSON = json.dumps(
    {
        "description": "RDAP bootstrap file for IPv4 address allocations",
        "publication": "2017-01-01T00:00:00Z",
        "version": "1.0",
        "services": [
            [["41.0.0.0/8", "102.0.0.0/8"], AFRINIC],
            [["2.0.0.0/8", "5.0.0.0/8"], RIPE],
            [["5.10.0.0/16"], ["https://rdap.example.com/nested/"]],
            [["2001:db8::/32", "not-a-cidr", "10.0.0.0/255.0.0.0"], ["https://rdap.example.com/"]],
        ],
    }
)

IPV6_JSON = json.dumps(
    {
        "description": "RDAP bootstrap file for IPv6 address allocations",
        "publication": "2017-01-01T00:00:00Z",
        "version": "1.0",
        "services": [
            [["2001:4200::/23", "2c00::/12"], AFRINIC],
            [["2001:1400::/23", "2001:600::/23"], RIPE],
        ],
    }
)


@pytest.mark.parametrize(
    "query, error, entry, urls",
    [
        ("255.0.0.0", False, "", []),
        ("41.0.0.0", False, "41.0.0.0/8", AFRINIC),
        ("41.255.255.255", False, "41.0.0.0/8", AFRINIC),
        ("41.", True, "", []),
    ],
)
def test_ipv4_lookups(query, error, entry, urls):
    registry = NetRegistry(IPV4_JSON, 4)
    question = Question(query=query)
    if error:
        with pytest.raises(ValueError):
            registry.lookup(question)
        return
    answer = registry.lookup(question)
    assert answer.entry == entry
    assert answer.urls == urls


@pytest.mark.parametrize(
    "query, error, entry, urls",
    [
        ("4000::", False, "", []),
        ("2001:1400::", False, "2001:1400::/23", RIPE),
        ("2001:1400::5/128", False, "2001:1400::/23", RIPE),
        ("2001:1400::/23", False, "2001:1400::/23", RIPE),
        ("2001/129", True, "", []),
    ],
)
def test_ipv6_lookups(query, error, entry, urls):
    registry = NetRegistry(IPV6_JSON, 6)
    question = Question(query=query)
    if error:
        with pytest.raises(ValueError):
            registry.lookup(question)
        return
    answer = registry.lookup(question)
    assert answer.entry == entry
    assert answer.urls == urls


def test_longest_prefix_wins():
    registry = NetRegistry(IPV4_JSON, 4)
    assert registry.lookup(Question(query="5.10.1.2")).entry == "5.10.0.0/16"
    assert registry.lookup(Question(query="5.11.1.2")).entry == "5.0.0.0/8"


def test_query_broader_than_entry_does_not_match():
    registry = NetRegistry(IPV4_JSON, 4)
    answer = registry.lookup(Question(query="41.0.0.0/7"))
    assert answer.entry == ""
    assert answer.urls == []


def test_query_gets_full_mask():
    registry = NetRegistry(IPV4_JSON, 4)
    assert registry.lookup(Question(query="41.1.2.3")).query == "41.1.2.3/32"
    registry6 = NetRegistry(IPV6_JSON, 6)
    assert registry6.lookup(Question(query="2c00::1")).query == "2c00::1/128"


def test_other_version_and_bad_entries_are_ignored():
    registry = NetRegistry(IPV4_JSON, 4)
    answer = registry.lookup(Question(query="10.1.1.1"))
    assert answer.entry == ""
    assert answer.urls == []


def test_wrong_protocol_query():
    registry = NetRegistry(IPV4_JSON, 4)
    with pytest.raises(ValueError, match="wrong IP protocol"):
        registry.lookup(Question(query="2001:db8::"))


def test_unknown_ip_version():
    with pytest.raises(ValueError, match="Unknown IP version 5"):
        NetRegistry(IPV4_JSON, 5)


def test_invalid_document():
    with pytest.raises(BootstrapFileError, match="Error parsing net registry file"):
        NetRegistry(b"", 4)
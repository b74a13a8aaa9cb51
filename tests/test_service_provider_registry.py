import json

import pytest

from rdap.bootstrap.file import BootstrapFileError
from rdap.bootstrap.question import Question
from rdap.bootstrap.service_provider_registry import ServiceProviderRegistry

OBJECT_TAGS_JSON = json.dumps(
    {
        "description": "RDAP bootstrap file for service provider object tags",
        "publication": "2017-01-01T00:00:00Z",
        "version": "1.0",
        "services": [
            [["contact@example.com"], ["FRNIC"], ["https://rdap.nic.fr/"]],
            [["contact@example.com"], ["ARIN"], ["https://rdap.arin.net/registry/"]],
        ],
    }
)


@pytest.fixture
def registry():
    return ServiceProviderRegistry(OBJECT_TAGS_JSON)


@pytest.mark.parametrize(
    "query, entry, urls",
    [
        ("", "", []),
        ("12345-FRNIC", "FRNIC", ["https://rdap.nic.fr/"]),
        ("*-FRNIC", "FRNIC", ["https://rdap.nic.fr/"]),
        ("-FRNIC", "FRNIC", ["https://rdap.nic.fr/"]),
        ("A-B-FRNIC", "FRNIC", ["https://rdap.nic.fr/"]),
    ],
)
def test_lookups(registry, query, entry, urls):
    answer = registry.lookup(Question(query=query))
    assert answer.entry == entry
    assert answer.urls == urls


@pytest.mark.parametrize("query", ["12345-UNKNOWN", "12345-", "NOTAG"])
def test_no_match(registry, query):
    answer = registry.lookup(Question(query=query))
    assert answer.query == query
    assert answer.entry == ""
    assert answer.urls == []


def test_invalid_document():
    with pytest.raises(BootstrapFileError, match="Service Provider"):
        ServiceProviderRegistry("[1, 2")
# rdap

Tools for working with the Registration Data Access Protocol (RDAP).

Every RDAP query is answered by some RDAP server, and IANA publishes
Service Registry files that say which server is responsible for which
domain names, IP networks and Autonomous System numbers. This package
downloads, caches and searches those files, so that for a given query you
get the list of RDAP base URLs to ask.

## Bootstrapping a query

```python
from rdap.bootstrap.client import BootstrapClient
from rdap.bootstrap.question import Question, RegistryType

client = BootstrapClient()

question = Question(registry_type=RegistryType.DNS, query="example.br")
answer = client.lookup(question)

print(answer.query)   # the query as it was looked up, e.g. lower-cased
print(answer.entry)   # the registry entry that matched, empty if none
for url in answer.urls:
    print(url)
```

The registry types are:

| Registry type                      | Example queries                         |
|------------------------------------|-----------------------------------------|
| `RegistryType.DNS`                 | `example.br`, `www.example.com`         |
| `RegistryType.IPV4`                | `192.0.2.0`, `192.0.2.0/25`             |
| `RegistryType.IPV6`                | `2001:db8::`, `2001:db8::/62`           |
| `RegistryType.ASN`                 | `AS1768`, `as1768`, `1768`              |
| `RegistryType.SERVICE_PROVIDER`    | `12345-FRNIC` (entity handle with tag)  |

Domain lookups strip a trailing dot, lower-case the name and walk up it
(`an.example.com`, `example.com`, `com`, then the root zone `""`),
returning the first entry found. IP lookups return the most specific
network containing the address or range; a bare address is treated as a
`/32` or `/128`. ASN lookups find the single number or range from the
registry that holds the number. Service provider lookups use the tag after
the last `-` of an entity handle.

A query with no matching entry is not an error: the answer just has an
empty `entry` and no URLs. Malformed queries (an IP address that does not
parse, an address of the other IP version, an AS number that is not a
number) raise `ValueError`.

A `Question` may carry a `timeout` in seconds, used for any download the
lookup needs; `question.with_timeout(10)` returns a copy with a new one.

## Registries

`lookup` downloads a Service Registry file when the client has not loaded
that registry yet. If the cache reports that a newer copy is available
(`FileState.SHOULD_RELOAD`, as when another process saved one to a shared
disk cache), the registry is reloaded from the cache instead, and
downloaded if that fails. To refresh a registry yourself, or to inspect
its data, use `download` and the accessors:

```python
client.download(RegistryType.DNS)

registry = client.dns()
for tld in registry.file.entries:
    print(tld)
```

`asn()`, `dns()`, `ipv4()`, `ipv6()` and `service_provider()` never touch
the network; they may reload a newer copy from the cache, and return
`None` when the registry has not been loaded.

`BootstrapClient` takes an optional `requests.Session` (`session`), a
bootstrap service `base_url` (default `https://data.iana.org/rdap/`), a
`cache`, and a `verbose` callback that receives progress messages.

The registry classes can also be built directly from a JSON document:
`ASNRegistry`, `DNSRegistry`, `NetRegistry` (with `ip_version` 4 or 6) and
`ServiceProviderRegistry`, or through `new_registry(registry_type,
document)`. Each parses the document with `RegistryFile.from_json`, which
raises `BootstrapFileError` on a malformed document and skips URLs it
cannot parse.

## Caching

By default the client keeps registry files in a `MemoryCache` with a
24-hour timeout. To share them between runs, cache them on disk instead:

```python
from rdap.bootstrap.cache import DiskCache

client = BootstrapClient(cache=DiskCache())
```

`DiskCache` stores the files in `~/.openrdap` unless given another
`directory`, creates that directory as needed (`init_dir`), and uses file
modification times to notice when another process has saved a newer
copy. Both caches report each file's `FileState`: `ABSENT`, `GOOD`,
`SHOULD_RELOAD` or `EXPIRED`. An expired file can still be loaded; loading
a file the cache does not hold raises `CacheMissError`. `set_timeout`
changes how many seconds a file stays fresh.

When the client uses a base URL other than the default one, its cached
files get a six-character hash prefix (see `filename_for`), so files from
different bootstrap services never mix.

## Errors

A failed download (a network error or a status other than 200) raises
`BootstrapError`. A downloaded document that does not parse raises
`BootstrapFileError`.

`rdap.errors` defines `ClientError`, tagged with a `ClientErrorType`:
input error, no bootstrap support for a query type, no matching server,
wrong response type, no working servers, an object that does not exist,
or an error returned by an RDAP server. `rdap_server_error(error_code,
title, description)` builds the last kind.

## Response objects

`rdap.objects` holds the RDAP data types `Link`, `Notice`, `Remark`,
`Event`, `PublicID` and `Autnum` as dataclasses. `rdap.decode_data.DecodeData`
keeps the raw fields of an object, including fields the types do not know
about (`fields`, `unknown_fields`, `value`), together with any notes made
about a field (`notes`).

## What this package does not do

The package finds RDAP servers; it does not query them. There is no
client that sends RDAP requests or decodes JSON responses into the
objects above, no types for domains, nameservers, entities or IP
networks, no output formatting, and no command-line tool.
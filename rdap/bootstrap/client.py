"""Bootstrap client: finds the RDAP servers that can answer a query.

IANA publishes Service Registry files for domain names, IP addresses and
Autonomous System numbers. The client downloads them as needed, keeps them
in a cache, and looks up queries in them.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from urllib.parse import urljoin, urlsplit, urlunsplit

import requests

from rdap.bootstrap.asn_registry import ASNRegistry
from rdap.bootstrap.cache import CacheMissError, FileState, MemoryCache, RegistryCache
from rdap.bootstrap.dns_registry import DNSRegistry
from rdap.bootstrap.net_registry import NetRegistry
from rdap.bootstrap.question import Answer, Question, RegistryType
from rdap.bootstrap.service_provider_registry import ServiceProviderRegistry

DEFAULT_BASE_URL = "https://data.iana.org/rdap/"
DEFAULT_CACHE_TIMEOUT = 24 * 60 * 60.0

Registry = ASNRegistry | DNSRegistry | NetRegistry | ServiceProviderRegistry


class BootstrapError(Exception):
    """Raised when a Service Registry file cannot be downloaded."""


def new_registry(registry_type: RegistryType, document: bytes | str) -> Registry:
    """Build the registry of ``registry_type`` from a JSON document."""
    if registry_type is RegistryType.ASN:
        return ASNRegistry(document)
    if registry_type is RegistryType.DNS:
        return DNSRegistry(document)
    if registry_type is RegistryType.IPV4:
        return NetRegistry(document, 4)
    if registry_type is RegistryType.IPV6:
        return NetRegistry(document, 6)
    if registry_type is RegistryType.SERVICE_PROVIDER:
        return ServiceProviderRegistry(document)
    raise ValueError(f"Unknown registry type {registry_type!r}")


def _quiet(text: str) -> None:
    pass


class BootstrapClient:
    """Downloads, caches and queries bootstrap Service Registry files."""

    def __init__(
        self,
        session: requests.Session | None = None,
        base_url: str | None = None,
        cache: RegistryCache | None = None,
        verbose: Callable[[str], None] | None = None,
    ) -> None:
        self.session = session if session is not None else requests.Session()
        self.base_url = base_url or DEFAULT_BASE_URL
        self.cache = cache if cache is not None else MemoryCache(DEFAULT_CACHE_TIMEOUT)
        self.verbose = verbose or _quiet
        self._registries: dict[RegistryType, Registry] = {}

    def download(self, registry_type: RegistryType, timeout: float | None = None) -> None:
        """Download one Service Registry file, cache it and refresh its registry."""
        document, registry = self._fetch(registry_type, timeout)
        self.cache.save(self.filename_for(registry_type), document)
        self._registries[registry_type] = registry

    def _fetch_url(self, registry_type: RegistryType) -> str:
        base = self.base_url
        parts = urlsplit(base)
        if parts.path and not parts.path.endswith("/"):
            base = urlunsplit(parts._replace(path=parts.path + "/"))
        return urljoin(base, registry_type.filename())

    def _fetch(
        self, registry_type: RegistryType, timeout: float | None
    ) -> tuple[bytes, Registry]:
        url = self._fetch_url(registry_type)
        try:
            response = self.session.get(url, timeout=timeout)
        except requests.RequestException as exc:
            raise BootstrapError(str(exc)) from exc

        if response.status_code != 200:
            raise BootstrapError(
                f"Server returned non-200 status code: {response.status_code} {response.reason}"
            )

        document = response.content
        return document, new_registry(registry_type, document)

    def _reload_from_cache(self, registry_type: RegistryType) -> None:
        document = self.cache.load(self.filename_for(registry_type))
        self._registries[registry_type] = new_registry(registry_type, document)

    def _freshen_from_cache(self, registry_type: RegistryType) -> None:
        if self.cache.state(self.filename_for(registry_type)) is FileState.SHOULD_RELOAD:
            try:
                self._reload_from_cache(registry_type)
            except (CacheMissError, OSError, ValueError):
                pass

    def lookup(self, question: Question) -> Answer:
        """Return the RDAP base URLs for ``question``, downloading the registry if needed."""
        say = self.verbose
        registry_type = question.registry_type
        filename = self.filename_for(registry_type)

        say("  bootstrap: Looking up...")
        say(f"  bootstrap: Question type : {registry_type}")
        say(f"  bootstrap: Question query: {question.query}")

        state = self.cache.state(filename)
        say(f"  bootstrap: Cache state: {filename}: {state}")

        force_download = False
        if state is FileState.SHOULD_RELOAD:
            try:
                self._reload_from_cache(registry_type)
            except (CacheMissError, OSError, ValueError) as exc:
                force_download = True
                say(f"  bootstrap: Cache load error ({exc}), downloading...")

        if registry_type not in self._registries or force_download:
            say(f"  bootstrap: Downloading {registry_type.filename()}")
            self.download(registry_type, question.timeout)
        else:
            say("  bootstrap: Using cached Service Registry file")

        answer = self._registries[registry_type].lookup(question)

        say(f"  bootstrap: Looked up '{answer.query}'")
        if answer.entry:
            say(f"  bootstrap: Matching entry '{answer.entry}'")
        else:
            say("  bootstrap: No match")
        for number, url in enumerate(answer.urls, start=1):
            say(f"  bootstrap: Service URL #{number}: '{url}'")

        return answer

    def _current(self, registry_type: RegistryType) -> Registry | None:
        self._freshen_from_cache(registry_type)
        return self._registries.get(registry_type)

    def asn(self) -> ASNRegistry | None:
        """Return the ASN registry, or None if it has not been downloaded."""
        registry = self._current(RegistryType.ASN)
        return registry if isinstance(registry, ASNRegistry) else None

    def dns(self) -> DNSRegistry | None:
        """Return the DNS registry, or None if it has not been downloaded."""
        registry = self._current(RegistryType.DNS)
        return registry if isinstance(registry, DNSRegistry) else None

    def ipv4(self) -> NetRegistry | None:
        """Return the IPv4 registry, or None if it has not been downloaded."""
        registry = self._current(RegistryType.IPV4)
        return registry if isinstance(registry, NetRegistry) else None

    def ipv6(self) -> NetRegistry | None:
        """Return the IPv6 registry, or None if it has not been downloaded."""
        registry = self._current(RegistryType.IPV6)
        return registry if isinstance(registry, NetRegistry) else None

    def service_provider(self) -> ServiceProviderRegistry | None:
        """Return the Service Provider registry, or None if it has not been downloaded."""
        registry = self._current(RegistryType.SERVICE_PROVIDER)
        return registry if isinstance(registry, ServiceProviderRegistry) else None

    def filename_for(self, registry_type: RegistryType) -> str:
        """Return the cache filename for a registry.

        For a non-default bootstrap service, six hex characters of the
        SHA-256 of its base URL are prepended, e.g. "012def_dns.json".
        """
        filename = registry_type.filename()
        if self.base_url != DEFAULT_BASE_URL:
            digest = hashlib.sha256(self.base_url.encode()).hexdigest()
            filename = f"{digest[:6]}_{filename}"
        return filename
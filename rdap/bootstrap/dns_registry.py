"""Bootstrap lookups of domain names."""

from __future__ import annotations

from rdap.bootstrap.file import BootstrapFileError, RegistryFile
from rdap.bootstrap.question import Answer, Question


class DNSRegistry:
    """Maps domain labels to RDAP base URLs, from a dns.json document."""

    def __init__(self, document: bytes | str) -> None:
        try:
            self.file = RegistryFile.from_json(document)
        except BootstrapFileError as exc:
            raise BootstrapFileError(f"Error parsing DNS bootstrap: {exc}") from exc
        self._dns = self.file.entries

    def lookup(self, question: Question) -> Answer:
        """Return the RDAP base URLs for the longest matching domain suffix.

        For "an.example.com" the entries "an.example.com", "example.com",
        "com" and "" (the root zone) are tried in turn.
        """
        name = question.query.removesuffix(".").lower()
        fqdn = name

        while True:
            urls = self._dns.get(fqdn)
            if urls is not None or fqdn == "":
                break
            _, dot, rest = fqdn.partition(".")
            fqdn = rest if dot else ""

        return Answer(query=name, entry=fqdn, urls=list(urls or []))
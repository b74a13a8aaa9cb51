"""Bootstrap lookups of entity handles by service provider tag."""

from __future__ import annotations

from rdap.bootstrap.file import BootstrapFileError, RegistryFile
from rdap.bootstrap.question import Answer, Question


class ServiceProviderRegistry:
    """Maps service provider tags (e.g. "VRSN") to RDAP base URLs."""

    def __init__(self, document: bytes | str) -> None:
        try:
            self.file = RegistryFile.from_json(document)
        except BootstrapFileError as exc:
            raise BootstrapFileError(
                f"Error parsing Service Provider bootstrap: {exc}"
            ) from exc
        self._services = self.file.entries

    def lookup(self, question: Question) -> Answer:
        """Return the RDAP base URLs for an entity handle such as "12345-VRSN".

        Missing, malformed or unknown tags give an answer with no URLs.
        """
        handle = question.query
        offset = handle.rfind("-")
        if offset == -1 or offset == len(handle) - 1:
            return Answer(query=handle)

        service = handle[offset + 1 :]
        urls = self._services.get(service)
        if urls is None:
            return Answer(query=handle)
        return Answer(query=handle, entry=service, urls=list(urls))
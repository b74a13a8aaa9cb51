"""Errors raised by the RDAP client."""

from __future__ import annotations

import enum
from collections.abc import Iterable


class ClientErrorType(enum.Enum):
    """The kind of failure a ClientError reports."""

    INPUT_ERROR = 1
    BOOTSTRAP_NOT_SUPPORTED = 2
    BOOTSTRAP_NO_MATCH = 3
    WRONG_RESPONSE_TYPE = 4
    NO_WORKING_SERVERS = 5
    OBJECT_DOES_NOT_EXIST = 6
    RDAP_SERVER_ERROR = 7


class ClientError(Exception):
    """An error from the RDAP client, tagged with its ClientErrorType."""

    def __init__(self, error_type: ClientErrorType, text: str) -> None:
        super().__init__(text)
        self.error_type = error_type
        self.text = text

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"ClientError({self.error_type.name}, {self.text!r})"


def rdap_server_error(
    error_code: int, title: str, description: Iterable[str]
) -> ClientError:
    """Build the ClientError for an error object returned by an RDAP server."""
    return ClientError(
        ClientErrorType.RDAP_SERVER_ERROR,
        f"Server returned error code {error_code}, title='{title}', "
        f"description='{' '.join(description)}'",
    )
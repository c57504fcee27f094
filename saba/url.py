"""Parsing of HTTP URLs of the form http://<host>:<port>/<path>?<searchpart>."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

_SCHEME = "http://"
_DEFAULT_PORT = "80"


class UrlError(ValueError):
    """Raised when a URL cannot be handled."""


def _strip_scheme(url: str) -> str:
    while url.startswith(_SCHEME):
        url = url[len(_SCHEME):]
    return url


@dataclass(frozen=True)
class Url:
    """An HTTP URL split into its parts; only `url` is set before parsing."""

    url: str
    host: str = ""
    port: str = ""
    path: str = ""
    searchpart: str = ""

    def parse(self) -> "Url":
        """Return a copy with host, port, path and searchpart filled in."""
        if _SCHEME not in self.url:
            raise UrlError("Only HTTP scheme is supported.")

        host_port, _, rest = _strip_scheme(self.url).partition("/")
        has_path = "/" in _strip_scheme(self.url)

        host, colon, port = host_port.partition(":")
        if not colon:
            port = _DEFAULT_PORT

        if has_path:
            path, _, searchpart = rest.partition("?")
        else:
            path, searchpart = "", ""

        return dataclasses.replace(
            self, host=host, port=port, path=path, searchpart=searchpart
        )
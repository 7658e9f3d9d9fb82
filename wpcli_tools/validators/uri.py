"""Chained precondition checks for URIs."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional, Sequence
from urllib.parse import SplitResult, urlsplit

import requests

from ..config import load_settings
from ..exceptions import COMMON_SCHEMES, UriError

LOGGER = logging.getLogger("wpcli_tools.validators")

SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_FORBIDDEN_CHARACTERS = re.compile(r"[\s\x00-\x1f\x7f]")

# Schemes that may be used without a network location.
HOSTLESS_SCHEMES = frozenset({"file", "data", "mailto", "news", "urn"})


class UriValidator:
    """Fluent checks on a URI string.

    The reachability check issues a ``HEAD`` request through :mod:`requests`;
    ``timeout`` and ``user_agent`` default to the values from
    :func:`wpcli_tools.config.load_settings`.
    """

    def __init__(
        self,
        uri: str,
        *,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
    ) -> None:
        self.uri = uri
        settings = load_settings() if timeout is None or user_agent is None else None
        self.timeout = timeout if timeout is not None else settings.http_timeout
        self.user_agent = user_agent if user_agent is not None else settings.user_agent

    @classmethod
    def validate(cls, uri: str, **kwargs: Any) -> "UriValidator":
        return cls(uri, **kwargs)

    def _fail(self, error: UriError) -> UriError:
        LOGGER.debug("URI check failed for %s: %s", self.uri, error.message)
        return error

    def _split(self) -> SplitResult:
        try:
            return urlsplit(self.uri)
        except ValueError as exc:
            raise self._fail(UriError.invalid(self.uri, str(exc))) from exc

    def must_be_valid(self) -> "UriValidator":
        """Require an absolute URI with a well-formed scheme and, for network schemes, a host."""

        if not self.uri or _FORBIDDEN_CHARACTERS.search(self.uri):
            raise self._fail(UriError.invalid(self.uri, "contains whitespace or control characters"))

        parts = self._split()
        if not parts.scheme or not SCHEME_PATTERN.match(parts.scheme):
            raise self._fail(UriError.invalid(self.uri, "missing or malformed scheme"))

        if parts.scheme.lower() not in HOSTLESS_SCHEMES:
            try:
                host, _ = parts.hostname, parts.port  # port raises on out-of-range values
            except ValueError as exc:
                raise self._fail(UriError.invalid(self.uri, str(exc))) from exc
            if not host:
                raise self._fail(UriError.invalid(self.uri, "missing host"))
        elif not (parts.path or parts.netloc):
            raise self._fail(UriError.invalid(self.uri, "missing path"))
        return self

    def must_exist(self) -> "UriValidator":
        """Require the URI to answer a ``HEAD`` request with a status below 400."""

        self.must_be_valid()
        try:
            response = requests.head(
                self.uri,
                timeout=self.timeout,
                allow_redirects=True,
                headers={"User-Agent": self.user_agent},
            )
        except requests.RequestException as exc:
            raise self._fail(UriError.not_found(self.uri, reason=str(exc))) from exc

        if response.status_code >= 400:
            raise self._fail(UriError.not_found(self.uri, response.status_code))
        LOGGER.debug("URI %s answered with status %s", self.uri, response.status_code)
        return self

    def must_have_valid_scheme(self, allowed: Sequence[str] = ()) -> "UriValidator":
        self.must_be_valid()
        scheme = self._split().scheme
        if not scheme:
            raise self._fail(UriError.malformed(self.uri, "scheme"))
        if allowed and scheme not in allowed:
            raise self._fail(UriError.invalid_scheme(self.uri, scheme, allowed))
        return self

    def must_have_supported_scheme(self, supported: Sequence[str] = ()) -> "UriValidator":
        self.must_be_valid()
        scheme = self._split().scheme
        if not scheme:
            raise self._fail(UriError.malformed(self.uri, "scheme"))
        schemes = tuple(supported) or COMMON_SCHEMES
        if scheme not in schemes:
            raise self._fail(UriError.unsupported_scheme(self.uri, scheme, schemes))
        return self

    def _require_component(self, component: str, value: Optional[str]) -> "UriValidator":
        if not value:
            raise self._fail(UriError.malformed(self.uri, component))
        return self

    def must_have_valid_host(self) -> "UriValidator":
        self.must_be_valid()
        return self._require_component("host", self._split().hostname)

    def must_have_valid_path(self) -> "UriValidator":
        self.must_be_valid()
        return self._require_component("path", self._split().path)

    def must_have_valid_query(self) -> "UriValidator":
        self.must_be_valid()
        return self._require_component("query", self._split().query)

    def must_have_valid_fragment(self) -> "UriValidator":
        self.must_be_valid()
        return self._require_component("fragment", self._split().fragment)

    def must_be_secure(self) -> "UriValidator":
        self.must_be_valid()
        scheme = self._split().scheme
        if scheme != "https":
            raise self._fail(UriError.invalid_scheme(self.uri, scheme or "none", ["https"]))
        return self

    def get_components(self) -> Dict[str, Any]:
        """Return the present parts of the URI.

        Keys mirror a classic ``parse_url`` result: ``scheme``, ``host``,
        ``port``, ``user``, ``pass``, ``path``, ``query`` and ``fragment``.
        Absent parts are left out.
        """

        self.must_be_valid()
        parts = self._split()
        components: Dict[str, Any] = {
            "scheme": parts.scheme,
            "host": parts.hostname,
            "port": parts.port,
            "user": parts.username,
            "pass": parts.password,
            "path": parts.path,
            "query": parts.query,
            "fragment": parts.fragment,
        }
        return {key: value for key, value in components.items() if value not in (None, "")}


__all__ = ["UriValidator", "HOSTLESS_SCHEMES", "SCHEME_PATTERN"]

from __future__ import annotations

import logging
import typing
from starlette.requests import cookie_parser

from cookiekit.exceptions import SinkClosed
from cookiekit.structures import CookieAttributes, SameSite, SetCookie

logger = logging.getLogger(__name__)


class InboundCookieJar(typing.Mapping[str, str]):
    """Cookies sent by the client with the current request.

    Read-only for callers. The only mutation is `discard`, used by cookie deletion so that
    later lookups within the same request observe the removal."""

    def __init__(self, cookies: typing.Mapping[str, str] | None = None) -> None:
        self._cookies: dict[str, str] = dict(cookies or {})

    @classmethod
    def from_header(cls, header: str) -> InboundCookieJar:
        return cls(cookie_parser(header))

    def discard(self, name: str) -> None:
        self._cookies.pop(name, None)

    def __getitem__(self, name: str) -> str:
        return self._cookies[name]

    def __iter__(self) -> typing.Iterator[str]:
        return iter(self._cookies)

    def __len__(self) -> int:
        return len(self._cookies)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {list(self._cookies)}>"


class SetCookieSink(typing.Protocol):  # pragma: nocover
    def append_set_cookie(self, name: str, value: str, attributes: CookieAttributes) -> None:
        ...


class ResponseCookieSink:
    """Collects Set-Cookie directives until the response headers are sent."""

    def __init__(self) -> None:
        self._directives: list[SetCookie] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def append_set_cookie(self, name: str, value: str, attributes: CookieAttributes) -> None:
        if self._closed:
            raise SinkClosed(f'Cannot set cookie "{name}", response headers have already been sent.')

        if attributes.samesite == SameSite.NONE and not attributes.secure:
            logger.warning('Cookie "%s" uses SameSite=None without Secure, clients will reject it.', name)
        self._directives.append(SetCookie(name=name, value=value, attributes=attributes))

    def close(self) -> None:
        self._closed = True

    def headers(self) -> typing.Iterator[str]:
        for directive in self._directives:
            yield directive.to_header()

    def __iter__(self) -> typing.Iterator[SetCookie]:
        return iter(self._directives)

    def __len__(self) -> int:
        return len(self._directives)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: directives={len(self._directives)}, closed={self._closed}>"

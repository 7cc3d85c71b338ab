from __future__ import annotations

import dataclasses
import datetime
import typing
from starlette.requests import HTTPConnection
from starlette.types import Scope

from cookiekit.jars import InboundCookieJar, ResponseCookieSink, SetCookieSink

Clock = typing.Callable[[], datetime.datetime]

DEFAULT_SCOPE_KEY = "cookies"

# scope entry naming where CookieMiddleware stored the context
SCOPE_KEY_ENTRY = "cookiekit.scope_key"


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


@dataclasses.dataclass
class CookieContext:
    """Per-request pair of the inbound cookie jar and the outbound Set-Cookie sink.

    Every cookie operation receives the context explicitly, one context is never shared between
    requests."""

    jar: InboundCookieJar = dataclasses.field(default_factory=InboundCookieJar)
    sink: SetCookieSink = dataclasses.field(default_factory=ResponseCookieSink)
    clock: Clock = utcnow

    @classmethod
    def from_scope(cls, scope: Scope, clock: Clock | None = None) -> CookieContext:
        connection = HTTPConnection(scope)
        return cls(
            jar=InboundCookieJar.from_header(connection.headers.get("cookie", "")),
            sink=ResponseCookieSink(),
            clock=clock or utcnow,
        )

    def now(self) -> datetime.datetime:
        return self.clock()


def get_cookie_context(scope: Scope, key: str | None = None) -> CookieContext:
    key = key or scope.get(SCOPE_KEY_ENTRY, DEFAULT_SCOPE_KEY)
    assert key in scope, "CookieMiddleware must be installed to access cookie context."
    return typing.cast(CookieContext, scope[key])

from __future__ import annotations

import datetime
import typing

from cookiekit.context import CookieContext, utcnow
from cookiekit.jars import InboundCookieJar, ResponseCookieSink


class FrozenClock:
    """A clock that always returns the same moment until moved."""

    def __init__(self, moment: datetime.datetime | None = None) -> None:
        self.moment = moment or datetime.datetime.now(datetime.timezone.utc).replace(microsecond=0)

    def move(self, seconds: int) -> None:
        self.moment += datetime.timedelta(seconds=seconds)

    def timestamp(self) -> int:
        return int(self.moment.timestamp())

    def __call__(self) -> datetime.datetime:
        return self.moment


def make_cookie_context(
    cookies: typing.Mapping[str, str] | None = None,
    clock: typing.Callable[[], datetime.datetime] | None = None,
) -> CookieContext:
    """Create a cookie context as if the client sent `cookies` with the request."""
    return CookieContext(jar=InboundCookieJar(cookies), sink=ResponseCookieSink(), clock=clock or utcnow)

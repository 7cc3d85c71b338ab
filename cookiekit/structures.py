from __future__ import annotations

import dataclasses
import datetime
import enum
import re
from email.utils import format_datetime
from http.cookies import SimpleCookie

from cookiekit.exceptions import InvalidCookieExpiry, InvalidCookieName, InvalidCookieValue

# RFC 6265 cookie-name is an RFC 7230 token
_TOKEN_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


class SameSite(str, enum.Enum):
    """Cross-site sending policy of a cookie.

    ``NONE`` is only honored by clients when the cookie is also ``Secure``.
    """

    LAX = "Lax"
    STRICT = "Strict"
    NONE = "None"

    @classmethod
    def _missing_(cls, value: object) -> SameSite | None:
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)

    @classmethod
    def choices(cls) -> tuple[tuple[str, str], ...]:
        return tuple((member.value, member.name.title()) for member in cls)

    def __str__(self) -> str:
        return str(self.value)


@dataclasses.dataclass(frozen=True)
class CookieAttributes:
    expires: int = 0
    path: str = "/"
    domain: str = ""
    secure: bool = True
    httponly: bool = True
    samesite: SameSite = SameSite.LAX

    def __post_init__(self) -> None:
        if not isinstance(self.samesite, SameSite):
            object.__setattr__(self, "samesite", SameSite(self.samesite))
        if not self.is_session:
            try:
                datetime.datetime.fromtimestamp(self.expires, tz=datetime.timezone.utc)
            except (OverflowError, OSError, ValueError):
                raise InvalidCookieExpiry(self.expires) from None

    @property
    def is_session(self) -> bool:
        """Session cookies carry no expiry and are dropped when the client closes."""
        return self.expires == 0

    @property
    def expires_at(self) -> datetime.datetime | None:
        if self.is_session:
            return None
        return datetime.datetime.fromtimestamp(self.expires, tz=datetime.timezone.utc)


def validate_name(name: str) -> str:
    if not name or not _TOKEN_RE.fullmatch(name):
        raise InvalidCookieName(name)
    return name


def encode_value(value: str) -> str:
    """Quote a cookie value the way http.cookies does, starlette.requests.cookie_parser reverses it."""
    if not value:
        return value

    _, coded_value = SimpleCookie().value_encode(value)
    try:
        coded_value.encode("latin-1")
    except UnicodeEncodeError:
        raise InvalidCookieValue(value) from None
    return coded_value


@dataclasses.dataclass(frozen=True)
class SetCookie:
    """A single Set-Cookie directive waiting to be written into response headers."""

    name: str
    value: str = ""
    attributes: CookieAttributes = dataclasses.field(default_factory=CookieAttributes)

    def __post_init__(self) -> None:
        validate_name(self.name)
        encode_value(self.value)

    def to_header(self) -> str:
        attributes = self.attributes
        parts = [f"{self.name}={encode_value(self.value)}"]
        if expires_at := attributes.expires_at:
            parts.append(f"Expires={format_datetime(expires_at, usegmt=True)}")
        parts.append(f"Path={attributes.path}")
        if attributes.domain:
            parts.append(f"Domain={attributes.domain}")
        if attributes.secure:
            parts.append("Secure")
        if attributes.httponly:
            parts.append("HttpOnly")
        parts.append(f"SameSite={attributes.samesite}")
        return "; ".join(parts)

    def __str__(self) -> str:
        return self.to_header()

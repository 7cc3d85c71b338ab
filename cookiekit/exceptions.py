import re

PatternError = re.error


class CookieKitError(Exception):
    """Base class for all cookiekit errors."""


class InvalidCookieName(CookieKitError, ValueError):
    """Cookie name is empty or contains characters not allowed in a header token
    (control characters, whitespace, separators like "=" and ";")."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid cookie name: {name!r}.")


class InvalidCookieValue(CookieKitError, ValueError):
    """Cookie value cannot be represented in a latin-1 encoded header, even after quoting."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__("Cookie value contains characters that cannot be sent in the Set-Cookie header.")


class InvalidCookieExpiry(CookieKitError, ValueError):
    """Expiry timestamp cannot be rendered as an HTTP date (years 1 to 9999)."""

    def __init__(self, expires: int) -> None:
        self.expires = expires
        super().__init__(f"Cookie expiry {expires} is outside of the supported date range.")


class SinkClosed(CookieKitError):
    """Raised when a Set-Cookie directive is written after response headers were sent."""

from cookiekit.config import Config, CookieSettings
from cookiekit.context import CookieContext, get_cookie_context
from cookiekit.cookies import (
    CookieManager,
    delete_cookie,
    extend_lifetime,
    get_cookie,
    has_cookie,
    list_cookies,
    set_cookie,
)
from cookiekit.exceptions import (
    CookieKitError,
    InvalidCookieExpiry,
    InvalidCookieName,
    InvalidCookieValue,
    PatternError,
    SinkClosed,
)
from cookiekit.jars import InboundCookieJar, ResponseCookieSink, SetCookieSink
from cookiekit.middleware import CookieMiddleware
from cookiekit.requests import Request
from cookiekit.structures import CookieAttributes, SameSite, SetCookie

__all__ = [
    "Config",
    "CookieSettings",
    "CookieContext",
    "get_cookie_context",
    "CookieManager",
    "set_cookie",
    "get_cookie",
    "has_cookie",
    "delete_cookie",
    "list_cookies",
    "extend_lifetime",
    "CookieKitError",
    "InvalidCookieExpiry",
    "InvalidCookieName",
    "InvalidCookieValue",
    "PatternError",
    "SinkClosed",
    "InboundCookieJar",
    "ResponseCookieSink",
    "SetCookieSink",
    "CookieMiddleware",
    "Request",
    "CookieAttributes",
    "SameSite",
    "SetCookie",
]

__version__ = "0.1.0"

"""
Read, write, enumerate, delete and extend HTTP cookies of the current request.

Every function takes the request's `CookieContext` as the first argument. Reads go to the inbound
jar (cookies the client sent), writes go to the outbound sink (Set-Cookie headers of the response).
A cookie written with `set_cookie` is not visible to `get_cookie` until the client sends it back
with a later request.
"""
from __future__ import annotations

import datetime
import logging
import re
import typing

from cookiekit.context import CookieContext
from cookiekit.exceptions import CookieKitError
from cookiekit.structures import CookieAttributes, SameSite, encode_value, validate_name

__all__ = [
    "set_cookie",
    "get_cookie",
    "has_cookie",
    "delete_cookie",
    "list_cookies",
    "extend_lifetime",
    "CookieManager",
]

logger = logging.getLogger(__name__)

# expiry used for deletion, one hour back to tolerate client clock skew
_EXPIRED_OFFSET = datetime.timedelta(hours=1)


def _write(context: CookieContext, name: str, value: str, **options: typing.Any) -> bool:
    try:
        validate_name(name)
        encode_value(value)
        context.sink.append_set_cookie(name, value, CookieAttributes(**options))
    except CookieKitError as ex:
        logger.warning('Failed to write cookie "%s": %s', name, ex)
        return False
    return True


def set_cookie(
    context: CookieContext,
    name: str,
    value: str,
    expires: int = 0,
    path: str = "/",
    domain: str = "",
    secure: bool = True,
    httponly: bool = True,
    samesite: SameSite | str = SameSite.LAX,
) -> bool:
    """
    Queue a Set-Cookie header for the response.

    Values are quoted like `http.cookies` does when they contain characters outside of the cookie
    token set, Starlette unquotes them when the cookie comes back.

    :param expires: absolute Unix timestamp, 0 makes a session cookie
    :param domain: empty value scopes the cookie to the current host
    :param samesite: SameSite.NONE requires secure=True, clients reject the cookie otherwise
    :return: False if the name, value or expiry is invalid or response headers were already sent.
    """
    return _write(
        context,
        name,
        value,
        expires=expires,
        path=path,
        domain=domain,
        secure=secure,
        httponly=httponly,
        samesite=SameSite(samesite),
    )


def get_cookie(context: CookieContext, name: str) -> str | None:
    return context.jar.get(name)


def has_cookie(context: CookieContext, name: str) -> bool:
    return get_cookie(context, name) is not None


def delete_cookie(
    context: CookieContext,
    name: str,
    path: str = "/",
    domain: str = "",
    secure: bool = True,
    httponly: bool = True,
    samesite: SameSite | str = SameSite.LAX,
) -> bool:
    """
    Expire a cookie the client sent with this request.

    The attributes must be the same as used when the cookie was set. Otherwise, the client treats
    the directive as a different cookie and keeps the original one.

    The cookie disappears from the inbound jar immediately, so `has_cookie` returns False for the
    rest of the request.

    :return: False if the client did not send the cookie or the header could not be written.
    """
    if not has_cookie(context, name):
        return False

    expires = context.now() - _EXPIRED_OFFSET
    written = _write(
        context,
        name,
        "",
        expires=int(expires.timestamp()),
        path=path,
        domain=domain,
        secure=secure,
        httponly=httponly,
        samesite=SameSite(samesite),
    )
    if not written:
        return False

    context.jar.discard(name)
    return True


def list_cookies(context: CookieContext, pattern: str | re.Pattern[str] = "") -> dict[str, str]:
    """
    Return inbound cookies whose names match `pattern`, in the order the client sent them.

    The pattern uses Python `re` syntax and is applied with `re.search`, so it matches anywhere in
    the name unless anchored: "^test" selects "test1" but not "mytest". An empty pattern returns all
    cookies. Malformed patterns raise `re.error`.
    """
    if not pattern:
        return dict(context.jar)

    regex = re.compile(pattern)
    return {name: value for name, value in context.jar.items() if regex.search(name)}


def extend_lifetime(context: CookieContext, name: str, additional_seconds: int) -> bool:
    """
    Re-issue an inbound cookie with expiry moved to now + `additional_seconds`.

    Inbound cookies carry no attributes, so the cookie is written with default path, domain,
    secure, httponly and samesite. This may change the scope or security flags of a cookie that
    was originally set with different attributes. Callers that need the original attributes must
    track them next to the value and call `set_cookie` directly.
    """
    if not has_cookie(context, name):
        return False

    if additional_seconds < 0:
        raise ValueError("additional_seconds must not be negative.")

    value = typing.cast(str, get_cookie(context, name))
    try:
        expires = context.now() + datetime.timedelta(seconds=additional_seconds)
    except OverflowError:
        logger.warning('Failed to extend cookie "%s": expiry is out of the supported date range.', name)
        return False

    logger.debug('Extending cookie "%s" resets its attributes to defaults.', name)
    return set_cookie(context, name, value, int(expires.timestamp()))


class CookieManager:
    """Static facade over the cookie functions of this module."""

    set = staticmethod(set_cookie)
    get = staticmethod(get_cookie)
    has = staticmethod(has_cookie)
    delete = staticmethod(delete_cookie)
    list = staticmethod(list_cookies)
    extend_lifetime = staticmethod(extend_lifetime)

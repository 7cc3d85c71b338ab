import dataclasses
import datetime
import pytest

from cookiekit.exceptions import InvalidCookieExpiry, InvalidCookieName, InvalidCookieValue
from cookiekit.jars import InboundCookieJar
from cookiekit.structures import CookieAttributes, SameSite, SetCookie


def test_samesite_values() -> None:
    assert SameSite.values() == ("Lax", "Strict", "None")
    assert SameSite.choices() == (("Lax", "Lax"), ("Strict", "Strict"), ("None", "None"))
    assert str(SameSite.NONE) == "None"


@pytest.mark.parametrize("value, expected", [("Lax", SameSite.LAX), ("strict", SameSite.STRICT), ("NONE", SameSite.NONE)])
def test_samesite_lookup_is_case_insensitive(value: str, expected: SameSite) -> None:
    assert SameSite(value) is expected


def test_samesite_rejects_unknown_value() -> None:
    with pytest.raises(ValueError):
        SameSite("relaxed")


def test_attributes_defaults() -> None:
    attributes = CookieAttributes()
    assert attributes.expires == 0
    assert attributes.path == "/"
    assert attributes.domain == ""
    assert attributes.secure
    assert attributes.httponly
    assert attributes.samesite is SameSite.LAX
    assert attributes.is_session
    assert attributes.expires_at is None


def test_attributes_coerce_samesite() -> None:
    assert CookieAttributes(samesite="strict").samesite is SameSite.STRICT  # type: ignore[arg-type]


def test_attributes_reject_unknown_samesite() -> None:
    with pytest.raises(ValueError):
        CookieAttributes(samesite="whatever")  # type: ignore[arg-type]


def test_attributes_are_frozen() -> None:
    attributes = CookieAttributes()
    with pytest.raises(dataclasses.FrozenInstanceError):
        attributes.path = "/admin"  # type: ignore[misc]


def test_attributes_expires_at() -> None:
    attributes = CookieAttributes(expires=1_700_000_000)
    assert not attributes.is_session
    assert attributes.expires_at == datetime.datetime(2023, 11, 14, 22, 13, 20, tzinfo=datetime.timezone.utc)


def test_set_cookie_header_with_all_attributes() -> None:
    directive = SetCookie(
        "session",
        "abc",
        CookieAttributes(expires=1_700_000_000, path="/app", domain="example.com", samesite=SameSite.NONE),
    )
    assert directive.to_header() == (
        "session=abc; Expires=Tue, 14 Nov 2023 22:13:20 GMT; Path=/app; Domain=example.com; "
        "Secure; HttpOnly; SameSite=None"
    )
    assert str(directive) == directive.to_header()


def test_set_cookie_header_for_session_cookie() -> None:
    directive = SetCookie("session", "abc", CookieAttributes(secure=False, httponly=False))
    assert directive.to_header() == "session=abc; Path=/; SameSite=Lax"


def test_set_cookie_header_with_empty_value() -> None:
    assert SetCookie("gone").to_header() == "gone=; Path=/; Secure; HttpOnly; SameSite=Lax"


@pytest.mark.parametrize("name", ["", " ", "a b", "a=b", "a;b", "a\x7fb", "näme", "a\n"])
def test_set_cookie_rejects_invalid_names(name: str) -> None:
    with pytest.raises(InvalidCookieName):
        SetCookie(name, "value")


@pytest.mark.parametrize("name", ["session", "__Host-id", "a.b", "x_y-z", "!#$%&'*+^`|~"])
def test_set_cookie_accepts_token_names(name: str) -> None:
    assert SetCookie(name, "value").name == name


def test_set_cookie_quotes_value_like_http_cookies() -> None:
    assert SetCookie("name", "a;b").to_header().startswith('name="a\\073b"; ')
    assert SetCookie("name", "a b").to_header().startswith('name="a b"; ')
    assert SetCookie("name", "plain-value").to_header().startswith("name=plain-value; ")


@pytest.mark.parametrize(
    "value", ["x;y", "a b", 'say "hi"', "back\\slash", "line\r\nbreak", "caf\u00e9", "comma,separated"]
)
def test_quoted_value_survives_round_trip(value: str) -> None:
    header = SetCookie("name", value).to_header()
    name_value = header.split("; Path=", 1)[0]
    assert InboundCookieJar.from_header(name_value)["name"] == value


def test_set_cookie_rejects_value_outside_latin1() -> None:
    with pytest.raises(InvalidCookieValue):
        SetCookie("name", "\u20ac")


@pytest.mark.parametrize("expires", [10**12, -(10**12)])
def test_attributes_reject_unrenderable_expiry(expires: int) -> None:
    with pytest.raises(InvalidCookieExpiry):
        CookieAttributes(expires=expires)

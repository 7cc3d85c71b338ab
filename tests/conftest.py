import datetime
import pytest

from cookiekit.context import CookieContext
from cookiekit.testing import FrozenClock, make_cookie_context


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime.datetime(2024, 3, 10, 12, 0, 0, tzinfo=datetime.timezone.utc))


@pytest.fixture
def context(clock: FrozenClock) -> CookieContext:
    return make_cookie_context({"test1": "value1", "test2": "value2", "mycookie": "value3"}, clock=clock)


@pytest.fixture
def empty_context(clock: FrozenClock) -> CookieContext:
    return make_cookie_context(clock=clock)

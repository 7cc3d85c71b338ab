from __future__ import annotations

from starlette import requests

from cookiekit.context import CookieContext, get_cookie_context


class Request(requests.Request):
    @property
    def cookie_context(self) -> CookieContext:
        """Cookie context of this request, installed by CookieMiddleware."""
        return get_cookie_context(self.scope)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.method} {self.url}>"

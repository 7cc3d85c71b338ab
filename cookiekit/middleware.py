import logging
from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from cookiekit.config import CookieSettings
from cookiekit.context import SCOPE_KEY_ENTRY, Clock, CookieContext
from cookiekit.jars import ResponseCookieSink

logger = logging.getLogger(__name__)


class CookieMiddleware:
    """Build a cookie context for every HTTP request and write collected Set-Cookie headers into the
    response. Once the response has started, the context refuses further cookie writes."""

    def __init__(self, app: ASGIApp, settings: CookieSettings | None = None, clock: Clock | None = None) -> None:
        self.app = app
        self.settings = settings or CookieSettings.from_config()
        self.clock = clock

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":  # pragma: no cover
            return await self.app(scope, receive, send)

        context = CookieContext.from_scope(scope, clock=self.clock)
        scope[self.settings.scope_key] = context
        scope[SCOPE_KEY_ENTRY] = self.settings.scope_key

        async def sender(message: Message) -> None:
            if message["type"] == "http.response.start":
                self.flush(context, message)
            await send(message)

        await self.app(scope, receive, sender)

    def flush(self, context: CookieContext, message: Message) -> None:
        sink = context.sink
        if not isinstance(sink, ResponseCookieSink):  # pragma: no cover
            return

        message.setdefault("headers", [])
        headers = MutableHeaders(scope=message)
        for directive in sink:
            if self.settings.log_directives:
                logger.debug('Writing Set-Cookie header for cookie "%s".', directive.name)
            headers.append("set-cookie", directive.to_header())
        sink.close()

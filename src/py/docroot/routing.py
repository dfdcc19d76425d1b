from typing import Any, Callable, Iterator, NamedTuple, Pattern
import re

from .model import Handler, RouteNotMatched, handler
from .sink import Sink
from .status import NOT_FOUND
from .utils.logging import debug, info, logged

# -----------------------------------------------------------------------------
#
# ROUTE
#
# -----------------------------------------------------------------------------


class Route(NamedTuple):
    """A pattern matched at the start of a path, and the handler that
    receives what is left of the path."""

    pattern: Pattern[str]
    target: Handler

    @staticmethod
    def Compile(pattern: str | Pattern[str]) -> Pattern[str]:
        if not isinstance(pattern, str):
            return pattern
        try:
            return re.compile(pattern)
        except re.error as e:
            raise ValueError(f"Route pattern '{pattern}' is malformed: {e}")

    def match(self, path: str) -> str | None:
        """Returns the remainder of `path` after the matched prefix, or
        `None` when the pattern does not match at offset 0."""
        matched = self.pattern.match(path)
        return None if matched is None else path[matched.end() :]

    def __repr__(self) -> str:
        return f"(Route {self.pattern.pattern!r} {self.target!r})"


# -----------------------------------------------------------------------------
#
# ROUTER
#
# -----------------------------------------------------------------------------
# Routers strip the matched prefix before delegating, so they can be nested
# to build a dispatch tree where each level only knows its own segment.
# Routes are tried in registration order and the first match wins, whatever
# its specificity: register the more specific patterns first.


class Router(Handler):
    """Dispatches paths to the first route whose pattern matches."""

    __slots__ = ["_routes"]

    def __init__(self) -> None:
        self._routes: list[Route] = []

    @property
    def routes(self) -> tuple[Route, ...]:
        return tuple(self._routes)

    def addRoute(
        self,
        pattern: str | Pattern[str],
        target: Handler | Callable[[Sink, str], Any],
    ) -> "Router":
        route = Route(Route.Compile(pattern), handler(target))
        self._routes.append(route)
        info("Registered route", Pattern=route.pattern.pattern)
        return self

    def match(self, path: str) -> tuple[Route, str] | None:
        for route in self._routes:
            remainder = route.match(path)
            if remainder is not None:
                return route, remainder
        return None

    def process(self, sink: Sink, path: str) -> Any:
        matched = self.match(path)
        if matched is None:
            logged(debug) and debug("No route matched", Path=path)
            sink.writeError(NOT_FOUND)
            return RouteNotMatched(path)
        route, remainder = matched
        logged(debug) and debug(
            "Route matched",
            Pattern=route.pattern.pattern,
            Path=path,
            Remainder=remainder,
        )
        return route.target.process(sink, remainder)

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)


# EOF

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Literal, NamedTuple, TypeAlias

if TYPE_CHECKING:
	from .copier import ByteCopier
	from .sink import Sink

# -----------------------------------------------------------------------------
#
# RESULTS
#
# -----------------------------------------------------------------------------
# Handlers never raise for request-level conditions, they return one of
# these values and the sink has already received the matching response.


class ResolvedPath(NamedTuple):
	"""A canonical path, guaranteed to be within `root`."""

	path: Path
	root: Path
	requestPath: str

	@property
	def isDirectory(self) -> bool:
		return self.path.is_dir()


TDenyReason: TypeAlias = Literal["malformed", "missing", "outside"]


class TraversalDenied(NamedTuple):
	"""The request path could not be resolved to a path within the root."""

	requestPath: str
	reason: TDenyReason


class RouteNotMatched(NamedTuple):
	path: str


class RootNotConfigured(NamedTuple):
	pass


class OpenFailed(NamedTuple):
	path: Path
	reason: str


class Listed(NamedTuple):
	"""A directory listing was written in full."""

	path: Path
	length: int


class Started(NamedTuple):
	"""Headers are written and the body is being copied."""

	path: Path
	length: int
	copier: "ByteCopier"


# -----------------------------------------------------------------------------
#
# HANDLERS
#
# -----------------------------------------------------------------------------


class Handler(ABC):
	"""Processes a request path by writing a response to the given sink."""

	@abstractmethod
	def process(self, sink: "Sink", path: str) -> Any: ...


class FunctionHandler(Handler):
	"""Wraps a plain `(sink, path)` callable as a handler."""

	__slots__ = ["functor"]

	def __init__(self, functor: Callable[["Sink", str], Any]):
		self.functor = functor

	def process(self, sink: "Sink", path: str) -> Any:
		return self.functor(sink, path)

	def __repr__(self) -> str:
		return f"(FunctionHandler {self.functor})"


def handler(value: Handler | Callable[["Sink", str], Any]) -> Handler:
	"""Returns the given value as a handler, wrapping callables."""
	if isinstance(value, Handler):
		return value
	elif callable(value):
		return FunctionHandler(value)
	else:
		raise TypeError(f"Expected a Handler or a callable, got: {value!r}")


# EOF

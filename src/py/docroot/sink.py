import asyncio
from abc import ABC, abstractmethod

from .status import reason, OK
from .utils.io import asBytes
from .utils.logging import debug, logged, warning

# -----------------------------------------------------------------------------
#
# HELPERS
#
# -----------------------------------------------------------------------------


def headername(name: str, *, headers: dict[str, str] = {}) -> str:
	"""Normalizes the header name as `Kebab-Case`."""
	if name in headers:
		return headers[name]
	key: str = name.lower()
	if key in headers:
		return headers[key]
	else:
		normalized: str = "-".join(_.capitalize() for _ in name.split("-"))
		headers[key] = normalized
		return normalized


# -----------------------------------------------------------------------------
#
# SINK
#
# -----------------------------------------------------------------------------


class Sink(ABC):
	"""The response channel of a single request. Headers are buffered until
	`writeHeaders()` (or the first `write()`), after which only body bytes
	can be sent."""

	__slots__ = ["protocol", "status", "headers", "headersWritten", "isClosed", "sent"]

	def __init__(self, protocol: str = "HTTP/1.1") -> None:
		self.protocol: str = protocol
		self.status: int = OK
		self.headers: dict[str, str] = {}
		self.headersWritten: bool = False
		self.isClosed: bool = False
		# Number of body bytes sent so far
		self.sent: int = 0

	def header(self, name: str) -> str | None:
		return self.headers.get(headername(name))

	def setHeader(self, name: str, value: str | int) -> bool:
		if self.headersWritten:
			warning("Header set after headers were written", Header=name)
			return False
		self.headers[headername(name)] = str(value)
		return True

	def head(self) -> bytes:
		"""Serializes the status line and headers."""
		lines: list[str] = [f"{k}: {v}" for k, v in self.headers.items()]
		lines.insert(0, f"{self.protocol} {self.status} {reason(self.status)}")
		lines.append("")
		lines.append("")
		return "\r\n".join(lines).encode("ascii")

	def writeHeaders(self) -> bool:
		if self.headersWritten or self.isClosed:
			return False
		self.headersWritten = True
		self._send(self.head(), False)
		return True

	def write(self, data: bytes | str) -> bool:
		"""Writes body data, returning `False` when the sink is closed."""
		if self.isClosed:
			return False
		if not self.headersWritten:
			self.writeHeaders()
		payload: bytes = asBytes(data)
		if payload:
			self._send(payload, True)
			self.sent += len(payload)
		return True

	def writeError(self, status: int) -> bool:
		"""Writes a canned plain text response for the given status and
		closes the sink."""
		if self.headersWritten:
			# The status line is already out, all we can do is to stop.
			warning(
				"Error after headers were written", Status=status, Sent=self.sent
			)
			self.close()
			return False
		body: bytes = f"{status} {reason(status)}".encode("ascii")
		self.status = status
		self.headers = {}
		self.setHeader("Content-Type", "text/plain")
		self.setHeader("Content-Length", len(body))
		logged(debug) and debug("Writing error", Status=status)
		self.write(body)
		self.close()
		return True

	async def drain(self) -> bool:
		"""Suspends until more bytes can be written, returning `False` if
		the sink was closed in the meantime."""
		# Yields to the loop so that copies interleave with other requests
		await asyncio.sleep(0)
		return not self.isClosed

	def close(self) -> None:
		if not self.isClosed:
			self.isClosed = True
			self._close()

	@abstractmethod
	def _send(self, data: bytes, body: bool) -> None: ...

	def _close(self) -> None:
		pass


class BufferSink(Sink):
	"""A sink that keeps the response in memory."""

	__slots__ = ["body", "limit"]

	def __init__(self, protocol: str = "HTTP/1.1") -> None:
		super().__init__(protocol)
		self.body: bytearray = bytearray()
		self.limit: int | None = None

	def closeAfter(self, count: int) -> "BufferSink":
		"""Behaves like a peer that goes away after receiving `count` body
		bytes."""
		self.limit = count
		return self

	def _send(self, data: bytes, body: bool) -> None:
		if not body:
			return
		if self.limit is None:
			self.body += data
		else:
			self.body += data[: max(0, self.limit - len(self.body))]
			if len(self.body) >= self.limit:
				self.isClosed = True

	def payload(self) -> bytes:
		"""Returns the full response as it would be seen on the wire."""
		return (self.head() if self.headersWritten else b"") + bytes(self.body)

	def __str__(self) -> str:
		return f"BufferSink({self.status} {self.headers} {len(self.body)}b)"


class StreamSink(Sink):
	"""A sink writing to an asyncio stream."""

	__slots__ = ["writer"]

	def __init__(self, writer: asyncio.StreamWriter, protocol: str = "HTTP/1.1"):
		super().__init__(protocol)
		self.writer: asyncio.StreamWriter = writer

	def _send(self, data: bytes, body: bool) -> None:
		if self.writer.is_closing():
			self.isClosed = True
		else:
			self.writer.write(data)

	async def drain(self) -> bool:
		if self.isClosed:
			return False
		try:
			await self.writer.drain()
		except ConnectionError as e:
			logged(debug) and debug("Peer closed the stream", Error=str(e))
			self.isClosed = True
		return not self.isClosed

	def _close(self) -> None:
		self.writer.close()


# EOF

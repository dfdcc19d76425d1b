import asyncio

from docroot.sink import BufferSink, StreamSink, headername


def test_headername():
	assert headername("content-type") == "Content-Type"
	assert headername("CONTENT-LENGTH") == "Content-Length"


def test_write_error():
	sink = BufferSink()
	assert sink.writeError(404)
	assert sink.status == 404
	assert sink.isClosed
	assert bytes(sink.body) == b"404 Not Found"
	assert sink.header("content-length") == "13"
	assert sink.payload().startswith(b"HTTP/1.1 404 Not Found\r\n")


def test_headers_are_written_once():
	sink = BufferSink()
	assert sink.setHeader("content-type", "text/plain")
	assert sink.writeHeaders()
	assert not sink.writeHeaders()
	assert not sink.setHeader("X-Late", "1")
	assert sink.headers == {"Content-Type": "text/plain"}
	assert sink.payload() == b"HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\n\r\n"


def test_write_after_close():
	sink = BufferSink()
	assert sink.write("hello")
	sink.close()
	assert not sink.write("world")
	assert bytes(sink.body) == b"hello"
	assert sink.sent == 5


def test_close_after():
	sink = BufferSink().closeAfter(3)
	sink.write(b"hello")
	assert bytes(sink.body) == b"hel"
	assert sink.isClosed
	assert not asyncio.run(sink.drain())


class Writer:
	"""Stands for an `asyncio.StreamWriter` whose peer may go away."""

	def __init__(self, fail: bool = False) -> None:
		self.data = bytearray()
		self.fail = fail
		self.closed = False

	def write(self, data):
		self.data += data

	async def drain(self):
		if self.fail:
			raise ConnectionResetError("reset by peer")

	def is_closing(self):
		return self.closed

	def close(self):
		self.closed = True


def test_stream_sink():
	writer = Writer()
	sink = StreamSink(writer)
	sink.setHeader("Content-Length", 2)
	sink.write(b"OK")
	assert asyncio.run(sink.drain())
	sink.close()
	assert writer.closed
	assert bytes(writer.data) == b"HTTP/1.1 200 OK\r\nContent-Length: 2\r\n\r\nOK"


def test_stream_sink_peer_reset():
	sink = StreamSink(Writer(fail=True))
	sink.write(b"data")
	assert not asyncio.run(sink.drain())
	assert sink.isClosed
	assert not sink.write(b"more")


# EOF

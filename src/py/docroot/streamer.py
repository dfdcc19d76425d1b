import os
import stat
from pathlib import Path
from typing import BinaryIO

from .config import CHUNK_SIZE
from .copier import ByteCopier
from .mime import MimeTable
from .model import OpenFailed, ResolvedPath, Started
from .sink import Sink
from .utils.logging import debug, logged, warning


def nonblocking(path: str, flags: int) -> int:
	# Opening a FIFO for reading would otherwise wait for a writer
	return os.open(path, flags | getattr(os, "O_NONBLOCK", 0))


class FileStreamer:
	"""Opens a resolved file, writes its headers and starts copying its
	bytes to the sink. The copy runs on the event loop, `stream` returns as
	soon as it is scheduled."""

	def __init__(self, mimeTable: MimeTable | None = None, chunkSize: int = CHUNK_SIZE):
		self.mimeTable: MimeTable = mimeTable or MimeTable()
		self.chunkSize: int = chunkSize

	def open(self, path: Path) -> tuple[BinaryIO, int] | OpenFailed:
		"""Opens the file, returning it with its size at open time."""
		try:
			f: BinaryIO = open(path, "rb", opener=nonblocking)
		except OSError as e:
			return OpenFailed(path, e.strerror or str(e))
		try:
			info = os.fstat(f.fileno())
		except OSError as e:
			f.close()
			return OpenFailed(path, e.strerror or str(e))
		if not stat.S_ISREG(info.st_mode):
			f.close()
			return OpenFailed(path, "Not a regular file")
		return f, info.st_size

	def stream(self, sink: Sink, resolved: ResolvedPath) -> Started | OpenFailed:
		opened = self.open(resolved.path)
		if isinstance(opened, OpenFailed):
			warning("Could not open file", Path=resolved.requestPath, Reason=opened.reason)
			return opened
		f, size = opened
		sink.setHeader("Content-Type", self.mimeTable.lookup(resolved.path))
		sink.setHeader("Content-Length", size)
		sink.writeHeaders()
		copier = ByteCopier(f, sink, self.chunkSize)
		try:
			copier.start()
		except RuntimeError:
			# There is no running loop, the file must not leak
			f.close()
			raise
		logged(debug) and debug("Streaming file", Path=resolved.requestPath, Size=size)
		return Started(resolved.path, size, copier)


# EOF

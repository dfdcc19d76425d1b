from pathlib import Path

from .config import CHUNK_SIZE
from .listing import DirectoryRenderer
from .mime import MimeTable
from .model import (
	Handler,
	Listed,
	OpenFailed,
	RootNotConfigured,
	Started,
	TraversalDenied,
)
from .resolver import PathResolver
from .sink import Sink
from .status import FORBIDDEN, INTERNAL_SERVER_ERROR, NOT_FOUND
from .streamer import FileStreamer
from .utils.logging import error, info, warning


class FilesystemHandler(Handler):
	"""Serves files and directory listings from a document root. Any path
	that does not resolve within the root is reported as not found."""

	def __init__(
		self,
		root: str | Path | None = None,
		*,
		mimeTable: MimeTable | None = None,
		chunkSize: int = CHUNK_SIZE,
	):
		self.mimeTable: MimeTable = mimeTable or MimeTable()
		self.renderer: DirectoryRenderer = DirectoryRenderer()
		self.streamer: FileStreamer = FileStreamer(self.mimeTable, chunkSize)
		self.documentRoot: Path | None = None
		if root is not None:
			self.setDocumentRoot(root)

	def setDocumentRoot(self, root: str | Path | None) -> Path | None:
		"""Sets the document root, which is canonicalized. Requests already
		in progress keep the root they were resolved against."""
		self.documentRoot = Path(root).resolve() if root else None
		info("Document root", Root=str(self.documentRoot))
		return self.documentRoot

	def process(
		self, sink: Sink, path: str
	) -> Listed | Started | TraversalDenied | RootNotConfigured | OpenFailed:
		root = self.documentRoot
		if root is None:
			error("No document root configured", "NOROOT", Path=path)
			sink.writeError(INTERNAL_SERVER_ERROR)
			return RootNotConfigured()
		resolved = PathResolver.Resolve(root, path)
		if isinstance(resolved, TraversalDenied):
			if resolved.reason != "missing":
				warning("Path denied", Path=path, Reason=resolved.reason)
			sink.writeError(NOT_FOUND)
			return resolved
		elif resolved.isDirectory:
			return self.processDirectory(sink, resolved.requestPath, resolved.path)
		else:
			result = self.streamer.stream(sink, resolved)
			if isinstance(result, OpenFailed):
				sink.writeError(FORBIDDEN)
			return result

	def processDirectory(
		self, sink: Sink, requestPath: str, directory: Path
	) -> Listed | OpenFailed:
		try:
			data: bytes = self.renderer.render(requestPath, directory)
		except (OSError, ValueError) as e:
			warning("Could not list directory", Path=requestPath, Reason=str(e))
			sink.writeError(FORBIDDEN)
			return OpenFailed(directory, getattr(e, "strerror", None) or str(e))
		sink.setHeader("Content-Type", "text/html")
		sink.setHeader("Content-Length", len(data))
		sink.write(data)
		sink.close()
		return Listed(directory, len(data))


# EOF

from pathlib import Path

DEFAULT_TYPE: str = "application/octet-stream"

MIME_TYPES: dict[str, str] = {
	"htm": "text/html",
	"html": "text/html",
	"css": "text/css",
	"js": "application/javascript",
	"mjs": "application/javascript",
	"json": "application/json",
	"jpg": "image/jpeg",
	"jpeg": "image/jpeg",
	"png": "image/png",
	"gif": "image/gif",
	"svg": "image/svg+xml",
	"ico": "image/x-icon",
	"txt": "text/plain",
	"xml": "application/xml",
	"pdf": "application/pdf",
	"wasm": "application/wasm",
	"tar.gz": "application/x-gtar",
}


def extension(path: Path | str) -> str:
	"""Returns the complete suffix of the path's last component, that is
	everything after its first dot (`tar.gz` for `archive.tar.gz`)."""
	name: str = Path(path).name
	return name.split(".", 1)[1] if "." in name else ""


class MimeTable:
	"""Maps complete file extensions to content types. Lookups are case
	sensitive and fall back to `application/octet-stream`."""

	__slots__ = ["types", "default"]

	def __init__(
		self, extra: dict[str, str] | None = None, *, default: str = DEFAULT_TYPE
	):
		self.types: dict[str, str] = MIME_TYPES | extra if extra else dict(MIME_TYPES)
		self.default: str = default

	def lookup(self, path: Path | str) -> str:
		return self.types.get(extension(path), self.default)

	def __contains__(self, ext: str) -> bool:
		return ext in self.types


# EOF

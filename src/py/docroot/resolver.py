import os
from pathlib import Path
from urllib.parse import unquote

from .model import ResolvedPath, TraversalDenied
from .utils.logging import debug, logged

# -----------------------------------------------------------------------------
#
# RESOLVER
#
# -----------------------------------------------------------------------------
# Resolution is the only way to obtain a `ResolvedPath`. The request path is
# decoded, joined to the root and only then canonicalized, resolving `..` and
# symlinks against the actual filesystem. The result must then sit within
# the canonical root.
#
# NOTE: There is a window between resolution and the moment the file is
# opened where the filesystem can change (a symlink swapped in, a file
# deleted). This is accepted, as it is for conventional static servers.


def canonical(path: Path | str) -> Path:
	"""Returns the canonical, absolute form of `path`, which must exist."""
	return Path(path).resolve(strict=True)


def isWithin(path: Path, root: Path) -> bool:
	"""Tells if the canonical `path` is `root` or below it."""
	p, r = str(path), str(root)
	return p == r or p.startswith(r if r.endswith(os.sep) else r + os.sep)


class PathResolver:
	"""Resolves request paths against a canonical document root."""

	@staticmethod
	def Decode(requestPath: str) -> str | None:
		"""Percent-decodes the path as UTF-8, returning `None` when the
		decoded bytes are not valid UTF-8."""
		try:
			decoded: str = unquote(requestPath, encoding="utf-8", errors="strict")
		except UnicodeDecodeError:
			return None
		return None if "\x00" in decoded else decoded

	@classmethod
	def Resolve(cls, root: Path, requestPath: str) -> ResolvedPath | TraversalDenied:
		decoded = cls.Decode(requestPath)
		if decoded is None:
			return TraversalDenied(requestPath, "malformed")
		# The request path is always relative to the root
		relative: str = decoded.lstrip("/" + os.sep)
		try:
			resolved: Path = canonical(root / relative if relative else root)
		except (OSError, RuntimeError):
			# Missing targets, symlink loops and unreadable components
			return TraversalDenied(requestPath, "missing")
		if not isWithin(resolved, root):
			return TraversalDenied(requestPath, "outside")
		logged(debug) and debug("Resolved path", Path=requestPath, Local=str(resolved))
		return ResolvedPath(resolved, root, decoded)


# EOF

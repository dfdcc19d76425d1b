import os
from pathlib import Path
from urllib.parse import quote

from . import __version__
from .utils.htmpl import H, Node, html

# -----------------------------------------------------------------------------
#
# DIRECTORY LISTING
#
# -----------------------------------------------------------------------------


def displayName(name: str) -> str:
	"""Returns a printable version of a file name that may hold undecodable
	bytes, which are replaced with U+FFFD."""
	return os.fsencode(name).decode("utf8", "replace")


def linkTarget(name: str) -> str:
	"""Returns the percent-encoded link to a directory entry, built from the
	raw bytes of its name."""
	return quote(os.fsencode(name), safe="")


class DirectoryRenderer:
	"""Renders the immediate entries of a directory as an HTML document. The
	title is the request path, never the local path, and entries are listed in
	the order the filesystem returns them."""

	def __init__(self, footer: str | None = None):
		self.footer: str = footer or f"docroot {__version__}"

	def entries(self, directory: Path) -> list[Node]:
		res: list[Node] = []
		with os.scandir(directory) as it:
			for entry in it:
				try:
					isDir = entry.is_dir()
				except OSError:
					isDir = False
				suffix: str = "/" if isDir else ""
				res.append(
					H.li(
						H.a(
							displayName(entry.name) + suffix,
							href=linkTarget(entry.name) + suffix,
						)
					)
				)
		return res

	def render(self, requestPath: str, directory: Path) -> bytes:
		return "".join(
			html(
				H.html(
					H.head(H.meta(charset="utf-8"), H.title(requestPath)),
					H.body(
						H.h1(requestPath),
						H.p("Directory listing:"),
						H.ul(self.entries(directory)),
						H.hr(),
						H.em(self.footer),
					),
				),
				doctype="html",
			)
		).encode("utf8", "replace")


# EOF

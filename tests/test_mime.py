import pytest

from docroot.mime import DEFAULT_TYPE, MimeTable, extension


@pytest.mark.parametrize(
	"path,expected",
	[
		("index.html", "text/html"),
		("index.htm", "text/html"),
		("css/style.css", "text/css"),
		("app.js", "application/javascript"),
		("photo.jpg", "image/jpeg"),
		("logo.png", "image/png"),
		("archive.tar.gz", "application/x-gtar"),
		("data.bin", DEFAULT_TYPE),
		("README", DEFAULT_TYPE),
	],
)
def test_lookup(path, expected):
	assert MimeTable().lookup(path) == expected


def test_complete_suffix():
	assert extension("archive.tar.gz") == "tar.gz"
	assert extension("a.b/archive") == ""
	assert extension(".bashrc") == "bashrc"
	# The complete suffix must match, not just the last part
	assert MimeTable().lookup("jquery.min.js") == DEFAULT_TYPE
	assert MimeTable().lookup("backup.html.bak") == DEFAULT_TYPE


def test_lookup_is_case_sensitive():
	assert MimeTable().lookup("INDEX.HTML") == DEFAULT_TYPE


def test_extra_entries():
	table = MimeTable({"md": "text/markdown", "min.js": "application/javascript"})
	assert table.lookup("README.md") == "text/markdown"
	assert table.lookup("jquery.min.js") == "application/javascript"
	assert table.lookup("index.html") == "text/html"
	assert "md" in table
	assert "md" not in MimeTable()


# EOF

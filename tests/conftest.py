import pytest


@pytest.fixture
def site(tmp_path):
	"""A document root with a few files, and a secret file next to it."""
	root = tmp_path / "www"
	root.mkdir()
	(root / "index.html").write_text("<h1>Home</h1>")
	(root / "style.css").write_text("body { color: red; }")
	(root / "archive.tar.gz").write_bytes(b"\x1f\x8b\x08\x00" + bytes(range(256)))
	(root / "data.bin").write_bytes(b"\x00\x01\x02\x03")
	docs = root / "docs"
	docs.mkdir()
	(docs / "guide.txt").write_text("Read me")
	(root / "empty").mkdir()
	(tmp_path / "secret.txt").write_text("top secret")
	return root


# EOF

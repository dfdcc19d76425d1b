import os

import pytest

from docroot.model import ResolvedPath, TraversalDenied
from docroot.resolver import PathResolver, isWithin


@pytest.fixture
def root(site):
	return site.resolve()


def test_resolves_files_and_directories(root):
	res = PathResolver.Resolve(root, "docs/guide.txt")
	assert isinstance(res, ResolvedPath)
	assert res.path == root / "docs" / "guide.txt"
	assert not res.isDirectory
	assert PathResolver.Resolve(root, "docs").isDirectory


def test_resolves_root(root):
	assert PathResolver.Resolve(root, "").path == root
	assert PathResolver.Resolve(root, "/").path == root
	assert PathResolver.Resolve(root, "docs/..").path == root


def test_leading_slash_is_relative_to_root(root):
	assert PathResolver.Resolve(root, "/index.html").path == root / "index.html"


def test_percent_decoding(root):
	(root / "with space.txt").write_text("x")
	(root / "café.txt").write_text("x")
	assert PathResolver.Resolve(root, "with%20space.txt").path.name == "with space.txt"
	assert PathResolver.Resolve(root, "caf%C3%A9.txt").path.name == "café.txt"


def test_malformed_paths(root):
	assert PathResolver.Resolve(root, "%ff%fe") == TraversalDenied("%ff%fe", "malformed")
	assert PathResolver.Resolve(root, "index.html%00") == TraversalDenied(
		"index.html%00", "malformed"
	)


def test_missing_paths(root):
	assert PathResolver.Resolve(root, "nope.txt") == TraversalDenied("nope.txt", "missing")


@pytest.mark.parametrize(
	"path",
	[
		"../secret.txt",
		"docs/../../secret.txt",
		"..%2Fsecret.txt",
		"%2E%2E/secret.txt",
		"..",
	],
)
def test_traversal_is_denied(root, path):
	assert PathResolver.Resolve(root, path) == TraversalDenied(path, "outside")


def test_symlinks_out_of_root_are_denied(root):
	os.symlink(root.parent / "secret.txt", root / "link.txt")
	os.symlink(root.parent, root / "up")
	assert PathResolver.Resolve(root, "link.txt").reason == "outside"
	assert PathResolver.Resolve(root, "up/secret.txt").reason == "outside"


def test_symlinks_within_root_are_resolved(root):
	os.symlink(root / "docs", root / "manual")
	assert PathResolver.Resolve(root, "manual/guide.txt").path == (
		root / "docs" / "guide.txt"
	)


def test_sibling_with_common_prefix_is_denied(root):
	sibling = root.parent / (root.name + "2")
	sibling.mkdir()
	(sibling / "file.txt").write_text("x")
	path = f"../{sibling.name}/file.txt"
	assert PathResolver.Resolve(root, path) == TraversalDenied(path, "outside")


def test_resolution_is_idempotent(root):
	assert PathResolver.Resolve(root, "docs/./guide.txt") == PathResolver.Resolve(
		root, "docs/./guide.txt"
	)


def test_is_within(tmp_path):
	assert isWithin(tmp_path / "a", tmp_path)
	assert isWithin(tmp_path, tmp_path)
	assert not isWithin(tmp_path.parent, tmp_path)
	assert isWithin(tmp_path, tmp_path.parents[len(tmp_path.parents) - 1])


# EOF

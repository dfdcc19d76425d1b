import re

from docroot.listing import DirectoryRenderer


def test_listing_entries(site):
	page = DirectoryRenderer().render("/", site).decode("utf8")
	items = re.findall(r"<li>(.*?)</li>", page)
	assert len(items) == 6
	assert '<li><a href="docs/">docs/</a></li>' in page
	assert '<li><a href="empty/">empty/</a></li>' in page
	assert '<li><a href="index.html">index.html</a></li>' in page
	assert "<p>Directory listing:</p>" in page
	assert page.startswith("<!DOCTYPE html>")


def test_listing_title_is_request_path(site):
	page = DirectoryRenderer().render("docs", site / "docs").decode("utf8")
	assert "<title>docs</title>" in page
	assert "<h1>docs</h1>" in page
	# The local path is never disclosed
	assert str(site) not in page


def test_listing_is_escaped(site):
	(site / "empty" / "a<b>&c.txt").write_text("x")
	page = DirectoryRenderer().render("<script>", site / "empty").decode("utf8")
	assert "<h1>&lt;script&gt;</h1>" in page
	assert "<script>" not in page
	assert (
		'<li><a href="a%3Cb%3E%26c.txt">a&lt;b&gt;&amp;c.txt</a></li>' in page
	)


def test_listing_links_are_percent_encoded(site):
	for name in ("a#b.txt", "what?.txt", "100%.txt", "with space.txt"):
		(site / "empty" / name).write_text("x")
	(site / "empty" / "sub dir").mkdir()
	page = DirectoryRenderer().render("empty", site / "empty").decode("utf8")
	assert '<a href="a%23b.txt">a#b.txt</a>' in page
	assert '<a href="what%3F.txt">what?.txt</a>' in page
	assert '<a href="100%25.txt">100%.txt</a>' in page
	assert '<a href="with%20space.txt">with space.txt</a>' in page
	assert '<a href="sub%20dir/">sub dir/</a>' in page


def test_empty_listing(site):
	page = DirectoryRenderer().render("empty", site / "empty").decode("utf8")
	assert "<ul></ul>" in page


def test_listing_footer(site):
	page = DirectoryRenderer(footer="Powered by tests").render("/", site)
	assert b"<hr><em>Powered by tests</em>" in page


# EOF

"""
Content tree tests

Tests front matter splitting, URL derivation and page lookup over a
directory of markdown sources.
"""

import pytest
from pathlib import Path

from devsite_export.lib.pages import ContentTree, frontMatter_split, url_fromPath


def page_write(root, relative, text):
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestFrontMatterSplit:
    """Test separation of YAML front matter"""

    def test_front_matter_and_body(self):
        data, body = frontMatter_split("---\ntitle: Hi\ntags:\n  - a\n---\nBody\n")

        assert data == {"title": "Hi", "tags": ["a"]}
        assert body == "Body\n"

    def test_no_front_matter(self):
        assert frontMatter_split("Just text\n") == ({}, "Just text\n")

    def test_non_mapping_front_matter(self):
        data, body = frontMatter_split("---\n- a\n---\nBody")

        assert data == {}
        assert body == "Body"

    def test_horizontal_rule_in_body_kept(self):
        """Only the leading block is front matter"""
        data, body = frontMatter_split("---\ntitle: Hi\n---\nA\n\n---\n\nB\n")

        assert data == {"title": "Hi"}
        assert body == "A\n\n---\n\nB\n"


class TestUrls:
    """Test Eleventy-style URL derivation"""

    @pytest.mark.parametrize("relative,url", [
        ("index.md", "/"),
        ("about.md", "/about/"),
        ("blog/foo/index.md", "/blog/foo/"),
        ("blog/foo.md", "/blog/foo/"),
    ])
    def test_url_from_path(self, relative, url):
        assert url_fromPath(Path(relative)) == url


class TestContentTree:
    """Test page lookup over a directory"""

    def test_lookup(self, tmp_path):
        page_write(tmp_path, "blog/foo/index.md", "---\ntitle: Foo\nauthors:\n  - jane\n---\nHello\n")
        page_write(tmp_path, "about.md", "About\n")

        tree = ContentTree(tmp_path)
        page = tree.page_findByUrl("/blog/foo/")

        assert page.title == "Foo"
        assert page.rawContent == "Hello\n"
        assert page.frontMatterData["authors"] == ["jane"]
        assert tree.page_findByUrl("/about/").title == ""
        assert tree.page_findByUrl("/missing/") is None

    def test_underscore_directories_skipped(self, tmp_path):
        page_write(tmp_path, "_includes/style.md", "x")
        page_write(tmp_path, "post.md", "y")

        assert ContentTree(tmp_path).url_list() == ["/post/"]

    def test_permalink_overrides_path(self, tmp_path):
        page_write(tmp_path, "misc/old-name.md", "---\npermalink: /new-name/\n---\nBody")

        assert ContentTree(tmp_path).url_list() == ["/new-name/"]

    def test_empty_body(self, tmp_path):
        """A page with only front matter has no content to export"""
        page_write(tmp_path, "empty.md", "---\ntitle: Empty\n---\n")

        assert ContentTree(tmp_path).page_findByUrl("/empty/").rawContent == ""

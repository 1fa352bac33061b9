"""
Export path tests

Tests URL splitting, the tag rules and their priority, and the URL map
kept by the export session.
"""

import pytest
import yaml

from devsite_export.lib.paths import ExportSession, exportPath_resolve, url_split


class TestUrlSplit:
    """Test URL → (directory, name)"""

    @pytest.mark.parametrize("url,expected", [
        ("/foo/", ("/", "foo")),
        ("/foo", ("/", "foo")),
        ("/foo/bar", ("/foo", "bar")),
        ("/foo/bar/", ("/foo", "bar")),
        ("/blog/post.html", ("/blog", "post")),
        ("/", ("/", "")),
    ])
    def test_split(self, url, expected):
        assert url_split(url) == expected


class TestExportPath:
    """Test the tag rules"""

    def test_root_page_goes_to_articles(self):
        """A root-level page without tags lands in articles/"""
        path = exportPath_resolve("/foo/")

        assert path.directory == "/articles/"
        assert path.identifier == "/articles/foo"

    def test_nested_page_keeps_directory(self):
        """A page below the root keeps its directory when no rule fires"""
        assert exportPath_resolve("/foo/bar").identifier == "/foo/bar"
        assert exportPath_resolve("/learn/css/box-model/").identifier == "/learn/css/box-model"

    def test_case_study(self):
        assert exportPath_resolve("/foo/", ["case-study"]).identifier == "/case-studies/foo"

    def test_new_to_the_web(self):
        assert exportPath_resolve("/foo/", ["new-to-the-web"]).identifier == "/blog/foo"

    def test_case_study_wins(self):
        """The first matching rule wins when both tags are present"""
        path = exportPath_resolve("/foo/", ["new-to-the-web", "case-study"])

        assert path.directory == "/case-studies/"

    def test_tag_rule_below_root(self):
        """Tag folders are appended to the page's own directory"""
        assert exportPath_resolve("/foo/bar/", ["case-study"]).identifier == "/foo/case-studies/bar"

    def test_single_tag_string(self):
        assert exportPath_resolve("/foo/", "new-to-the-web").directory == "/blog/"

    def test_unrelated_tags(self):
        assert exportPath_resolve("/foo/", ["performance"]).directory == "/articles/"

    def test_directory_ends_with_separator(self):
        for url in ("/a/", "/a/b", "/a/b/c/", "/"):
            assert exportPath_resolve(url).directory.endswith("/")


class TestExportSession:
    """Test the URL map"""

    def test_resolution_is_recorded(self):
        session = ExportSession()

        path = session.path_resolve("/foo/", ["case-study"])

        assert session.exportId_get("/foo/") == path.identifier == "/case-studies/foo"
        assert len(session) == 1

    def test_last_write_wins(self):
        session = ExportSession()
        session.path_resolve("/foo/")
        session.path_resolve("/foo/", ["new-to-the-web"])

        assert session.exportId_get("/foo/") == "/blog/foo"
        assert len(session) == 1

    def test_sessions_are_independent(self):
        first, second = ExportSession(), ExportSession()
        first.path_resolve("/foo/")

        assert second.exportId_get("/foo/") is None

    def test_redirects(self):
        session = ExportSession()
        session.path_resolve("/foo/")
        session.path_resolve("/bar/", ["case-study"])

        assert session.redirects_list() == [
            {"from": "/foo/", "to": "/articles/foo"},
            {"from": "/bar/", "to": "/case-studies/bar"},
        ]
        assert yaml.safe_load(session.redirects_dump()) == {"redirects": session.redirects_list()}

    def test_unmoved_pages_have_no_redirect(self):
        """A page whose identifier equals its URL would redirect to itself"""
        session = ExportSession()
        session.path_resolve("/learn/css/box-model")
        session.path_resolve("/foo/")

        assert session.exportId_get("/learn/css/box-model") == "/learn/css/box-model"
        assert session.redirects_list() == [{"from": "/foo/", "to": "/articles/foo"}]

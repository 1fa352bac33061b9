"""
File writer tests

Tests where exported documents land below the output directory.
"""

import pytest

from devsite_export.lib.authors import OutputPathError
from devsite_export.lib.writer import FileWriter


def context_make(exportPath, slug):
    return {"exportPath": exportPath, "page": {"url": "/x/", "fileSlug": slug}}


class TestDocumentPath:
    """Test document placement"""

    def test_written_below_export_path(self, tmp_path):
        writer = FileWriter(tmp_path)

        writer.document_write(context_make("/case-studies/", "foo"), "doc")

        assert (tmp_path / "case-studies" / "foo.md").read_text(encoding="utf-8") == "doc"

    def test_root_page_is_index(self, tmp_path):
        assert FileWriter(tmp_path).documentPath_get(context_make("/", "")) == (tmp_path / "index.md").resolve()

    def test_escaping_export_path_rejected(self, tmp_path):
        """A permalink climbing out of the output directory is refused"""
        writer = FileWriter(tmp_path / "out")

        with pytest.raises(OutputPathError):
            writer.document_write(context_make("/../../etc/", "passwd"), "doc")

        assert not (tmp_path.parent / "etc" / "passwd.md").exists()

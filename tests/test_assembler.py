"""
Document assembler tests

Tests front matter construction and ordering, header layout, and the
authors table lookup.
"""

import pytest

from devsite_export.lib.assembler import DocumentAssembler, authors_fromFrontMatter
from devsite_export.lib.authors import AuthorsFileError, AuthorsTable, MissingAuthorError
from devsite_export.models.export import PageSource


AUTHORS = AuthorsTable({
    "jane": {"title": {"en": "Jane Doe"}},
    "joe": {"title": {"en": "Joe Bloggs", "es": "José"}},
    "anon": {"country": "NL"},
})

PREAMBLE = (
    '{% import "/_macros.html" as macros %}\n'
    '{% include "/_styles/style.md" %}\n'
)


@pytest.fixture
def assembler():
    return DocumentAssembler(AUTHORS)


class TestFrontMatter:
    """Test the front matter record"""

    def test_defaults_only(self, assembler):
        """A page without metadata gets the fixed defaults"""
        frontMatter = assembler.frontMatter_build(PageSource(url="/foo/"))

        assert frontMatter == {
            "project_path": "/_project.yaml",
            "book_path": "/_book.yaml",
        }

    def test_key_order(self, assembler):
        """Keys follow the fixed order"""
        page = PageSource(
            url="/learn/css/box-model/",
            frontMatterData={"description": "Boxes.", "authors": ["jane"]},
        )

        frontMatter = assembler.frontMatter_build(page)

        assert list(frontMatter) == ["project_path", "book_path", "author_name", "description", "page_type"]
        assert frontMatter["author_name"] == "Jane Doe"
        assert frontMatter["page_type"] == "course"

    def test_first_author_named(self, assembler):
        """Only the first listed author provides author_name"""
        page = PageSource(url="/foo/", frontMatterData={"authors": ["joe", "jane"]})

        assert assembler.frontMatter_build(page)["author_name"] == "Joe Bloggs"

    def test_missing_author_fails(self, assembler):
        """An author id absent from the table aborts instead of being dropped"""
        page = PageSource(url="/foo/", frontMatterData={"authors": ["nobody"]})

        with pytest.raises(MissingAuthorError) as excinfo:
            assembler.frontMatter_build(page)
        assert excinfo.value.author_id == "nobody"

    def test_empty_description_omitted(self, assembler):
        page = PageSource(url="/foo/", frontMatterData={"description": ""})

        assert "description" not in assembler.frontMatter_build(page)

    def test_course_prefix_only(self, assembler):
        """Only URLs under /learn are course pages"""
        page = PageSource(url="/blog/learn-more/")

        assert "page_type" not in assembler.frontMatter_build(page)

    def test_serialize(self, assembler):
        assert assembler.frontMatter_serialize({"a": "1", "b": "two"}) == "a: 1\nb: two"


class TestHeader:
    """Test the assembled document header"""

    def test_header_without_authors(self, assembler):
        page = PageSource(url="/foo/", title="Hello")
        header = assembler.header_build(assembler.frontMatter_build(page), page)

        assert header == (
            "project_path: /_project.yaml\n"
            "book_path: /_book.yaml\n"
            "\n"
            + PREAMBLE +
            "\n"
            "# Hello\n"
        )

    def test_header_with_authors(self, assembler):
        """The authors macro receives the id list as a literal"""
        page = PageSource(url="/foo/", title="Hello", frontMatterData={"authors": ["jane", "joe"]})
        header = assembler.header_build(assembler.frontMatter_build(page), page)

        assert header == (
            "project_path: /_project.yaml\n"
            "book_path: /_book.yaml\n"
            "author_name: Jane Doe\n"
            "\n"
            + PREAMBLE +
            "\n"
            "# Hello\n"
            "\n"
            '{{ macros.Authors(["jane","joe"]) }}\n'
        )

    def test_assemble_prepends_header(self, assembler):
        page = PageSource(url="/foo/", title="Hello")

        document = assembler.assemble(page, "Body text\n")

        assert document.endswith("# Hello\nBody text\n")
        assert document.startswith("project_path: /_project.yaml\n")

    def test_single_author_string(self):
        """A bare author id is treated as a one-element list"""
        assert authors_fromFrontMatter({"authors": "jane"}) == ["jane"]
        assert authors_fromFrontMatter({"authors": []}) == []
        assert authors_fromFrontMatter({}) == []


class TestAuthorsTable:
    """Test the authors table"""

    def test_lookup(self):
        assert AUTHORS.author_lookup("jane") == "Jane Doe"
        assert "jane" in AUTHORS

    def test_locale(self):
        table = AuthorsTable(AUTHORS.entries, locale="es")

        assert table.author_lookup("joe") == "José"
        with pytest.raises(MissingAuthorError):
            table.author_lookup("jane")

    def test_entry_without_title(self):
        """An entry without a display name counts as missing"""
        with pytest.raises(MissingAuthorError):
            AUTHORS.author_lookup("anon")

    def test_load_from_file(self, tmp_path):
        authors_file = tmp_path / "authors.yml"
        authors_file.write_text("jane:\n  title:\n    en: Jane Doe\n", encoding="utf-8")

        table = AuthorsTable.table_loadFromFile(authors_file)

        assert table.author_lookup("jane") == "Jane Doe"

    def test_missing_file(self, tmp_path):
        with pytest.raises(AuthorsFileError):
            AuthorsTable.table_loadFromFile(tmp_path / "nope.yml")

    def test_file_not_a_mapping(self, tmp_path):
        authors_file = tmp_path / "authors.yml"
        authors_file.write_text("- jane\n- joe\n", encoding="utf-8")

        with pytest.raises(AuthorsFileError):
            AuthorsTable.table_loadFromFile(authors_file)

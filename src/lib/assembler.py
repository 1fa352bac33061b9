"""
DevSite document header assembly

Builds the front matter block, the macro/style preamble and the page
heading that precede every exported body.
"""

import json
from typing import Any, Dict, List, Optional

from ..config import appsettings, AppSettings
from ..models.collaborators import AuthorLookup
from ..models.export import PageSource
from .log import LOG


def authors_fromFrontMatter(data: Dict[str, Any]) -> List[str]:
    """Return the page's author ids as a list (a single id may be given bare)"""
    authors = data.get('authors')
    if not authors:
        return []
    if isinstance(authors, str):
        return [authors]
    return [str(author) for author in authors]


class DocumentAssembler:
    """
    Assembles DevSite documents from page metadata and a rewritten body

    Output layout:

        project_path: /_project.yaml
        book_path: /_book.yaml
        author_name: Jane Doe
        description: ...

        {% import "/_macros.html" as macros %}
        {% include "/_styles/style.md" %}

        # Title

        {{ macros.Authors(["jane"]) }}
        <body>
    """

    def __init__(self, authors: AuthorLookup, settings: Optional[AppSettings] = None):
        self.authors = authors
        self.settings = settings or appsettings

    def frontMatter_build(self, page: PageSource) -> Dict[str, str]:
        """
        Build the ordered front matter record for a page

        Keys appear in a fixed order; optional keys are left out when they
        have no value.

        Raises:
            MissingAuthorError: If the first listed author is not in the table
        """
        data = page.frontMatterData or {}
        frontMatter = {
            'project_path': self.settings.project_path,
            'book_path': self.settings.book_path,
        }

        authors = authors_fromFrontMatter(data)
        if authors:
            frontMatter['author_name'] = self.authors.author_lookup(authors[0])

        description = data.get('description')
        if description:
            frontMatter['description'] = str(description)

        if page.url.startswith(self.settings.course_url_prefix):
            frontMatter['page_type'] = self.settings.course_page_type

        LOG(f"Front matter keys: {', '.join(frontMatter)}", level=3)
        return frontMatter

    def frontMatter_serialize(self, frontMatter: Dict[str, str]) -> str:
        """Serialize front matter as key: value lines"""
        return '\n'.join(f'{key}: {value}' for key, value in frontMatter.items())

    def header_build(self, frontMatter: Dict[str, str], page: PageSource) -> str:
        """Build everything that precedes the body"""
        authors = authors_fromFrontMatter(page.frontMatterData or {})
        byline = ''
        if authors:
            authors_literal = json.dumps(authors, separators=(',', ':'), ensure_ascii=False)
            byline = f'\n{{{{ macros.Authors({authors_literal}) }}}}\n'

        return (
            f'{self.frontMatter_serialize(frontMatter)}\n'
            f'\n'
            f'{{% import "{self.settings.macros_import}" as macros %}}\n'
            f'{{% include "{self.settings.styles_include}" %}}\n'
            f'\n'
            f'# {page.title}\n'
            f'{byline}'
        )

    def assemble(self, page: PageSource, body: str) -> str:
        """
        Assemble a complete document for a page

        Raises:
            MissingAuthorError: If the first listed author is not in the table
        """
        return self.header_build(self.frontMatter_build(page), page) + body

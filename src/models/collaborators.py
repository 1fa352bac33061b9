"""
Protocol definitions for the collaborators the exporter calls

The exporter only depends on these contracts; lib/ ships one default
implementation of each (content tree, authors table, Jinja2 renderer,
file writer) and tests substitute their own.
"""

from typing import Any, Dict, Optional, Protocol

from .export import PageSource


class PageLookup(Protocol):
    """Resolves a page URL to its source content and metadata."""

    def page_findByUrl(self, url: str) -> Optional[PageSource]:
        """
        Look up a page.

        Args:
            url: Page URL (e.g., "/blog/foo/")

        Returns:
            PageSource (possibly lacking rawContent), or None if unknown
        """
        ...


class AuthorLookup(Protocol):
    """Maps author ids to display names."""

    def author_lookup(self, author_id: str) -> str:
        """
        Return the display name for an author id.

        Raises:
            MissingAuthorError: If the id is not in the table
        """
        ...


class TemplateRenderer(Protocol):
    """Renders templated page content; may fail."""

    async def render(self, template_text: str, context: Dict[str, Any]) -> str:
        """
        Render template text against a context.

        Raises:
            Exception: Any rendering failure; the exporter substitutes an
                       error placeholder for the body
        """
        ...


class DocumentWriter(Protocol):
    """Persists a finished document."""

    def document_write(self, context: Dict[str, Any], document: str) -> None:
        """
        Write a document for the page described by context.

        Args:
            context: Render context including "page", "export" and "exportPath"
            document: Final DevSite document text
        """
        ...

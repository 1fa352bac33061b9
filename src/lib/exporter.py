"""
Page exporter: web.dev page → DevSite document

Coordinates the collaborators for one page at a time:

1. Look up the page source; no content means nothing to export
2. Build the front matter (a missing author aborts the page)
3. Protect raw shortcodes from the template renderer
4. Resolve and record the export path
5. Render the protected source with the export context
6. Restore the raw shortcodes
7. Rewrite the rendered markdown into the DevSite dialect
8. Prepend the document header
9. Hand the document to the writer

Rendering is the only step that suspends. A failed render does not abort
the export: an error message takes the place of the body.
"""

from typing import Any, Dict, Optional, Tuple

from ..config import appsettings, AppSettings
from ..models.collaborators import AuthorLookup, DocumentWriter, PageLookup, TemplateRenderer
from ..models.export import ExportResult, PageSource
from .assembler import DocumentAssembler
from .log import LOG, LOG_warning
from .paths import ExportSession, url_split
from .protector import RAW_SHORTCODE_PATTERN, protected_restore, regions_extract
from .rewriter import DialectRewriter


class PageExporter:
    """
    Exports pages through the lookup, render, rewrite and write collaborators

    One PageExporter serves a whole build; every export records its URL
    mapping in the shared ExportSession.
    """

    def __init__(
        self,
        pages: PageLookup,
        authors: AuthorLookup,
        renderer: TemplateRenderer,
        writer: DocumentWriter,
        session: Optional[ExportSession] = None,
        rewriter: Optional[DialectRewriter] = None,
        settings: Optional[AppSettings] = None,
    ) -> None:
        """
        Initialize exporter

        Args:
            pages: Page lookup
            authors: Author id → display name lookup
            renderer: Async template renderer
            writer: Destination for finished documents
            session: URL map for this build (default: a new session)
            rewriter: Dialect rewriter (default: built-in rules)
            settings: Settings providing prefixes and messages
        """
        self.pages = pages
        self.settings = settings or appsettings
        self.renderer = renderer
        self.writer = writer
        self.session = session if session is not None else ExportSession()
        self.rewriter = rewriter or DialectRewriter(settings=self.settings)
        self.assembler = DocumentAssembler(authors, settings=self.settings)

    def context_build(self, page: PageSource, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Build the render context of a page

        Front matter data is available at the top level, as in the site
        build, next to "page" and "title".
        """
        context: Dict[str, Any] = dict(page.frontMatterData or {})
        context.update({
            'page': {'url': page.url, 'fileSlug': url_split(page.url)[1]},
            'title': page.title,
        })
        context.update(extra or {})
        return context

    async def body_render(self, source: str, context: Dict[str, Any]) -> Tuple[str, bool]:
        """
        Render page source, substituting an error message on failure

        Returns:
            (rendered text, whether rendering succeeded)
        """
        LOG(f"Rendering template {context['page']['url']}", level=2)
        try:
            return await self.renderer.render(source, context), True
        except Exception as e:
            LOG_warning(f"Could not render {context['page']['url']}: {e}")
            return f"{self.settings.render_error_message}{e}", False

    async def page_export(self, url: str, extra_context: Optional[Dict[str, Any]] = None) -> ExportResult:
        """
        Export a single page

        Args:
            url: Page URL
            extra_context: Additional render context entries

        Returns:
            ExportResult; document is "" when the page has no content

        Raises:
            MissingAuthorError: If the page's first author is not in the authors table
        """
        page = self.pages.page_findByUrl(url)
        if page is None or not page.rawContent:
            LOG(f"Nothing to export for {url}", level=2)
            return ExportResult(url=url)

        LOG(f"Exporting {url}", level=1)
        frontMatter = self.assembler.frontMatter_build(page)

        raw = regions_extract(RAW_SHORTCODE_PATTERN, self.settings.raw_prefix, page.rawContent)

        exportPath = self.session.path_resolve(url, (page.frontMatterData or {}).get('tags'))
        context = self.context_build(page, extra_context)
        context.update({'export': True, 'exportPath': exportPath.directory})

        markdown, rendered = await self.body_render(raw.text, context)
        markdown = protected_restore(raw, markdown)

        document = self.assembler.header_build(frontMatter, page) + self.rewriter.rewrite(markdown)

        self.writer.document_write(context, document)

        return ExportResult(
            url=url,
            document=document,
            exportId=exportPath.identifier,
            rendered=rendered,
        )

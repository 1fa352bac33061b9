"""
Export-specific data models

Type-safe structures passed between the protector, the orchestrator and
the collaborators.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ProtectedText:
    """
    Result of extracting protected regions from a text buffer

    Returned by regions_extract() after every match of a pattern has been
    replaced by a placeholder token of one namespace.

    Attributes:
        text: Text with each match replaced by a placeholder token
              (e.g., "Use \x00INLINE_CODE_0\x00 here")
        regions: Extracted substrings, indexed to match placeholders
                 (INLINE_CODE_0 → regions[0]), in left-to-right order
        prefix: Namespace prefix the placeholders were made with

    Example:
        regions_extract(INLINE_CODE_PATTERN, "INLINE_CODE", "Use `x` here")
        ProtectedText(
            text="Use \x00INLINE_CODE_0\x00 here",
            regions=["`x`"],
            prefix="INLINE_CODE"
        )
    """
    text: str
    regions: List[str]
    prefix: str


@dataclass
class PageSource:
    """
    A source page as returned by the page lookup

    Attributes:
        url: Page URL (e.g., "/blog/foo/")
        rawContent: Unrendered body (front matter removed); None or empty
                    means there is nothing to export
        frontMatterData: Parsed front matter (authors, description, tags, ...)
        title: Page title used for the level-1 heading
    """
    url: str
    rawContent: Optional[str] = None
    frontMatterData: Dict[str, Any] = field(default_factory=dict)
    title: str = ""


@dataclass
class ExportResult:
    """
    Outcome of exporting a single page

    Attributes:
        url: Original page URL
        document: Final DevSite document ("" when the page had no content)
        exportId: Export identifier (export path + base name), None when skipped
        rendered: False when the template renderer failed and the error
                  placeholder was substituted for the body
    """
    url: str
    document: str = ""
    exportId: Optional[str] = None
    rendered: bool = True

    @property
    def skipped(self) -> bool:
        return self.exportId is None


@dataclass
class ExportPath:
    """
    Where a page lands in the exported tree

    Attributes:
        directory: Export path, always ending in "/" (e.g., "/blog/")
        name: Base name of the original URL without extension (e.g., "foo")

    Example:
        For URL "/foo/" tagged "new-to-the-web":
        ExportPath(directory="/blog/", name="foo"), identifier "/blog/foo"
    """
    directory: str
    name: str

    @property
    def identifier(self) -> str:
        return f"{self.directory}{self.name}"

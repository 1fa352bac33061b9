"""
devsite_export - web.dev to DevSite markdown exporter

Converts web.dev pages into DevSite documents and records the URL moves.
"""

__version__ = "1.0.0"

from .protector import regions_extract, regions_restore
from .rewriter import DialectRewriter, markdown_rewrite
from .assembler import DocumentAssembler
from .paths import ExportSession, exportPath_resolve
from .authors import AuthorsTable, ExportError, MissingAuthorError, AuthorsFileError, OutputPathError
from .pages import ContentTree
from .renderer import JinjaRenderer
from .writer import FileWriter
from .exporter import PageExporter
from .log import LOG, state_connectToLogger

__all__ = [
    "regions_extract",
    "regions_restore",
    "DialectRewriter",
    "markdown_rewrite",
    "DocumentAssembler",
    "ExportSession",
    "exportPath_resolve",
    "AuthorsTable",
    "ExportError",
    "MissingAuthorError",
    "AuthorsFileError",
    "OutputPathError",
    "ContentTree",
    "JinjaRenderer",
    "FileWriter",
    "PageExporter",
    "LOG",
    "state_connectToLogger",
    "__version__",
]

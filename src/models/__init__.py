"""
Models package for devsite_export

Contains data structures, collaborator protocols and type definitions for
the export pipeline.
"""

from .state import ProgramState, pipeline
from .rules import RewriteRule, RuleCategory
from .export import ProtectedText, PageSource, ExportResult, ExportPath
from .collaborators import PageLookup, AuthorLookup, TemplateRenderer, DocumentWriter

__all__ = [
    "ProgramState",
    "pipeline",
    "RewriteRule",
    "RuleCategory",
    "ProtectedText",
    "PageSource",
    "ExportResult",
    "ExportPath",
    "PageLookup",
    "AuthorLookup",
    "TemplateRenderer",
    "DocumentWriter",
]

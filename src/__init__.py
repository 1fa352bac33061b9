"""
devsite_export - web.dev to DevSite markdown exporter

Rewrites web.dev pages into the DevSite dialect without touching code
samples or raw regions, and builds the old-to-new URL redirect table.
"""

__version__ = "1.0.0"

from .lib import PageExporter, DialectRewriter, ExportSession, LOG, state_connectToLogger

__all__ = ["PageExporter", "DialectRewriter", "ExportSession", "LOG", "state_connectToLogger", "__version__"]

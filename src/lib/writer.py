"""
File writer for exported documents
"""

from pathlib import Path
from typing import Any, Dict

from .authors import OutputPathError
from .log import LOG


class FileWriter:
    """
    Writes each document to <outputdir>/<exportPath>/<fileSlug>.md

    The root page ("/") has an empty slug and is written as index.md.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def documentPath_get(self, context: Dict[str, Any]) -> Path:
        """
        Raises:
            OutputPathError: If the export path escapes the output directory
        """
        exportPath = str(context.get('exportPath', '/')).strip('/')
        slug = context.get('page', {}).get('fileSlug') or 'index'
        path = (self.output_dir / exportPath / f'{slug}.md').resolve()

        root = self.output_dir.resolve()
        if root not in path.parents:
            raise OutputPathError(f"Export path {exportPath!r} is outside {root}")
        return path

    def document_write(self, context: Dict[str, Any], document: str) -> None:
        path = self.documentPath_get(context)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(document, encoding='utf-8')
        LOG(f"Wrote {path}", level=2)

"""
Authors table loaded from the site's authors.yml

The table maps author ids to localized metadata:

    jane:
      title:
        en: Jane Doe
      country: NL
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..config import appsettings


class ExportError(Exception):
    """Base class for errors that abort a page export"""
    pass


class MissingAuthorError(ExportError):
    """Raised when a page references an author the authors table lacks"""

    def __init__(self, author_id: str, reason: str = "not in the authors table") -> None:
        self.author_id = author_id
        super().__init__(f"Author '{author_id}' {reason}")


class AuthorsFileError(ExportError):
    """Raised when the authors table cannot be loaded"""
    pass


class OutputPathError(ExportError):
    """Raised when a document would be written outside the output directory"""
    pass


class AuthorsTable:
    """
    Author id → display name lookup

    Display names come from title.<locale> of each entry.
    """

    def __init__(self, entries: Dict[str, Any], locale: Optional[str] = None):
        """
        Args:
            entries: Parsed authors mapping
            locale: Locale of the display name (default: settings author_locale)
        """
        self.entries = entries
        self.locale = locale or appsettings.author_locale

    @classmethod
    def table_loadFromFile(cls, path: Union[str, Path], locale: Optional[str] = None) -> "AuthorsTable":
        """
        Load the authors table from a YAML file.

        Raises:
            AuthorsFileError: If the file is missing or is not a mapping
        """
        path = Path(path)
        if not path.exists():
            raise AuthorsFileError(f"Authors file not found: {path}")

        with open(path, 'r', encoding='utf-8') as f:
            entries = yaml.safe_load(f) or {}

        if not isinstance(entries, dict):
            raise AuthorsFileError(f"Authors file must contain a mapping: {path}")

        return cls(entries, locale=locale)

    def author_lookup(self, author_id: str) -> str:
        """
        Return the display name for an author id.

        Raises:
            MissingAuthorError: If the id is absent or has no name for the locale
        """
        if author_id not in self:
            raise MissingAuthorError(author_id)

        entry = self.entries[author_id] or {}
        title = entry.get('title') if isinstance(entry, dict) else None
        name = title.get(self.locale) if isinstance(title, dict) else None
        if not name:
            raise MissingAuthorError(author_id, f"has no '{self.locale}' title")
        return str(name)

    def __contains__(self, author_id: str) -> bool:
        return author_id in self.entries

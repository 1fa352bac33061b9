"""
Content tree: page lookup over a directory of markdown sources

Each source file carries YAML front matter between --- fences. URLs follow
the Eleventy convention used by web.dev:

    blog/foo/index.md  → /blog/foo/
    blog/foo.md        → /blog/foo/
    index.md           → /

A "permalink" in the front matter overrides the derived URL. Files under
directories whose name starts with "_" (includes, data) are not pages.
"""

import re
import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..config import appsettings
from ..models.export import PageSource
from .log import LOG


FRONT_MATTER_PATTERN = re.compile(r'\A---[ \t]*\n(.*?)\n---[ \t]*(?:\n|\Z)', re.DOTALL)


def frontMatter_split(source: str) -> Tuple[Dict[str, Any], str]:
    """
    Separate YAML front matter from the page body

    Returns:
        (front matter mapping, body); the mapping is empty when the file
        has no front matter or it is not a mapping
    """
    match = FRONT_MATTER_PATTERN.match(source)
    if not match:
        return {}, source

    data = yaml.safe_load(match.group(1)) or {}
    if not isinstance(data, dict):
        data = {}
    return data, source[match.end():]


def url_fromPath(relative: Path) -> str:
    """Derive the page URL of a source file relative to the content root"""
    parts = list(relative.with_suffix('').parts)
    if parts and parts[-1] == 'index':
        parts = parts[:-1]
    if not parts:
        return '/'
    return '/' + '/'.join(parts) + '/'


class ContentTree:
    """
    Page lookup backed by a directory of markdown files

    Pages are read once, on first lookup.
    """

    def __init__(self, root: Path, glob: Optional[str] = None):
        """
        Args:
            root: Content root directory
            glob: Glob selecting page files (default: settings content_glob)
        """
        self.root = Path(root)
        self.glob = glob or appsettings.content_glob
        self._pages: Optional[Dict[str, PageSource]] = None

    def pages_load(self) -> Dict[str, PageSource]:
        """Read every page under the root, keyed by URL"""
        pages: Dict[str, PageSource] = {}
        for path in sorted(self.root.glob(self.glob)):
            relative = path.relative_to(self.root)
            if not path.is_file() or any(part.startswith('_') for part in relative.parts):
                continue

            data, body = frontMatter_split(path.read_text(encoding='utf-8'))
            url = str(data.get('permalink') or url_fromPath(relative))
            pages[url] = PageSource(
                url=url,
                rawContent=body,
                frontMatterData=data,
                title=str(data.get('title', '')),
            )
            LOG(f"Loaded {relative} as {url}", level=3)

        LOG(f"Loaded {len(pages)} page(s) from {self.root}", level=2)
        return pages

    @property
    def pages(self) -> Dict[str, PageSource]:
        if self._pages is None:
            self._pages = self.pages_load()
        return self._pages

    def page_findByUrl(self, url: str) -> Optional[PageSource]:
        return self.pages.get(url)

    def url_list(self) -> List[str]:
        return list(self.pages)

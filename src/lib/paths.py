"""
Export path resolution and the build-wide URL map

web.dev keeps most pages in a flat URL space; the export sorts them into
case-studies/, blog/ and articles/ folders based on their tags. Every
resolution is recorded in the ExportSession so a redirect table can be
written once the whole build has run.
"""

import posixpath
import yaml
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..models.export import ExportPath
from .log import LOG


CASE_STUDY_TAG = "case-study"
NEW_TO_THE_WEB_TAG = "new-to-the-web"

CASE_STUDIES_DIR = "case-studies/"
BLOG_DIR = "blog/"
ARTICLES_DIR = "articles/"


def url_split(url: str) -> Tuple[str, str]:
    """
    Split a page URL into its directory and extension-less base name

    Trailing slashes are ignored, so "/foo/bar/" and "/foo/bar" both give
    ("/foo", "bar"); "/foo/" gives ("/", "foo").
    """
    trimmed = url.rstrip('/') or '/'
    directory, base = posixpath.split(trimmed)
    name, _ = posixpath.splitext(base)
    return directory, name


def tags_normalize(tags: Union[None, str, Iterable[str]]) -> List[str]:
    """Front matter may carry a single tag as a bare string"""
    if not tags:
        return []
    if isinstance(tags, str):
        return [tags]
    return [str(tag) for tag in tags]


def exportPath_resolve(url: str, tags: Union[None, str, Iterable[str]] = None) -> ExportPath:
    """
    Derive the export location of a page

    The first matching rule wins:
        1. tagged case-study       → <dir>/case-studies/
        2. tagged new-to-the-web   → <dir>/blog/
        3. page sits in the root   → /articles/
    Otherwise the page keeps its directory.

    Args:
        url: Original page URL
        tags: Page tags from front matter

    Returns:
        ExportPath with a directory ending in "/"

    Example:
        >>> exportPath_resolve("/foo/").identifier
        '/articles/foo'
    """
    directory, name = url_split(url)
    tags = tags_normalize(tags)

    exportPath = directory
    if not exportPath.endswith('/'):
        exportPath = f'{exportPath}/'

    if CASE_STUDY_TAG in tags:
        exportPath += CASE_STUDIES_DIR
    elif NEW_TO_THE_WEB_TAG in tags:
        exportPath += BLOG_DIR
    elif exportPath == '/':
        exportPath += ARTICLES_DIR

    return ExportPath(directory=exportPath, name=name)


class ExportSession:
    """
    URL map shared by every page export of one build

    Maps original URL → export identifier. Entries are only added; a URL
    resolved twice keeps its latest identifier.
    """

    def __init__(self) -> None:
        self.exportUrls: Dict[str, str] = {}

    def path_resolve(self, url: str, tags: Union[None, str, Iterable[str]] = None) -> ExportPath:
        """Resolve a page's export path and record the URL mapping"""
        exportPath = exportPath_resolve(url, tags)
        self.record(url, exportPath.identifier)
        return exportPath

    def record(self, url: str, identifier: str) -> None:
        self.exportUrls[url] = identifier
        LOG(f"{url} → {identifier}", level=2)

    def exportId_get(self, url: str) -> Optional[str]:
        return self.exportUrls.get(url)

    def redirects_list(self) -> List[Dict[str, str]]:
        """Redirect entries for moved pages, in the order pages were resolved"""
        return [
            {'from': old, 'to': new}
            for old, new in self.exportUrls.items()
            if old != new
        ]

    def redirects_dump(self) -> str:
        """Serialize the redirect table in DevSite _redirects.yaml format"""
        return yaml.safe_dump(
            {'redirects': self.redirects_list()},
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )

    def __len__(self) -> int:
        return len(self.exportUrls)

"""
Placeholder protection for regions that rewrites must not touch

Extracts every match of a pattern into an ordered region list, leaving an
indexed placeholder token (\x00PREFIX_N\x00) in its place, and restores the
regions later. Each namespace (prefix) owns exactly one region list:

    code     = regions_extract(MULTI_LINE_CODE_PATTERN, "MULTI_LINE_CODE", text)
    inline   = regions_extract(INLINE_CODE_PATTERN, "INLINE_CODE", code.text)
    ...rewrite inline.text...
    text     = regions_restore(inline.regions, "INLINE_CODE", text)
    text     = regions_restore(code.regions, "MULTI_LINE_CODE", text)

Namespaces are restored in the reverse order they were extracted, so a
region captured inside an earlier namespace's placeholder text comes back
intact.
"""

import re
from typing import List, Union

from ..config import appsettings
from ..models.export import ProtectedText
from .log import LOG


# Fenced code: ``` ... ``` spanning lines, shortest match
MULTI_LINE_CODE_PATTERN = re.compile(r'```.*?```', re.DOTALL)

# Inline code: `...` on a single line
INLINE_CODE_PATTERN = re.compile(r'`[^`\n]+`')

# Raw shortcode region, may span lines
RAW_SHORTCODE_PATTERN = re.compile(r'{% raw %}.*?{% endraw %}', re.DOTALL)


def regions_extract(
    pattern: Union[str, "re.Pattern[str]"], prefix: str, text: str
) -> ProtectedText:
    """
    Replace every match of pattern with an indexed placeholder token

    Matches are found left to right without overlapping. An empty match
    still yields a placeholder (restoring it gives back the empty string)
    and the scan always moves past it.

    Args:
        pattern: Regular expression (string or compiled) selecting regions
        prefix: Namespace prefix for the placeholder tokens
        text: Text buffer to protect

    Returns:
        ProtectedText with the new buffer and the extracted regions

    Example:
        >>> protected = regions_extract(INLINE_CODE_PATTERN, "INLINE_CODE", "a `b` c")
        >>> protected.regions
        ['`b`']
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern)

    regions: List[str] = []

    def region_pluck(match: "re.Match[str]") -> str:
        regions.append(match.group(0))
        return appsettings.placeHolder_make(prefix, len(regions) - 1)

    protected = pattern.sub(region_pluck, text)
    LOG(f"Protected {len(regions)} {prefix} region(s)", level=3)
    return ProtectedText(text=protected, regions=regions, prefix=prefix)


def regions_restore(regions: List[str], prefix: str, text: str) -> str:
    """
    Put protected regions back in place of their placeholder tokens

    Only tokens of the given prefix are touched. A token whose index is not
    in regions is left as it is.

    Args:
        regions: Region list produced by regions_extract() for this prefix
        prefix: Namespace prefix the tokens were made with
        text: Text buffer containing placeholder tokens

    Returns:
        Text with every known placeholder of this namespace replaced
    """
    def region_insert(match: "re.Match[str]") -> str:
        index = int(match.group(1))
        if index >= len(regions):
            return match.group(0)
        return regions[index]

    return appsettings.placeHolder_pattern(prefix).sub(region_insert, text)


def protected_restore(protected: ProtectedText, text: str) -> str:
    """Restore the regions of a ProtectedText into an evolved text buffer."""
    return regions_restore(protected.regions, protected.prefix, text)

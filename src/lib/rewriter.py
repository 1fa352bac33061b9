"""
Dialect rewriter: web.dev markdown to DevSite markdown

Rewrites markup conventions with pattern substitutions while keeping code
samples and raw regions byte-for-byte intact.

Stages, in order:
1. Protect fenced code blocks
2. Protect inline code spans
3. Protect raw regions ({% raw %}...{% endraw %}) so nothing below alters them
4. Apply the structural rules (figures, captions, class renames)
5. Expand fenced code nested in container elements into <pre> blocks
6. Restore raw regions, then inline code, then fenced code
7. Convert raw shortcodes to DevSite verbatim shortcodes

No stage raises: a pattern that does not match leaves the text unchanged.
"""

import re
from typing import List, Optional, Tuple

from ..config import appsettings, AppSettings
from .log import LOG
from .protector import (
    INLINE_CODE_PATTERN,
    MULTI_LINE_CODE_PATTERN,
    RAW_SHORTCODE_PATTERN,
    protected_restore,
    regions_extract,
)
from .rules import RuleRegistry
from ..models.rules import RuleCategory


# Opening fence line (with optional language hint), body, closing fence
FENCED_BLOCK_PATTERN = re.compile(r'\A```([^\n]*)\n(.*?)[ \t]*```\Z', re.DOTALL)

PRE_OPEN = '<pre class="{classes}">{{% htmlescape %}}\n'
PRE_CLOSE = '{% endhtmlescape %}</pre>'


def codeblock_toPreformatted(codeblock: str) -> str:
    """
    Rewrite a fenced code block as a DevSite escaped <pre> block

    The opening fence becomes <pre class="prettyprint lang-X"> followed by
    the htmlescape start marker; the closing fence becomes the htmlescape
    end marker followed by </pre>. No fence survives the rewrite.

    Example:
        >>> codeblock_toPreformatted("```js\\nfoo();\\n```")
        '<pre class="prettyprint lang-js">{% htmlescape %}\\nfoo();\\n{% endhtmlescape %}</pre>'
    """
    match = FENCED_BLOCK_PATTERN.match(codeblock)
    if match:
        hint, body = match.group(1).strip(), match.group(2)
    else:
        # Single-line block such as ```code```
        hint, body = '', codeblock[3:-3]

    classes = 'prettyprint'
    if hint:
        classes += f' lang-{hint.split()[0]}'

    return PRE_OPEN.format(classes=classes) + body + PRE_CLOSE


class DialectRewriter:
    """
    Rewrites rendered web.dev markdown into DevSite markdown

    Responsibilities:
    - Keep code and raw regions out of reach of the rewrite rules
    - Apply the registered structural rules in order
    - Turn fenced code nested in containers into <pre> blocks
    - Convert raw shortcodes to verbatim shortcodes
    """

    def __init__(
        self,
        registry: Optional[RuleRegistry] = None,
        settings: Optional[AppSettings] = None,
    ) -> None:
        """
        Initialize rewriter

        Args:
            registry: Rule registry (default: built-in DevSite rules)
            settings: Settings providing prefixes and the container tag
        """
        self.registry = registry or RuleRegistry()
        self.settings = settings or appsettings

        tag = re.escape(self.settings.nested_code_container)
        self.container_pattern = re.compile(
            rf'<(/?){tag}(?:\s[^>]*)?>', re.IGNORECASE
        )

    def rewrite(self, markdown: str) -> str:
        """
        Rewrite a markdown buffer into the DevSite dialect

        Args:
            markdown: Rendered web.dev markdown

        Returns:
            DevSite markdown
        """
        settings = self.settings

        # Raw markers mentioned inside code never open a verbatim region
        codeblocks = regions_extract(MULTI_LINE_CODE_PATTERN, settings.code_block_prefix, markdown)
        inline = regions_extract(INLINE_CODE_PATTERN, settings.inline_code_prefix, codeblocks.text)
        verbatim = regions_extract(RAW_SHORTCODE_PATTERN, settings.verbatim_prefix, inline.text)

        markdown = self.rules_apply(verbatim.text, RuleCategory.FIGURE, RuleCategory.CLASS)
        markdown = self.nestedCode_expand(markdown, codeblocks.regions)

        markdown = protected_restore(verbatim, markdown)
        markdown = protected_restore(inline, markdown)
        markdown = protected_restore(codeblocks, markdown)

        return self.rules_apply(markdown, RuleCategory.SHORTCODE)

    def rules_apply(self, text: str, *categories: RuleCategory) -> str:
        """Apply every registered rule of the given categories, in order"""
        for rule in self.registry.rules_listByCategory(*categories):
            text, count = rule.apply(text)
            if count:
                LOG(f"Rule {rule.name}: {count} substitution(s)", level=3)
        return text

    def containers_find(self, text: str) -> List[Tuple[int, int]]:
        """
        Locate container elements and their matching closing tags

        Scans left to right; each span runs from an opening tag to the
        closing tag at the same nesting depth. Spans do not overlap. An
        opening tag that never closes is skipped and scanning resumes at
        the next tag.

        Returns:
            List of (start, end) offsets, end exclusive
        """
        tags = list(self.container_pattern.finditer(text))
        spans: List[Tuple[int, int]] = []

        position = 0
        while position < len(tags):
            if tags[position].group(1):
                position += 1
                continue

            depth = 0
            closing: Optional[int] = None
            for index in range(position, len(tags)):
                depth += -1 if tags[index].group(1) else 1
                if depth == 0:
                    closing = index
                    break

            if closing is None:
                position += 1
                continue

            spans.append((tags[position].start(), tags[closing].end()))
            position = closing + 1

        return spans

    def nestedCode_expand(self, text: str, codeblocks: List[str]) -> str:
        """
        Inline fenced code nested in containers as <pre> blocks

        DevSite does not render fenced code inside HTML containers, so every
        fenced-code placeholder found inside a container span is replaced by
        its rewritten block. This deliberately breaks the protector contract
        for those occurrences only: the token is consumed and the block is
        now live text, while the same token anywhere outside a container is
        left for the normal restore.

        Args:
            text: Buffer with fenced-code placeholders
            codeblocks: Region list the placeholders index into

        Returns:
            Buffer with nested code blocks expanded
        """
        placeholder = self.settings.placeHolder_pattern(self.settings.code_block_prefix)

        def codeblock_expand(match: "re.Match[str]") -> str:
            index = int(match.group(1))
            if index >= len(codeblocks):
                return match.group(0)
            return codeblock_toPreformatted(codeblocks[index])

        parts: List[str] = []
        cursor = 0
        for start, end in self.containers_find(text):
            parts.append(text[cursor:start])
            parts.append(placeholder.sub(codeblock_expand, text[start:end]))
            cursor = end
        parts.append(text[cursor:])

        return ''.join(parts)


def markdown_rewrite(markdown: str) -> str:
    """Rewrite markdown with the built-in rules and default settings"""
    return DialectRewriter().rewrite(markdown)

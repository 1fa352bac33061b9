"""
Rewrite rule specification and metadata models

Defines the structure and categories of dialect rewrite rules for
ordering, documentation, and registry management.
"""

import re
from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


class RuleCategory(Enum):
    """
    Categories of dialect rewrite rules

    Used for organization and documentation.
    """
    FIGURE = "figure"        # <figure class="float-left">, <figcaption>
    CLASS = "class"          # class="switcher", class="stats-*"
    SHORTCODE = "shortcode"  # {% raw %} → {% verbatim %}


@dataclass
class RewriteRule:
    """
    Specification for a single textual rewrite

    Each rule is a global, case-sensitive substitution over the whole buffer.
    Rules do not backtrack; they only interact through registration order.

    Attributes:
        name: Rule identifier (used in logs)
        category: Category for organization
        description: Human-readable description
        pattern: Compiled regular expression to find
        replacement: Replacement string (may use group references)
        examples: Before/after pairs for documentation
    """
    name: str
    category: RuleCategory
    description: str
    pattern: "re.Pattern[str]"
    replacement: str
    examples: List[str] = field(default_factory=list)

    @classmethod
    def literal(
        cls,
        name: str,
        category: RuleCategory,
        description: str,
        find: str,
        replacement: str,
        examples: Optional[List[str]] = None,
    ) -> "RewriteRule":
        """Build a rule that replaces a literal string."""
        return cls(
            name=name,
            category=category,
            description=description,
            pattern=re.compile(re.escape(find)),
            replacement=replacement.replace('\\', '\\\\'),
            examples=examples or [],
        )

    def apply(self, text: str) -> Tuple[str, int]:
        """
        Apply the rule to a text buffer.

        Returns:
            Tuple of (rewritten text, number of substitutions)
        """
        return self.pattern.subn(self.replacement, text)

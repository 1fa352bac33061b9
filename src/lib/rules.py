"""
Rewrite rule registry for the DevSite dialect

Each rule rewrites one web.dev markup convention into its DevSite
equivalent. Rules are applied in registration order.
"""

import re
from typing import Dict, List

from ..models.rules import RewriteRule, RuleCategory


class RuleRegistry:
    """
    Registry of rewrite rules

    Keeps rules in registration order (the order they are applied in) and
    indexes them by name.
    """

    def __init__(self) -> None:
        """Initialize the registry and register all built-in rules"""
        self.rules: List[RewriteRule] = []
        self.specs: Dict[str, RewriteRule] = {}
        self.figureRules_register()
        self.classRules_register()
        self.shortcodeRules_register()

    def register(self, rule: RewriteRule) -> None:
        """Register a rewrite rule, replacing any rule of the same name in place"""
        if rule.name in self.specs:
            position = self.rules.index(self.specs[rule.name])
            self.rules[position] = rule
        else:
            self.rules.append(rule)
        self.specs[rule.name] = rule

    def rules_listByCategory(self, *categories: RuleCategory) -> List[RewriteRule]:
        """Get all rules in the given categories, in application order"""
        return [rule for rule in self.rules if rule.category in categories]

    def figureRules_register(self) -> None:
        """Register figure and caption rules"""

        self.register(RewriteRule(
            name="figure-float",
            category=RuleCategory.FIGURE,
            description="Drop float-left/float-right, which web.dev does not use",
            pattern=re.compile(r'<figure class="float-(left|right)">'),
            replacement='<figure>',
            examples=['<figure class="float-left"> → <figure>'],
        ))

        self.register(RewriteRule.literal(
            name="figcaption-class",
            category=RuleCategory.FIGURE,
            description="Style every caption with the wd-caption class",
            find='<figcaption>',
            replacement='<figcaption class="wd-caption">',
        ))

        self.register(RewriteRule.literal(
            name="figure-screenshot",
            category=RuleCategory.FIGURE,
            description="Drop the screenshot class, which would style figures on DevSite",
            find='<figure class="screenshot">',
            replacement='<figure>',
        ))

    def classRules_register(self) -> None:
        """Register class renames"""

        self.register(RewriteRule.literal(
            name="switcher-class",
            category=RuleCategory.CLASS,
            description="Namespace the switcher class",
            find='class="switcher"',
            replacement='class="wd-switcher"',
        ))

        self.register(RewriteRule.literal(
            name="stats-class",
            category=RuleCategory.CLASS,
            description="Prefix stats* class names with wd-",
            find='class="stats',
            replacement='class="wd-stats',
            examples=['class="stats-foo" → class="wd-stats-foo"'],
        ))

    def shortcodeRules_register(self) -> None:
        """Register raw → verbatim shortcode conversion"""

        self.register(RewriteRule.literal(
            name="raw-start",
            category=RuleCategory.SHORTCODE,
            description="Open raw regions as DevSite verbatim regions",
            find='{% raw %}',
            replacement='{% verbatim %}',
        ))

        self.register(RewriteRule.literal(
            name="raw-end",
            category=RuleCategory.SHORTCODE,
            description="Close raw regions as DevSite verbatim regions",
            find='{% endraw %}',
            replacement='{% endverbatim %}',
        ))

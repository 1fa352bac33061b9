"""
Jinja2 renderer standing in for the site's template engine

Renders page content asynchronously so the exporter suspends only while a
page is being rendered.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader


class JinjaRenderer:
    """
    Renders templated page content with Jinja2

    Supports:
    - Includes/imports resolved against an optional includes directory
    - Async rendering (render_async)
    """

    def __init__(self, includes_dir: Optional[Path] = None) -> None:
        """
        Args:
            includes_dir: Directory that {% include %} and {% import %} resolve against
        """
        self.includes_dir = includes_dir
        self.env = Environment(
            loader=FileSystemLoader(str(includes_dir)) if includes_dir else None,
            autoescape=False,  # Markdown, not HTML
            keep_trailing_newline=True,
            enable_async=True,
        )

    async def render(self, template_text: str, context: Dict[str, Any]) -> str:
        """
        Render template text against a context

        Raises:
            jinja2.TemplateError: On syntax errors, missing includes, etc.
        """
        template = self.env.from_string(template_text)
        # Front matter keys need not be strings
        return await template.render_async(context)

"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use DEVSITE_EXPORT_ prefix (e.g., DEVSITE_EXPORT_PROJECT_PATH=/_p.yaml).

Settings can also be loaded from a .env file in the project root.
"""

import re

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use DEVSITE_EXPORT_ prefix.

    Examples:
        DEVSITE_EXPORT_COURSE_URL_PREFIX=/learn
        DEVSITE_EXPORT_AUTHOR_LOCALE=en
        DEVSITE_EXPORT_REDIRECTS_FILE=_redirects.yaml
    """

    model_config = SettingsConfigDict(
        env_prefix="DEVSITE_EXPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Placeholder configuration
    placeholder_delimiter: str = Field(
        default="\x00",
        description="Wraps every placeholder token (null byte avoids collisions with authored text)",
    )

    code_block_prefix: str = Field(
        default="MULTI_LINE_CODE",
        description="Placeholder prefix for fenced code blocks",
    )

    inline_code_prefix: str = Field(
        default="INLINE_CODE",
        description="Placeholder prefix for inline code spans",
    )

    raw_prefix: str = Field(
        default="RAW",
        description="Placeholder prefix for raw shortcodes hidden from the template renderer",
    )

    verbatim_prefix: str = Field(
        default="VERBATIM",
        description="Placeholder prefix for raw regions hidden from the dialect rewrites",
    )

    # Front matter configuration
    project_path: str = Field(default="/_project.yaml", description="DevSite project file")
    book_path: str = Field(default="/_book.yaml", description="DevSite book file")

    course_url_prefix: str = Field(
        default="/learn",
        description="Pages whose URL starts with this prefix are flagged as course pages",
    )

    course_page_type: str = Field(default="course", description="page_type value for course pages")

    author_locale: str = Field(
        default="en",
        description="Locale used to pick the author display name from the authors table",
    )

    # Document preamble
    macros_import: str = Field(default="/_macros.html", description="DevSite macros template")
    styles_include: str = Field(default="/_styles/style.md", description="Shared styles include")

    # Content tree
    authors_file: str = Field(
        default="_data/authors.yml",
        description="Authors table (relative to inputdir unless absolute)",
    )

    content_glob: str = Field(default="**/*.md", description="Glob selecting source pages")

    redirects_file: str = Field(
        default="_redirects.yaml",
        description="Redirect table written to the output directory",
    )

    # Rewriting
    nested_code_container: str = Field(
        default="div",
        description="Container element whose nested code blocks become <pre> blocks",
    )

    render_error_message: str = Field(
        default="Could not render template: ",
        description="Text substituted for the page body when rendering fails",
    )

    def placeHolder_make(self, prefix: str, index: int) -> str:
        """
        Generate a placeholder token for a protected region at given index.

        Args:
            prefix: Namespace prefix (e.g., "MULTI_LINE_CODE")
            index: Zero-based index of the region in its region list

        Returns:
            Placeholder string (e.g., "\\x00MULTI_LINE_CODE_0\\x00")

        Example:
            >>> settings = AppSettings()
            >>> settings.placeHolder_make("RAW", 3)
            '\\x00RAW_3\\x00'
        """
        return f"{self.placeholder_delimiter}{prefix}_{index}{self.placeholder_delimiter}"

    def placeHolder_pattern(self, prefix: str) -> "re.Pattern[str]":
        """
        Compile a pattern matching every placeholder of one namespace.

        The region index is captured as group 1.
        """
        delimiter = re.escape(self.placeholder_delimiter)
        return re.compile(f"{delimiter}{re.escape(prefix)}_(\\d+){delimiter}")


# Singleton instance - import this in your code
appsettings = AppSettings()

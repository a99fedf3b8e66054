#!/usr/bin/env python3
"""
renderer.py
-----------
Jinja2 template engine for page generation.

Configures the Jinja2 environment with the site filters and HTML
autoescaping. Supports filesystem templates (production) and dict
templates (tests).

Usage:
    from lifeblog.site.renderer import SiteRenderer

    # Production: loads from lifeblog/site/templates/
    renderer = SiteRenderer()
    html = renderer.render("index.html.jinja2", context)
    changed = renderer.render_to_file("index.html.jinja2", context, path)

    # Testing: supply templates as dict
    renderer = SiteRenderer(templates={"t.html.jinja2": "<p>{{ name }}</p>"})

Dependencies:
    - jinja2>=3.1.0
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third-party imports ---
from jinja2 import (
    BaseLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    select_autoescape,
)

# --- Local imports ---
from lifeblog.core.paths import TEMPLATES_DIR
from lifeblog.site import filters as site_filters
from lifeblog.utils.fs import write_if_changed


class SiteRenderer:
    """
    Jinja2-based page renderer.

    Attributes:
        env: Configured Jinja2 Environment instance
    """

    def __init__(
        self,
        templates_dir: Optional[Path] = None,
        templates: Optional[Dict[str, str]] = None,
    ) -> None:
        """
        Initialize the renderer.

        Args:
            templates_dir: Templates directory (FileSystemLoader)
            templates: Dict of template_name -> template_string (DictLoader)

        Raises:
            ValueError: If both templates_dir and templates are provided
        """
        if templates_dir and templates:
            raise ValueError("Provide either templates_dir or templates, not both")

        loader: BaseLoader
        if templates is not None:
            loader = DictLoader(templates)
        else:
            loader = FileSystemLoader(str(templates_dir or TEMPLATES_DIR))

        self.env = Environment(
            loader=loader,
            autoescape=select_autoescape(
                enabled_extensions=("html", "jinja2", "xml"),
                default_for_string=True,
            ),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._register_filters()

    def _register_filters(self) -> None:
        self.env.filters["date_display"] = site_filters.date_display
        self.env.filters["iso_date"] = site_filters.iso_date
        self.env.filters["tag_color"] = site_filters.tag_color
        self.env.filters["absolute_url"] = site_filters.absolute_url

    def render(self, template_name: str, context: Dict[str, Any]) -> str:
        template = self.env.get_template(template_name)
        return template.render(**context)

    def render_to_file(
        self,
        template_name: str,
        context: Dict[str, Any],
        output_path: Path,
    ) -> bool:
        """
        Render a template and write it, skipping identical output.

        Returns:
            True if the file was written, False if it was already current
        """
        return write_if_changed(output_path, self.render(template_name, context))

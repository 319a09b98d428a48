"""
Jinja2 setup for rendering declarations.

Each generator owns one engine bound to its template directory. Templates
added in memory take precedence over files of the same name, which lets
callers replace a single template (the header, say) without copying the
whole directory.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import (
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    TemplateNotFound,
)


class TemplateError(Exception):
    """A template could not be found."""

    pass


class TemplateEngine:
    """Renders named templates with the declaration filters installed."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Args:
            template_dir: Directory of bundled templates, or None for
                in-memory templates only
        """
        self.template_dir = template_dir
        self._overrides: Dict[str, str] = {}

        loaders = [DictLoader(self._overrides)]
        if template_dir and template_dir.exists():
            loaders.append(FileSystemLoader(str(template_dir)))

        # Generated source is not HTML; block tags must not leave blank lines
        self._env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._env.filters["doc_lines"] = doc_lines
        self._env.filters["literal"] = literal

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render one template.

        Raises:
            TemplateError: If no template has that name
        """
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateError(f"Template not found: {template_name}") from e
        return template.render(**context)

    def template_exists(self, template_name: str) -> bool:
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True

    def add_template(self, name: str, content: str):
        """Register an in-memory template, shadowing any file with that name."""
        self._overrides[name] = content


def doc_lines(value: Any) -> List[str]:
    """Split a description into doc comment lines, closing markers escaped."""
    text = str(value).replace("*/", "*\\/")
    return [line.rstrip() for line in text.splitlines()] or [""]


def literal(value: Any) -> str:
    """Render a JSON scalar as a source literal."""
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    return TemplateEngine(template_dir)

import markdown
from flask import render_template
from jinja2 import TemplateError
from wiki.domain.exceptions import RenderError

MARKDOWN_EXTENSIONS = ["tables", "fenced_code"]


def render_markdown(source: str) -> str:
    """Convert raw Markdown to an HTML fragment."""
    try:
        return markdown.markdown(source or "", extensions=MARKDOWN_EXTENSIONS)
    except Exception as exc:
        raise RenderError(f"could not render markdown: {exc}") from exc


def render_html(template: str, **payload) -> str:
    """Render a full HTML document from a template and a flat payload."""
    try:
        return render_template(template, **payload)
    except TemplateError as exc:
        raise RenderError(f"could not render {template}: {exc}") from exc

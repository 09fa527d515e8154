from typing import Any, Dict, List

from markupsafe import Markup

from wiki.application.pages.fetch_page import PageReply
from wiki.utils.rendering import render_markdown


def normalize_index(pages: List[str], *, title: str) -> Dict[str, Any]:
    return {
        "title": title,
        "pages": sorted(pages),
    }


def normalize_page(reply: PageReply) -> Dict[str, Any]:
    """
    Flatten a store reply into the page template payload.

    `content` is the rendered HTML; `rawContent` stays Markdown for the
    editor.
    """
    return {
        "id": reply["id"],
        "title": reply["title"],
        "rawContent": reply["rawContent"],
        "content": Markup(render_markdown(reply["rawContent"])),
        "newPage": reply["newPage"],
        "timestamp": reply["timestamp"],
    }

# wiki/views/pages.py
import logging
from urllib.parse import quote

from flask import current_app, redirect, request

from wiki.application.store import PageStore
from wiki.normalizers.page import normalize_index, normalize_page
from wiki.utils.forms import required_field, required_int
from wiki.utils.rendering import render_html
from . import wiki_bp

logger = logging.getLogger(__name__)


def page_store() -> PageStore:
    return current_app.extensions["page_store"]


def page_location(name: str) -> str:
    return "/wiki/" + quote(name, safe="")


# ------------------------
# Reads
# ------------------------

@wiki_bp.route("/", methods=["GET"])
def index():
    pages = page_store().all_pages()
    logger.info("we found %d pages in the database", len(pages))

    return render_html(
        "index.html",
        **normalize_index(pages, title=current_app.config["INDEX_TITLE"]),
    )


@wiki_bp.route("/wiki/<page>", methods=["GET"])
def show_page(page):
    # Unknown names render the editor for an empty page with a 200
    reply = page_store().fetch_page(page)
    return render_html("page.html", **normalize_page(reply))


# ------------------------
# Writes
# ------------------------

@wiki_bp.route("/save", methods=["POST"])
def save_page():
    page_id = required_int("id")
    title = required_field("title")
    is_new = required_field("newPage") == "yes"
    markdown = required_field("markdown")

    page_store().upsert_page(
        is_new=is_new,
        page_id=page_id,
        name=title,
        content=markdown,
    )

    return redirect(page_location(title), code=303)


@wiki_bp.route("/create", methods=["POST"])
def create_page():
    name = request.form.get("name", "")
    location = page_location(name) if name else "/"

    logger.info("retrieved name %r and location %s", name, location)
    return redirect(location, code=303)


@wiki_bp.route("/delete", methods=["POST"])
def delete_page():
    page_id = required_int("id")
    logger.info("going to delete page %s", page_id)

    page_store().delete_page(page_id)

    return redirect("/", code=303)

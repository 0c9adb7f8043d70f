"""Unit tests for core/catalog.py"""

import logging

import pytest

from mdposts.config import Settings
from mdposts.core.catalog import DuplicateSlugError, build_catalog, build_post, get_by_slug
from mdposts.core.models import Document


def _doc(path: str, date: str = None, slug: str = None, body: str = "Body.\n") -> Document:
    lines = []
    if date is not None:
        lines.append(f"date: {date}")
    if slug is not None:
        lines.append(f"slug: {slug}")
    fm = "---\n" + "\n".join(lines) + "\n---\n" if lines else ""
    return Document(path=path, raw_text=fm + body)


# --- build_post ---

def test_build_post_metadata_wins(full_doc, settings):
    """Frontmatter slug/date override the filename-derived ones."""
    post = build_post(full_doc, settings)
    assert post.slug == "rtl-copilot"
    assert post.date == "2026-03-01"
    assert post.title == "Shipping the RTL copilot"
    assert post.description == "How we got here"
    assert post.author == "Jane Doe"
    assert post.tags == ("launch", "deep dives")
    assert post.content.startswith("\n# Shipping")
    assert post.thumbnail == "https://img.youtube.com/vi/dQw4w9WgXcQ/hqdefault.jpg"
    assert post.read_time == 1


def test_build_post_filename_fallback_and_defaults(bare_doc, settings):
    """Without frontmatter: filename date/slug, empty strings, default author."""
    post = build_post(bare_doc, settings)
    assert post.slug == "hello-world"
    assert post.date == "2025-06-30"
    assert post.title == ""
    assert post.description == ""
    assert post.author == "SilicogenAI"
    assert post.tags == ()
    assert post.content == bare_doc.raw_text
    assert post.thumbnail is None


def test_build_post_default_author_from_settings(bare_doc):
    post = build_post(bare_doc, Settings(default_author="Editorial Team"))
    assert post.author == "Editorial Team"


def test_build_post_explicit_image(settings):
    doc = Document(path="p.md", raw_text="---\nimage: https://x/img.png\n---\nhttps://youtu.be/dQw4w9WgXcQ\n")
    assert build_post(doc, settings).thumbnail == "https://x/img.png"


def test_build_post_empty_metadata_values_fall_back(settings):
    """Empty `slug:` / `date:` count as absent so the slug is never empty."""
    doc = Document(path="2026-01-02_Fallback.md", raw_text="---\nslug:\ndate: ''\n---\nBody\n")
    post = build_post(doc, settings)
    assert post.slug == "fallback"
    assert post.date == "2026-01-02"


def test_build_post_datetime_metadata_truncated(settings):
    doc = _doc("x.md", date="2026-04-05T10:30:00")
    assert build_post(doc, settings).date == "2026-04-05"


def test_build_post_bad_metadata_date_uses_filename(settings, caplog):
    """An unparsable frontmatter date is logged and replaced by the filename date."""
    doc = _doc("2026-01-02_Post.md", date="March 3rd")
    with caplog.at_level(logging.WARNING, logger="mdposts.core.catalog"):
        post = build_post(doc, settings)
    assert post.date == "2026-01-02"
    assert "March 3rd" in caplog.text


def test_build_post_scalar_tag_promoted(settings):
    doc = Document(path="p.md", raw_text="---\ntags: solo\n---\n")
    assert build_post(doc, settings).tags == ("solo",)


def test_build_post_read_time_uses_settings(settings):
    body = " ".join(["word"] * 300)
    doc = Document(path="p.md", raw_text=body)
    assert build_post(doc, settings).read_time == 2
    assert build_post(doc, Settings(words_per_minute=100)).read_time == 3


# --- build_catalog ---

def test_catalog_orders_newest_first_undated_last():
    docs = [
        _doc("a.md", date="2025-01-01"),
        _doc("b.md"),
        _doc("c.md", date="2026-05-05"),
    ]
    catalog = build_catalog(docs)
    assert [p.date for p in catalog] == ["2026-05-05", "2025-01-01", ""]
    assert [p.slug for p in catalog] == ["c", "a", "b"]


def test_catalog_ties_keep_input_order():
    docs = [
        _doc("first.md", date="2026-01-01"),
        _doc("undated-one.md"),
        _doc("second.md", date="2026-01-01"),
        _doc("undated-two.md"),
    ]
    assert [p.slug for p in build_catalog(docs)] == ["first", "second", "undated-one", "undated-two"]


def test_catalog_from_mapping():
    """A plain path -> raw text mapping is accepted as the document source."""
    catalog = build_catalog({
        "Blog/2024-01-01_Old.md": "old",
        "Blog/2026-01-01_New.md": "new",
    })
    assert [p.slug for p in catalog] == ["new", "old"]


def test_catalog_empty():
    assert build_catalog([]) == []


def test_catalog_rebuilds_each_call():
    docs = [_doc("a.md", date="2026-01-01")]
    first = build_catalog(docs)
    second = build_catalog(docs)
    assert first == second
    assert first is not second


def test_catalog_duplicate_slugs_warn(caplog):
    docs = [_doc("x/a.md", date="2025-01-01"), _doc("y/a.md", date="2026-01-01")]
    with caplog.at_level(logging.WARNING, logger="mdposts.core.catalog"):
        catalog = build_catalog(docs)
    assert len(catalog) == 2
    assert "Duplicate post slugs" in caplog.text


def test_catalog_duplicate_slugs_strict():
    docs = [_doc("x/a.md"), _doc("y/a.md")]
    with pytest.raises(DuplicateSlugError, match="a") as exc:
        build_catalog(docs, strict=True)
    assert exc.value.slugs == ["a"]


# --- get_by_slug ---

def test_get_by_slug_found(full_doc, bare_doc):
    catalog = build_catalog([full_doc, bare_doc])
    assert get_by_slug(catalog, "hello-world").date == "2025-06-30"


def test_get_by_slug_empty_catalog():
    assert get_by_slug(build_catalog([]), "anything") is None


def test_get_by_slug_missing(full_doc):
    assert get_by_slug(build_catalog([full_doc]), "nope") is None


def test_get_by_slug_first_match_wins():
    """Duplicates resolve to the first post in catalog (date) order."""
    docs = [
        _doc("old.md", date="2024-01-01", slug="same", body="old\n"),
        _doc("new.md", date="2026-01-01", slug="same", body="new\n"),
    ]
    assert get_by_slug(build_catalog(docs), "same").content == "new\n"

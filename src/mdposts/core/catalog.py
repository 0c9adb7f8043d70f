"""Post catalog: merge frontmatter, filename defaults, and content analysis into sorted posts"""

import logging
from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Optional, Union

from mdposts.config import Settings
from mdposts.core.analyze import estimate_read_time, extract_thumbnail
from mdposts.core.filename import derive_from_filename
from mdposts.core.frontmatter import parse_frontmatter
from mdposts.core.models import Document, Post
from mdposts.core.utils.dates import normalize_date


logger = logging.getLogger(__name__)


class DuplicateSlugError(ValueError):
    """Raised in strict mode when two posts share a slug."""

    def __init__(self, slugs: list[str]):
        self.slugs = slugs
        super().__init__(f"Duplicate post slugs: {', '.join(slugs)}")


def _post_date(meta_date: Optional[str], filename_date: str, path: str) -> str:
    """Frontmatter date (YYYY-MM-DD prefix) if usable, else the filename date."""
    if meta_date is None:
        return filename_date
    normalized = normalize_date(meta_date)
    if normalized is None:
        logger.warning("%s: unrecognized date %r, using %r", path, meta_date, filename_date)
        return filename_date
    return normalized


def build_post(document: Document, settings: Settings) -> Post:
    """Derive one Post from a Document; frontmatter fields win over filename defaults."""
    metadata, body = parse_frontmatter(document.raw_text)
    filename_date, filename_slug = derive_from_filename(document.path)

    return Post(
        slug=metadata.get_str('slug', filename_slug),
        title=metadata.get_str('title', ''),
        date=_post_date(metadata.get_str('date'), filename_date, document.path),
        description=metadata.get_str('description', ''),
        author=metadata.get_str('author', settings.default_author),
        tags=metadata.get_list('tags', []),
        content=body,
        read_time=estimate_read_time(body, settings.words_per_minute),
        thumbnail=extract_thumbnail(body, metadata.get_str('image')),
    )


def sort_posts(posts: Iterable[Post]) -> list[Post]:
    """Newest first; undated posts go last. Ties keep their input order."""
    posts = list(posts)
    dated = sorted((p for p in posts if p.date), key=lambda p: p.date, reverse=True)
    return dated + [p for p in posts if not p.date]


def _duplicates(posts: list[Post]) -> list[str]:
    counts = Counter(p.slug for p in posts)
    return sorted(slug for slug, n in counts.items() if n > 1)


def build_catalog(
    documents: Union[Iterable[Document], Mapping[str, str]],
    settings: Settings = None,
    strict: bool = False,
    ) -> list[Post]:
    """Build the sorted post list from documents (or a path -> raw text mapping).

    Every call rebuilds from scratch. Duplicate slugs are logged; with
    strict=True they raise DuplicateSlugError instead.
    """
    settings = settings or Settings()
    if isinstance(documents, Mapping):
        documents = [Document(path=path, raw_text=raw) for path, raw in documents.items()]

    posts = [build_post(doc, settings) for doc in documents]
    logger.debug("Parsed %d post(s)", len(posts))

    dupes = _duplicates(posts)
    if dupes:
        if strict:
            raise DuplicateSlugError(dupes)
        logger.warning("Duplicate post slugs (first in date order wins): %s", ", ".join(dupes))

    return sort_posts(posts)


def get_by_slug(catalog: Iterable[Post], slug: str) -> Optional[Post]:
    """Return the first post with this slug, or None if absent."""
    for post in catalog:
        if post.slug == slug:
            return post
    return None

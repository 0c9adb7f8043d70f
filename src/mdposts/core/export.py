"""Export: rendered post pages, sidecar JSON, and the catalog index"""

import json
from pathlib import Path

from markdown_it.common.utils import escapeHtml

from mdposts.config import Settings
from mdposts.core.models import Post
from mdposts.core.utils.dates import format_date
from mdposts.render.renderer import make_parser


def build_header(post: Post) -> str:
    """Article header: tags, title, description, then date / read time / author."""
    parts = ['<header class="post-header">']
    if post.tags:
        tags = ''.join(f'<span class="post-tag">{escapeHtml(t)}</span>' for t in post.tags)
        parts.append(f'<div class="post-tags">{tags}</div>')
    parts.append(f'<h1 class="post-title">{escapeHtml(post.title)}</h1>')
    if post.description:
        parts.append(f'<p class="post-description">{escapeHtml(post.description)}</p>')

    meta = []
    if post.date:
        meta.append(f'<time datetime="{post.date}">{format_date(post.date)}</time>')
    meta.append(f'<span>{post.read_time} min read</span>')
    meta.append(f'<span>{escapeHtml(post.author)}</span>')
    parts.append(f'<div class="post-meta">{"".join(meta)}</div>')
    parts.append('</header>')
    return '\n'.join(parts) + '\n'


def build_article(post: Post, body_html: str) -> str:
    """Wrap a rendered body with the post header."""
    return (
        f'<article class="post" data-slug="{escapeHtml(post.slug)}">\n'
        f'{build_header(post)}'
        f'<div class="post-body">\n{body_html}</div>\n'
        f'</article>\n'
    )


def build_sidecar(post: Post) -> dict:
    """Sidecar JSON for one post: listing fields plus the display date."""
    data = post.summary()
    data['display_date'] = format_date(post.date)
    return data


def build_index(catalog: list[Post]) -> dict:
    """Catalog listing in catalog order, without post bodies."""
    return {"count": len(catalog), "posts": [build_sidecar(p) for p in catalog]}


def post_path(output_dir: Path, slug: str, suffix: str) -> Path:
    """<output_dir>/<slug><suffix>; slugs with '/' nest, slugs escaping output_dir are rejected."""
    root = output_dir.resolve()
    target = (root / f"{slug}{suffix}").resolve()
    if target == root or not target.is_relative_to(root):
        raise RuntimeError(f"Slug {slug!r} resolves outside {output_dir}")
    return target


def write_post(post: Post, output_dir: Path, body_html: str) -> tuple[Path, Path]:
    """Write <slug>.html + <slug>.json. Returns (html_path, json_path)."""
    html_path = post_path(output_dir, post.slug, ".html")
    json_path = post_path(output_dir, post.slug, ".json")
    try:
        html_path.parent.mkdir(parents=True, exist_ok=True)
        html_path.write_text(build_article(post, body_html), encoding='utf-8')
        json_path.write_text(json.dumps(build_sidecar(post), indent=2, ensure_ascii=False), encoding='utf-8')
    except OSError as e:
        raise RuntimeError(f"Failed to write post {post.slug!r}: {e}") from e
    return html_path, json_path


def export_catalog(catalog: list[Post], output_dir: Path, settings: Settings = None) -> list[tuple[str, Path]]:
    """Render and write every post plus index.json. Returns (slug, html_path) pairs.

    With duplicate slugs only the first post in catalog order is written,
    matching get_by_slug.
    """
    settings = settings or Settings()
    md = make_parser(settings)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise RuntimeError(f"Failed to create {output_dir}: {e}") from e

    results = []
    for post in catalog:
        if any(slug == post.slug for slug, _ in results):
            continue
        html_path, _ = write_post(post, output_dir, md.render(post.content))
        results.append((post.slug, html_path))

    index_path = output_dir / "index.json"
    try:
        index_path.write_text(json.dumps(build_index(catalog), indent=2, ensure_ascii=False), encoding='utf-8')
    except OSError as e:
        raise RuntimeError(f"Failed to write {index_path}: {e}") from e
    return results

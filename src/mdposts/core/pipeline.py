"""Pipeline step functions: load -> catalog, and export orchestration"""

import logging
from pathlib import Path

from mdposts.config import Settings
from mdposts.core.catalog import build_catalog
from mdposts.core.export import export_catalog
from mdposts.core.loader import load_documents
from mdposts.core.models import Post


logger = logging.getLogger(__name__)


def run_catalog(path: str, settings: Settings, strict: bool = None) -> list[Post]:
    """Load every post source under path and build the sorted catalog.

    strict defaults to settings.strict_slugs. Raises RuntimeError if the path
    does not exist or a file cannot be read.
    """
    root = Path(path)
    if not root.exists():
        raise RuntimeError(f"Content path not found: {root}")
    documents = load_documents(root)
    if strict is None:
        strict = settings.strict_slugs
    return build_catalog(documents, settings, strict=strict)


def run_export(
    path: str,
    output_dir: Path,
    settings: Settings,
    strict: bool = None,
    ) -> list[tuple[str, Path]]:
    """Build the catalog from path and write it to output_dir. Returns (slug, html_path) pairs."""
    catalog = run_catalog(path, settings, strict)
    results = export_catalog(catalog, output_dir, settings)
    logger.info("Exported %d post(s) to %s", len(results), output_dir)
    return results

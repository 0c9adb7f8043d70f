"""File discovery and eager loading of post sources into Document snapshots"""

import logging
from pathlib import Path

from mdposts.core.models import Document


logger = logging.getLogger(__name__)

MD_EXTENSIONS = {'.md'}


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md files under path, or [path] if a single .md file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix in MD_EXTENSIONS)


def load_documents(path: Path) -> tuple[Document, ...]:
    """Read every post source under path once; paths are stored relative to path, POSIX style."""
    path = Path(path)
    root = path.parent if path.is_file() else path
    documents = []
    for p in discover_files(path):
        try:
            raw = p.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise RuntimeError(f"Failed to read {p}: {e}") from e
        documents.append(Document(path=p.relative_to(root).as_posix(), raw_text=raw))
    logger.debug("Loaded %d document(s) from %s", len(documents), path)
    return tuple(documents)

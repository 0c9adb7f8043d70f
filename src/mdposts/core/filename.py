"""Default date and slug derivation from `YYYY-MM-DD_Post_Title.md` style filenames"""

import re


FILENAME_RE = re.compile(r'^(\d{4}-\d{2}-\d{2})_(.+)$', re.DOTALL)
FALLBACK_SLUG = "post"


def _slugify(text: str) -> str:
    """Lowercase and swap underscores for hyphens; nothing else is touched."""
    return text.lower().replace('_', '-')


def derive_from_filename(path: str) -> tuple[str, str]:
    """Return (date, slug) from the last path segment; date is '' when the name carries none."""
    name = re.split(r'[\\/]', path)[-1]
    stem = name[:-3] if name.endswith('.md') else name

    m = FILENAME_RE.match(stem)
    if m:
        return m.group(1), _slugify(m.group(2))
    return '', _slugify(stem) or FALLBACK_SLUG

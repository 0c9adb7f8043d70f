"""Frontmatter extraction: a tolerant `key: value` subset of YAML"""

import re

from mdposts.core.models import Metadata, MetaValue


FRONTMATTER_RE = re.compile(r'^---\r?\n(?:([\s\S]*?)\r?\n)??---(?:\r?\n|\Z)')
QUOTES = ('"', "'")


def _unquote(value: str) -> str:
    """Strip one layer of matching single/double quotes."""
    if len(value) >= 2 and value[0] in QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value


def _parse_list(value: str) -> list[str]:
    """Parse `[a, "b c"]` into ['a', 'b c']; everything past the last ']' is dropped."""
    end = value.rfind(']')
    inner = value[1:end] if end > 0 else value[1:]
    items = (_unquote(item.strip()) for item in inner.split(','))
    return [item for item in items if item]


def _parse_value(value: str) -> MetaValue:
    if value.startswith('['):
        return _parse_list(value)
    return _unquote(value)


def parse_frontmatter(raw: str) -> tuple[Metadata, str]:
    """Return (metadata, body) with the leading `---` block removed.

    Malformed or missing frontmatter is not an error: the metadata is empty
    and the body is the unchanged input.
    """
    m = FRONTMATTER_RE.match(raw)
    if not m:
        return Metadata(), raw

    values: dict[str, MetaValue] = {}
    for line in (m.group(1) or '').split('\n'):
        key, sep, value = line.partition(':')
        key = key.strip()
        if not sep or not key:
            continue
        values[key] = _parse_value(value.strip())
    return Metadata(values), raw[m.end():]


def _quote_if_needed(value: str) -> str:
    if value != value.strip() or value.startswith('[') or _unquote(value) != value:
        return f'"{value}"'
    return value


def render_frontmatter(metadata: Metadata) -> str:
    """Serialize metadata back into a `---` block that parse_frontmatter reads identically."""
    lines = ['---']
    for key, value in metadata.items():
        if ':' in key or '\n' in key or key != key.strip() or not key:
            raise ValueError(f"Frontmatter key cannot be serialized: {key!r}")
        if isinstance(value, list):
            if any(',' in item or '\n' in item for item in value):
                raise ValueError(f"Frontmatter list item for {key!r} cannot contain ',' or newlines")
            items = ', '.join(_quote_if_needed(item) for item in value if item)
            lines.append(f"{key}: [{items}]")
        else:
            if '\n' in value:
                raise ValueError(f"Frontmatter value for {key!r} cannot span lines")
            lines.append(f"{key}: {_quote_if_needed(value)}")
    lines.append('---')
    return '\n'.join(lines) + '\n'

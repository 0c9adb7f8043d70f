"""Data models for the ingestion pipeline: source documents, metadata, and posts"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


MetaValue = Union[str, list[str]]


@dataclass(frozen=True)
class Document:
    """A raw source file as handed over by the loader; never mutated."""
    path:     str
    raw_text: str


class Metadata(Mapping):
    """Schema-less frontmatter values: each key maps to a scalar string or a list of strings."""

    def __init__(self, values: Mapping[str, MetaValue] = None):
        self._values: dict[str, MetaValue] = dict(values or {})

    def __getitem__(self, key: str) -> MetaValue:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Metadata({self._values!r})"

    def get_str(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Scalar value for key; empty, missing, or list values yield default."""
        value = self._values.get(key)
        if isinstance(value, str) and value:
            return value
        return default

    def get_list(self, key: str, default: Optional[list[str]] = None) -> Optional[list[str]]:
        """List value for key; a non-empty scalar is promoted to a one-item list."""
        value = self._values.get(key)
        if isinstance(value, list):
            return list(value)
        if isinstance(value, str) and value:
            return [value]
        return default


class Post(BaseModel):
    """A normalized blog post derived from one Document."""
    model_config = ConfigDict(frozen=True)

    slug:        str = Field(..., min_length=1)
    title:       str = ""
    date:        str = ""                # YYYY-MM-DD or "" when unknown
    description: str = ""
    author:      str
    tags:        tuple[str, ...] = ()
    content:     str = ""                # markdown body, frontmatter stripped
    read_time:   int = Field(default=1, ge=1)
    thumbnail:   Optional[str] = None

    def summary(self) -> dict:
        """JSON-friendly listing entry (everything except the body)."""
        return self.model_dump(mode="json", exclude={"content"})

"""Shared fixtures for core unit tests"""

import pytest

from mdposts.config import Settings
from mdposts.core.models import Document


FULL_POST = """\
---
title: "Shipping the RTL copilot"
slug: rtl-copilot
date: 2026-03-01
description: How we got here
author: Jane Doe
tags: [launch, "deep dives"]
---

# Shipping

https://youtu.be/dQw4w9WgXcQ

Some text.
"""

BARE_POST = "Just a body with no frontmatter.\n"


@pytest.fixture(name="settings")
def settings_fixture():
    return Settings()


@pytest.fixture(name="full_doc")
def full_doc_fixture():
    return Document(path="Blog/2026-02-14_Launch_Day.md", raw_text=FULL_POST)


@pytest.fixture(name="bare_doc")
def bare_doc_fixture():
    return Document(path="Blog/2025-06-30_Hello_World.md", raw_text=BARE_POST)


@pytest.fixture(name="write_posts")
def write_posts_fixture(tmp_path):
    """Write {relative_name: text} under tmp_path/blog and return that directory."""
    def _write(files: dict[str, str]):
        root = tmp_path / "blog"
        for name, text in files.items():
            p = root / name
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_text(text, encoding="utf-8")
        return root
    return _write

"""Shared fixtures for render unit tests"""

import pytest

from mdposts.config import Settings
from mdposts.render.renderer import make_parser


@pytest.fixture(name="md")
def md_fixture():
    return make_parser(Settings())


@pytest.fixture(name="render")
def render_fixture(md):
    return md.render

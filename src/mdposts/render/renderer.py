"""Markdown-to-HTML rendering of post bodies with the override table installed"""

from markdown_it import MarkdownIt

from mdposts.config import Settings
from mdposts.render.highlight import resolve_theme
from mdposts.render.overrides import override_rules, video_embed_rule


def make_parser(settings: Settings = None) -> MarkdownIt:
    """Build a MarkdownIt instance for the configured preset with every override registered."""
    settings = settings or Settings()
    md = MarkdownIt(settings.parser_config, options_update={"linkify": settings.linkify})
    if settings.linkify:
        md.enable("linkify")
    md.core.ruler.push("video_embed", video_embed_rule)
    for name, rule in override_rules(resolve_theme(settings.code_theme)).items():
        md.add_render_rule(name, rule)
    return md


def render_markdown(body: str, settings: Settings = None) -> str:
    """Render one post body to HTML."""
    return make_parser(settings).render(body)

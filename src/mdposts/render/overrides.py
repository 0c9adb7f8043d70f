"""Per-token render overrides for post bodies, keyed by markdown-it token type"""

from typing import Callable, Optional

from markdown_it.common.utils import escapeHtml, unescapeAll
from markdown_it.rules_core import StateCore
from markdown_it.token import Token

from mdposts.core.analyze import extract_video_id
from mdposts.render.embed import VideoEmbed
from mdposts.render.highlight import highlight_code


RenderRule = Callable[..., str]

CLASSES: dict[str, str] = {
    'h1':          'post-h1',
    'h2':          'post-h2',
    'h3':          'post-h3',
    'h4':          'post-h4',
    'quote':       'post-quote',
    'rule':        'post-rule',
    'table_wrap':  'post-table-wrap',
    'table':       'post-table',
    'th':          'post-th',
    'td':          'post-td',
    'link':        'post-link',
    'code_inline': 'post-code',
}


# --- paragraph -> video embed ---

def _top_level(children: list[Token]) -> list[list[Token]]:
    """Group inline tokens into top-level elements (a link_open..link_close run is one)."""
    groups: list[list[Token]] = []
    level = 0
    for tok in children:
        if level == 0:
            groups.append([])
        groups[-1].append(tok)
        level += tok.nesting
    return groups


def paragraph_video_id(inline: Token) -> Optional[str]:
    """Video id if the paragraph's only element is a bare video URL or a link to one."""
    if inline.type != 'inline':
        return None
    groups = _top_level(inline.children or [])
    if len(groups) != 1:
        return None
    first = groups[0][0]
    if first.type == 'text' and len(groups[0]) == 1:
        text = first.content.strip()
        if not text or any(c.isspace() for c in text):
            return None
        return extract_video_id(text, anchored=True)
    if first.type == 'link_open':
        return extract_video_id(first.attrGet('href') or '', anchored=True)
    return None


def video_embed_rule(state: StateCore) -> None:
    """Core rule: collapse visible video-only paragraphs into a single video_embed token."""
    tokens = state.tokens
    out: list[Token] = []
    i = 0
    while i < len(tokens):
        tok = tokens[i]
        if (tok.type == 'paragraph_open' and not tok.hidden
                and i + 2 < len(tokens) and tokens[i + 2].type == 'paragraph_close'):
            video_id = paragraph_video_id(tokens[i + 1])
            if video_id:
                out.append(Token(
                    'video_embed', 'div', 0,
                    map=tok.map, level=tok.level, block=True, meta={'video_id': video_id},
                ))
                i += 3
                continue
        out.append(tok)
        i += 1
    tokens[:] = out


def render_video_embed(self, tokens, idx, options, env) -> str:
    return VideoEmbed(tokens[idx].meta['video_id']).render()


# --- code ---

def make_fence_rule(theme: str) -> RenderRule:
    """Fence renderer bound to a Pygments theme."""

    def render_fence(self, tokens, idx, options, env) -> str:
        token = tokens[idx]
        info = unescapeAll(token.info).strip()
        language = info.split(maxsplit=1)[0] if info else ''
        code = token.content[:-1] if token.content.endswith('\n') else token.content
        if language:
            return highlight_code(code, language, theme)
        return f'<pre><code class="{CLASSES["code_inline"]}">{escapeHtml(code)}</code></pre>\n'

    return render_fence


def render_code_inline(self, tokens, idx, options, env) -> str:
    return f'<code class="{CLASSES["code_inline"]}">{escapeHtml(tokens[idx].content)}</code>'


# --- links ---

def render_link_open(self, tokens, idx, options, env) -> str:
    token = tokens[idx]
    href = token.attrGet('href') or ''
    if isinstance(href, str) and href.startswith('http'):
        token.attrSet('target', '_blank')
        token.attrSet('rel', 'noopener noreferrer')
    token.attrJoin('class', CLASSES['link'])
    return self.renderToken(tokens, idx, options, env)


# --- presentation only ---

def render_heading_open(self, tokens, idx, options, env) -> str:
    token = tokens[idx]
    if token.tag in CLASSES:
        token.attrJoin('class', CLASSES[token.tag])
    return self.renderToken(tokens, idx, options, env)


def _styled(key: str) -> RenderRule:
    """Default rendering with a presentation class added."""

    def render(self, tokens, idx, options, env) -> str:
        tokens[idx].attrJoin('class', CLASSES[key])
        return self.renderToken(tokens, idx, options, env)

    return render


def render_table_open(self, tokens, idx, options, env) -> str:
    tokens[idx].attrJoin('class', CLASSES['table'])
    return f'<div class="{CLASSES["table_wrap"]}">\n' + self.renderToken(tokens, idx, options, env)


def render_table_close(self, tokens, idx, options, env) -> str:
    return self.renderToken(tokens, idx, options, env) + '</div>\n'


def override_rules(theme: str) -> dict[str, RenderRule]:
    """Token type -> render function. Types not listed use markdown-it's default renderer."""
    return {
        'video_embed':     render_video_embed,
        'fence':           make_fence_rule(theme),
        'code_inline':     render_code_inline,
        'link_open':       render_link_open,
        'heading_open':    render_heading_open,
        'blockquote_open': _styled('quote'),
        'hr':              _styled('rule'),
        'table_open':      render_table_open,
        'table_close':     render_table_close,
        'th_open':         _styled('th'),
        'td_open':         _styled('td'),
    }

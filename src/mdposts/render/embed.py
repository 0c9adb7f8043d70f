"""Click-to-play video placeholder emitted in place of video-only paragraphs"""

from dataclasses import dataclass
from enum import Enum

from markdown_it.common.utils import escapeHtml

from mdposts.core.analyze import THUMBNAIL_URL


EMBED_URL = (
    "https://www.youtube-nocookie.com/embed/{video_id}"
    "?autoplay=1&rel=0&modestbranding=1&color=white&playsinline=1"
)
IFRAME_ALLOW = "accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture"


class EmbedState(str, Enum):
    """Playback state of one embed; the only transition is ready -> playing."""
    ready = "ready"
    playing = "playing"


@dataclass
class VideoEmbed:
    """Per-instance widget state. A fresh instance always starts ready; nothing is persisted."""
    video_id: str
    state: EmbedState = EmbedState.ready

    @property
    def playing(self) -> bool:
        return self.state is EmbedState.playing

    @property
    def src(self) -> str:
        return EMBED_URL.format(video_id=self.video_id)

    @property
    def thumbnail(self) -> str:
        return THUMBNAIL_URL.format(video_id=self.video_id)

    def play(self) -> None:
        """User activation. Idempotent once playing."""
        self.state = EmbedState.playing

    def _body(self) -> str:
        if self.playing:
            return (
                f'<iframe src="{escapeHtml(self.src)}" title="YouTube video" '
                f'allow="{IFRAME_ALLOW}" allowfullscreen style="border: 0"></iframe>'
            )
        return (
            f'<button type="button" class="video-embed-play" data-src="{escapeHtml(self.src)}">'
            f'<img src="{escapeHtml(self.thumbnail)}" alt="" loading="lazy">'
            f'<span>Click to play</span></button>'
        )

    def render(self) -> str:
        vid = escapeHtml(self.video_id)
        status = "Playing" if self.playing else "Ready"
        return (
            f'<div class="video-embed" data-video-id="{vid}" data-state="{self.state.value}">\n'
            f'<div class="video-embed-header">youtube · {vid}</div>\n'
            f'<div class="video-embed-frame">{self._body()}</div>\n'
            f'<div class="video-embed-status">{status}</div>\n'
            f'</div>\n'
        )

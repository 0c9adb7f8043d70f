"""Content analysis: read-time estimates and video thumbnail discovery"""

import math
import re
from typing import Optional


VIDEO_URL_RE = re.compile(r'https?://(?:www\.)?(?:youtube\.com/watch\?v=|youtu\.be/)([a-zA-Z0-9_-]{11})')
THUMBNAIL_URL = "https://img.youtube.com/vi/{video_id}/hqdefault.jpg"
WORDS_PER_MINUTE = 200


def estimate_read_time(body: str, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Minutes to read body at words_per_minute; never less than 1."""
    words = len(body.split())
    return max(1, math.ceil(words / words_per_minute))


def extract_video_id(text: str, anchored: bool = False) -> Optional[str]:
    """Return the 11-char id of the first embeddable video URL in text, else None.

    With anchored=True the URL must start at the beginning of text.
    """
    m = VIDEO_URL_RE.match(text) if anchored else VIDEO_URL_RE.search(text)
    return m.group(1) if m else None


def extract_thumbnail(body: str, explicit_image: Optional[str] = None) -> Optional[str]:
    """Explicit image wins; otherwise the thumbnail of the first video linked in body."""
    if explicit_image:
        return explicit_image
    video_id = extract_video_id(body)
    if video_id:
        return THUMBNAIL_URL.format(video_id=video_id)
    return None

"""
Presentational building blocks used by the templates.

They carry no database access; the template tags in
``directory.templatetags.directory_ui`` wrap them for use in pages.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

DEFAULT_ERROR_TITLE = '오류가 발생했습니다'
RETRY_LABEL = '다시 시도'


@dataclass(frozen=True)
class ErrorMessage:
    """A title/message pair with an optional retry link."""
    message: str
    title: str = DEFAULT_ERROR_TITLE
    retry_url: Optional[str] = None

    @property
    def can_retry(self) -> bool:
        return bool(self.retry_url)


def highlight_segments(text: str, term: str) -> list[tuple[str, bool]]:
    """Split ``text`` into ``(segment, marked)`` pairs around ``term``.

    Matching is case-insensitive and substring based, so partial words
    match too.  A blank or whitespace-only term yields the whole text as
    a single unmarked segment.
    """
    text = text or ''
    if not term or not term.strip():
        return [(text, False)]
    lowered = term.lower()
    parts = re.split(f'({re.escape(term)})', text, flags=re.IGNORECASE)
    return [(part, part.lower() == lowered) for part in parts if part]


class HospitalCardImage:
    """Hospital picture that falls back to a placeholder glyph.

    Once an instance has failed to load its image it keeps showing the
    placeholder; there is no way back to the image.
    """
    PLACEHOLDER = '🏥'

    def __init__(self, image_url: Optional[str], name: str, height_class: str = 'h-48'):
        self.image_url = image_url or None
        self.name = name
        self.height_class = height_class
        self._failed = False

    @property
    def failed(self) -> bool:
        return self._failed

    def mark_failed(self) -> None:
        self._failed = True

    @property
    def show_placeholder(self) -> bool:
        return self.image_url is None or self._failed

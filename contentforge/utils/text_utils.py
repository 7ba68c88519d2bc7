# contentforge/utils/text_utils.py
import math
import re
from typing import Dict, List, Union

READING_SPEED_WPM = 225
SLUG_MAX_LENGTH = 100
EXCERPT_MAX_LENGTH = 300
META_DESCRIPTION_MAX_LENGTH = 160
META_TITLE_MAX_LENGTH = 60

_TAG_RE = re.compile(r'<[^>]*>')
_UUID_RE = re.compile(
    r'[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}',
    re.IGNORECASE,
)
_LIST_MARKER_RE = re.compile(r'^(?:\d+[.)]|[-*•])\s*')


def _truncate(text: str, max_length: int) -> str:
    """Cut to max_length, replacing the last three characters with an ellipsis."""
    if len(text) > max_length:
        return text[:max_length - 3] + '...'
    return text


def generate_slug(title: str) -> str:
    """
    Turn a title into a URL-safe slug
    """
    slug = title.lower()
    slug = re.sub(r'[^a-z0-9\s-]', '', slug)
    slug = re.sub(r'\s+', '-', slug)
    return slug[:SLUG_MAX_LENGTH]


def strip_html(content: str) -> str:
    return _TAG_RE.sub('', content or '')


def count_words(content: str) -> int:
    return len(strip_html(content).split())


def calculate_read_time(word_count: int) -> int:
    # Average reading speed is 200-250 words per minute
    return math.ceil(word_count / READING_SPEED_WPM)


def extract_meta_from_content(content: str) -> Dict[str, str]:
    """
    Derive the excerpt (first paragraph) and meta description from HTML content
    """
    text_content = strip_html(content)
    first_paragraph = text_content.split('\n\n')[0] or text_content[:EXCERPT_MAX_LENGTH]
    excerpt = _truncate(first_paragraph, EXCERPT_MAX_LENGTH)
    meta_description = _truncate(excerpt, META_DESCRIPTION_MAX_LENGTH)
    return {'excerpt': excerpt, 'meta_description': meta_description}


def build_meta_title(title: str) -> str:
    return _truncate(title, META_TITLE_MAX_LENGTH)


def is_uuid(identifier: str) -> bool:
    return isinstance(identifier, str) and bool(_UUID_RE.fullmatch(identifier))


def split_tweets(raw_output: str) -> List[str]:
    """
    Split model output into individual tweets, dropping blank lines and list numbering
    """
    tweets = []
    for line in (raw_output or '').split('\n'):
        line = _LIST_MARKER_RE.sub('', line.strip()).strip()
        if line:
            tweets.append(line)
    return tweets


def parse_keywords(value: Union[str, List[str], None]) -> List[str]:
    """
    Normalise keywords given as a list or a comma-separated string

    Raises:
        ValueError: for any other type, or a list holding non-strings
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(',')
    elif not isinstance(value, list) or not all(isinstance(k, str) for k in value):
        raise ValueError("keywords must be a list of strings or a comma-separated string")
    return [k.strip() for k in value if k.strip()]

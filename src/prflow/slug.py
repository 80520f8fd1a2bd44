"""Slug generation for branch names and worktree directory suffixes.

Branch names look like ``2026jan12-16-43-fix-auth-bug``: a minute-resolution
timestamp followed by the first meaningful words of a description.
"""

import re
import string
from datetime import datetime
from typing import FrozenSet, List, Optional

STOPWORDS: FrozenSet[str] = frozenset({
    "for", "with", "to", "in", "on", "at", "as", "is",
    "the", "a", "an", "and", "or", "but",
})

BRANCH_NAME_MAX_WORDS = 6
SHORT_NAME_MAX_WORDS = 3

DEFAULT_FALLBACK = "update"
WORKTREE_FALLBACK = "worktree"

_ALLOWED_CHARS = frozenset(string.ascii_letters + string.digits + " ")
_FALLBACK_PATTERN = re.compile(r"[a-z0-9]+(-[a-z0-9]+)*")

# English abbreviations regardless of the process locale.
_MONTHS = ("jan", "feb", "mar", "apr", "may", "jun",
           "jul", "aug", "sep", "oct", "nov", "dec")


def timestamp_token(now: Optional[datetime] = None) -> str:
    """Format a time as ``YYYYmonDD-HH-MM``, e.g. ``2026jan12-16-43``."""
    if now is None:
        now = datetime.now()
    return f"{now.year:04d}{_MONTHS[now.month - 1]}{now:%d-%H-%M}"


def normalize(text: str) -> str:
    """Keep only ASCII letters, digits and spaces, lowercased.

    Everything else is dropped, including tabs, newlines and non-ASCII
    letters, so ``"café"`` becomes ``"caf"``.
    """
    return "".join(ch for ch in text if ch in _ALLOWED_CHARS).lower()


def meaningful_words(
    text: str, max_words: int, stopwords: FrozenSet[str] = STOPWORDS,
) -> List[str]:
    """Return the first ``max_words`` non-stopword tokens of ``text``."""
    words: List[str] = []
    for token in normalize(text).split():
        if len(words) >= max_words:
            break
        if token not in stopwords:
            words.append(token)
    return words


def make_slug(
    text: str,
    *,
    max_words: int,
    timestamp: Optional[str] = None,
    fallback: Optional[str] = None,
    stopwords: FrozenSet[str] = STOPWORDS,
) -> str:
    """Build a ``-``-joined slug from the meaningful words of ``text``.

    Args:
        text: Free-text description.
        max_words: Maximum number of words kept, in order of appearance.
        timestamp: Optional token prepended to the slug.
        fallback: Word used when no meaningful words survive. When None an
            empty word segment is returned as-is. Otherwise it must be
            lowercase alphanumeric words joined by single dashes.
        stopwords: Words skipped while collecting.

    Returns:
        The slug. Only ``[a-z0-9-]`` characters can appear in it.

    Raises:
        ValueError: If ``fallback`` is empty or not slug-shaped.
    """
    if fallback is not None and not _FALLBACK_PATTERN.fullmatch(fallback):
        raise ValueError(f"fallback must be a lowercase alphanumeric slug, got {fallback!r}")
    slug = "-".join(meaningful_words(text, max_words, stopwords))
    if not slug and fallback is not None:
        slug = fallback
    if timestamp is not None:
        return f"{timestamp}-{slug}"
    return slug


def generate_branch_name(
    text: str,
    fallback: str = DEFAULT_FALLBACK,
    now: Optional[datetime] = None,
    stopwords: FrozenSet[str] = STOPWORDS,
) -> str:
    """Generate a timestamped branch name from a commit message or description.

    Only unique to the minute: two calls in the same minute with the same
    text produce the same name.

    Raises:
        ValueError: If ``fallback`` is empty or not slug-shaped.

    Examples:
        >>> generate_branch_name("Fix the auth bug in login", now=datetime(2026, 1, 12, 16, 43))
        '2026jan12-16-43-fix-auth-bug-login'
        >>> generate_branch_name("the a an", now=datetime(2026, 1, 12, 16, 43))
        '2026jan12-16-43-update'
    """
    return make_slug(
        text,
        max_words=BRANCH_NAME_MAX_WORDS,
        timestamp=timestamp_token(now),
        fallback=fallback,
        stopwords=stopwords,
    )


def short_name(
    text: str,
    max_words: int = SHORT_NAME_MAX_WORDS,
    stopwords: FrozenSet[str] = STOPWORDS,
) -> str:
    """Return the first few meaningful words of ``text`` joined with ``-``.

    Returns an empty string when nothing survives filtering; callers supply
    their own fallback.
    """
    return make_slug(text, max_words=max_words, stopwords=stopwords)

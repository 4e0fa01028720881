"""
Models package for the phrase store.

Importing this package registers every table on ``Base.metadata``.
"""

from .phrase import Phrase, PHRASE_FIELDS
from .translation import Translation
from .commit_log import CommitLog, CommitLogStatus

__all__ = [
    "Phrase",
    "PHRASE_FIELDS",
    "Translation",
    "CommitLog",
    "CommitLogStatus",
]

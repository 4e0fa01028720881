from .phrase import PhraseCreate, PhraseRead
from .translation import TranslationRead
from .commit_log import CommitLogRead

__all__ = [
    "PhraseCreate",
    "PhraseRead",
    "TranslationRead",
    "CommitLogRead",
]

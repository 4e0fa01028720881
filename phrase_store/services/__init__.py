# Store services

from .phrase_service import PhraseStore
from .translation_service import TranslationStore
from .commit_log_service import CommitLogStore
from .data_store import DataStore

__all__ = [
    'PhraseStore',
    'TranslationStore',
    'CommitLogStore',
    'DataStore',
]

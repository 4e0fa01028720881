"""Relational phrase, translation and commit-log store."""

from phrase_store.services.data_store import DataStore
from phrase_store.core.index_policy import IndexPolicy, MetaKeyIndexPolicy
from phrase_store.models import CommitLogStatus

__all__ = ["DataStore", "IndexPolicy", "MetaKeyIndexPolicy", "CommitLogStatus"]

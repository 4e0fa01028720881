"""
Phrase index policies.

A policy turns a ``(key, meta_key)`` pair into the phrase column to filter on
and the value to compare against. Stores receive a policy at construction so
the query layer stays correct whatever derivation rule is plugged in.
"""
from abc import ABC, abstractmethod
from typing import Optional


class IndexPolicy(ABC):
    """Abstract base class for phrase index policies"""

    @abstractmethod
    def index_key(self, key: Optional[str], meta_key: Optional[str]) -> str:
        """Name of the phrase column used for lookups"""
        pass

    @abstractmethod
    def index_value(self, key: Optional[str], meta_key: Optional[str]):
        """Value the index column must equal"""
        pass


class MetaKeyIndexPolicy(IndexPolicy):
    """Looks phrases up by meta_key when one is given, by key otherwise."""

    def _use_meta_key(self, meta_key: Optional[str]) -> bool:
        return meta_key is not None and meta_key != ""

    def index_key(self, key, meta_key):
        return "meta_key" if self._use_meta_key(meta_key) else "key"

    def index_value(self, key, meta_key):
        return meta_key if self._use_meta_key(meta_key) else key


default_index_policy = MetaKeyIndexPolicy()

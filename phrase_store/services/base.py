"""Shared plumbing for the session-bound stores."""
from itertools import islice
from typing import Callable, Iterable, Iterator, Optional

from sqlalchemy import and_, or_
from sqlalchemy.orm import sessionmaker

from phrase_store.core.db import session_scope, get_session_factory
from phrase_store.core.index_policy import IndexPolicy, default_index_policy
from phrase_store.config.settings import get_settings
from phrase_store.models.phrase import Phrase


def chunked(items: Iterable, size: int) -> Iterator[list]:
    it = iter(items)
    while True:
        chunk = list(islice(it, size))
        if not chunk:
            return
        yield chunk


def file_commit_filter(pairs: list):
    """OR of exact (file, commit_id) matches."""
    return or_(*[
        and_(Phrase.file == file, Phrase.commit_id == commit_id)
        for file, commit_id in pairs
    ])


class StoreService:
    """Base for stores that open one session per public operation."""

    def __init__(
        self,
        session_factory: Optional[sessionmaker] = None,
        index_policy: Optional[IndexPolicy] = None,
        yield_per: Optional[int] = None,
    ):
        self._session_factory = session_factory or get_session_factory()
        self._index_policy = index_policy or default_index_policy
        self._yield_per = yield_per or get_settings().database.yield_per

    @property
    def index_policy(self) -> IndexPolicy:
        return self._index_policy

    def _session(self):
        return session_scope(self._session_factory)

    def _stream(self, rows: Iterator, callback: Optional[Callable] = None):
        """Hand back the lazy iterator, or drain it through ``callback``."""
        if callback is None:
            return rows
        for row in rows:
            callback(row)
        return None

    def _iter_statements(self, statements: Iterable) -> Iterator:
        """Run each statement in one session, yielding scalars as they stream."""
        with self._session() as session:
            for stmt in statements:
                result = session.execute(stmt.execution_options(yield_per=self._yield_per))
                for row in result.scalars():
                    yield row

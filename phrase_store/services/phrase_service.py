"""
Phrase Store - Stores and looks up extracted source phrases
"""
import logging
from collections.abc import Mapping
from typing import Callable, Iterator, List, Optional

from pydantic import ValidationError
from sqlalchemy import select, func, distinct

from phrase_store.core.exceptions import InvalidPhraseError
from phrase_store.core.index_policy import IndexPolicy
from phrase_store.models.phrase import Phrase, PHRASE_FIELDS
from phrase_store.schemas.phrase import PhraseCreate
from phrase_store.services.base import StoreService, chunked, file_commit_filter

logger = logging.getLogger(__name__)


def phrase_lookup_statement(
    index_policy: IndexPolicy,
    repo_name: str,
    key: Optional[str],
    meta_key: Optional[str],
    commit_id: str,
):
    """SELECT for the phrase addressed by the policy's (column, value) pair."""
    column = getattr(Phrase, index_policy.index_key(key, meta_key))
    value = index_policy.index_value(key, meta_key)
    return (
        select(Phrase)
        .where(
            Phrase.repo_name == repo_name,
            Phrase.commit_id == commit_id,
            column == value,
        )
        .order_by(Phrase.id)
        .limit(1)
    )


def _extract_attrs(phrase_attrs) -> dict:
    if isinstance(phrase_attrs, PhraseCreate):
        return phrase_attrs.model_dump()
    if isinstance(phrase_attrs, Mapping):
        return dict(phrase_attrs)
    return {
        field: getattr(phrase_attrs, field)
        for field in PHRASE_FIELDS
        if hasattr(phrase_attrs, field)
    }


class PhraseStore(StoreService):
    """Create/lookup of phrases keyed by repo, key or meta_key, and commit"""

    def store_phrase(self, repo_name: str, phrase_attrs) -> Phrase:
        """
        Insert a new phrase for ``repo_name``

        Args:
            repo_name: Repository the phrase was extracted from
            phrase_attrs: Mapping, PhraseCreate, or any object exposing
                key, meta_key, file and commit_id

        Returns:
            The stored phrase

        Raises:
            InvalidPhraseError: If key is None or file, commit_id or
                repo_name is missing or blank
        """
        attrs = _extract_attrs(phrase_attrs)
        attrs["repo_name"] = repo_name
        try:
            data = PhraseCreate(**{k: attrs[k] for k in PHRASE_FIELDS if k in attrs})
        except ValidationError as e:
            errors = [
                {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
                for err in e.errors()
            ]
            logger.warning(f"Rejected phrase for repo {repo_name}: {errors}")
            raise InvalidPhraseError(errors) from e

        with self._session() as session:
            phrase = Phrase(**data.model_dump())
            session.add(phrase)
            session.flush()
            logger.debug(f"Stored phrase {phrase.id} ({phrase.file}@{phrase.commit_id})")
            return phrase

    def lookup_phrase(
        self,
        repo_name: str,
        key: Optional[str],
        meta_key: Optional[str],
        commit_id: str,
    ) -> Optional[Phrase]:
        """Return the first matching phrase, or None when nothing matches."""
        stmt = phrase_lookup_statement(self._index_policy, repo_name, key, meta_key, commit_id)
        with self._session() as session:
            return session.execute(stmt).scalars().first()

    def phrases_by_commit(
        self,
        repo_name: str,
        commit_id: str,
        file: Optional[str] = None,
    ) -> List[Phrase]:
        stmt = select(Phrase).where(
            Phrase.repo_name == repo_name,
            Phrase.commit_id == commit_id,
        )
        if file is not None:
            stmt = stmt.where(Phrase.file == file)
        stmt = stmt.order_by(Phrase.id)
        with self._session() as session:
            return list(session.execute(stmt).scalars())

    def phrases_by_commits(
        self,
        repo_name: str,
        commit_id_map: dict,
        callback: Optional[Callable[[Phrase], None]] = None,
    ) -> Optional[Iterator[Phrase]]:
        """
        Phrases matching each exact (file, commit_id) pair of ``commit_id_map``

        Args:
            repo_name: Repository name
            commit_id_map: Mapping of file -> commit_id
            callback: Invoked once per phrase when given

        Returns:
            Lazy iterator of phrases, or None when a callback consumed them
        """
        return self._stream(self._iter_by_commits(repo_name, commit_id_map), callback)

    def _iter_by_commits(self, repo_name: str, commit_id_map: dict) -> Iterator[Phrase]:
        if not commit_id_map:
            return iter(())
        statements = (
            select(Phrase)
            .where(Phrase.repo_name == repo_name, file_commit_filter(pairs))
            .order_by(Phrase.id)
            for pairs in chunked(commit_id_map.items(), self._yield_per)
        )
        return self._iter_statements(statements)

    def each_unique_commit(
        self,
        repo_name: str,
        callback: Optional[Callable[[str], None]] = None,
    ) -> Optional[Iterator[str]]:
        """Each distinct commit id among the repo's phrases, once."""
        stmt = (
            select(Phrase.commit_id)
            .where(Phrase.repo_name == repo_name)
            .distinct()
            .order_by(Phrase.commit_id)
        )
        return self._stream(self._iter_statements([stmt]), callback)

    def unique_commit_count(self, repo_name: str) -> int:
        stmt = select(func.count(distinct(Phrase.commit_id))).where(
            Phrase.repo_name == repo_name
        )
        with self._session() as session:
            return session.execute(stmt).scalar_one()

"""
Translation Store - Locale-scoped create-or-update of translated text
"""
import logging
from typing import Callable, Iterator, List, Optional

from sqlalchemy import select, update
from sqlalchemy.orm import contains_eager, selectinload
from sqlalchemy.exc import SQLAlchemyError

from phrase_store.core.exceptions import (
    AddTranslationError,
    MissingParamError,
    PhraseNotFoundError,
)
from phrase_store.models.phrase import Phrase
from phrase_store.models.translation import Translation
from phrase_store.services.base import StoreService, chunked, file_commit_filter
from phrase_store.services.phrase_service import phrase_lookup_statement

logger = logging.getLogger(__name__)


class TranslationStore(StoreService):
    """Translations of stored phrases, one or more rows per (phrase, locale)"""

    def translations_by_commits(
        self,
        repo_name: str,
        locale: str,
        commit_id_map: dict,
        callback: Optional[Callable[[Translation], None]] = None,
    ) -> Optional[Iterator[Translation]]:
        """
        Translations in ``locale`` whose phrases match the (file, commit_id)
        pairs of ``commit_id_map``

        Returns:
            Lazy iterator of translations, or None when a callback consumed them
        """
        return self._stream(
            self._iter_by_commits(repo_name, locale, commit_id_map), callback
        )

    def _iter_by_commits(self, repo_name: str, locale: str, commit_id_map: dict) -> Iterator[Translation]:
        if not commit_id_map:
            return iter(())
        statements = (
            select(Translation)
            .join(Translation.phrase)
            .options(contains_eager(Translation.phrase))
            .where(
                Phrase.repo_name == repo_name,
                Translation.locale == locale,
                file_commit_filter(pairs),
            )
            .order_by(Translation.id)
            for pairs in chunked(commit_id_map.items(), self._yield_per)
        )
        return self._iter_statements(statements)

    def _required_params(self, params: dict) -> list:
        index_column = self._index_policy.index_key(params.get("key"), params.get("meta_key"))
        return [index_column, "commit_id", "translation", "locale"]

    def add_or_update_translation(
        self,
        repo_name: str,
        params: Optional[dict] = None,
        **kwargs,
    ) -> List[Translation]:
        """
        Set the translation text of a phrase in one locale

        Every existing row for (phrase, locale) is rewritten, so duplicate
        rows all end up with the new text. With no existing row a single one
        is inserted.

        Args:
            repo_name: Repository name
            params: key and/or meta_key, commit_id, translation, locale;
                keyword arguments are merged on top

        Returns:
            The inserted or updated translation rows

        Raises:
            MissingParamError: A required param is absent
            PhraseNotFoundError: No phrase matches key/meta_key at commit_id
            AddTranslationError: The translation could not be persisted
        """
        params = {**(params or {}), **kwargs}
        missing = [name for name in self._required_params(params) if name not in params]
        if missing:
            raise MissingParamError(missing[0], missing=missing)

        key = params.get("key")
        meta_key = params.get("meta_key")
        commit_id = params["commit_id"]
        locale = params["locale"]
        text = params["translation"]

        phrase_id = None
        try:
            with self._session() as session:
                stmt = phrase_lookup_statement(self._index_policy, repo_name, key, meta_key, commit_id)
                phrase = session.execute(stmt).scalars().first()
                if phrase is None:
                    raise PhraseNotFoundError(repo_name, key, meta_key, commit_id)
                phrase_id = phrase.id

                if text is None:
                    raise AddTranslationError(
                        "Translation can't be blank",
                        details={"phrase_id": phrase_id, "locale": locale},
                    )

                existing = list(session.execute(
                    select(Translation)
                    .where(Translation.phrase_id == phrase_id, Translation.locale == locale)
                    .options(selectinload(Translation.phrase))
                    .order_by(Translation.id)
                ).scalars())

                if existing:
                    session.execute(
                        update(Translation)
                        .where(Translation.phrase_id == phrase_id, Translation.locale == locale)
                        .values(translation=text)
                        .execution_options(synchronize_session="evaluate")
                    )
                    saved = existing
                else:
                    translation = Translation(phrase=phrase, locale=locale, translation=text)
                    session.add(translation)
                    session.flush()
                    saved = [translation]
        except SQLAlchemyError as e:
            logger.error(f"Failed to save translation for phrase {phrase_id}: {e}", exc_info=True)
            raise AddTranslationError(
                str(e.orig) if getattr(e, "orig", None) is not None else str(e),
                details={"phrase_id": phrase_id, "locale": locale},
            ) from e

        logger.info(f"Saved {len(saved)} translation(s) for phrase {phrase_id} ({locale})")
        return saved

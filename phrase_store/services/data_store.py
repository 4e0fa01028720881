"""
DataStore - Single gateway over the phrase, translation and commit log stores
"""
import logging
from typing import Optional

from sqlalchemy.orm import sessionmaker

from phrase_store.config.settings import DatabaseSettings
from phrase_store.core.db import Base, build_engine, build_session_factory, get_session_factory
from phrase_store.core.index_policy import IndexPolicy, default_index_policy
from phrase_store.services.phrase_service import PhraseStore
from phrase_store.services.translation_service import TranslationStore
from phrase_store.services.commit_log_service import CommitLogStore

logger = logging.getLogger(__name__)


class DataStore:
    """
    Repository-style gateway used by callers

    All three stores share one session factory and one index policy. Each
    public call runs in its own transaction.
    """

    def __init__(
        self,
        session_factory: Optional[sessionmaker] = None,
        index_policy: Optional[IndexPolicy] = None,
        yield_per: Optional[int] = None,
    ):
        self._session_factory = session_factory or get_session_factory()
        self._index_policy = index_policy or default_index_policy
        store_args = (self._session_factory, self._index_policy, yield_per)
        self.phrases = PhraseStore(*store_args)
        self.translations = TranslationStore(*store_args)
        self.commit_logs = CommitLogStore(*store_args)

    @classmethod
    def from_settings(
        cls,
        db_settings: Optional[DatabaseSettings] = None,
        index_policy: Optional[IndexPolicy] = None,
    ) -> "DataStore":
        engine = build_engine(db_settings)
        return cls(
            build_session_factory(engine),
            index_policy=index_policy,
            yield_per=db_settings.yield_per if db_settings else None,
        )

    def create_schema(self) -> None:
        """Create every table on the bound engine (tests and local setups)."""
        # registers the mapped tables on Base.metadata
        import phrase_store.models  # noqa: F401

        engine = self._session_factory.kw["bind"]
        logger.info(f"Creating phrase store schema on {engine.url.render_as_string(hide_password=True)}")
        Base.metadata.create_all(engine)

    # Phrases

    def store_phrase(self, repo_name, phrase_attrs):
        return self.phrases.store_phrase(repo_name, phrase_attrs)

    def lookup_phrase(self, repo_name, key, meta_key, commit_id):
        return self.phrases.lookup_phrase(repo_name, key, meta_key, commit_id)

    def phrases_by_commit(self, repo_name, commit_id, file=None):
        return self.phrases.phrases_by_commit(repo_name, commit_id, file)

    def phrases_by_commits(self, repo_name, commit_id_map, callback=None):
        return self.phrases.phrases_by_commits(repo_name, commit_id_map, callback)

    def each_unique_commit(self, repo_name, callback=None):
        return self.phrases.each_unique_commit(repo_name, callback)

    def unique_commit_count(self, repo_name):
        return self.phrases.unique_commit_count(repo_name)

    # Translations

    def translations_by_commits(self, repo_name, locale, commit_id_map, callback=None):
        return self.translations.translations_by_commits(repo_name, locale, commit_id_map, callback)

    def add_or_update_translation(self, repo_name, params=None, **kwargs):
        return self.translations.add_or_update_translation(repo_name, params, **kwargs)

    # Commit logs

    def add_or_update_commit_log(self, repo_name, commit_id, phrase_count=None, status=None):
        return self.commit_logs.add_or_update_commit_log(repo_name, commit_id, phrase_count, status)

    def lookup_commit_log(self, repo_name, commit_id):
        return self.commit_logs.lookup_commit_log(repo_name, commit_id)

    def seen_commits_in(self, repo_name, commit_ids):
        return self.commit_logs.seen_commits_in(repo_name, commit_ids)

    def commit_log_exists(self, repo_name, commit_id):
        return self.commit_logs.commit_log_exists(repo_name, commit_id)

    def each_commit_log_with_status(self, repo_name, status, callback=None):
        return self.commit_logs.each_commit_log_with_status(repo_name, status, callback)

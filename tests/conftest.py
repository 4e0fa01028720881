"""
Shared fixtures: a fresh in-memory SQLite store per test plus row factories.
"""
import itertools
import uuid

import pytest

from phrase_store.config.settings import DatabaseSettings
from phrase_store.core.db import build_engine, build_session_factory, session_scope
from phrase_store.models import Phrase, Translation, CommitLog, CommitLogStatus
from phrase_store.services.data_store import DataStore

REPO_NAME = "foobar_repo"

_seq = itertools.count(1)


def _commit_id() -> str:
    return uuid.uuid4().hex[:12]


@pytest.fixture
def repo_name():
    return REPO_NAME


@pytest.fixture(scope="function")
def session_factory():
    # In-memory SQLite for fast unit testing
    engine = build_engine(DatabaseSettings(url="sqlite://"))
    factory = build_session_factory(engine)
    yield factory
    engine.dispose()


@pytest.fixture
def datastore(session_factory):
    store = DataStore(session_factory)
    store.create_schema()
    return store


@pytest.fixture
def count_rows(session_factory, datastore):
    def _count(model) -> int:
        with session_scope(session_factory) as session:
            return session.query(model).count()
    return _count


@pytest.fixture
def reload(session_factory, datastore):
    """Fetch a fresh copy of a row by primary key."""
    def _reload(model, pk):
        with session_scope(session_factory) as session:
            return session.get(model, pk)
    return _reload


@pytest.fixture
def phrase_factory(session_factory, datastore):
    def _create(**overrides) -> Phrase:
        n = next(_seq)
        attrs = {
            "repo_name": REPO_NAME,
            "key": f"key {n}",
            "meta_key": None,
            "file": f"config/locales/file_{n}.yml",
            "commit_id": _commit_id(),
        }
        attrs.update(overrides)
        with session_scope(session_factory) as session:
            phrase = Phrase(**attrs)
            session.add(phrase)
            session.flush()
            return phrase
    return _create


@pytest.fixture
def translation_factory(session_factory, phrase_factory):
    def _create(**overrides) -> Translation:
        n = next(_seq)
        phrase_id = overrides.pop("phrase_id", None)
        if phrase_id is None:
            phrase_id = phrase_factory().id
        attrs = {
            "phrase_id": phrase_id,
            "locale": "es",
            "translation": f"translation {n}",
        }
        attrs.update(overrides)
        with session_scope(session_factory) as session:
            translation = Translation(**attrs)
            session.add(translation)
            session.flush()
            # load the owning phrase before the session closes
            translation.phrase
            return translation
    return _create


@pytest.fixture
def commit_log_factory(session_factory, datastore):
    def _create(**overrides) -> CommitLog:
        attrs = {
            "repo_name": REPO_NAME,
            "commit_id": _commit_id(),
            "phrase_count": 0,
            "status": CommitLogStatus.UNTRANSLATED,
        }
        attrs.update(overrides)
        with session_scope(session_factory) as session:
            log = CommitLog(**attrs)
            session.add(log)
            session.flush()
            return log
    return _create


def build_commit_id_map_from(phrases) -> dict:
    return {phrase.file: phrase.commit_id for phrase in phrases}


@pytest.fixture
def commit_id_map_from():
    return build_commit_id_map_from

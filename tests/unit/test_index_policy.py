"""
Unit tests for phrase index policies and policy injection
"""
import pytest

from phrase_store.core.index_policy import IndexPolicy, MetaKeyIndexPolicy
from phrase_store.core.exceptions import MissingParamError
from phrase_store.services.data_store import DataStore


class KeyOnlyIndexPolicy(IndexPolicy):
    """Ignores meta keys entirely"""

    def index_key(self, key, meta_key):
        return "key"

    def index_value(self, key, meta_key):
        return key


@pytest.mark.parametrize(
    "key, meta_key, column, value",
    [
        ("foo", None, "key", "foo"),
        ("foo", "", "key", "foo"),
        (None, "bar", "meta_key", "bar"),
        ("foo", "bar", "meta_key", "bar"),
        (None, None, "key", None),
    ],
)
def test_meta_key_policy(key, meta_key, column, value):
    policy = MetaKeyIndexPolicy()
    assert policy.index_key(key, meta_key) == column
    assert policy.index_value(key, meta_key) == value


def test_index_policy_is_abstract():
    with pytest.raises(TypeError):
        IndexPolicy()


def test_injected_policy_drives_lookups(session_factory, repo_name, phrase_factory):
    store = DataStore(session_factory, index_policy=KeyOnlyIndexPolicy())
    phrase = phrase_factory(key="foo", meta_key="bar")

    assert store.lookup_phrase(repo_name, "foo", "something else", phrase.commit_id).id == phrase.id
    assert store.lookup_phrase(repo_name, None, "bar", phrase.commit_id) is None


def test_injected_policy_drives_required_params(session_factory, repo_name, phrase_factory):
    store = DataStore(session_factory, index_policy=KeyOnlyIndexPolicy())
    phrase = phrase_factory(key="foo", meta_key="bar")

    with pytest.raises(MissingParamError) as exc_info:
        store.add_or_update_translation(
            repo_name, meta_key="bar", commit_id=phrase.commit_id,
            translation="x", locale="es",
        )
    assert exc_info.value.param == "key"

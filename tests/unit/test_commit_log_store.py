"""
Unit tests for commit log upsert and membership queries
"""
import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from phrase_store.core.exceptions import CommitLogUpdateError
from phrase_store.models.commit_log import CommitLog, CommitLogStatus


def test_add_commit_log_creates_untranslated_entry(datastore, repo_name, count_rows, reload):
    assert count_rows(CommitLog) == 0

    log = datastore.add_or_update_commit_log(repo_name, "4321")

    assert count_rows(CommitLog) == 1
    entry = reload(CommitLog, log.id)
    assert entry.repo_name == repo_name
    assert entry.commit_id == "4321"
    assert entry.status == CommitLogStatus.UNTRANSLATED
    assert entry.phrase_count == 0
    assert entry.created_at is not None


def test_add_commit_log_with_initial_fields(datastore, repo_name):
    log = datastore.add_or_update_commit_log(repo_name, "4321", 12, "PENDING")

    assert log.phrase_count == 12
    assert log.status == CommitLogStatus.PENDING


def test_update_commit_log_status(datastore, repo_name, commit_log_factory, count_rows, reload):
    existing = commit_log_factory(commit_id="4321")

    datastore.add_or_update_commit_log(repo_name, "4321", None, CommitLogStatus.PENDING)

    assert count_rows(CommitLog) == 1
    entry = reload(CommitLog, existing.id)
    assert entry.repo_name == repo_name
    assert entry.commit_id == "4321"
    assert entry.status == CommitLogStatus.PENDING


def test_update_commit_log_leaves_omitted_fields(datastore, repo_name, commit_log_factory):
    commit_log_factory(commit_id="4321", phrase_count=7, status=CommitLogStatus.PUSHED)

    log = datastore.add_or_update_commit_log(repo_name, "4321", phrase_count=9)
    assert log.phrase_count == 9
    assert log.status == CommitLogStatus.PUSHED

    log = datastore.add_or_update_commit_log(repo_name, "4321", status="FINALIZED")
    assert log.phrase_count == 9
    assert log.status == CommitLogStatus.FINALIZED


def test_any_status_may_overwrite_any_other(datastore, repo_name):
    datastore.add_or_update_commit_log(repo_name, "4321", status=CommitLogStatus.FINALIZED)
    log = datastore.add_or_update_commit_log(repo_name, "4321", status=CommitLogStatus.UNTRANSLATED)

    assert log.status == CommitLogStatus.UNTRANSLATED


def test_unknown_status_is_rejected(datastore, repo_name, count_rows):
    with pytest.raises(CommitLogUpdateError) as exc_info:
        datastore.add_or_update_commit_log(repo_name, "4321", status="BOGUS")

    assert exc_info.value.details["commit_id"] == "4321"
    assert count_rows(CommitLog) == 0


def test_seen_commits_in(datastore, repo_name, commit_log_factory):
    commits = [commit_log_factory() for _ in range(2)]

    seen = datastore.seen_commits_in(repo_name, [commits[0].commit_id, "foobar"])

    assert seen == {commits[0].commit_id}


def test_seen_commits_in_ignores_status_and_empty_input(datastore, repo_name, commit_log_factory):
    pending = commit_log_factory(status=CommitLogStatus.PENDING)
    missing = commit_log_factory(status=CommitLogStatus.MISSING)

    assert datastore.seen_commits_in(repo_name, [pending.commit_id, missing.commit_id]) == {
        pending.commit_id, missing.commit_id,
    }
    assert datastore.seen_commits_in(repo_name, []) == set()


def test_commit_log_exists(datastore, repo_name, commit_log_factory):
    assert datastore.commit_log_exists(repo_name, "abc123") is False

    log_entry = commit_log_factory(commit_id="abc123")

    assert datastore.commit_log_exists(repo_name, log_entry.commit_id) is True
    assert datastore.commit_log_exists("other_repo", log_entry.commit_id) is False


def test_lookup_commit_log(datastore, repo_name, commit_log_factory):
    log_entry = commit_log_factory(phrase_count=3)

    found = datastore.lookup_commit_log(repo_name, log_entry.commit_id)

    assert found.id == log_entry.id
    assert found.phrase_count == 3
    assert datastore.lookup_commit_log(repo_name, "nope") is None


def test_each_commit_log_with_status(datastore, repo_name, commit_log_factory):
    pending = [commit_log_factory(status=CommitLogStatus.PENDING) for _ in range(2)]
    commit_log_factory(status=CommitLogStatus.UNTRANSLATED)
    commit_log_factory(status=CommitLogStatus.PENDING, repo_name="other_repo")

    found = list(datastore.each_commit_log_with_status(repo_name, "PENDING"))
    assert [log.id for log in found] == [log.id for log in pending]

    visited = []
    datastore.each_commit_log_with_status(repo_name, CommitLogStatus.PENDING, visited.append)
    assert [log.commit_id for log in visited] == [log.commit_id for log in pending]


def test_commit_failure_is_reported(monkeypatch, datastore, repo_name, count_rows):
    def failing_commit(self):
        raise OperationalError("COMMIT", {}, Exception("server closed the connection"))

    with monkeypatch.context() as m:
        m.setattr(Session, "commit", failing_commit)
        with pytest.raises(CommitLogUpdateError) as exc_info:
            datastore.add_or_update_commit_log(repo_name, "4321", 5)

    assert exc_info.value.details["commit_id"] == "4321"
    assert "server closed the connection" in exc_info.value.details["reason"]
    assert count_rows(CommitLog) == 0

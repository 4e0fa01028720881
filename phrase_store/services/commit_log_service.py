"""
Commit Log Store - Tracks processing status per commit
"""
import logging
from typing import Callable, Iterable, Iterator, Optional, Set, Union

from sqlalchemy import select, exists
from sqlalchemy.exc import SQLAlchemyError

from phrase_store.core.exceptions import CommitLogUpdateError
from phrase_store.models.commit_log import CommitLog, CommitLogStatus
from phrase_store.services.base import StoreService, chunked

logger = logging.getLogger(__name__)

StatusLike = Union[CommitLogStatus, str]


class CommitLogStore(StoreService):
    """
    Idempotent upsert and membership queries over commit logs

    commit_id is unique across all repos. Status changes are not validated:
    any status may overwrite any other.
    """

    def add_or_update_commit_log(
        self,
        repo_name: str,
        commit_id: str,
        phrase_count: Optional[int] = None,
        status: Optional[StatusLike] = None,
    ) -> CommitLog:
        """
        Create the log entry for ``commit_id`` or update the supplied fields

        Args:
            repo_name: Repository name (used only when creating)
            commit_id: Commit identifier
            phrase_count: New phrase count, untouched when None
            status: New status, untouched when None; new entries default
                to UNTRANSLATED

        Returns:
            The created or updated commit log

        Raises:
            CommitLogUpdateError: Unknown status or the row could not be saved
        """
        try:
            with self._session() as session:
                new_status = CommitLogStatus(status) if status is not None else None
                log = session.execute(
                    select(CommitLog).where(CommitLog.commit_id == commit_id)
                ).scalar_one_or_none()

                if log is None:
                    log = CommitLog(
                        repo_name=repo_name,
                        commit_id=commit_id,
                        phrase_count=phrase_count if phrase_count is not None else 0,
                        status=new_status or CommitLogStatus.UNTRANSLATED,
                    )
                    session.add(log)
                    logger.info(f"Logging commit {commit_id} for {repo_name} as {log.status.value}")
                else:
                    if new_status is not None:
                        log.status = new_status
                    if phrase_count is not None:
                        log.phrase_count = phrase_count
                    logger.debug(f"Updated commit log {commit_id}: status={log.status}, phrase_count={log.phrase_count}")

                session.flush()
                session.refresh(log)
        except (SQLAlchemyError, ValueError) as e:
            logger.error(f"Failed to log commit {commit_id}: {e}", exc_info=True)
            raise CommitLogUpdateError(
                commit_id, details={"commit_id": commit_id, "reason": str(e)}
            ) from e
        return log

    def lookup_commit_log(self, repo_name: str, commit_id: str) -> Optional[CommitLog]:
        stmt = select(CommitLog).where(
            CommitLog.repo_name == repo_name,
            CommitLog.commit_id == commit_id,
        )
        with self._session() as session:
            return session.execute(stmt).scalar_one_or_none()

    def seen_commits_in(self, repo_name: str, commit_ids: Iterable[str]) -> Set[str]:
        """The subset of ``commit_ids`` already present in the commit log."""
        seen: Set[str] = set()
        ids = list(dict.fromkeys(commit_ids))
        if not ids:
            return seen
        with self._session() as session:
            for chunk in chunked(ids, 500):
                stmt = select(CommitLog.commit_id).where(
                    CommitLog.repo_name == repo_name,
                    CommitLog.commit_id.in_(chunk),
                )
                seen.update(session.execute(stmt).scalars())
        return seen

    def commit_log_exists(self, repo_name: str, commit_id: str) -> bool:
        stmt = select(
            exists().where(
                CommitLog.repo_name == repo_name,
                CommitLog.commit_id == commit_id,
            )
        )
        with self._session() as session:
            return bool(session.execute(stmt).scalar())

    def each_commit_log_with_status(
        self,
        repo_name: str,
        status: StatusLike,
        callback: Optional[Callable[[CommitLog], None]] = None,
    ) -> Optional[Iterator[CommitLog]]:
        stmt = (
            select(CommitLog)
            .where(
                CommitLog.repo_name == repo_name,
                CommitLog.status == CommitLogStatus(status),
            )
            .order_by(CommitLog.id)
        )
        return self._stream(self._iter_statements([stmt]), callback)

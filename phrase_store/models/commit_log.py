"""
Commit log model for per-commit processing status
"""
from sqlalchemy import Column, Integer, String, DateTime, Index, Enum as SQLEnum
from sqlalchemy.sql import func
import enum

from phrase_store.core.db import Base


class CommitLogStatus(str, enum.Enum):
    """Commit processing status. Any status may replace any other."""
    NOT_SEEN = "NOT_SEEN"
    UNTRANSLATED = "UNTRANSLATED"
    PENDING = "PENDING"
    PUSHED = "PUSHED"
    FETCHED = "FETCHED"
    FINALIZED = "FINALIZED"
    MISSING = "MISSING"


class CommitLog(Base):
    """
    One row per commit_id across all repos
    Tracks how far a commit has progressed through translation
    """
    __tablename__ = "commit_logs"

    id = Column(Integer, primary_key=True)
    repo_name = Column(String(255), nullable=False)
    commit_id = Column(String(45), nullable=False)
    phrase_count = Column(Integer, default=0, server_default="0")
    status = Column(SQLEnum(CommitLogStatus, native_enum=False, length=255), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        Index("ix_commit_logs_commit_id", "commit_id", unique=True),
    )

    def __repr__(self) -> str:  # pragma: no cover
        return f"<CommitLog commit_id={self.commit_id} status={self.status}>"

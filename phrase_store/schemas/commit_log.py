"""
Commit log schemas
"""
from pydantic import BaseModel
from datetime import datetime
from typing import Optional
from phrase_store.models.commit_log import CommitLogStatus


class CommitLogRead(BaseModel):
    """Schema for a commit log entry"""
    id: int
    repo_name: str
    commit_id: str
    phrase_count: int = 0
    status: Optional[CommitLogStatus] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

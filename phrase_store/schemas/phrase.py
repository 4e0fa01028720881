from pydantic import BaseModel, Field, field_validator
from typing import Optional


class PhraseCreate(BaseModel):
    """Attributes accepted when storing a phrase"""
    repo_name: str
    key: str
    meta_key: Optional[str] = None
    file: str
    commit_id: str = Field(..., max_length=45)

    @field_validator("repo_name", "file", "commit_id")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("can't be blank")
        return v


class PhraseRead(BaseModel):
    id: int
    repo_name: str
    key: str
    meta_key: Optional[str] = None
    file: str
    commit_id: str

    class Config:
        from_attributes = True

from sqlalchemy import Column, Integer, String, Text, Index
from sqlalchemy.orm import relationship
from phrase_store.core.db import Base

PHRASE_FIELDS = ("repo_name", "key", "meta_key", "file", "commit_id")


class Phrase(Base):
    """
    A unit of source text extracted from one file at one commit.
    Not unique per (repo_name, commit_id, file, key); callers handle duplicates.
    """
    __tablename__ = "phrases"

    id = Column(Integer, primary_key=True)
    repo_name = Column(String(255), nullable=False)
    key = Column(Text, nullable=False)
    meta_key = Column(Text, nullable=True)
    file = Column(Text, nullable=False)
    commit_id = Column(String(45), nullable=False)

    # Relationships
    translations = relationship("Translation", back_populates="phrase")

    __table_args__ = (
        Index("ix_phrases_repo_name_commit_id", "repo_name", "commit_id"),
        Index("ix_phrases_key", "key"),
        Index("ix_phrases_meta_key", "meta_key"),
    )

    def to_dict(self) -> dict:
        data = {field: getattr(self, field) for field in PHRASE_FIELDS}
        data["id"] = self.id
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Phrase":
        return cls(**{k: v for k, v in data.items() if k in PHRASE_FIELDS or k == "id"})

    def __repr__(self) -> str:  # pragma: no cover
        return f"<Phrase id={self.id} key={self.key!r} commit_id={self.commit_id}>"

from sqlalchemy.orm import relationship
from phrase_store.core.db import Base
from sqlalchemy import Column, Integer, String, ForeignKey, Text, Index


class Translation(Base):
    __tablename__ = "translations"
    id = Column(Integer, primary_key=True)
    phrase_id = Column(Integer, ForeignKey("phrases.id"), nullable=False)
    locale = Column(String(255), nullable=False)
    translation = Column(Text, nullable=False)

    # Relationships
    phrase = relationship("Phrase", back_populates="translations")

    # (phrase_id, locale) is not unique; updates touch every match
    __table_args__ = (
        Index("ix_translations_phrase_id_locale", "phrase_id", "locale"),
    )

    def __repr__(self) -> str:  # pragma: no cover
        return f"<Translation id={self.id} phrase_id={self.phrase_id} locale={self.locale}>"

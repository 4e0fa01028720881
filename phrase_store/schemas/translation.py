from pydantic import BaseModel


class TranslationRead(BaseModel):
    id: int
    phrase_id: int
    locale: str
    translation: str

    class Config:
        from_attributes = True

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class FeelRequest(BaseModel):
    input: str = Field(min_length=1, max_length=2000)
    profile: Optional[Union[str, dict[str, Any]]] = None


# The models below describe the reply shape for the API docs only.
# Replies are returned as the model produced them, plus `audio`.

class QuranQuote(BaseModel):
    model_config = ConfigDict(extra="allow")

    en: str
    ref: str
    ar: Optional[str] = None
    audio: list[str] = Field(default_factory=list)


class Hadith(BaseModel):
    model_config = ConfigDict(extra="allow")

    en: str
    ref: str
    ar: Optional[str] = None


class Counsel(BaseModel):
    model_config = ConfigDict(extra="allow")

    by: str
    text: str
    ref: Optional[str] = None


class Mapped(BaseModel):
    model_config = ConfigDict(extra="allow")

    feeling: str
    quran: QuranQuote
    quran2: Optional[QuranQuote] = None
    hadith: Hadith
    counsel: Counsel
    dua: str


class FeelResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    mapped: Mapped
    peptalk: str
    suggestions: Optional[list[str]] = None

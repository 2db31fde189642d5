from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class WordDetailRequest(BaseModel):
    # Required fields are checked by the service so the caller gets the
    # word-detail error envelope instead of a schema error.
    # Numbers are interpolated into the prompt the same way strings are.
    model_config = ConfigDict(populate_by_name=True, extra='ignore', coerce_numbers_to_str=True)

    word: Optional[str] = None
    pos: Optional[str] = None  # part of speech, e.g. "動詞"
    sentence: Optional[str] = None
    furigana: Optional[str] = None
    romaji: Optional[str] = None
    model: Optional[str] = None
    api_url: Optional[str] = Field(default=None, alias="apiUrl")


class ChatMessage(BaseModel):
    role: str
    content: str


class UpstreamPayload(BaseModel):
    model: str
    reasoning_effort: str = "none"
    messages: List[ChatMessage]

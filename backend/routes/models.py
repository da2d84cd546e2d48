"""Pydantic request bodies for API endpoints.

Only presence is checked here; the store accepts whatever passes.
"""

from pydantic import AliasChoices, BaseModel, Field


class CreateContent(BaseModel):
    title: str = Field(min_length=1)
    url: str = Field(min_length=1)
    type: str = ""
    category: str = ""


class SubmitNote(BaseModel):
    content_id: int | str = Field(
        default="", validation_alias=AliasChoices("content_id", "contentId")
    )
    script: str = Field(min_length=1)
    intent: str = ""
    technique: str = ""
    emotion: str = ""
    keywords: str = ""
    rewriting: str = ""
    tags: list[str] = Field(default_factory=list)

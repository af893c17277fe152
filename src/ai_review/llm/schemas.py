from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Suggestion(BaseModel):
    """Замечание модели к строке, до валидации."""

    model_config = ConfigDict(populate_by_name=True)

    line_number: Any = Field(default=None, alias="lineNumber")
    review_comment: str | None = Field(default="", alias="reviewComment")


class ReviewReply(BaseModel):
    """Ответ модели: {"reviews": [...]}.

    Элементы не валидируются здесь: битый элемент отбрасывается
    по отдельности и не ломает весь ответ.
    """

    reviews: list[Any] = []

    @field_validator("reviews", mode="before")
    @classmethod
    def _null_reviews(cls, value):
        return [] if value is None else value

"""Pydantic schemas for AI suggestion feedback."""

from datetime import datetime

from pydantic import Field, StrictBool, StrictInt, StrictStr, model_validator

from campus_events.schemas.base import APIModel

DEFAULT_SUGGESTION_TYPE = "event_recommendation"


class FeedbackCreate(APIModel):
    """Feedback input. Types are strict: `"true"` is not a boolean here."""

    user_id: StrictInt = Field(gt=0)
    event_id: StrictInt | None = Field(default=None, gt=0)
    club_id: StrictInt | None = Field(default=None, gt=0)
    suggestion_type: StrictStr = Field(default=DEFAULT_SUGGESTION_TYPE, min_length=1, max_length=50)
    is_relevant: StrictBool | None = None
    feedback_text: StrictStr | None = None

    @model_validator(mode="after")
    def _require_context(self) -> "FeedbackCreate":
        if self.event_id is None and self.club_id is None:
            raise ValueError("one of event_id or club_id is required")
        return self


class FeedbackRead(APIModel):
    """Stored feedback record."""

    id: int
    user_id: int
    event_id: int | None = None
    club_id: int | None = None
    suggestion_type: str
    is_relevant: bool | None = None
    feedback_text: str | None = None
    created_at: datetime

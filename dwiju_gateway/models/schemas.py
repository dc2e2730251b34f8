"""Result schemas for structured provider output.

Provider output is loosely typed: a language model may omit fields or add
new ones. All fields are optional (nullable) and unknown keys are kept, so
that partial results still validate.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _LooseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class QuizQuestion(_LooseModel):
    question: str | None = None
    options: list[str] = Field(default_factory=list)
    correct: int | None = None  # zero-based index into options
    explanation: str | None = None


class Quiz(_LooseModel):
    title: str | None = None
    questions: list[QuizQuestion] = Field(default_factory=list)


class StudyDay(_LooseModel):
    day: str | None = None
    topic: str | None = None
    activities: list[str] = Field(default_factory=list)
    resources: list[str] = Field(default_factory=list)
    goals: str | None = None


class StudyPlan(_LooseModel):
    plan_title: str | None = Field(default=None, alias="planTitle")
    duration: str | None = None
    daily_hours: float | None = Field(default=None, alias="dailyHours")
    schedule: list[StudyDay] = Field(default_factory=list)
    tips: list[str] = Field(default_factory=list)


class SearchResult(_LooseModel):
    title: str | None = None
    link: str | None = None
    snippet: str | None = None
    thumbnail: str | None = None


class VideoResult(_LooseModel):
    id: str | None = None
    title: str | None = None
    description: str | None = None
    thumbnail: str | None = None
    channel_title: str | None = Field(default=None, alias="channelTitle")
    published_at: str | None = Field(default=None, alias="publishedAt")

    @property
    def embed_url(self) -> str | None:
        if not self.id:
            return None
        return f"https://www.youtube.com/embed/{self.id}?autoplay=1"

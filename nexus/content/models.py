"""FAQ content models with structural validation."""

import re
from datetime import date
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

VERSION_PATTERN = re.compile(r"^\d+\.\d+\.\d+$")

# Ids round-trip through button payloads; Telegram caps callback_data at 64 bytes
MAX_ID_BYTES = 64


def _check_id_size(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_ID_BYTES:
        raise ValueError(f"id must be at most {MAX_ID_BYTES} bytes in UTF-8, got {value!r}")
    return value


class FAQQuestion(BaseModel):
    """A question and its answer."""

    id: str = Field(..., min_length=1, description="Stable question identifier")
    question: str = Field(..., min_length=1, description="Question text")
    answer: str = Field(..., min_length=1, description="Answer text")

    @field_validator("id")
    @classmethod
    def _validate_id(cls, value: str) -> str:
        return _check_id_size(value)


class FAQCategory(BaseModel):
    """A group of related questions."""

    id: str = Field(..., min_length=1, description="Stable category identifier")
    title: str = Field(..., min_length=1, description="Display title")
    questions: list[FAQQuestion] = Field(default_factory=list, description="Questions")

    @field_validator("id")
    @classmethod
    def _validate_id(cls, value: str) -> str:
        return _check_id_size(value)


class FAQMetadata(BaseModel):
    """Document-level metadata."""

    last_updated: date = Field(..., description="When the content was last revised")
    version: str = Field(default="1.0.0", description="Semantic content version")
    welcome_text: str = Field(
        default="Hello! How can we help you today?",
        description="Greeting shown on the first turn",
    )
    contact: dict[str, Any] = Field(default_factory=dict, description="Contact channels")

    @field_validator("version")
    @classmethod
    def _validate_version(cls, value: str) -> str:
        if not VERSION_PATTERN.match(value):
            raise ValueError(f"version must look like MAJOR.MINOR.PATCH, got {value!r}")
        return value


class FAQDocument(BaseModel):
    """Complete FAQ content.

    Category ids and question ids must each be unique across the document,
    since questions are looked up without their category.
    """

    categories: list[FAQCategory] = Field(..., min_length=1, description="Categories")
    metadata: FAQMetadata = Field(..., description="Document metadata")

    @model_validator(mode="after")
    def _check_unique_ids(self) -> "FAQDocument":
        seen_categories: set[str] = set()
        seen_questions: set[str] = set()
        for category in self.categories:
            if category.id in seen_categories:
                raise ValueError(f"Duplicate category id: {category.id}")
            seen_categories.add(category.id)
            for question in category.questions:
                if question.id in seen_questions:
                    raise ValueError(f"Duplicate question id: {question.id}")
                seen_questions.add(question.id)
        return self


class QuestionSummary(BaseModel):
    """Question listing entry returned by get_category_questions."""

    id: str
    question: str


class Answer(BaseModel):
    """Answer lookup result returned by get_answer."""

    question: str
    answer: str

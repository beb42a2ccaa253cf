"""Content provider interface and static implementation."""

from abc import ABC, abstractmethod
from datetime import date

from nexus.content.models import Answer, FAQCategory, FAQDocument, QuestionSummary


class ContentProvider(ABC):
    """FAQ content lookups consumed by the conversation state machine.

    Lookups for unknown ids return empty results rather than raising;
    ids come straight from user input.
    """

    @property
    @abstractmethod
    def welcome_text(self) -> str:
        ...

    @property
    @abstractmethod
    def last_updated(self) -> date:
        ...

    @abstractmethod
    def get_categories(self) -> list[FAQCategory]:
        """All categories in display order."""
        ...

    @abstractmethod
    def get_category(self, category_id: str) -> FAQCategory | None:
        ...

    @abstractmethod
    def get_category_questions(self, category_id: str) -> list[QuestionSummary]:
        """Questions of a category, empty for an unknown category."""
        ...

    @abstractmethod
    def get_answer(self, question_id: str) -> Answer | None:
        """Answer for a question id from any category."""
        ...


class StaticContentProvider(ContentProvider):
    """Serves a validated FAQDocument held in memory."""

    def __init__(self, document: FAQDocument) -> None:
        self._document = document
        self._categories = {c.id: c for c in document.categories}
        self._answers = {
            q.id: Answer(question=q.question, answer=q.answer)
            for c in document.categories
            for q in c.questions
        }

    @property
    def welcome_text(self) -> str:
        return self._document.metadata.welcome_text

    @property
    def last_updated(self) -> date:
        return self._document.metadata.last_updated

    def get_categories(self) -> list[FAQCategory]:
        return list(self._document.categories)

    def get_category(self, category_id: str) -> FAQCategory | None:
        return self._categories.get(category_id)

    def get_category_questions(self, category_id: str) -> list[QuestionSummary]:
        category = self._categories.get(category_id)
        if category is None:
            return []
        return [QuestionSummary(id=q.id, question=q.question) for q in category.questions]

    def get_answer(self, question_id: str) -> Answer | None:
        return self._answers.get(question_id)

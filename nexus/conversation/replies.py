"""Reply builders for each state machine outcome."""

from nexus.content.models import Answer, FAQCategory, QuestionSummary
from nexus.content.provider import ContentProvider
from nexus.conversation.models import Reply, ReplyKind, ReplyOption

GENERIC_ERROR_TEXT = "Sorry, something went wrong. Please try again."
BLOCKED_TEXT = "Sorry, this message cannot be processed."


def _category_options(categories: list[FAQCategory]) -> list[ReplyOption]:
    return [ReplyOption(id=c.id, label=c.title) for c in categories]


def _numbered(labels: list[str]) -> str:
    return "\n".join(f"{i}. {label}" for i, label in enumerate(labels, start=1))


def welcome_reply(content: ContentProvider) -> Reply:
    categories = content.get_categories()
    text = content.welcome_text
    if categories:
        text = f"{text}\n\n{_numbered([c.title for c in categories])}"
    return Reply(
        kind=ReplyKind.WELCOME,
        text=text,
        options=_category_options(categories),
    )


def categories_reply(content: ContentProvider) -> Reply:
    categories = content.get_categories()
    return Reply(
        kind=ReplyKind.CATEGORIES,
        text=f"Please choose a topic:\n\n{_numbered([c.title for c in categories])}",
        options=_category_options(categories),
    )


def questions_reply(
    category: FAQCategory,
    questions: list[QuestionSummary],
    back_command: str,
) -> Reply:
    listing = _numbered([q.question for q in questions])
    return Reply(
        kind=ReplyKind.QUESTIONS,
        text=f"{category.title}\n\n{listing}\n\nType '{back_command}' to see all topics.",
        options=[ReplyOption(id=q.id, label=q.question) for q in questions],
        category=category.id,
        data={"questions": [q.model_dump() for q in questions]},
    )


def answer_reply(answer: Answer, content: ContentProvider, category: str | None) -> Reply:
    return Reply(
        kind=ReplyKind.ANSWER,
        text=f"{answer.question}\n\n{answer.answer}",
        category=category,
        data={
            "question": answer.question,
            "answer": answer.answer,
            "last_updated": content.last_updated.isoformat(),
        },
    )


def invalid_category_reply(content: ContentProvider) -> Reply:
    categories = content.get_categories()
    return Reply(
        kind=ReplyKind.ERROR,
        text="Sorry, I couldn't find that topic. Please pick one of these:",
        options=_category_options(categories),
        data={"reason": "unknown_category"},
    )


def invalid_question_reply(
    questions: list[QuestionSummary],
    category: str | None,
    back_command: str,
) -> Reply:
    return Reply(
        kind=ReplyKind.ERROR,
        text=(
            "Sorry, I couldn't find that question. Pick one below "
            f"or type '{back_command}' to see all topics."
        ),
        options=[ReplyOption(id=q.id, label=q.question) for q in questions],
        category=category,
        data={"reason": "unknown_question"},
    )


def generic_error_reply() -> Reply:
    return Reply(kind=ReplyKind.ERROR, text=GENERIC_ERROR_TEXT, data={"reason": "internal"})


def blocked_reply() -> Reply:
    return Reply(kind=ReplyKind.BLOCKED, text=BLOCKED_TEXT)

"""Enums for conversation domain."""

from enum import Enum


class Step(str, Enum):
    """Built-in conversation steps.

    Session.step is a plain string so additional steps can be registered
    on the state machine without extending this enum.
    """

    INIT = "init"
    CATEGORY = "category"
    QUESTION = "question"


class ReplyKind(str, Enum):
    """What a reply carries."""

    WELCOME = "welcome"
    CATEGORIES = "categories"
    QUESTIONS = "questions"
    ANSWER = "answer"
    ERROR = "error"
    BLOCKED = "blocked"

"""FAQ conversation state machine.

Steps and transitions:

    init      --any-------------------> category   welcome + category list
    category  --known category id-----> question   list that category's questions
    category  --unknown id------------> category   help reply
    question  --known question id-----> question   the answer
    question  --unknown id------------> question   help reply
    any       --back------------------> category   clear category, list categories

User input is untrusted: unknown ids never raise, they produce a help reply.
"""

import inspect
from collections.abc import Awaitable, Callable

from nexus.content.provider import ContentProvider
from nexus.conversation import replies
from nexus.conversation.models import Reply, Session, Step
from nexus.exceptions import StateMachineError
from nexus.observability.logging import get_logger

logger = get_logger(__name__)

StepHandler = Callable[[Session, str], Reply | Awaitable[Reply]]


class ConversationStateMachine:
    """Dispatches a message to the handler for the session's current step."""

    def __init__(
        self,
        content: ContentProvider,
        *,
        back_command: str = "back",
        reset_commands: list[str] | None = None,
    ) -> None:
        self._content = content
        self._back = back_command.strip().lower()
        self._reset = {c.strip().lower() for c in (reset_commands or [])}
        self._handlers: dict[str, StepHandler] = {
            Step.INIT.value: self._handle_init,
            Step.CATEGORY.value: self._handle_category,
            Step.QUESTION.value: self._handle_question,
        }

    @property
    def back_command(self) -> str:
        return self._back

    def register_step(self, step: str, handler: StepHandler) -> None:
        """Add or replace the handler for a step."""
        self._handlers[str(step)] = handler
        logger.info("step_handler_registered", step=str(step))

    def is_reset(self, message: str) -> bool:
        return message.strip().lower() in self._reset

    def is_back(self, message: str) -> bool:
        return message.strip().lower() == self._back

    async def step(self, session: Session, message: str) -> Reply:
        """Advance the session by one message.

        Raises:
            StateMachineError: If the session's step has no handler
        """
        text = message.strip()

        if self.is_back(text):
            session.step = Step.CATEGORY.value
            session.current_category = None
            session.data.pop("invalid_inputs", None)
            return replies.categories_reply(self._content)

        handler = self._handlers.get(session.step)
        if handler is None:
            raise StateMachineError(session.step)

        result = handler(session, text)
        if inspect.isawaitable(result):
            result = await result
        return result

    def _handle_init(self, session: Session, _message: str) -> Reply:
        session.step = Step.CATEGORY.value
        session.current_category = None
        return replies.welcome_reply(self._content)

    def _handle_category(self, session: Session, category_id: str) -> Reply:
        category = self._content.get_category(category_id)
        questions = self._content.get_category_questions(category_id)
        if category is None or not questions:
            self._count_invalid(session)
            logger.debug("unknown_category", category_id=category_id)
            return replies.invalid_category_reply(self._content)

        session.step = Step.QUESTION.value
        session.current_category = category.id
        session.data.pop("invalid_inputs", None)
        return replies.questions_reply(category, questions, self._back)

    def _handle_question(self, session: Session, question_id: str) -> Reply:
        answer = self._content.get_answer(question_id)
        if answer is None:
            self._count_invalid(session)
            logger.debug("unknown_question", question_id=question_id)
            questions = (
                self._content.get_category_questions(session.current_category)
                if session.current_category
                else []
            )
            return replies.invalid_question_reply(
                questions, session.current_category, self._back
            )

        session.data.pop("invalid_inputs", None)
        return replies.answer_reply(answer, self._content, session.current_category)

    @staticmethod
    def _count_invalid(session: Session) -> None:
        session.data["invalid_inputs"] = session.data.get("invalid_inputs", 0) + 1

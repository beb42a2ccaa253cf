"""Tests for ConversationStateMachine."""

import pytest

from nexus.conversation.models import Reply, ReplyKind, Session, Step
from nexus.conversation.state_machine import ConversationStateMachine
from nexus.exceptions import StateMachineError


@pytest.fixture
def machine(content) -> ConversationStateMachine:
    return ConversationStateMachine(
        content,
        back_command="back",
        reset_commands=["reset", "/start"],
    )


@pytest.fixture
def session() -> Session:
    return Session(user_key="facebook:u1", created_at=0, last_active_at=0)


class TestInit:
    @pytest.mark.asyncio
    async def test_any_message_welcomes(self, machine, session) -> None:
        """The first message moves to category and lists the categories."""
        reply = await machine.step(session, "xin chào")

        assert session.step == Step.CATEGORY.value
        assert reply.kind == ReplyKind.WELCOME
        assert [o.id for o in reply.options] == ["general", "products", "investment", "contact"]


class TestCategory:
    @pytest.mark.asyncio
    async def test_valid_category_lists_questions(self, machine, session) -> None:
        await machine.step(session, "hi")
        reply = await machine.step(session, "investment")

        assert session.step == Step.QUESTION.value
        assert session.current_category == "investment"
        assert reply.kind == ReplyKind.QUESTIONS
        assert [o.id for o in reply.options] == [
            "become-shareholder",
            "investment-benefits",
            "investment-notes",
        ]

    @pytest.mark.asyncio
    async def test_ids_trimmed(self, machine, session) -> None:
        await machine.step(session, "hi")
        await machine.step(session, "  products \n")
        assert session.current_category == "products"

    @pytest.mark.asyncio
    async def test_invalid_category_stays(self, machine, session) -> None:
        await machine.step(session, "hi")
        reply = await machine.step(session, "weather")

        assert session.step == Step.CATEGORY.value
        assert reply.kind == ReplyKind.ERROR
        assert reply.options
        assert session.data["invalid_inputs"] == 1

    @pytest.mark.asyncio
    async def test_empty_message_is_invalid_category(self, machine, session) -> None:
        await machine.step(session, "hi")
        reply = await machine.step(session, "")
        assert reply.kind == ReplyKind.ERROR


class TestQuestion:
    @pytest.mark.asyncio
    async def test_valid_question_answers(self, machine, session) -> None:
        await machine.step(session, "hi")
        await machine.step(session, "investment")
        reply = await machine.step(session, "become-shareholder")

        assert session.step == Step.QUESTION.value
        assert reply.kind == ReplyKind.ANSWER
        assert "XT.com" in reply.data["answer"]
        assert reply.data["last_updated"]

    @pytest.mark.asyncio
    async def test_question_ids_resolved_globally(self, machine, session) -> None:
        """A question from another category is still answered."""
        await machine.step(session, "hi")
        await machine.step(session, "investment")
        reply = await machine.step(session, "contact-info")

        assert reply.kind == ReplyKind.ANSWER
        assert session.current_category == "investment"

    @pytest.mark.asyncio
    async def test_invalid_question_keeps_step(self, machine, session) -> None:
        await machine.step(session, "hi")
        await machine.step(session, "investment")
        reply = await machine.step(session, "nonsense")

        assert session.step == Step.QUESTION.value
        assert session.current_category == "investment"
        assert reply.kind == ReplyKind.ERROR
        assert [o.id for o in reply.options][0] == "become-shareholder"

    @pytest.mark.asyncio
    async def test_valid_input_clears_invalid_counter(self, machine, session) -> None:
        await machine.step(session, "hi")
        await machine.step(session, "investment")
        await machine.step(session, "nope")
        await machine.step(session, "nope")
        assert session.data["invalid_inputs"] == 2

        await machine.step(session, "investment-notes")
        assert "invalid_inputs" not in session.data


class TestBack:
    @pytest.mark.asyncio
    async def test_back_returns_to_categories(self, machine, session) -> None:
        await machine.step(session, "hi")
        await machine.step(session, "investment")
        reply = await machine.step(session, "back")

        assert session.step == Step.CATEGORY.value
        assert session.current_category is None
        assert reply.kind == ReplyKind.CATEGORIES

    @pytest.mark.asyncio
    async def test_back_case_insensitive(self, machine, session) -> None:
        await machine.step(session, "hi")
        await machine.step(session, "investment")
        await machine.step(session, "  BACK ")
        assert session.step == Step.CATEGORY.value

    @pytest.mark.asyncio
    async def test_back_from_init(self, machine, session) -> None:
        reply = await machine.step(session, "back")
        assert session.step == Step.CATEGORY.value
        assert reply.kind == ReplyKind.CATEGORIES


class TestCommands:
    def test_is_reset(self, machine) -> None:
        assert machine.is_reset(" /START ")
        assert machine.is_reset("reset")
        assert not machine.is_reset("restart")


class TestCustomSteps:
    @pytest.mark.asyncio
    async def test_unknown_step_raises(self, machine, session) -> None:
        session.step = "survey"
        with pytest.raises(StateMachineError) as exc_info:
            await machine.step(session, "hi")
        assert exc_info.value.step == "survey"

    @pytest.mark.asyncio
    async def test_registered_sync_handler(self, machine, session) -> None:
        def survey(s: Session, message: str) -> Reply:
            s.data["rating"] = message
            s.step = Step.CATEGORY.value
            return Reply(kind=ReplyKind.ANSWER, text="thanks")

        machine.register_step("survey", survey)
        session.step = "survey"
        reply = await machine.step(session, "5")

        assert reply.text == "thanks"
        assert session.data["rating"] == "5"

    @pytest.mark.asyncio
    async def test_registered_async_handler(self, machine, session) -> None:
        async def survey(s: Session, message: str) -> Reply:
            return Reply(kind=ReplyKind.ANSWER, text=message.upper())

        machine.register_step("survey", survey)
        session.step = "survey"
        assert (await machine.step(session, "ok")).text == "OK"

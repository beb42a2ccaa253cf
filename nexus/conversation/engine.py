"""Conversation engine.

One turn:

1. Run pre-process plugins over the inbound data bag
2. Unless a pre-process plugin vetoed the turn, destroy the session if
   the message is a reset command
3. Lease the session (created lazily) and advance the state machine,
   again only when the turn was not vetoed
4. Run post-process plugins with an immutable session snapshot
5. Return a canonical response
"""

from typing import Any

from nexus.channels.models import CanonicalResponse, InboundEvent
from nexus.context.store import ContextStore
from nexus.conversation import replies
from nexus.conversation.manager import SessionManager
from nexus.conversation.models import Reply, session_key
from nexus.conversation.state_machine import ConversationStateMachine
from nexus.exceptions import StateMachineError
from nexus.observability.logging import get_logger
from nexus.observability.metrics import REPLIES
from nexus.plugins.models import DataBag, HookKind
from nexus.plugins.pipeline import PluginPipeline

logger = get_logger(__name__)


class ConversationEngine:
    """Drives a single inbound event through plugins and the state machine.

    The engine owns the session manager and context store for its lifetime.
    Plugins reach shared state only through the data bag: bag["context"] is
    the context store and, in post-process, bag["session"] is a snapshot.
    """

    def __init__(
        self,
        manager: SessionManager,
        context: ContextStore,
        pipeline: PluginPipeline,
        state_machine: ConversationStateMachine,
    ) -> None:
        self._manager = manager
        self._context = context
        self._pipeline = pipeline
        self._state_machine = state_machine

    @property
    def manager(self) -> SessionManager:
        return self._manager

    @property
    def context(self) -> ContextStore:
        return self._context

    @property
    def pipeline(self) -> PluginPipeline:
        return self._pipeline

    @property
    def state_machine(self) -> ConversationStateMachine:
        return self._state_machine

    async def handle(self, event: InboundEvent) -> CanonicalResponse:
        """Process one inbound event and produce the reply.

        State machine failures degrade to a generic error reply; the
        session stays usable for the next turn.
        """
        user_key = session_key(event.platform, event.user_id)

        bag: DataBag = {
            "platform": event.platform,
            "user_id": event.user_id,
            "message": event.message,
            "metadata": dict(event.metadata),
            "context": self._context,
        }
        bag = await self._pipeline.run(HookKind.PRE_PROCESS, bag)

        message = bag.get("message")
        if not isinstance(message, str):
            logger.warning(
                "pre_process_message_discarded",
                user_key=user_key,
                message_type=type(message).__name__,
            )
            message = event.message

        vetoed = bool(bag.get("veto"))
        if not vetoed and self._state_machine.is_reset(message):
            await self._manager.reset(user_key)

        async with self._manager.lease(user_key) as session:
            if vetoed:
                reply = self._veto_reply(bag.get("reply"))
                logger.info("turn_vetoed", user_key=user_key, step=session.step)
            else:
                try:
                    reply = await self._state_machine.step(session, message)
                except StateMachineError as e:
                    logger.error(
                        "state_machine_error",
                        user_key=user_key,
                        session_id=session.id,
                        step=e.step,
                        error=e.message,
                    )
                    reply = replies.generic_error_reply()
                self._manager.record_turn(session, message, reply)
            snapshot = self._manager.snapshot(session)

        post_bag: DataBag = {
            **bag,
            "message": message,
            "reply": reply,
            "session": snapshot,
        }
        post_bag = await self._pipeline.run(HookKind.POST_PROCESS, post_bag)
        reply = self._post_process_reply(post_bag.get("reply"), reply)

        REPLIES.labels(kind=reply.kind.value).inc()
        logger.debug(
            "turn_handled",
            user_key=user_key,
            session_id=snapshot.id,
            step=snapshot.step,
            reply_kind=reply.kind.value,
        )
        return CanonicalResponse(
            platform=event.platform,
            user_id=event.user_id,
            reply=reply,
            step=snapshot.step,
            session_id=snapshot.id,
            metadata=dict(event.metadata),
        )

    @staticmethod
    def _veto_reply(candidate: Any) -> Reply:
        if isinstance(candidate, Reply):
            return candidate
        return replies.blocked_reply()

    @staticmethod
    def _post_process_reply(candidate: Any, original: Reply) -> Reply:
        if isinstance(candidate, Reply):
            return candidate
        logger.warning(
            "post_process_reply_ignored",
            reply_type=type(candidate).__name__,
        )
        return original

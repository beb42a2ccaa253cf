"""Build the full Nexus stack from settings.

Wires content, stores, plugins, the conversation engine, the router, the
audit dispatcher and the sweeper. Used by the API dependencies and handy
for scripts and tests:

    from nexus.bootstrap import build_runtime

    runtime = build_runtime(get_settings())
    result = await runtime.router.route("facebook", payload)
"""

import time
from dataclasses import dataclass, field

from nexus import __version__
from nexus.audit import AuditDispatcher, AuditSink, LoggingAuditSink
from nexus.channels import PlatformGateway
from nexus.clock import Clock, monotonic
from nexus.config.models import PluginsConfig
from nexus.config.settings import Settings
from nexus.content import ContentProvider, StaticContentProvider, load_faq_document
from nexus.context import InMemoryContextStore
from nexus.conversation.engine import ConversationEngine
from nexus.conversation.manager import SessionManager
from nexus.conversation.state_machine import ConversationStateMachine
from nexus.conversation.stores import InMemorySessionStore
from nexus.conversation.sweeper import SweepScheduler
from nexus.observability.logging import get_logger
from nexus.plugins import PluginPipeline
from nexus.plugins.builtin import InquiryClassifierPlugin, MessageNormalizerPlugin
from nexus.routing import Router

logger = get_logger(__name__)


@dataclass
class Runtime:
    """Everything a running relay holds for its lifetime."""

    settings: Settings
    engine: ConversationEngine
    router: Router
    sweeper: SweepScheduler
    audit: AuditDispatcher
    started_at: float = field(default_factory=time.monotonic)

    @property
    def uptime_seconds(self) -> float:
        return time.monotonic() - self.started_at

    async def start(self) -> None:
        await self.sweeper.start()

    async def stop(self) -> None:
        await self.sweeper.stop()
        await self.audit.flush()


def register_builtin_plugins(pipeline: PluginPipeline, config: PluginsConfig) -> None:
    """Register enabled built-in plugins; the normalizer always runs first."""
    if config.normalizer_enabled:
        pipeline.register(MessageNormalizerPlugin(max_length=config.max_message_length))
    if config.classifier_enabled:
        pipeline.register(InquiryClassifierPlugin(ttl_seconds=config.analytics_ttl_seconds))


def build_engine(
    settings: Settings,
    *,
    content: ContentProvider | None = None,
    clock: Clock = monotonic,
) -> ConversationEngine:
    """Create a conversation engine with in-memory stores.

    Args:
        settings: Application settings
        content: FAQ content, loaded from settings.content when omitted
        clock: Monotonic clock shared by sessions and context entries

    Raises:
        ContentError: If the configured FAQ file cannot be loaded
    """
    conversation = settings.conversation
    if content is None:
        content = StaticContentProvider(load_faq_document(settings.content.faq_path))

    manager = SessionManager(
        InMemorySessionStore(),
        timeout_seconds=conversation.session_timeout_seconds,
        history_max_length=conversation.history_max_length,
        clock=clock,
    )
    context = InMemoryContextStore(
        default_ttl_seconds=conversation.context_default_ttl_seconds,
        clock=clock,
    )
    pipeline = PluginPipeline()
    register_builtin_plugins(pipeline, settings.plugins)

    state_machine = ConversationStateMachine(
        content,
        back_command=conversation.back_command,
        reset_commands=conversation.reset_commands,
    )
    return ConversationEngine(manager, context, pipeline, state_machine)


def build_runtime(
    settings: Settings,
    *,
    content: ContentProvider | None = None,
    audit_sink: AuditSink | None = None,
    clock: Clock = monotonic,
) -> Runtime:
    """Create the engine, router, audit dispatcher and sweeper."""
    engine = build_engine(settings, content=content, clock=clock)
    audit = AuditDispatcher(audit_sink or LoggingAuditSink())
    router = Router(
        PlatformGateway(),
        engine,
        allowed_platforms=settings.platforms.allowed,
        audit=audit,
    )
    sweeper = SweepScheduler(
        engine.manager,
        engine.context,
        interval_seconds=settings.conversation.sweep_interval_seconds,
    )

    logger.info(
        "runtime_built",
        version=__version__,
        environment=settings.environment,
        platforms=sorted(router.allowed_platforms),
        plugins=engine.pipeline.names,
    )
    return Runtime(
        settings=settings,
        engine=engine,
        router=router,
        sweeper=sweeper,
        audit=audit,
    )

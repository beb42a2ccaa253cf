"""Tests for PluginPipeline."""

from typing import Any

import pytest
from prometheus_client import REGISTRY

from nexus.context import InMemoryContextStore
from nexus.plugins import HookKind, PluginPipeline


class FakePlugin:
    def __init__(self, name: str, hooks: Any = None, execute: Any = None) -> None:
        self.name = name
        self.hooks = {HookKind.PRE_PROCESS} if hooks is None else hooks
        if execute is not None:
            self.execute = execute

    def execute(self, hook: HookKind, bag: dict[str, Any]) -> dict[str, Any]:
        return bag


@pytest.fixture
def pipeline() -> PluginPipeline:
    return PluginPipeline()


class TestRegistration:
    def test_valid_plugin_registered(self, pipeline) -> None:
        assert pipeline.register(FakePlugin("a")) is True
        assert pipeline.names == ["a"]

    def test_hook_names_accepted_as_strings(self, pipeline) -> None:
        assert pipeline.register(FakePlugin("a", hooks=["pre-process", "post-process"]))
        assert pipeline.plugins_for(HookKind.POST_PROCESS) == ["a"]

    def test_duplicate_name_rejected(self, pipeline) -> None:
        pipeline.register(FakePlugin("a"))
        assert pipeline.register(FakePlugin("a")) is False
        assert pipeline.names == ["a"]

    @pytest.mark.parametrize(
        "plugin",
        [
            FakePlugin(""),
            FakePlugin("   "),
            FakePlugin("a", hooks=set()),
            FakePlugin("a", hooks="pre-process"),
            FakePlugin("a", hooks={"during-process"}),
            FakePlugin("a", hooks=None, execute="not callable"),
            object(),
        ],
    )
    def test_malformed_plugin_rejected(self, pipeline, plugin) -> None:
        """Rejected plugins are logged, never raised, and never run."""
        assert pipeline.register(plugin) is False
        assert pipeline.names == []

    def test_missing_name_rejected(self, pipeline) -> None:
        class NoName:
            hooks = {HookKind.PRE_PROCESS}

            def execute(self, hook, bag):
                return bag

        assert pipeline.register(NoName()) is False


class TestRun:
    @pytest.mark.asyncio
    async def test_registration_order(self, pipeline) -> None:
        def append(tag: str):
            def _execute(hook, bag):
                bag["order"] = [*bag.get("order", []), tag]
                return bag

            return _execute

        for tag in ["first", "second", "third"]:
            pipeline.register(FakePlugin(tag, execute=append(tag)))

        bag = await pipeline.run(HookKind.PRE_PROCESS, {})
        assert bag["order"] == ["first", "second", "third"]

    @pytest.mark.asyncio
    async def test_only_declared_hooks_run(self, pipeline) -> None:
        calls: list[str] = []

        def record(hook, bag):
            calls.append(hook.value)
            return bag

        pipeline.register(FakePlugin("post", hooks={HookKind.POST_PROCESS}, execute=record))

        await pipeline.run(HookKind.PRE_PROCESS, {})
        assert calls == []
        await pipeline.run(HookKind.POST_PROCESS, {})
        assert calls == ["post-process"]

    @pytest.mark.asyncio
    async def test_failing_plugin_skipped_with_prior_bag(self, pipeline) -> None:
        """When A raises, B runs with the bag as it stood before A."""
        seen_by_b: list[dict[str, Any]] = []

        def plugin_a(hook, bag):
            bag["message"] = "mutated by A"
            bag["tags"].append("A")
            raise RuntimeError("A failed")

        def plugin_b(hook, bag):
            seen_by_b.append(dict(bag))
            bag["b_ran"] = True
            return bag

        pipeline.register(FakePlugin("A", execute=plugin_a))
        pipeline.register(FakePlugin("B", execute=plugin_b))
        failures_before = (
            REGISTRY.get_sample_value(
                "nexus_plugin_failures_total", {"plugin": "A", "hook": "pre-process"}
            )
            or 0.0
        )

        original = {"message": "hello", "tags": []}
        result = await pipeline.run(HookKind.PRE_PROCESS, original)

        assert seen_by_b == [{"message": "hello", "tags": []}]
        assert result == {"message": "hello", "tags": [], "b_ran": True}
        assert original == {"message": "hello", "tags": []}
        assert (
            REGISTRY.get_sample_value(
                "nexus_plugin_failures_total", {"plugin": "A", "hook": "pre-process"}
            )
            == failures_before + 1
        )

    @pytest.mark.asyncio
    async def test_non_mapping_result_skipped(self, pipeline) -> None:
        pipeline.register(FakePlugin("bad", execute=lambda hook, bag: None))
        pipeline.register(FakePlugin("good", execute=lambda hook, bag: {**bag, "ok": True}))

        result = await pipeline.run(HookKind.PRE_PROCESS, {"message": "hi"})
        assert result == {"message": "hi", "ok": True}

    @pytest.mark.asyncio
    async def test_async_plugins_awaited(self, pipeline) -> None:
        async def execute(hook, bag):
            bag["async"] = True
            return bag

        pipeline.register(FakePlugin("async", execute=execute))
        assert (await pipeline.run(HookKind.PRE_PROCESS, {}))["async"] is True

    @pytest.mark.asyncio
    async def test_context_shared_by_reference(self, pipeline) -> None:
        """Shared handles are not copied between attempts."""
        context = InMemoryContextStore()
        seen: list[Any] = []

        def execute(hook, bag):
            seen.append(bag["context"])
            return bag

        pipeline.register(FakePlugin("a", execute=execute))
        result = await pipeline.run(HookKind.PRE_PROCESS, {"context": context})

        assert seen[0] is context
        assert result["context"] is context

    @pytest.mark.asyncio
    async def test_empty_pipeline_returns_bag(self, pipeline) -> None:
        bag = {"message": "hi"}
        assert await pipeline.run(HookKind.PRE_PROCESS, bag) == bag

# tests/core/test_deploy_context.py
"""
Testes de logging estruturado e coleta de warnings no DeployContext.
"""

from cilium_addon.core.deploy_context import DeployContext


def test_log_records_structured_event(ctx: DeployContext):
    ctx.log(stage="merge", level="INFO", message="values merged", overridden_paths=["tunnel"])
    assert len(ctx.events) == 1
    event = ctx.events[0]
    assert event["deploy_id"] == "deploy-test"
    assert event["stage"] == "merge"
    assert event["level"] == "INFO"
    assert event["message"] == "values merged"
    assert event["overridden_paths"] == ["tunnel"]
    assert "timestamp" in event


def test_warnings_are_grouped_by_stage(ctx: DeployContext):
    ctx.add_warning(stage="overlay", message="w1")
    ctx.add_warning(stage="overlay", message="w2")
    ctx.add_warning(stage="merge", message="w3")
    assert ctx.warnings == {"overlay": ["w1", "w2"], "merge": ["w3"]}


def test_new_contexts_are_isolated():
    a = DeployContext.new()
    b = DeployContext.new()
    assert a.deploy_id != b.deploy_id
    a.log(stage="install", level="INFO", message="x")
    assert b.events == []
    assert a.events_for("install")[0]["message"] == "x"

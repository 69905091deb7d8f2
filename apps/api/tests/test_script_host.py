import pytest

from packages.common.models import ScriptStatus
from packages.common.store import RunStore
from packages.flows import registry
from packages.flows.registry import UnknownScriptError, get_script, list_scripts
from packages.tools.script_host import ScriptHost


@pytest.fixture
def run_store(tmp_path) -> RunStore:
    return RunStore(runs_dir=tmp_path / "runs")


def test_registry_lists_discover_items() -> None:
    names = [info.name for info in list_scripts()]
    assert "discover_items" in names
    info = next(info for info in list_scripts() if info.name == "discover_items")
    assert info.description.startswith("Publish the highest visible item index")


def test_registry_lookup_is_case_insensitive() -> None:
    assert get_script("Discover_Items") is registry.SCRIPTS["discover_items"]


def test_unknown_script_raises() -> None:
    with pytest.raises(UnknownScriptError) as exc_info:
        get_script("count_everything")
    assert exc_info.value.name == "count_everything"
    assert "count_everything" in str(exc_info.value)


def test_run_populates_fresh_sink(run_store, capsys) -> None:
    host = ScriptHost(run_store, persist=False)
    result = host.run("discover_items")

    assert result.status == ScriptStatus.COMPLETED
    assert result.error is None
    assert result.output == {
        "maxItemIndex": 20,
        "hasFirstItem": True,
        "hasMiddleItems": True,
        "hasLastItems": True,
    }
    assert result.logs == ["Discovered 21 items"]
    assert "Discovered 21 items" in capsys.readouterr().out
    assert not run_store.state_path(result.run_id).exists()


def test_run_does_not_mutate_caller_sink(run_store) -> None:
    initial = {"flowName": "todo_list"}
    result = ScriptHost(run_store, persist=False).run("discover_items", output=initial)

    assert initial == {"flowName": "todo_list"}
    assert result.output["flowName"] == "todo_list"
    assert result.output["maxItemIndex"] == 20


def test_persisted_run_writes_state_and_events(run_store) -> None:
    host = ScriptHost(run_store, persist=True)
    result = host.run("discover_items")

    stored = run_store.load_result(result.run_id)
    assert stored.output == result.output
    assert stored.logs == ["Discovered 21 items"]

    events = run_store.read_log(result.run_id)
    assert [event["action"] for event in events] == ["console_log", "script_end"]
    assert events[0]["message"] == "Discovered 21 items"
    assert events[1]["outcome"] == "completed"
    assert run_store.list_results(script="discover_items")[0].run_id == result.run_id


def test_script_failure_is_reported_not_raised(run_store, monkeypatch) -> None:
    def broken(output, console) -> None:
        raise RuntimeError("screen not reachable")

    monkeypatch.setitem(registry.SCRIPTS, "broken", broken)
    result = ScriptHost(run_store, persist=True).run("broken")

    assert result.status == ScriptStatus.FAILED
    assert result.error == "screen not reachable"
    assert run_store.read_log(result.run_id)[-1]["error"] == "screen not reachable"


def test_invalid_output_fails_validation(run_store, monkeypatch) -> None:
    def half_done(output, console) -> None:
        output["maxItemIndex"] = 20

    monkeypatch.setitem(registry.SCRIPTS, "discover_items", half_done)
    result = ScriptHost(run_store, persist=False).run("discover_items")

    assert result.status == ScriptStatus.FAILED
    assert "missing required fields" in (result.error or "")


def test_read_log_for_unknown_run(run_store) -> None:
    with pytest.raises(FileNotFoundError):
        run_store.read_log("run_missing")

from contextlib import contextmanager
from types import SimpleNamespace
from typing import Iterator

import pytest

from undo_engine.runtime import telemetry
from undo_engine.runtime.config import HistoryConfig, SavePolicy


def test_from_env_defaults_to_append(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("UNDO_ENGINE_SAVE_POLICY", raising=False)

    assert HistoryConfig.from_env().save_policy is SavePolicy.APPEND


def test_from_env_reads_policy_case_insensitively(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("UNDO_ENGINE_SAVE_POLICY", " Truncate ")

    assert HistoryConfig.from_env().save_policy is SavePolicy.TRUNCATE


def test_from_env_rejects_unknown_policy(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UNDO_ENGINE_SAVE_POLICY", "branch")

    with pytest.raises(ValueError, match="branch"):
        HistoryConfig.from_env()


def test_env_flag_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UNDO_ENGINE_LOG_JSON", "yes")
    monkeypatch.setenv("UNDO_ENGINE_NO_COLOR", "0")

    assert telemetry.env_flag("LOG_JSON", False) is True
    assert telemetry.env_flag("NO_COLOR", True) is False
    assert telemetry.env_flag("MISSING_FLAG", True) is True


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError, match="not both"):
        telemetry.configure(config=object(), preset="development")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError, match="Unknown preset"):
        telemetry.configure(preset="verbose")


class FakeLogger:
    def __init__(self, name: str, config: object) -> None:
        self.name = name
        self.config = config
        self.lines: list[tuple[str, str, dict[str, str]]] = []
        self.context: dict[str, str] = {}
        self.profiled: list[str] = []
        self.components: list[str] = []

    @classmethod
    def with_config(cls, name: str, config: object) -> "FakeLogger":
        return cls(name, config)

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        del self.context[key]

    @contextmanager
    def profile(self, name: str) -> Iterator[None]:
        self.profiled.append(name)
        yield

    @contextmanager
    def track_component(self, name: str) -> Iterator[None]:
        self.components.append(name)
        yield

    def info_with(self, message: str, pairs: list[tuple[str, str]]) -> None:
        self.lines.append(("info", message, dict(pairs)))

    def error_with(self, message: str, pairs: list[tuple[str, str]]) -> None:
        self.lines.append(("error", message, dict(pairs)))


class FakeConfig:
    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[object, ...]]] = []

    def __getattr__(self, name: str):
        if not name.startswith("with_"):
            raise AttributeError(name)
        return lambda *args: self.calls.append((name, args))


@pytest.fixture
def fake_telelog(monkeypatch: pytest.MonkeyPatch) -> SimpleNamespace:
    module = SimpleNamespace(Config=FakeConfig, Logger=FakeLogger)
    monkeypatch.setattr(telemetry, "tl", module)
    monkeypatch.setattr(telemetry, "_ACTIVE_CONFIG", None)
    monkeypatch.setattr(telemetry, "_LOGGER_CACHE", {})
    return module


def test_configure_development_preset(fake_telelog: SimpleNamespace) -> None:
    telemetry.configure(preset="development")

    logger = telemetry.get_logger()

    assert logger.name == "undo_engine"
    assert ("with_min_level", ("DEBUG",)) in logger.config.calls
    assert ("with_profiling", (True,)) in logger.config.calls
    assert telemetry.get_logger() is logger


def test_record_event_uses_named_logger(fake_telelog: SimpleNamespace) -> None:
    telemetry.record_event(
        "textual.adapter", data={"line": "save ->"}, logger_name="ui"
    )

    logger = telemetry.get_logger("ui")
    assert logger.lines == [
        (
            "info",
            "event::textual.adapter",
            {"event": "textual.adapter", "line": "save ->"},
        )
    ]
    assert telemetry.get_logger().lines == []


def test_span_reports_failure_and_reraises(fake_telelog: SimpleNamespace) -> None:
    with pytest.raises(KeyError):
        with telemetry.span("history::save", component=True, metadata={"k": 1}):
            raise KeyError("missing")

    logger = telemetry.get_logger()
    level, message, payload = logger.lines[-1]
    assert (level, message) == ("error", "span::fail")
    assert payload["span"] == "history::save"
    assert payload["component"] == "history::save"
    assert payload["k"] == "1"
    assert "missing" in payload["reason"]
    assert logger.context == {}


def test_span_pushes_metadata_as_context(fake_telelog: SimpleNamespace) -> None:
    with telemetry.span(
        "history::undo", component="history", metadata={"v": 3}
    ) as handle:
        logger = telemetry.get_logger()
        assert logger.context == {"v": "3"}
        handle.add_metadata("cursor", 0)

    assert handle.metadata == {"v": "3", "cursor": "0"}
    assert logger.components == ["history"]
    assert logger.profiled == ["history::undo"]
    assert logger.context == {}
    assert logger.lines == []


def test_parse_save_policy_lists_choices_on_error() -> None:
    assert SavePolicy.parse("APPEND") is SavePolicy.APPEND

    with pytest.raises(ValueError, match="append, truncate"):
        SavePolicy.parse("branch")

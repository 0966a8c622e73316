"""Tests for the application facade, configuration and logging helpers."""

from pathlib import Path
import json
import logging
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.validation import GenerateOutfitsResponse
from memory.history_log import GenerationHistory
from models.sample_wardrobe import SAMPLE_ITEMS, build_sample_wardrobe
from stylist_app.app import (
    EMPTY_CATALOG_MESSAGE,
    MISSING_OCCASION_MESSAGE,
    NO_OUTFITS_MESSAGE,
    OutfitStylistApp,
)
from stylist_app.config import StylistConfig
from stylist_app.logging_config import (
    CORRELATION_ID,
    JsonFormatter,
    correlation_context,
    redact_for_log,
)


def _build_app(**config) -> OutfitStylistApp:
    return OutfitStylistApp(config=StylistConfig(**config), history=GenerationHistory())


def test_generate_records_history() -> None:
    app = _build_app()

    response = app.generate("user-1", build_sample_wardrobe("user-1"), "casual")

    assert response["status"] == "ok"
    assert len(response["outfits"]) == 10
    assert response["message"] == "Generated 10 outfit(s) for casual"
    assert response["summary"]["outfit_count"] == 10
    [summary] = app.history_for("user-1")
    assert summary.occasion == "casual"


def test_default_max_outfits_comes_from_config() -> None:
    app = _build_app(default_max_outfits=2)

    response = app.generate("user-1", build_sample_wardrobe(), "casual")

    assert len(response["outfits"]) == 2


def test_no_outfits_is_not_an_error_and_is_not_logged_to_history() -> None:
    app = _build_app()

    response = app.generate("user-1", build_sample_wardrobe(), "party")

    assert response["status"] == "ok"
    assert response["outfits"] == []
    assert response["message"] == NO_OUTFITS_MESSAGE
    assert app.history_for("user-1") == []


@pytest.mark.parametrize(
    "occasion, items, message",
    [
        ("", build_sample_wardrobe(), MISSING_OCCASION_MESSAGE),
        ("   ", build_sample_wardrobe(), MISSING_OCCASION_MESSAGE),
        ("casual", [], EMPTY_CATALOG_MESSAGE),
    ],
)
def test_generate_rejects_missing_inputs(occasion, items, message) -> None:
    response = _build_app().generate("user-1", items, occasion)

    assert response["status"] == "error"
    assert response["message"] == message


def test_generate_from_payload_validates() -> None:
    app = _build_app()

    ok = app.generate_from_payload(user_id="user-1", occasion="formal", items=SAMPLE_ITEMS)
    bad = app.generate_from_payload(
        user_id="user-1", occasion="formal", items=[{**SAMPLE_ITEMS[0], "primary_color": "white"}]
    )

    assert ok["status"] == "ok"
    assert len(ok["outfits"]) == 1
    assert ok["outfits"][0]["layer"]["item_id"] == "blazer-navy"
    assert bad["status"] == "needs_review"
    assert bad["details"]


def test_responses_follow_the_response_schema() -> None:
    app = _build_app()

    found = app.generate("user-1", build_sample_wardrobe("user-1"), "formal")
    rejected = app.generate("user-1", [], "formal")

    summary = GenerateOutfitsResponse.model_validate(found).summary
    assert summary.history_id == app.history_for("user-1")[0].history_id
    assert rejected["outfits"] == []
    assert rejected["summary"] is None
    assert GenerateOutfitsResponse.model_validate(rejected).status == "error"


class _RecordingHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def recorded_events():
    handler = _RecordingHandler()
    logger = logging.getLogger("tools.observability")
    logger.addHandler(handler)
    try:
        yield handler.records
    finally:
        logger.removeHandler(handler)


def test_generate_logs_catalog_summary_without_items(recorded_events) -> None:
    app = _build_app()
    app.generate("user-1", build_sample_wardrobe("user-1"), "casual", max_outfits=3)

    started, completed = recorded_events
    assert (started.event, completed.event) == ("operation_started", "operation_completed")
    assert started.operation == "generate"
    assert (started.occasion, started.catalog_size, started.max_outfits) == ("casual", 11, 3)
    assert (completed.status, completed.outfit_count) == ("ok", 3)
    assert completed.best_score > 0
    for record in recorded_events:
        line = JsonFormatter().format(record)
        assert "shirt-white" not in line
        assert "user-1" not in line


def test_payload_validation_failure_is_logged_by_field(recorded_events) -> None:
    app = _build_app()
    app.generate_from_payload("user-1", "casual", [{**SAMPLE_ITEMS[0], "primary_color": "white"}])

    [failure] = recorded_events
    assert failure.event == "operation_validation_failed"
    assert failure.catalog_size == 1
    assert [error["loc"] for error in failure.errors] == ["items.0.primary_color"]


def test_config_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    config_file = tmp_path / "staging.yaml"
    config_file.write_text("# staging\ndefault_max_outfits: 5\nhistory_limit: '7'\nlog_level: debug\n")
    monkeypatch.setenv("APP_ENV", "staging")
    monkeypatch.setenv("STYLIST_CONFIG_DIR", str(tmp_path))
    monkeypatch.delenv("APP_CONFIG_PATH", raising=False)
    monkeypatch.delenv("DEFAULT_MAX_OUTFITS", raising=False)
    monkeypatch.delenv("HISTORY_LIMIT", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "warning")

    config = StylistConfig.from_env()

    assert config.default_max_outfits == 5
    assert config.history_limit == 7
    assert config.log_level == "WARNING"
    assert config.environment == "staging"


def test_config_defaults_ignore_bad_numbers(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("APP_ENV", "APP_CONFIG_PATH", "LOG_LEVEL", "HISTORY_LIMIT"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("DEFAULT_MAX_OUTFITS", "lots")

    config = StylistConfig.from_env()

    assert config.default_max_outfits == 10
    assert config.history_limit == 50
    assert config.log_level == "INFO"


def test_redaction_scrubs_user_data() -> None:
    payload = {"user_id": "u-1", "note": "mail me at a@b.com", "nested": [{"items": [1, 2]}], "count": 3}

    assert redact_for_log(payload) == {
        "user_id": "[redacted]",
        "note": "mail me at [redacted-email]",
        "nested": [{"items": "[redacted]"}],
        "count": 3,
    }


def test_json_formatter_includes_correlation_and_extras() -> None:
    record = logging.LogRecord("stylist", logging.INFO, __file__, 1, "outfits_generated", None, None)
    record.event = "outfits_generated"
    record.user_id = "u-1"
    record.outfit_count = 4

    with correlation_context("abc123"):
        payload = json.loads(JsonFormatter().format(record))

    assert payload["correlation_id"] == "abc123"
    assert payload["event"] == "outfits_generated"
    assert payload["user_id"] == "[redacted]"
    assert payload["outfit_count"] == 4
    assert CORRELATION_ID.get() != "abc123"

"""Unit tests for the generation history log."""

from pathlib import Path
import sys
import threading

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from memory.history_log import GenerationHistory


def test_history_records_summaries_in_order() -> None:
    history = GenerationHistory()
    history.record("user-1", "casual", 10)
    history.record("user-1", "formal", 1)
    history.record("user-2", "party", 3)

    entries = history.list_for_user("user-1")

    assert [entry.occasion for entry in entries] == ["casual", "formal"]
    assert entries[0].outfit_count == 10
    assert entries[0].timestamp
    assert entries[0].history_id != entries[1].history_id
    assert history.count("user-2") == 1
    assert history.list_for_user("nobody") == []


def test_history_is_bounded_per_user() -> None:
    history = GenerationHistory(limit=2)
    for occasion in ("casual", "work", "formal"):
        history.record("user-1", occasion, 1)

    assert [entry.occasion for entry in history.list_for_user("user-1")] == ["work", "formal"]
    assert [entry.occasion for entry in history.list_for_user("user-1", limit=1)] == ["formal"]
    assert history.list_for_user("user-1", limit=0) == []


def test_history_clear_and_invalid_limit() -> None:
    history = GenerationHistory()
    history.record("user-1", "casual", 2)
    history.clear("user-1")
    assert history.count("user-1") == 0

    with pytest.raises(ValueError):
        GenerationHistory(limit=0)


def test_history_concurrent_records() -> None:
    history = GenerationHistory(limit=1000)

    def worker() -> None:
        for _ in range(50):
            history.record("user-1", "casual", 1)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert history.count("user-1") == 400


def test_summary_to_dict_is_opaque() -> None:
    summary = GenerationHistory().record("user-1", "work", 4)
    assert set(summary.to_dict()) == {"user_id", "occasion", "outfit_count", "timestamp", "history_id"}

"""Tests for UsageLog model and UsageStore."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from jobboard_ai.logging.models import UsageLog
from jobboard_ai.logging.usage_store import UsageStore
from jobboard_ai.operations import Operation


class TestUsageLog:
    def test_create_minimal(self):
        log = UsageLog(operation=Operation.RESUME)
        assert log.user_id == "anonymous"
        assert log.success is True
        assert log.defaulted_fields == []
        assert log.id

    def test_operation_from_string(self):
        log = UsageLog(operation="ats_analysis")
        assert log.operation is Operation.ATS_ANALYSIS

    def test_unique_ids(self):
        a = UsageLog(operation=Operation.RESUME)
        b = UsageLog(operation=Operation.RESUME)
        assert a.id != b.id

    def test_timestamp_auto(self):
        before = datetime.now()
        log = UsageLog(operation=Operation.RESUME)
        after = datetime.now()
        assert before <= log.timestamp <= after


@pytest.fixture
def store(tmp_path: Path) -> UsageStore:
    return UsageStore(db_path=tmp_path / "test_usage.db")


class TestUsageStore:
    def test_save_and_get(self, store: UsageStore):
        log = UsageLog(
            operation=Operation.ATS_ANALYSIS,
            user_id="u1",
            model="claude-sonnet-4-5-20250929",
            defaulted_fields=["score", "sectionsAnalysis.skills"],
        )
        store.save_log(log)
        [loaded] = store.get_logs()
        assert loaded.id == log.id
        assert loaded.operation is Operation.ATS_ANALYSIS
        assert loaded.defaulted_fields == ["score", "sectionsAnalysis.skills"]

    def test_filters(self, store: UsageStore):
        store.save_log(UsageLog(operation=Operation.RESUME, user_id="u1"))
        store.save_log(UsageLog(operation=Operation.COVER_LETTER, user_id="u2"))
        store.save_log(UsageLog(operation=Operation.COVER_LETTER, user_id="u1"))

        assert len(store.get_logs(user_id="u1")) == 2
        assert len(store.get_logs(operation=Operation.COVER_LETTER)) == 2
        assert len(store.get_logs(user_id="u1", operation=Operation.RESUME)) == 1

    def test_get_logs_limit(self, store: UsageStore):
        for _ in range(10):
            store.save_log(UsageLog(operation=Operation.RESUME))
        assert len(store.get_logs(limit=3)) == 3

    def test_get_logs_empty(self, store: UsageStore):
        assert store.get_logs() == []

    def test_monthly_stats(self, store: UsageStore):
        store.save_log(UsageLog(
            operation=Operation.COVER_LETTER,
            input_tokens=1000,
            output_tokens=500,
            estimated_cost_usd=0.01,
        ))
        store.save_log(UsageLog(
            operation=Operation.ATS_ANALYSIS,
            input_tokens=2000,
            output_tokens=300,
            estimated_cost_usd=0.02,
            defaulted_fields=["score"],
        ))
        store.save_log(UsageLog(operation=Operation.RESUME, success=False, error_message="timeout"))

        stats = store.get_monthly_stats()
        assert stats["total_calls"] == 3
        assert stats["total_input_tokens"] == 3000
        assert stats["total_output_tokens"] == 800
        assert stats["total_cost_usd"] == pytest.approx(0.03)
        assert stats["success_rate"] == pytest.approx(200 / 3)
        assert stats["degraded_analyses"] == 1
        assert stats["month"] == datetime.now().strftime("%Y-%m")

    def test_monthly_stats_empty(self, store: UsageStore):
        stats = store.get_monthly_stats()
        assert stats["total_calls"] == 0
        assert stats["success_rate"] == 0.0

"""SQLite-backed usage log storage."""

from __future__ import annotations

import json
import sqlite3
from datetime import datetime
from pathlib import Path

from jobboard_ai.logging.models import UsageLog
from jobboard_ai.operations import Operation

DEFAULT_DB_PATH = Path.home() / ".jobboard-ai" / "usage.db"


class UsageStore:
    """SQLite-backed store for AI operation usage logs with WAL mode."""

    def __init__(self, db_path: str | Path = DEFAULT_DB_PATH):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path))
        conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS usage_logs (
                    id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL,
                    timestamp TEXT NOT NULL,
                    operation TEXT NOT NULL,
                    model TEXT,
                    elapsed_seconds REAL NOT NULL DEFAULT 0.0,
                    input_tokens INTEGER NOT NULL DEFAULT 0,
                    output_tokens INTEGER NOT NULL DEFAULT 0,
                    estimated_cost_usd REAL NOT NULL DEFAULT 0.0,
                    success INTEGER NOT NULL DEFAULT 1,
                    error_message TEXT,
                    defaulted_fields TEXT NOT NULL DEFAULT '[]'
                )
            """)

    def save_log(self, log: UsageLog) -> None:
        """Persist a usage log entry."""
        with self._connect() as conn:
            conn.execute(
                """INSERT OR REPLACE INTO usage_logs
                   (id, user_id, timestamp, operation, model, elapsed_seconds,
                    input_tokens, output_tokens, estimated_cost_usd, success,
                    error_message, defaulted_fields)
                   VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
                (
                    log.id,
                    log.user_id,
                    log.timestamp.isoformat(),
                    log.operation.value,
                    log.model,
                    log.elapsed_seconds,
                    log.input_tokens,
                    log.output_tokens,
                    log.estimated_cost_usd,
                    1 if log.success else 0,
                    log.error_message,
                    json.dumps(log.defaulted_fields),
                ),
            )

    def get_logs(
        self,
        user_id: str | None = None,
        operation: Operation | None = None,
        limit: int = 50,
    ) -> list[UsageLog]:
        """Retrieve usage logs, newest first, optionally filtered."""
        clauses: list[str] = []
        params: list = []
        if user_id is not None:
            clauses.append("user_id = ?")
            params.append(user_id)
        if operation is not None:
            clauses.append("operation = ?")
            params.append(operation.value)
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        with self._connect() as conn:
            rows = conn.execute(
                f"SELECT * FROM usage_logs {where} ORDER BY timestamp DESC LIMIT ?",
                (*params, limit),
            ).fetchall()
        return [self._row_to_log(row) for row in rows]

    def get_monthly_stats(self) -> dict:
        """Get aggregated stats for the current month."""
        now = datetime.now()
        month_start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        with self._connect() as conn:
            row = conn.execute(
                """SELECT
                       COUNT(*) as total_calls,
                       SUM(input_tokens) as total_input,
                       SUM(output_tokens) as total_output,
                       SUM(estimated_cost_usd) as total_cost,
                       SUM(CASE WHEN success = 1 THEN 1 ELSE 0 END) as success_count,
                       SUM(CASE WHEN defaulted_fields != '[]' THEN 1 ELSE 0 END) as degraded
                   FROM usage_logs
                   WHERE timestamp >= ?""",
                (month_start.isoformat(),),
            ).fetchone()
        return {
            "total_calls": row[0] or 0,
            "total_input_tokens": row[1] or 0,
            "total_output_tokens": row[2] or 0,
            "total_cost_usd": row[3] or 0.0,
            "success_rate": (row[4] / row[0] * 100) if row[0] else 0.0,
            "degraded_analyses": row[5] or 0,
            "month": now.strftime("%Y-%m"),
        }

    @staticmethod
    def _row_to_log(row: tuple) -> UsageLog:
        return UsageLog(
            id=row[0],
            user_id=row[1],
            timestamp=datetime.fromisoformat(row[2]),
            operation=Operation(row[3]),
            model=row[4],
            elapsed_seconds=row[5],
            input_tokens=row[6],
            output_tokens=row[7],
            estimated_cost_usd=row[8],
            success=bool(row[9]),
            error_message=row[10],
            defaulted_fields=json.loads(row[11]),
        )

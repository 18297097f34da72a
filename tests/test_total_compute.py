import sqlite3
import time
from datetime import datetime, timedelta, timezone

import pytest

from cocompute.total_compute import TotalComputeCache, humanize_ms


# ── humanize_ms ───────────────────────────────────────────────────


def test_humanize_zero():
    assert humanize_ms(0) == "0 seconds"
    assert humanize_ms(-5) == "0 seconds"


def test_humanize_seconds():
    assert humanize_ms(45_000) == "45 seconds"


def test_humanize_minutes():
    assert humanize_ms(150_000) == "2.5 minutes"


def test_humanize_hours():
    assert humanize_ms(9_000_000) == "2.5 hours"


def test_humanize_days():
    assert humanize_ms(259_200_000) == "3.0 days"


def test_humanize_boundary_rolls_up():
    assert humanize_ms(36 * 3600 * 1000) == "1.5 days"
    assert humanize_ms(90 * 60 * 1000) == "1.5 hours"


# ── Cache behaviour ───────────────────────────────────────────────


@pytest.fixture
def db(tmp_path):
    conn = sqlite3.connect(str(tmp_path / "test.db"))
    conn.execute(
        """
        CREATE TABLE metering_logs (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            host_endpoint_id TEXT NOT NULL,
            model TEXT NOT NULL,
            request_type TEXT NOT NULL,
            prompt_tokens INTEGER NOT NULL,
            completion_tokens INTEGER NOT NULL,
            compute_ms INTEGER NOT NULL,
            total_ms INTEGER,
            iroh_rtt_ms INTEGER,
            created_at TEXT NOT NULL,
            api_key_id INTEGER,
            pool_id INTEGER
        )
        """
    )
    conn.commit()
    yield conn
    conn.close()


def insert_log(conn, compute_ms):
    conn.execute(
        "INSERT INTO metering_logs (host_endpoint_id, model, request_type, "
        "prompt_tokens, completion_tokens, compute_ms, created_at) "
        "VALUES (?, ?, ?, ?, ?, ?, ?)",
        (
            "test-host",
            "test-model",
            "chat",
            0,
            0,
            compute_ms,
            datetime.now(timezone.utc).isoformat(),
        ),
    )
    conn.commit()


def test_empty_table_returns_zero(db):
    cache = TotalComputeCache()
    assert cache.get(db) == 0


def test_fresh_fetch_sums_rows(db):
    insert_log(db, 7_500)
    insert_log(db, 2_500)
    cache = TotalComputeCache()
    assert cache.get(db) == 10_000


def test_returns_cached_within_ttl(db):
    insert_log(db, 1_000)
    cache = TotalComputeCache(ttl=60)
    assert cache.get(db) == 1_000

    insert_log(db, 5_000)
    assert cache.get(db) == 1_000


def test_refreshes_after_ttl_expires(db):
    insert_log(db, 1_000)
    cache = TotalComputeCache(ttl=0.04)
    assert cache.get(db) == 1_000

    insert_log(db, 2_000)
    time.sleep(0.08)
    assert cache.get(db) == 3_000


def test_timedelta_ttl_is_accepted(db):
    insert_log(db, 1_000)
    cache = TotalComputeCache(ttl=timedelta(milliseconds=40))
    assert cache.get(db) == 1_000

    insert_log(db, 2_000)
    time.sleep(0.08)
    assert cache.get(db) == 3_000


def test_returns_zero_on_db_error_when_cold(db):
    db.execute("DROP TABLE metering_logs")
    db.commit()
    cache = TotalComputeCache()
    assert cache.get(db) == 0


def test_returns_stale_on_db_error_after_warm(db):
    insert_log(db, 4_242)
    cache = TotalComputeCache(ttl=0.04)
    assert cache.get(db) == 4_242

    time.sleep(0.08)
    db.execute("DROP TABLE metering_logs")
    db.commit()

    assert cache.get(db) == 4_242


def test_recovers_after_error_once_table_returns(db, tmp_path):
    db.execute("DROP TABLE metering_logs")
    db.commit()
    cache = TotalComputeCache(ttl=60)
    assert cache.get(db) == 0

    db.execute("CREATE TABLE metering_logs (compute_ms INTEGER NOT NULL)")
    db.execute("INSERT INTO metering_logs (compute_ms) VALUES (123)")
    db.commit()
    # A failed refresh is not cached, so the next call queries again.
    assert cache.get(db) == 123
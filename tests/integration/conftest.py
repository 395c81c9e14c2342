import os
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from docverify.config.settings import Settings
from docverify.database.connection import close_pool, get_connection, init_pool

MODERATION_QUEUE_DDL = """
CREATE TABLE IF NOT EXISTS moderation_queue (
    id BIGSERIAL PRIMARY KEY,
    user_id BIGINT NOT NULL,
    front_image TEXT NOT NULL,
    back_image TEXT NOT NULL,
    selfie_image TEXT NOT NULL,
    status VARCHAR(32) NOT NULL DEFAULT 'pending_review',
    submission_id VARCHAR(255) UNIQUE,
    created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
)
"""

# Far outside any real account id range
TEST_USER_ID = 990_000_001


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "docverify_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute(MODERATION_QUEUE_DDL)
            conn.commit()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run integration tests")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def queue_user(db_conn: psycopg.Connection[Any]) -> Generator[int, None, None]:
    """A user id whose moderation_queue rows are removed after the test."""
    yield TEST_USER_ID
    with db_conn.cursor() as cur:
        cur.execute("DELETE FROM moderation_queue WHERE user_id = %s", (TEST_USER_ID,))
    db_conn.commit()

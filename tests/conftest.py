from __future__ import annotations

from pathlib import Path

import pytest

from folio import Storage
from folio.core.config import Settings


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    # Lowest bcrypt cost keeps hashing fast
    return Settings(DB_PATH=str(tmp_path / "folio.db"), BCRYPT_ROUNDS=4)


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "folio.db"


@pytest.fixture(params=[False, True], ids=["transient", "persistent"])
def store(request: pytest.FixtureRequest, db_path: Path, settings: Settings) -> Storage:
    s = Storage(db_path, init_user=False, persistent=request.param, settings=settings)
    yield s
    s.close()

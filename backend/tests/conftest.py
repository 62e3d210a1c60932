"""
Point the app at a throwaway SQLite file before anything imports app.db,
then create the schema once for the whole run.
"""
import os
import tempfile

_db_dir = tempfile.mkdtemp(prefix="vertilog-tests-")
os.environ["DB_URL"] = f"sqlite:///{os.path.join(_db_dir, 'test.db')}"

import pytest  # noqa: E402

from app.db import Base, engine  # noqa: E402
from app import models  # noqa: E402,F401


@pytest.fixture(scope="session", autouse=True)
def schema():
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)
    engine.dispose()

import os
import tempfile
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.mkdtemp(prefix='chirpy-tests-')) / 'chirpy.db'
TEST_DB_URL = os.getenv('TEST_DB_URL', f"sqlite:///{TEST_DB_PATH}")

os.environ['DB_URL'] = TEST_DB_URL
os.environ['JWT_SECRET'] = 'test-signing-secret'
os.environ['POLKA_KEY'] = 'test-polka-key'
os.environ['PLATFORM'] = 'dev'

from chirpy.db.init_db import init_db
from chirpy.db.session import engine
from sqlmodel import Session


@pytest.fixture(autouse=True, scope="session")
def _configure_test_database():
    init_db(drop_all=True)
    yield


@pytest.fixture
def session():
    init_db(drop_all=True)
    with Session(engine) as db_session:
        yield db_session

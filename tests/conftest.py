import os
import sys
from pathlib import Path
import pytest

# Omogući import projekta kad se testovi pokreću iz bilo kog radnog dir-a
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from modelcouch.config.env import EnvLoader
from modelcouch.db.memory_store import MemoryStore
from modelcouch.managers.error_manager import ErrorManager
from modelcouch.managers.log_manager import LogManager
from modelcouch.model.factory import define_model


@pytest.fixture(scope="session", autouse=True)
def isolated_env(tmp_path_factory):
    """
    - Logovi idu u privremeni fajl (ne diramo modelcouch/data/logs).
    - Dev mod isključen da testovi ne štampaju traceback-ove.
    """
    saved = {k: os.environ.get(k) for k in ("LOG_FILE_PATH", "DEV_MODE")}
    os.environ["LOG_FILE_PATH"] = str(tmp_path_factory.mktemp("logs") / "test.log")
    os.environ["DEV_MODE"] = "false"
    EnvLoader.load(force=True)
    yield
    for k, v in saved.items():
        if v is None:
            os.environ.pop(k, None)
        else:
            os.environ[k] = v


@pytest.fixture(autouse=True)
def fresh_managers():
    LogManager.initialize()
    ErrorManager.initialize(dev_mode=False)
    yield


@pytest.fixture
def store():
    return MemoryStore(name="test")


@pytest.fixture
def reported():
    """Lista (field, message) parova koje je prijavio on_validate_error."""
    return []


@pytest.fixture
def account_model(store, reported):
    """username/email, oba required, email mora sadržati '@'."""
    return define_model(
        store,
        "account",
        fields=["username", "email"],
        required=["username", "email"],
        validators={"email": [(lambda v: "@" in v, "must contain @")]},
        on_validate_error=lambda doc, field, message: reported.append((field, message)),
    )

import os
import sys
import time
import tempfile
import subprocess
import requests
import socket
from contextlib import closing

# Ensure project root is in path
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, PROJECT_ROOT)

# Keep test state out of the project data directory; must happen before the app import
TEST_DATA_DIR = tempfile.mkdtemp(prefix="dermacare_tests_")
os.environ["DUCKDB_PATH"] = os.path.join(TEST_DATA_DIR, "unit.duckdb")

import pytest
from fastapi.testclient import TestClient
from dermacare.main import app
from datetime import datetime
from dermacare.models import AnalysisResult, FeatureVector, HistoryEntry

def find_free_port():
    with closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind(('', 0))
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        return s.getsockname()[1]

def make_features(**overrides) -> FeatureVector:
    """Feature vector with every value at 0.5 unless overridden."""
    values = {name: 0.5 for name in FeatureVector.model_fields}
    values.update(overrides)
    return FeatureVector(**values)

def make_history_entry(entry_id: str, severity: str = "low", timestamp: datetime = None) -> HistoryEntry:
    return HistoryEntry(
        id=entry_id,
        image_uri=f"file:///tmp/{entry_id}.jpg",
        result=AnalysisResult(
            condition_key="healthy_skin" if severity == "low" else "rosacea",
            condition="Healthy Skin" if severity == "low" else "Rosacea",
            medical_name="",
            severity=severity,
            confidence=0.9,
            description="",
            recommendation="",
            affected_area=0,
        ),
        timestamp=timestamp or datetime(2024, 5, 1, 12, 0),
    )

@pytest.fixture
def features():
    """Factory for hand-built feature vectors."""
    return make_features

@pytest.fixture
def history_entry():
    """Factory for history entries with a given severity and timestamp."""
    return make_history_entry

@pytest.fixture
def client():
    """
    Test client for the FastAPI app.
    """
    return TestClient(app)

@pytest.fixture(scope="session")
def test_server():
    """
    Starts a uvicorn server in a subprocess for E2E tests.
    Yields the base URL (e.g., http://127.0.0.1:8001).
    """
    port = find_free_port()
    host = "127.0.0.1"
    base_url = f"http://{host}:{port}"
    env = os.environ.copy()
    env["PYTHONPATH"] = PROJECT_ROOT # Ensure standard imports work
    env["DUCKDB_PATH"] = os.path.join(TEST_DATA_DIR, f"e2e_{port}.duckdb")

    log_path = os.path.join(TEST_DATA_DIR, f"test_server_{port}.log")
    log_file = open(log_path, "w")
    proc = subprocess.Popen(
        [sys.executable, "-m", "uvicorn", "dermacare.main:app", "--host", host, "--port", str(port)],
        env=env,
        stdout=log_file,
        stderr=subprocess.STDOUT,
        cwd=PROJECT_ROOT # Start from project root
    )

    # Health check loop
    start_time = time.time()
    while time.time() - start_time < 10:
        try:
            resp = requests.get(f"{base_url}/api/health")
            if resp.status_code == 200:
                break
        except requests.ConnectionError:
            time.sleep(0.1)
    else:
        # Timeout
        print(f"Server failed to start. Logs in {log_path}")
        proc.kill()
        log_file.close()
        raise RuntimeError("Test server failed to start")

    yield base_url

    # Teardown
    proc.terminate()
    try:
        proc.wait(timeout=2)
    except subprocess.TimeoutExpired:
        proc.kill()

    log_file.close()

    with open(log_path, "r") as f:
        print(f"\n--- TEST SERVER LOGS ({port}) ---\n")
        print(f.read())
        print(f"\n--- END LOGS ---\n")

    os.remove(log_path)

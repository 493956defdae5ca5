import pytest
from fastapi.testclient import TestClient

from ...ibm.client import IBMQuantumError
from ...main import app
from ..jobs import get_client


class FakeIBMQuantumClient:
    def __init__(self, jobs=None, job=None, error=None):
        self.jobs = jobs
        self.job = job
        self.error = error
        self.requested_ids = []

    def list_jobs(self):
        if self.error:
            raise self.error
        return self.jobs

    def get_job(self, id):
        self.requested_ids.append(id)
        if self.error:
            raise self.error
        return self.job


@pytest.fixture(scope="function")
def client():
    return TestClient(app)


@pytest.fixture(scope="function")
def fake_ibm(jobs_response, job_details):
    fake = FakeIBMQuantumClient(jobs=jobs_response, job=job_details)
    app.dependency_overrides[get_client] = lambda: fake
    yield fake
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def failing_ibm():
    fake = FakeIBMQuantumClient(
        error=IBMQuantumError(
            "request failed",
            status_code=401,
            detail={"errors": [{"message": "Unauthorized"}]},
        )
    )
    app.dependency_overrides[get_client] = lambda: fake
    yield fake
    app.dependency_overrides.clear()


@pytest.fixture(
    scope="function",
    params=[
        {"type": "vector", "data": [0, 1]},
        {"type": "statevector", "data": [1]},
        {"type": "unknown", "data": [1, 2, 3]},
    ],
)
def invalid_bloch_payload(request):
    return request.param

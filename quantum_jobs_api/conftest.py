import copy

import pytest

JOBS = [
    {
        "id": "d2kud4cg59ks73c524c0",
        "backend": "ibm_brisbane",
        "state": {"status": "Completed"},
        "program": {"id": "sampler", "name": "Sampler"},
        "user_id": "IBMid-6940012W0V",
        "created": "2025-08-23T16:04:33.285627Z",
        "tags": ["Composer"],
        "cost": 10000,
        "bss": {"seconds": 1},
        "usage": {"quantum_seconds": 1, "seconds": 1},
        "status": "Completed",
    },
    {
        "id": "a1b2c3d4e5f6g7h8i9j0",
        "backend": "ibm_osaka",
        "state": {"status": "Running"},
        "program": {"id": "optimizer", "name": "VQE Optimizer"},
        "user_id": "IBMid-6940012W0V",
        "created": "2025-08-24T10:15:42.123456Z",
        "tags": ["VQE", "Optimization"],
        "cost": 25000,
        "usage": {"quantum_seconds": 2.5, "seconds": 2.5},
        "status": "Running",
    },
    {
        "id": "b2c3d4e5f6g7h8i9j0k1",
        "backend": "ibm_kyoto",
        "state": {"status": "Failed"},
        "program": {"id": "error_correction", "name": "Error Correction"},
        "user_id": "IBMid-6940012W0V",
        "created": "2025-08-24T08:30:15.987654Z",
        "tags": ["Error Correction"],
        "cost": 0,
        "usage": {"quantum_seconds": 0, "seconds": 0.1},
        "status": "Failed",
    },
    {
        "id": "c3d4e5f6g7h8i9j0k1l2",
        "backend": "ibm_brisbane",
        "state": {"status": "Queued"},
        "program": {"id": "qft"},
        "user_id": "IBMid-6940012W0V",
        "created": "2025-08-24T12:45:33.456789Z",
        "cost": 15000,
        "usage": {"quantum_seconds": 0, "seconds": 0},
        "status": "Queued",
    },
]

JOB_DETAILS = {
    **JOBS[0],
    "shots": 1024,
    "queue_position": 0,
    "run_time_seconds": 1.2,
    "completed": "2025-08-23T16:05:10Z",
    "metrics": {"depth": 12, "width": 3, "success_rate": 0.98},
    "bloch": {"type": "vector", "data": [0.2, -0.1, 0.97]},
    "raw": {
        "original_request": {"shots": 1024, "backend": "ibm_brisbane"},
        "results": {"counts": {"00": 512, "11": 512}},
    },
}


@pytest.fixture(scope="function")
def jobs_response():
    return {"jobs": copy.deepcopy(JOBS), "count": len(JOBS), "limit": 200, "offset": 0}


@pytest.fixture(scope="function")
def job_details():
    return copy.deepcopy(JOB_DETAILS)

import pytest


@pytest.fixture(
    scope="function",
    params=[
        [0.2, -0.1, 0.97],
        [0.0, 0.0, 1.0],
        [-1.0, 0.0, 0.0],
        [0.5, 0.5, 0.5],
    ],
)
def vector_inside_sphere(request):
    return request.param


@pytest.fixture(
    scope="function",
    params=[
        [2, 0, 0],
        [1, 1, 1],
        [-3, 4, 12],
        [0.9, 0.9, 0.0],
    ],
)
def vector_outside_sphere(request):
    return request.param


@pytest.fixture(
    scope="function",
    params=[
        {"type": "vector", "data": []},
        {"type": "vector", "data": [0, 1]},
        {"type": "statevector", "data": []},
        {"type": "statevector", "data": [1]},
        {"type": "unknown", "data": [1, 2, 3]},
        {"type": "density_matrix", "data": [1, 0, 0, 0]},
    ],
)
def invalid_payload(request):
    return request.param

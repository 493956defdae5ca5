import random
from math import cos, pi, sin, sqrt

from fastapi import APIRouter

from ..bloch.bloch import process_bloch_data
from ..models.models import BlochPayload, BlochType, RandomQubit

router = APIRouter(prefix="", tags=["helpers"])


# helper api
@router.get("/healthz")
def health_check():
    return {"message": "healthy"}


@router.get("/random", response_model=RandomQubit)
def get_random_pure_qubit():
    amp = random.random()
    phase = random.uniform(0, 2 * pi)
    payload = BlochPayload(
        type=BlochType.STATEVECTOR.value,
        data=[sqrt(amp), 0.0, sqrt(1 - amp) * cos(phase), sqrt(1 - amp) * sin(phase)],
    )
    return RandomQubit(statevector=payload, bloch=process_bloch_data(payload))

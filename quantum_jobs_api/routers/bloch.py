import logging

from fastapi import APIRouter, HTTPException

from ..bloch.bloch import (
    InvalidInputError,
    is_positional_statevector,
    process_bloch_data,
)
from ..models.models import BlochPayload, BlochVector

logger = logging.getLogger("uvicorn")

router = APIRouter(prefix="/bloch", tags=["bloch"])


def convert_bloch_payload(payload: BlochPayload) -> BlochVector:
    if is_positional_statevector(payload):
        logger.warning(
            f"statevector with {len(payload.data)} components is decoded positionally"
        )
    try:
        return process_bloch_data(payload)
    except InvalidInputError as e:
        logger.exception(e)
        raise HTTPException(status_code=422, detail=str(e))


# bloch api
@router.post("", response_model=BlochVector)
def create_bloch_vector(payload: BlochPayload):
    return convert_bloch_payload(payload)

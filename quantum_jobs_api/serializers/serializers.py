import logging
from typing import Any

from fastapi import HTTPException
from pydantic import ValidationError

from ..models.models import JobDetails, JobsResponse

logger = logging.getLogger("uvicorn")


def parse_jobs_response(data: Any) -> JobsResponse:
    try:
        return JobsResponse.model_validate(data)
    except ValidationError as e:
        logger.exception(e)
        raise HTTPException(
            status_code=502, detail="jobs response from upstream has unexpected shape"
        )


def parse_job_details(data: Any) -> JobDetails:
    try:
        return JobDetails.model_validate(data)
    except ValidationError as e:
        logger.exception(e)
        raise HTTPException(
            status_code=502, detail="job details from upstream have unexpected shape"
        )

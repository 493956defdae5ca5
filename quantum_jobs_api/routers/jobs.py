import logging
from datetime import datetime
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..ibm.client import IBMQuantumClient, IBMQuantumError
from ..models.models import (
    Job,
    JobBloch,
    JobDetails,
    JobFilters,
    JobsResponse,
    JobsSummary,
    SortDirection,
)
from ..serializers.serializers import parse_job_details, parse_jobs_response
from ..settings.settings import get_settings
from ..utils.jobs import filter_jobs, job_row, sort_jobs, summarize_jobs
from .bloch import convert_bloch_payload

logger = logging.getLogger("uvicorn")

router = APIRouter(prefix="/api/jobs", tags=["jobs"])


def get_client() -> IBMQuantumClient:
    return IBMQuantumClient(get_settings())


def get_filters(
    search: Optional[str] = None,
    backend: List[str] = Query([]),
    status: List[str] = Query([]),
    date_from: Optional[datetime] = None,
    date_to: Optional[datetime] = None,
) -> JobFilters:
    return JobFilters(
        search=search,
        backends=backend,
        statuses=status,
        date_from=date_from,
        date_to=date_to,
    )


def fetch_jobs(client: IBMQuantumClient) -> JobsResponse:
    try:
        data = client.list_jobs()
    except IBMQuantumError as e:
        logger.exception(e)
        raise HTTPException(status_code=500, detail=e.detail)
    return parse_jobs_response(data)


def fetch_job(client: IBMQuantumClient, id: str) -> JobDetails:
    try:
        data = client.get_job(id)
    except IBMQuantumError as e:
        logger.exception(e)
        raise HTTPException(status_code=500, detail=e.detail)
    return parse_job_details(data)


def select_jobs(
    jobs: List[Job],
    filters: JobFilters,
    sort_key: Optional[str],
    sort_direction: SortDirection,
) -> List[Job]:
    try:
        return sort_jobs(filter_jobs(jobs, filters), sort_key, sort_direction)
    except ValueError as e:
        logger.exception(e)
        raise HTTPException(status_code=400, detail=str(e))


def is_filtered(filters: JobFilters, sort_key: Optional[str]) -> bool:
    return sort_key is not None or any(
        [
            filters.search,
            filters.backends,
            filters.statuses,
            filters.date_from,
            filters.date_to,
        ]
    )


# jobs api
@router.get("", response_model=JobsResponse)
def list_jobs(
    filters: JobFilters = Depends(get_filters),
    sort_key: Optional[str] = None,
    sort_direction: SortDirection = SortDirection.ASC,
    client: IBMQuantumClient = Depends(get_client),
):
    response = fetch_jobs(client)
    if not is_filtered(filters, sort_key):
        return response

    jobs = select_jobs(response.jobs, filters, sort_key, sort_direction)
    return JobsResponse(
        jobs=jobs, count=len(jobs), limit=response.limit, offset=response.offset
    )


@router.get("/summary", response_model=JobsSummary)
def get_jobs_summary(
    filters: JobFilters = Depends(get_filters),
    client: IBMQuantumClient = Depends(get_client),
):
    response = fetch_jobs(client)
    return summarize_jobs(filter_jobs(response.jobs, filters))


@router.get("/table", response_model=Dict[str, List[Dict[str, str]]])
def get_jobs_table(
    filters: JobFilters = Depends(get_filters),
    sort_key: Optional[str] = None,
    sort_direction: SortDirection = SortDirection.ASC,
    client: IBMQuantumClient = Depends(get_client),
):
    response = fetch_jobs(client)
    jobs = select_jobs(response.jobs, filters, sort_key, sort_direction)
    return {"rows": [job_row(job) for job in jobs]}


@router.get("/{id}", response_model=JobDetails)
def get_job(id: str, client: IBMQuantumClient = Depends(get_client)):
    return fetch_job(client, id)


@router.get("/{id}/bloch", response_model=JobBloch)
def get_job_bloch(id: str, client: IBMQuantumClient = Depends(get_client)):
    job = fetch_job(client, id)
    if job.bloch is None:
        message = f"job with id '{id}' has no bloch data"
        logger.exception(message)
        raise HTTPException(status_code=404, detail=message)

    vector = convert_bloch_payload(job.bloch)
    return JobBloch(type=job.bloch.type.value, vector=vector, magnitude=vector.magnitude)

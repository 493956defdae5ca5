"""Dashboard views derived from a validated job list."""
from collections import Counter
from datetime import datetime, timezone
from typing import Dict, List, Optional

from ..models.models import (
    DateCount,
    Job,
    JobFilters,
    JobsSummary,
    JobStatus,
    SortDirection,
    StatusCount,
)
from .utils import (
    format_currency,
    format_datetime,
    format_duration,
    get_status_color,
    parse_datetime,
    truncate_text,
)

SORTABLE_KEYS = {"id", "backend", "user_id", "created", "cost", "status"}
JOBS_OVER_TIME_DAYS = 7


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _created_at(job: Job) -> Optional[datetime]:
    try:
        return _as_utc(parse_datetime(job.created))
    except ValueError:
        return None


def filter_jobs(jobs: List[Job], filters: JobFilters) -> List[Job]:
    def matches(job: Job) -> bool:
        if filters.search and filters.search.lower() not in job.id.lower():
            return False
        if filters.backends and job.backend not in filters.backends:
            return False
        if filters.statuses and job.status not in filters.statuses:
            return False
        if filters.date_from or filters.date_to:
            created = _created_at(job)
            if created is None:
                return False
            if filters.date_from and created < _as_utc(filters.date_from):
                return False
            if filters.date_to and created > _as_utc(filters.date_to):
                return False
        return True

    return [job for job in jobs if matches(job)]


def sort_jobs(
    jobs: List[Job],
    key: Optional[str] = None,
    direction: SortDirection = SortDirection.ASC,
) -> List[Job]:
    if key is None:
        return list(jobs)
    if key not in SORTABLE_KEYS:
        raise ValueError(f"cannot sort jobs by '{key}'")
    return sorted(
        jobs,
        key=lambda job: getattr(job, key),
        reverse=direction == SortDirection.DESC,
    )


def available_backends(jobs: List[Job]) -> List[str]:
    return sorted({job.backend for job in jobs})


def summarize_jobs(jobs: List[Job]) -> JobsSummary:
    total = len(jobs)
    status_counts = Counter(job.status for job in jobs)
    avg_cost = sum(job.cost for job in jobs) / total if total else 0

    # Counter keeps first-seen order
    status_distribution = [
        StatusCount(status=status, count=count, percentage=int(count / total * 100 + 0.5))
        for status, count in status_counts.items()
    ]

    created_dates = [_created_at(job) for job in jobs]
    per_date: Dict[str, int] = Counter(
        created.date().isoformat() for created in created_dates if created is not None
    )
    jobs_over_time = [
        DateCount(date=date, count=per_date[date]) for date in sorted(per_date)
    ][-JOBS_OVER_TIME_DAYS:]

    return JobsSummary(
        total=total,
        completed=status_counts[JobStatus.COMPLETED.value],
        running=status_counts[JobStatus.RUNNING.value],
        failed=status_counts[JobStatus.FAILED.value],
        avg_cost=avg_cost,
        avg_cost_display=format_currency(avg_cost),
        status_distribution=status_distribution,
        jobs_over_time=jobs_over_time,
        backends=available_backends(jobs),
    )


def job_row(job: Job) -> Dict[str, str]:
    return {
        "id": job.id,
        "short_id": truncate_text(job.id, 12),
        "backend": job.backend,
        "program": job.program.name or job.program.id,
        "status": job.status,
        "status_color": get_status_color(job.status),
        "created": format_datetime(job.created),
        "cost": format_currency(job.cost),
        "quantum_time": format_duration(job.usage.quantum_seconds),
    }

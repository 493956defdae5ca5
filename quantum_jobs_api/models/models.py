from datetime import datetime
from enum import Enum
from math import sqrt
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class BlochType(str, Enum):
    VECTOR = "vector"
    STATEVECTOR = "statevector"


class JobStatus(str, Enum):
    COMPLETED = "Completed"
    RUNNING = "Running"
    FAILED = "Failed"
    PENDING = "Pending"
    QUEUED = "Queued"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


# bloch
class BlochPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    data: List[float]


class BlochData(BlochPayload):
    type: BlochType


class BlochVector(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    @property
    def magnitude(self) -> float:
        return sqrt(self.x**2 + self.y**2 + self.z**2)


# jobs
class JobState(BaseModel):
    status: str


class JobProgram(BaseModel):
    id: str
    name: Optional[str] = None


class JobBss(BaseModel):
    seconds: float


class JobUsage(BaseModel):
    quantum_seconds: float
    seconds: float


class JobMetrics(BaseModel):
    depth: float
    width: float
    success_rate: float


class Job(BaseModel):
    id: str
    backend: str
    state: JobState
    program: JobProgram
    user_id: str
    created: str
    tags: Optional[List[str]] = None
    cost: float
    bss: Optional[JobBss] = None
    usage: JobUsage
    status: str


class JobDetails(Job):
    shots: Optional[int] = None
    queue_position: Optional[int] = None
    run_time_seconds: Optional[float] = None
    completed: Optional[str] = None
    metrics: Optional[JobMetrics] = None
    bloch: Optional[BlochData] = None
    raw: Optional[Dict[str, Any]] = None


class JobsResponse(BaseModel):
    jobs: List[Job]
    count: int
    limit: int
    offset: int


class JobFilters(BaseModel):
    search: Optional[str] = None
    backends: List[str] = []
    statuses: List[str] = []
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None


# views
class StatusCount(BaseModel):
    status: str
    count: int
    percentage: int


class DateCount(BaseModel):
    date: str
    count: int


class JobsSummary(BaseModel):
    total: int
    completed: int
    running: int
    failed: int
    avg_cost: float
    avg_cost_display: str
    status_distribution: List[StatusCount]
    jobs_over_time: List[DateCount]
    backends: List[str]


class JobBloch(BaseModel):
    type: str
    vector: BlochVector
    magnitude: float


class RandomQubit(BaseModel):
    statevector: BlochPayload
    bloch: BlochVector

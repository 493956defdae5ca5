import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routers import bloch, helpers, jobs
from .settings.settings import get_settings

logger = logging.getLogger("uvicorn")

settings = get_settings()

app = FastAPI(title="Quantum Jobs API")
app.include_router(helpers.router)
app.include_router(bloch.router)
app.include_router(jobs.router)

# cors settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.allow_origin],
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_credentials=True,
)


@app.on_event("startup")
async def startup():
    if not settings.ibm_api_key or not settings.instance_crn:
        logger.warning("IBM_API_KEY or INSTANCE_CRN is not set; job routes will fail")

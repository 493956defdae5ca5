import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

DEFAULT_API_VERSION = "2025-05-01"
DEFAULT_IAM_URL = "https://iam.cloud.ibm.com/identity/token"
DEFAULT_QUANTUM_API_URL = "https://quantum.cloud.ibm.com/api/v1"


class Settings(BaseModel):
    ibm_api_key: Optional[str] = None
    instance_crn: Optional[str] = None
    api_version: str = DEFAULT_API_VERSION
    iam_url: str = DEFAULT_IAM_URL
    quantum_api_url: str = DEFAULT_QUANTUM_API_URL
    request_timeout: float = 30
    allow_origin: str = "*"


def get_settings() -> Settings:
    # values already present in the environment win over .env
    load_dotenv(f"{os.getcwd()}/.env")
    return Settings(
        ibm_api_key=os.environ.get("IBM_API_KEY"),
        instance_crn=os.environ.get("INSTANCE_CRN"),
        api_version=os.environ.get("API_VERSION") or DEFAULT_API_VERSION,
        iam_url=os.environ.get("IBM_IAM_URL", DEFAULT_IAM_URL),
        quantum_api_url=os.environ.get("IBM_QUANTUM_API_URL", DEFAULT_QUANTUM_API_URL),
        request_timeout=os.environ.get("REQUEST_TIMEOUT", 30),
        allow_origin=os.environ.get("ALLOW_ORIGIN", "*"),
    )

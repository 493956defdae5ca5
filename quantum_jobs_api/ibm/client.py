"""Thin client for the IBM Quantum jobs API.

Every request exchanges the configured API key for a fresh IAM bearer
token, then calls the jobs endpoint with the token, the service CRN and the
API version headers.
"""
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from ..settings.settings import Settings

logger = logging.getLogger("uvicorn")

_GRANT_TYPE = "urn:ibm:params:oauth:grant-type:apikey"


class IBMQuantumError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None, detail: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail if detail is not None else message


def _error_body(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or response.reason


def _json_body(response: requests.Response, what: str) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise IBMQuantumError(
            f"{what} is not JSON",
            status_code=response.status_code,
            detail=response.text,
        ) from e


class IBMQuantumClient:
    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.session = session or requests.Session()

    def get_bearer_token(self) -> str:
        if not self.settings.ibm_api_key:
            raise IBMQuantumError("IBM_API_KEY is not set")

        try:
            response = self.session.post(
                self.settings.iam_url,
                data={"grant_type": _GRANT_TYPE, "apikey": self.settings.ibm_api_key},
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                timeout=self.settings.request_timeout,
            )
        except requests.RequestException as e:
            raise IBMQuantumError(f"token request failed: {e}") from e

        if not response.ok:
            raise IBMQuantumError(
                "token request failed",
                status_code=response.status_code,
                detail=_error_body(response),
            )

        body = _json_body(response, "token response")
        token = body.get("access_token") if isinstance(body, dict) else None
        if not token:
            raise IBMQuantumError("token response has no access_token")
        return token

    def _headers(self, token: str) -> Dict[str, str]:
        headers = {
            "Authorization": f"Bearer {token}",
            "IBM-API-Version": self.settings.api_version,
        }
        if self.settings.instance_crn:
            headers["Service-CRN"] = self.settings.instance_crn
        return headers

    def _get(self, path: str) -> Any:
        token = self.get_bearer_token()
        url = f"{self.settings.quantum_api_url.rstrip('/')}/{path}"
        logger.info(f"GET {url}")
        try:
            response = self.session.get(
                url,
                headers=self._headers(token),
                timeout=self.settings.request_timeout,
            )
        except requests.RequestException as e:
            raise IBMQuantumError(f"request to {url} failed: {e}") from e

        if not response.ok:
            raise IBMQuantumError(
                f"request to {url} failed",
                status_code=response.status_code,
                detail=_error_body(response),
            )
        return _json_body(response, f"response from {url}")

    def list_jobs(self) -> Any:
        return self._get("jobs")

    def get_job(self, id: str) -> Any:
        return self._get(f"jobs/{quote(id, safe='')}")

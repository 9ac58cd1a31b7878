# frontend/health_client.py
import logging

import requests

from frontend.config import ERROR_TEXT, HEALTH_URL, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class HealthClient:
    def __init__(self, health_url: str = HEALTH_URL, timeout: float = REQUEST_TIMEOUT):
        self.health_url = health_url
        self.timeout = timeout

    def fetch_status(self) -> str:
        """
        Ask the backend for its health status.

        Returns the ``status`` field of the reply, or ``ERROR`` when the backend
        is unreachable or answers with anything other than a JSON object
        carrying a string status.
        """
        try:
            response = requests.get(self.health_url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Health check against {self.health_url} failed: {e}")
            return ERROR_TEXT

        status = data.get("status") if isinstance(data, dict) else None
        if not isinstance(status, str):
            logger.warning(f"Unexpected health payload: {data!r}")
            return ERROR_TEXT
        return status

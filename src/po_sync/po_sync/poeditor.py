"""Client for the POEditor translation management API."""

import logging
from pathlib import Path

import requests

from po_sync.conf import POEditorConfig
from po_sync.constants import (
    PO_FILE_EXTENSION,
    POEDITOR_API_BASE_URL,
    POEDITOR_EXPORT_TYPE,
    POEDITOR_REQUEST_TIMEOUT,
    POEDITOR_STATUS_SUCCESS,
)
from po_sync.exceptions import RemoteAPIError

logger = logging.getLogger(__name__)


class POEditorClient:
    """
    Helper class for POEditor API operations.

    POEditor reports failures in the ``response.status`` field of the JSON
    body, so a 200 response is not enough to consider a call successful.
    """

    def __init__(
        self,
        api_token: str,
        project_id: str,
        base_url: str = POEDITOR_API_BASE_URL,
        session: requests.Session | None = None,
        timeout: int = POEDITOR_REQUEST_TIMEOUT,
    ):
        self.api_token = api_token
        self.project_id = project_id
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: POEditorConfig) -> "POEditorClient":
        config.validate()
        return cls(config.api_token, config.project_id)

    @staticmethod
    def _extract_error_message(response: requests.Response) -> str:
        """Extract a safe error message from a POEditor response."""
        try:
            data = response.json()
        except ValueError:
            return f"HTTP {response.status_code}"
        status = data.get("response") if isinstance(data, dict) else None
        if isinstance(status, dict) and status.get("message"):
            return status["message"]
        return f"HTTP {response.status_code}"

    def _post(self, endpoint: str, locale: str | None = None, **data) -> dict:
        """POST a form to the API and return the ``result`` payload."""
        payload = {"api_token": self.api_token, "id": self.project_id, **data}
        try:
            response = self.session.post(
                f"{self.base_url}/{endpoint}", data=payload, timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            msg = f"Request to POEditor failed: {e!s}"
            raise RemoteAPIError(msg, locale) from e

        if not response.ok:
            msg = f"POEditor request failed: {self._extract_error_message(response)}"
            raise RemoteAPIError(msg, locale)

        try:
            body = response.json()
        except ValueError as e:
            msg = "POEditor returned an invalid JSON response"
            raise RemoteAPIError(msg, locale) from e

        status = body.get("response") if isinstance(body, dict) else None
        if not isinstance(status, dict):
            msg = "POEditor returned an unexpected response"
            raise RemoteAPIError(msg, locale)
        if status.get("status") != POEDITOR_STATUS_SUCCESS:
            msg = f"POEditor API error: {status.get('message', 'Unknown error')}"
            raise RemoteAPIError(msg, locale)

        result = body.get("result") or {}
        if not isinstance(result, dict):
            msg = "POEditor returned an unexpected result"
            raise RemoteAPIError(msg, locale)
        return result

    def request_export(self, locale: str) -> str:
        """Ask POEditor to export a language and return the one-time download URL."""
        result = self._post(
            "projects/export", locale, language=locale, type=POEDITOR_EXPORT_TYPE
        )
        url = result.get("url")
        if not url:
            msg = f"No download URL returned for {locale}"
            raise RemoteAPIError(msg, locale)
        return url

    def fetch(self, url: str, locale: str | None = None) -> bytes:
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            msg = f"Failed to download file for {locale}: {e!s}"
            raise RemoteAPIError(msg, locale) from e
        if not response.ok:
            msg = f"Failed to download file for {locale}: HTTP {response.status_code}"
            raise RemoteAPIError(msg, locale)
        return response.content

    def download_language(self, locale: str, target_dir: Path) -> Path:
        """Export, fetch and save ``<target_dir>/<locale>.po``."""
        content = self.fetch(self.request_export(locale), locale)
        target_dir.mkdir(parents=True, exist_ok=True)
        file_path = target_dir / f"{locale}{PO_FILE_EXTENSION}"
        file_path.write_bytes(content)
        logger.info("Downloaded %s (%d bytes)", file_path, len(content))
        return file_path

    def list_languages(self) -> list[dict]:
        """Return the project's languages as reported by POEditor."""
        return self._post("languages/list").get("languages", [])

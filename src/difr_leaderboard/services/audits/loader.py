"""Manifest loader: fetch the audit manifest and every audit file it lists.

A single file failing is isolated (logged, dropped). The load as a whole
fails when the manifest cannot be used or no file yields a record, and the
dashboard then shows the built-in sample records instead.
"""

from __future__ import annotations

import logging

import anyio
import httpx

from difr_leaderboard.services.audits.errors import (
    AuditFileError,
    AuditLoadError,
    ManifestError,
)
from difr_leaderboard.services.audits.parser import (
    filter_audit_filenames,
    parse_audit_record,
)
from difr_leaderboard.services.audits.types import AuditDataset, AuditRecord
from difr_leaderboard.services.config import DashboardSettings

_log = logging.getLogger(__name__)

MANIFEST_PATH = "/data/manifest.json"
DATA_PATH = "/data"

RECOVERABLE_LOAD_ERRORS = (AuditLoadError, httpx.HTTPError, httpx.InvalidURL, ValueError)


class AuditClient:
    """Async HTTP client for the static audit data tree under a base URL."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DashboardSettings.DEFAULT_TIMEOUT,
        max_connections: int = DashboardSettings.DEFAULT_MAX_CONNECTIONS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            follow_redirects=True,
        )
        self._limiter = anyio.CapacityLimiter(max_connections)

    async def aclose(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> AuditClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def fetch_manifest(self) -> list[str]:
        """Fetch the manifest and return its file names.

        Raises:
            ManifestError: On a non-success status, a body that is not
                ``{"files": [...]}``, or an empty file list.
        """
        response = await self._client.get(MANIFEST_PATH)
        if not response.is_success:
            raise ManifestError(
                f"Manifest request failed with HTTP {response.status_code}",
                status_code=response.status_code,
            )
        try:
            manifest = response.json()
        except (ValueError, RecursionError) as exc:
            raise ManifestError(f"Manifest is not valid JSON: {exc}") from exc

        files = manifest.get("files") if isinstance(manifest, dict) else None
        if not isinstance(files, list):
            raise ManifestError("Manifest has no 'files' list")

        names = [name for name in files if isinstance(name, str)]
        if not names:
            raise ManifestError("No files in manifest")
        return names

    async def fetch_audit_file(self, filename: str) -> AuditRecord:
        """Fetch and parse one audit file.

        Raises:
            AuditFileError: On a non-success status or a malformed body.
        """
        response = await self._client.get(f"{DATA_PATH}/{filename}")
        if not response.is_success:
            raise AuditFileError(
                f"{filename}: HTTP {response.status_code}",
                status_code=response.status_code,
            )
        try:
            body = response.json()
        except (ValueError, RecursionError) as exc:
            raise AuditFileError(f"{filename}: invalid JSON: {exc}") from exc
        return parse_audit_record(filename, body)

    async def fetch_records(self) -> list[AuditRecord]:
        """Fetch every audit file in the manifest concurrently.

        Records keep manifest order regardless of which fetch finishes first.

        Raises:
            ManifestError: If the manifest cannot be used.
            AuditLoadError: If no file in the manifest yields a record.
        """
        candidates = filter_audit_filenames(await self.fetch_manifest())
        if not candidates:
            raise AuditLoadError("Manifest lists no audit result files")

        slots: list[AuditRecord | None] = [None] * len(candidates)
        async with anyio.create_task_group() as tg:
            for index, filename in enumerate(candidates):
                tg.start_soon(self._fetch_into, slots, index, filename)

        records = [record for record in slots if record is not None]
        if not records:
            raise AuditLoadError("No valid audit results found")

        _log.info("Loaded %d of %d audit files", len(records), len(candidates))
        return records

    async def _fetch_into(
        self, slots: list[AuditRecord | None], index: int, filename: str
    ) -> None:
        async with self._limiter:
            try:
                slots[index] = await self.fetch_audit_file(filename)
            except (AuditFileError, httpx.HTTPError, httpx.InvalidURL) as exc:
                _log.warning("Skipping audit file %s: %s", filename, exc)


def sample_dataset() -> AuditDataset:
    """The built-in records substituted for a failed load."""
    # Imported here: the examples package itself depends on the audit types.
    from difr_leaderboard.examples.sample_audits import SAMPLE_AUDIT_RESULTS

    return AuditDataset(records=SAMPLE_AUDIT_RESULTS, is_sample=True)


async def load_dashboard_records(
    settings: DashboardSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AuditDataset:
    """Load live audit records, or the sample records if the load fails.

    Recoverable load errors are logged here and never propagate.
    """
    try:
        if not settings.base_url:
            raise AuditLoadError("No audit data base URL configured")
        async with AuditClient(
            settings.base_url,
            timeout=settings.timeout,
            max_connections=settings.max_connections,
            transport=transport,
        ) as client:
            records = await client.fetch_records()
    except RECOVERABLE_LOAD_ERRORS as exc:
        _log.error("Error fetching audit results, using sample data: %s", exc, exc_info=True)
        return sample_dataset()
    return AuditDataset(records=tuple(records))

"""Audit record parser: filename decoding and JSON body normalization."""

from __future__ import annotations

import logging
import re
from typing import Any

from difr_leaderboard.services.audits.errors import AuditFileError
from difr_leaderboard.services.audits.types import (
    AuditRecord,
    ProviderMetric,
    is_valid_score,
)

_log = logging.getLogger(__name__)

AUDIT_FILENAME_RE = re.compile(
    r"(?P<model>.+)_audit_results_(?P<stamp>\d{8}_\d{6})\.json"
)

_FLOAT_FIELDS = (
    "exact_match_rate",
    "avg_prob",
    "avg_margin",
    "avg_logit_rank",
    "avg_gumbel_rank",
    "infinite_margin_rate",
)
_COUNT_FIELDS = ("total_tokens", "n_sequences")


def match_audit_filename(filename: str) -> re.Match[str] | None:
    """Match a whole filename against the audit results naming pattern."""
    return AUDIT_FILENAME_RE.fullmatch(filename)


def filter_audit_filenames(files: list[str]) -> list[str]:
    """Keep only audit result filenames, preserving manifest order."""
    return [name for name in files if match_audit_filename(name)]


def format_timestamp(stamp: str) -> str:
    """Decode "YYYYMMDD_HHMMSS" into "YYYY-MM-DDTHH:MM:SS".

    Examples:
        "20240115_093000" -> "2024-01-15T09:30:00"
    """
    return (
        f"{stamp[0:4]}-{stamp[4:6]}-{stamp[6:8]}"
        f"T{stamp[9:11]}:{stamp[11:13]}:{stamp[13:15]}"
    )


def model_from_filename(model_segment: str) -> str:
    """Filenames encode "org/model" as "org_model"."""
    return model_segment.replace("_", "/")


def parse_metric(raw: dict[str, Any]) -> ProviderMetric:
    """Normalize one endpoint's metrics; invalid values become None."""
    floats = {name: _parse_float(raw.get(name)) for name in _FLOAT_FIELDS}
    counts = {name: _parse_count(raw.get(name)) for name in _COUNT_FIELDS}
    return ProviderMetric(**floats, **counts)


def parse_audit_record(filename: str, body: object) -> AuditRecord:
    """Build an AuditRecord from a fetched audit file and its name.

    Raises:
        AuditFileError: If the name does not follow the audit naming pattern
            or the body is not a JSON object with an object of providers.
    """
    match = match_audit_filename(filename)
    if match is None:
        raise AuditFileError(f"Not an audit results filename: {filename}")
    if not isinstance(body, dict):
        raise AuditFileError(f"{filename}: expected a JSON object")

    raw_providers = body.get("providers")
    if raw_providers is None:
        raw_providers = {}
    if not isinstance(raw_providers, dict):
        raise AuditFileError(f"{filename}: 'providers' must be an object")

    providers: dict[str, ProviderMetric] = {}
    for endpoint, raw_metric in raw_providers.items():
        if not isinstance(raw_metric, dict):
            _log.debug("Skipping malformed endpoint %r in %s", endpoint, filename)
            continue
        providers[str(endpoint)] = parse_metric(raw_metric)

    model = body.get("model")
    if not isinstance(model, str) or not model:
        model = model_from_filename(match.group("model"))

    return AuditRecord(
        model=model,
        timestamp=format_timestamp(match.group("stamp")),
        providers=providers,
    )


def _parse_float(value: object) -> float | None:
    if not is_valid_score(value):
        return None
    return float(value)  # type: ignore[arg-type]


def _parse_count(value: object) -> int | None:
    if not is_valid_score(value):
        return None
    return int(value)  # type: ignore[call-overload]

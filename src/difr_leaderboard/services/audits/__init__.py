"""Audit services: record types, parsing and manifest loading."""

from difr_leaderboard.services.audits.errors import (
    AuditFileError,
    AuditLoadError,
    ManifestError,
)
from difr_leaderboard.services.audits.loader import (
    AuditClient,
    load_dashboard_records,
    sample_dataset,
)
from difr_leaderboard.services.audits.parser import (
    filter_audit_filenames,
    parse_audit_record,
)
from difr_leaderboard.services.audits.types import (
    AuditDataset,
    AuditRecord,
    ProviderMetric,
    is_valid_score,
)

__all__ = [
    "AuditClient",
    "AuditDataset",
    "AuditFileError",
    "AuditLoadError",
    "AuditRecord",
    "ManifestError",
    "ProviderMetric",
    "filter_audit_filenames",
    "is_valid_score",
    "load_dashboard_records",
    "parse_audit_record",
    "sample_dataset",
]

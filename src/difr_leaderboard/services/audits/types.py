"""Audit data types shared by the loader and the aggregation views."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field


def is_valid_score(value: object) -> bool:
    """True only for finite numbers (booleans are not scores)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


@dataclass(frozen=True, slots=True)
class ProviderMetric:
    """One endpoint's measured performance for one audit run.

    Every field is optional: values that were missing or not finite in the
    source file are stored as ``None``. Only ``exact_match_rate`` feeds the
    dashboard views.
    """

    exact_match_rate: float | None = None
    avg_prob: float | None = None
    avg_margin: float | None = None
    avg_logit_rank: float | None = None
    avg_gumbel_rank: float | None = None
    infinite_margin_rate: float | None = None
    total_tokens: int | None = None
    n_sequences: int | None = None


@dataclass(frozen=True, slots=True)
class AuditRecord:
    """One audit run for one model at one point in time.

    Attributes:
        model: Model identifier (e.g., "org/model-name")
        timestamp: Zero padded "YYYY-MM-DDTHH:MM:SS", sortable as a string
        providers: Endpoint name (e.g., "providerX/fp8") to its metric
    """

    model: str
    timestamp: str
    providers: Mapping[str, ProviderMetric] = field(default_factory=dict)

    def score(self, endpoint: str) -> float | None:
        metric = self.providers.get(endpoint)
        return metric.exact_match_rate if metric is not None else None


@dataclass(frozen=True, slots=True)
class AuditDataset:
    """Records handed to the dashboard after a load attempt.

    ``is_sample`` is True when the built-in sample records replaced a
    failed live load.
    """

    records: tuple[AuditRecord, ...]
    is_sample: bool = False

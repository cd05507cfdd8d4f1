"""Aggregation of audit records into the dashboard's three views.

Every function here is a pure recomputation over immutable records. A score
counts only when it is a finite number; missing or invalid values never
contribute to an average, min, max, latest value or trend.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from statistics import mean

from difr_leaderboard.services.audits.types import AuditRecord, is_valid_score

LEADERBOARD_LIMIT = 10


@dataclass(frozen=True, slots=True)
class LeaderboardRow:
    """A provider's standing across every model and audit run."""

    provider: str
    avg_score: float
    model_count: int
    data_points: int


@dataclass(frozen=True, slots=True)
class TimeSeriesPoint:
    """One audit run of the selected model.

    ``scores`` holds only endpoints with a valid score for this run.
    """

    timestamp: str
    scores: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class TimeSeries:
    """Chronological points for one model and the endpoints worth charting."""

    points: tuple[TimeSeriesPoint, ...] = ()
    endpoints: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ProviderStat:
    """Summary of one endpoint's scores for the selected model.

    ``provider`` is the full endpoint name (e.g., "together/fp8").
    """

    provider: str
    avg_score: float
    min_score: float
    max_score: float
    latest_score: float
    trend: float
    data_points: int


def provider_name(endpoint: str) -> str:
    """Base provider of an endpoint: the part before the first "/".

    Examples:
        "providerX/fp8" -> "providerX"
        "providerX"     -> "providerX"
    """
    return endpoint.partition("/")[0]


def list_models(records: Iterable[AuditRecord]) -> list[str]:
    """Distinct model identifiers in first-seen order."""
    return list(dict.fromkeys(record.model for record in records))


def build_leaderboard(records: Iterable[AuditRecord]) -> list[LeaderboardRow]:
    """Rank providers by mean exact match rate over all valid data points.

    Endpoint variants ("p/fp8", "p/bf16") are grouped under their provider.
    Rows are sorted by average, highest first; ties keep first-seen order.
    """
    scores: dict[str, list[float]] = {}
    models: dict[str, set[str]] = {}

    for record in records:
        for endpoint, metric in record.providers.items():
            score = metric.exact_match_rate
            if not is_valid_score(score):
                continue
            provider = provider_name(endpoint)
            scores.setdefault(provider, []).append(score)
            models.setdefault(provider, set()).add(record.model)

    rows = [
        LeaderboardRow(
            provider=provider,
            avg_score=mean(values),
            model_count=len(models[provider]),
            data_points=len(values),
        )
        for provider, values in scores.items()
    ]
    rows.sort(key=lambda row: -row.avg_score)
    return rows


def visible_rows(
    rows: Sequence[LeaderboardRow],
    show_all: bool,
    limit: int = LEADERBOARD_LIMIT,
) -> list[LeaderboardRow]:
    """Top ``limit`` rows, or every row when ``show_all`` is set."""
    return list(rows) if show_all else list(rows[:limit])


def records_for_model(
    records: Iterable[AuditRecord], model: str
) -> list[AuditRecord]:
    """The model's records in chronological order."""
    selected = [record for record in records if record.model == model]
    selected.sort(key=lambda record: record.timestamp)
    return selected


def build_time_series(records: Iterable[AuditRecord], model: str) -> TimeSeries:
    """Chart data for one model.

    Active endpoints are those with at least one valid score in the series.
    Trailing runs where no active endpoint has a score are dropped; nothing
    is trimmed from the start or the middle.
    """
    points = [
        TimeSeriesPoint(
            timestamp=record.timestamp,
            scores={
                endpoint: metric.exact_match_rate
                for endpoint, metric in record.providers.items()
                if is_valid_score(metric.exact_match_rate)
            },
        )
        for record in records_for_model(records, model)
    ]

    endpoints = list(dict.fromkeys(ep for point in points for ep in point.scores))
    if not endpoints:
        return TimeSeries(points=tuple(points))

    last_valid = len(points) - 1
    while last_valid >= 0 and not points[last_valid].scores:
        last_valid -= 1

    return TimeSeries(points=tuple(points[: last_valid + 1]), endpoints=tuple(endpoints))


def build_provider_stats(
    records: Iterable[AuditRecord], model: str
) -> list[ProviderStat]:
    """Per-endpoint statistics for one model, highest average first.

    ``latest_score`` is the most recent valid score, looking back past runs
    where the value is missing. ``trend`` compares the last two valid scores
    and is 0 with fewer than two. Endpoints without any valid score are left
    out.
    """
    history = records_for_model(records, model)
    endpoints = list(dict.fromkeys(ep for record in history for ep in record.providers))

    stats: list[ProviderStat] = []
    for endpoint in endpoints:
        raw = [record.score(endpoint) for record in history if endpoint in record.providers]
        valid = [score for score in raw if is_valid_score(score)]
        if not valid:
            continue
        stats.append(
            ProviderStat(
                provider=endpoint,
                avg_score=mean(valid),
                min_score=min(valid),
                max_score=max(valid),
                latest_score=_latest_valid(raw),
                trend=valid[-1] - valid[-2] if len(valid) >= 2 else 0.0,
                data_points=len(valid),
            )
        )

    stats.sort(key=lambda stat: -stat.avg_score)
    return stats


def _latest_valid(scores: Sequence[float | None]) -> float:
    for score in reversed(scores):
        if is_valid_score(score):
            return score
    return 0.0

"""Built-in audit results.

SAMPLE_AUDIT_RESULTS is shown whenever live audit data cannot be loaded:
the manifest is unreachable or malformed, or no audit file in it parses.
APP_INFO holds the text shown in the dashboard header.
"""

from difr_leaderboard.services.audits.types import AuditRecord, ProviderMetric

APP_INFO = {
    "name": "DiFR Leaderboard",
    "title": "Inference Provider Leaderboard",
    "subtitle": "Inference reliability metrics",
    "explanation": (
        "We audit providers by comparing their outputs against trusted reference "
        "implementations of models. The exact match rate is the share of tokens "
        "that match the reference; higher means the provider is more likely "
        "serving models correctly. We compare tens of thousands of tokens per run, "
        "so low exact match rates imply that a model is behaving differently "
        "than expected."
    ),
    "caveat": (
        "Exact match rates above 95% are typical; sustained drops can indicate "
        "model substitution, heavy quantization, or that we are incorrectly "
        "tokenizing the provider's response."
    ),
}


def _metric(rate: float | None, tokens: int = 24_576) -> ProviderMetric:
    if rate is None:
        return ProviderMetric(total_tokens=tokens, n_sequences=96)
    return ProviderMetric(
        exact_match_rate=rate,
        avg_prob=round(rate - 0.04, 4),
        avg_margin=round(rate * 3.1, 4),
        avg_logit_rank=round(1.0 + (1.0 - rate) * 4, 4),
        avg_gumbel_rank=round(1.0 + (1.0 - rate) * 6, 4),
        infinite_margin_rate=round((1.0 - rate) / 10, 4),
        total_tokens=tokens,
        n_sequences=96,
    )


def _record(model: str, timestamp: str, scores: dict[str, float | None]) -> AuditRecord:
    return AuditRecord(
        model=model,
        timestamp=timestamp,
        providers={endpoint: _metric(rate) for endpoint, rate in scores.items()},
    )


_LLAMA = "meta-llama/Llama-3.1-70B-Instruct"
_QWEN = "Qwen/Qwen3-32B"
_GPT_OSS = "openai/gpt-oss-120b"

SAMPLE_AUDIT_RESULTS: tuple[AuditRecord, ...] = (
    _record(
        _LLAMA,
        "2025-01-06T09:00:00",
        {
            "together/fp8": 0.972,
            "fireworks/fp8": 0.961,
            "deepinfra/bf16": 0.984,
            "novita/fp8": 0.902,
            "lambda/bf16": 0.979,
        },
    ),
    _record(
        _LLAMA,
        "2025-01-13T09:00:00",
        {
            "together/fp8": 0.969,
            "fireworks/fp8": 0.958,
            "deepinfra/bf16": 0.986,
            "novita/fp8": 0.874,
            "lambda/bf16": None,
        },
    ),
    _record(
        _LLAMA,
        "2025-01-20T09:00:00",
        {
            "together/fp8": 0.974,
            "fireworks/fp8": 0.963,
            "deepinfra/bf16": 0.983,
            "novita/fp8": 0.861,
            "lambda/bf16": 0.981,
        },
    ),
    _record(
        _QWEN,
        "2025-01-06T12:00:00",
        {
            "together/fp8": 0.948,
            "deepinfra/fp8": 0.955,
            "parasail/bf16": 0.977,
            "nebius/fp8": 0.931,
        },
    ),
    _record(
        _QWEN,
        "2025-01-13T12:00:00",
        {
            "together/fp8": 0.951,
            "deepinfra/fp8": 0.953,
            "parasail/bf16": 0.979,
            "nebius/fp8": 0.812,
        },
    ),
    _record(
        _GPT_OSS,
        "2025-01-08T15:30:00",
        {
            "groq/default": 0.921,
            "cerebras/default": 0.934,
            "fireworks/fp4": 0.944,
            "baseten/fp4": 0.967,
            "sambanova/bf16": 0.889,
        },
    ),
    _record(
        _GPT_OSS,
        "2025-01-15T15:30:00",
        {
            "groq/default": 0.925,
            "cerebras/default": 0.938,
            "fireworks/fp4": 0.946,
            "baseten/fp4": 0.969,
            "sambanova/bf16": 0.902,
            "crusoe/fp4": 0.958,
        },
    ),
)

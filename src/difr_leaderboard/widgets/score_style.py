"""Score formatting and the four-band color scale used wherever a score shows."""

SCORE_BANDS: tuple[tuple[float, str], ...] = (
    (0.95, "#55C89F"),
    (0.90, "#A6D8C0"),
    (0.85, "#FFB3A8"),
    (0.80, "#FF563F"),
)
MUTED_STYLE = "dim"


def score_style(score: float) -> str:
    """Rich style for a score in [0, 1]."""
    for threshold, color in SCORE_BANDS:
        if score >= threshold:
            return color
    return MUTED_STYLE


def format_percent(score: float) -> str:
    return f"{score * 100:.2f}%"


def format_trend(trend: float) -> str:
    """Signed percentage, e.g. "+0.20%" or "-1.35%"."""
    sign = "+" if trend > 0 else ""
    return f"{sign}{trend * 100:.2f}%"

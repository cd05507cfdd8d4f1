"""TimeSeriesChart - exact match rate per endpoint over time.

PATTERN: Custom rendering (like Throbber)
- render() builds a Rich Text grid sized to the widget
- Assigning ``series`` repaints the chart

Layout (height rows, width columns):
    100% ┤●·····●
         │       ·
     90% ┤        ●
     80% ┤
     70% ┤
         └──────────
          Jan 6, 09:00 AM    Jan 20, 09:00 AM
    ● together/fp8  ● fireworks/fp8
"""

from datetime import datetime

from rich.console import RenderableType
from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget

from difr_leaderboard.services.leaderboard import TimeSeries

CHART_COLORS = (
    "#FF563F",
    "#FFB3A8",
    "#6E73FF",
    "#BEC9FF",
    "#606060",
    "#D6D5D5",
    "#55C89F",
    "#A6D8C0",
    "#FFD24D",
    "#FFED9E",
)

Y_MIN = 0.7
Y_MAX = 1.0
Y_TICKS = (1.0, 0.9, 0.8, 0.7)

MARKER = "●"
LINK = "·"
GUTTER = 6
# Rows below the plot: x axis and time labels, then the legend.
FOOTER_ROWS = 3

EMPTY_MESSAGE = "Select a model to view timeline"


def chart_color(index: int) -> str:
    return CHART_COLORS[index % len(CHART_COLORS)]


def format_time_label(timestamp: str) -> str:
    """Format "2024-01-15T09:30:00" as "Jan 15, 09:30 AM"."""
    try:
        moment = datetime.fromisoformat(timestamp)
    except ValueError:
        return timestamp
    return f"{moment:%b} {moment.day}, {moment:%I:%M %p}"


def value_row(value: float, rows: int) -> int:
    """Grid row for a score; values outside the y domain are clamped."""
    clamped = min(max(value, Y_MIN), Y_MAX)
    return round((Y_MAX - clamped) / (Y_MAX - Y_MIN) * (rows - 1))


def point_column(index: int, count: int, plot_width: int) -> int:
    if count <= 1:
        return 0
    return round(index * (plot_width - 1) / (count - 1))


def render_chart(series: TimeSeries, width: int, height: int) -> Text:
    """Plot every endpoint of ``series`` into a Text of the given size.

    Consecutive scores of an endpoint are joined even across runs where the
    endpoint has no score.
    """
    if not series.points:
        return Text(EMPTY_MESSAGE, style="dim")

    rows = max(height - FOOTER_ROWS, 2)
    plot_width = max(width - GUTTER, 1)
    count = len(series.points)
    grid: list[list[tuple[str, str] | None]] = [[None] * plot_width for _ in range(rows)]

    for index, endpoint in enumerate(series.endpoints):
        color = chart_color(index)
        cells = [
            (point_column(i, count, plot_width), value_row(point.scores[endpoint], rows))
            for i, point in enumerate(series.points)
            if endpoint in point.scores
        ]
        for (col0, row0), (col1, row1) in zip(cells, cells[1:]):
            for col in range(col0 + 1, col1):
                row = round(row0 + (row1 - row0) * (col - col0) / (col1 - col0))
                if grid[row][col] is None:
                    grid[row][col] = (LINK, color)
        for col, row in cells:
            grid[row][col] = (MARKER, color)

    tick_rows: dict[int, float] = {}
    for tick in Y_TICKS:
        tick_rows.setdefault(value_row(tick, rows), tick)

    text = Text(no_wrap=True, overflow="crop")
    for row_index, row in enumerate(grid):
        tick = tick_rows.get(row_index)
        if tick is None:
            text.append(" " * (GUTTER - 1) + "│", style="dim")
        else:
            text.append(f"{tick * 100:.0f}%".rjust(GUTTER - 2) + " ┤", style="dim")
        for cell in row:
            if cell is None:
                text.append(" ")
            else:
                text.append(cell[0], style=cell[1])
        text.append("\n")

    text.append(" " * (GUTTER - 1) + "└" + "─" * plot_width + "\n", style="dim")

    labels = " " * GUTTER + format_time_label(series.points[0].timestamp)
    if count > 1:
        last = format_time_label(series.points[-1].timestamp)
        gap = max(GUTTER + plot_width - len(labels) - len(last), 2)
        labels += " " * gap + last
    text.append(labels + "\n", style="dim")

    text.append(" " * GUTTER)
    for index, endpoint in enumerate(series.endpoints):
        if index:
            text.append("  ")
        text.append(f"{MARKER} ", style=chart_color(index))
        text.append(endpoint)
    return text


class TimeSeriesChart(Widget):
    """Multi-line chart of the selected model's endpoint scores."""

    DEFAULT_CSS = """
    TimeSeriesChart {
        width: 1fr;
        height: 18;
        padding: 0 1;
    }
    """

    series: reactive[TimeSeries] = reactive(TimeSeries())

    def render(self) -> RenderableType:
        return render_chart(self.series, self.content_size.width, self.content_size.height)

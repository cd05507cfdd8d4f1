"""Dashboard screen - provider rankings, timeline and comparison cards.

This is the only screen of the app.

Layout:
+----------------------------------------------------------+
|  Inference Provider Leaderboard                          |
|  Inference reliability metrics                           |
+----------------------------------------------------------+
|  How to read this leaderboard                            |
+----------------------------------------------------------+
|  Overall Provider Rankings                               |
|  | Rank | Provider | Avg | Models | Data Points |        |
|                [Show all providers]                      |
+----------------------------------------------------------+
|  Provider Performance Over Time        [model select v]  |
|  100% ┤ ●····●                                           |
+----------------------------------------------------------+
|  Provider Comparison - <model>                           |
|  +--------+ +--------+ +--------+                        |
+----------------------------------------------------------+

Audit data is fetched once on mount (and again on reload); changing the
selected model only recomputes the model views.
"""

import logging
from typing import ClassVar

from rich.text import Text
from textual import on, work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, HorizontalGroup, VerticalGroup, VerticalScroll
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Button, Footer, LoadingIndicator, Select, Static

from difr_leaderboard.examples import APP_INFO
from difr_leaderboard.services.audits import (
    AuditDataset,
    AuditRecord,
    load_dashboard_records,
)
from difr_leaderboard.services.config import DashboardSettings
from difr_leaderboard.services.leaderboard import (
    LEADERBOARD_LIMIT,
    LeaderboardRow,
    build_leaderboard,
    build_provider_stats,
    build_time_series,
    list_models,
    visible_rows,
)
from difr_leaderboard.widgets import (
    LeaderboardTable,
    ProviderComparison,
    TimeSeriesChart,
)

_log = logging.getLogger(__name__)

SHOW_ALL_LABEL = "Show all providers"
SHOW_TOP_LABEL = f"Show top {LEADERBOARD_LIMIT} providers"
RANKINGS_DESCRIPTION = (
    "The rate that a token sampled from a provider matches our reference "
    "implementation averaged across all models and timesteps"
)


class DashboardScreen(Screen):
    """Audit results dashboard.

    State:
    - selected_model: model shown in the timeline and comparison cards
    - show_all: every leaderboard row instead of the top ten
    - is_loading: a load is in flight and the content is hidden
    """

    DEFAULT_CSS = """
    DashboardScreen #loading-container {
        display: none;
        height: 1fr;
        align: center middle;
    }

    DashboardScreen.-loading #loading-container {
        display: block;
    }

    DashboardScreen.-loading #content {
        display: none;
    }

    DashboardScreen #loading {
        height: 3;
    }

    DashboardScreen .section {
        border: round $primary 40%;
        padding: 0 1;
        margin: 0 1 1 1;
    }

    DashboardScreen .title {
        text-style: bold;
    }

    DashboardScreen .section-title {
        text-style: bold;
    }

    DashboardScreen .section-description {
        text-opacity: 70%;
        margin-bottom: 1;
    }

    DashboardScreen #header {
        padding: 1 2;
    }

    DashboardScreen #toggle-all-btn {
        margin-top: 1;
    }

    DashboardScreen #model-select {
        width: 48;
    }
    """

    BINDINGS: ClassVar[list[Binding]] = [
        Binding("a", "toggle_all", "All providers"),
        Binding("r", "reload", "Reload"),
        Binding("q", "quit", "Quit"),
    ]

    is_loading: reactive[bool] = reactive(True)
    show_all: reactive[bool] = reactive(False, init=False)

    def __init__(self, settings: DashboardSettings | None = None) -> None:
        """Initialize the screen.

        Args:
            settings: Where to fetch audit data from (defaults: no base URL,
                which shows the sample records)
        """
        super().__init__()
        self._settings = settings or DashboardSettings()
        self._records: tuple[AuditRecord, ...] = ()
        self._rows: list[LeaderboardRow] = []
        self.selected_model = ""

    @property
    def records(self) -> tuple[AuditRecord, ...]:
        return self._records

    def compose(self) -> ComposeResult:
        with Center(id="loading-container"):
            yield LoadingIndicator(id="loading")
            yield Static("Loading audit results...", id="loading-text")

        with VerticalScroll(id="content"):
            with VerticalGroup(id="header"):
                yield Static(APP_INFO["title"], classes="title")
                yield Static(APP_INFO["subtitle"], classes="section-description")

            with VerticalGroup(id="explainer", classes="section"):
                yield Static("How to read this leaderboard", classes="section-title")
                yield Static(APP_INFO["explanation"])
                yield Static(APP_INFO["caveat"])

            with VerticalGroup(id="rankings", classes="section"):
                yield Static("Overall Provider Rankings", classes="section-title")
                yield Static(RANKINGS_DESCRIPTION, classes="section-description")
                yield LeaderboardTable(id="leaderboard-table")
                with Center():
                    yield Button(SHOW_ALL_LABEL, id="toggle-all-btn")

            with VerticalGroup(id="timeline", classes="section"):
                with HorizontalGroup():
                    with VerticalGroup():
                        yield Static(
                            "Provider Performance Over Time", classes="section-title"
                        )
                        yield Static(
                            "Exact match rate over time for selected model",
                            classes="section-description",
                        )
                    yield Select([], prompt="Select a model", id="model-select")
                yield TimeSeriesChart(id="chart")

            with VerticalGroup(id="comparison", classes="section"):
                yield Static("", id="comparison-title", classes="section-title")
                yield Static(
                    "Detailed statistics for each provider",
                    classes="section-description",
                )
                yield ProviderComparison(id="provider-comparison")

        yield Footer()

    def on_mount(self) -> None:
        self._load_records()

    @work(exclusive=True)
    async def _load_records(self) -> None:
        self.is_loading = True
        dataset = await load_dashboard_records(self._settings)
        self._apply_dataset(dataset)

    def _apply_dataset(self, dataset: AuditDataset) -> None:
        """Replace the record set and redraw every view."""
        if not self.is_mounted:
            return
        if dataset.is_sample:
            _log.info("Showing %d sample audit records", len(dataset.records))

        self._records = dataset.records
        self._rows = build_leaderboard(self._records)

        models = list_models(self._records)
        self.selected_model = models[0] if models else ""
        select = self.query_one("#model-select", Select)
        select.set_options((model, model) for model in models)
        if self.selected_model:
            select.value = self.selected_model

        self._show_leaderboard()
        self._show_model_views()
        self.is_loading = False

    def _show_leaderboard(self) -> None:
        table = self.query_one("#leaderboard-table", LeaderboardTable)
        table.show_rows(visible_rows(self._rows, self.show_all))

        button = self.query_one("#toggle-all-btn", Button)
        button.display = len(self._rows) > LEADERBOARD_LIMIT
        button.label = SHOW_TOP_LABEL if self.show_all else SHOW_ALL_LABEL

    def _show_model_views(self) -> None:
        model = self.selected_model
        self.query_one("#chart", TimeSeriesChart).series = build_time_series(
            self._records, model
        )

        self.query_one("#comparison").display = bool(model)
        self.query_one("#comparison-title", Static).update(
            Text(f"Provider Comparison - {model}")
        )
        self.query_one("#provider-comparison", ProviderComparison).show_stats(
            build_provider_stats(self._records, model)
        )

    def watch_is_loading(self, loading: bool) -> None:
        self.set_class(loading, "-loading")

    def watch_show_all(self, show_all: bool) -> None:
        self._show_leaderboard()

    @on(Select.Changed, "#model-select")
    def on_model_changed(self, event: Select.Changed) -> None:
        """Re-derive the model views; no data is refetched."""
        if not isinstance(event.value, str) or event.value == self.selected_model:
            return
        self.selected_model = event.value
        self._show_model_views()

    @on(Button.Pressed, "#toggle-all-btn")
    def on_toggle_pressed(self, event: Button.Pressed) -> None:
        self.action_toggle_all()

    def action_toggle_all(self) -> None:
        self.show_all = not self.show_all

    def action_reload(self) -> None:
        """Fetch the manifest again and replace the record set."""
        self._load_records()

    def action_quit(self) -> None:
        self.app.exit()

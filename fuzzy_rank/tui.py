from __future__ import annotations

import time
from collections.abc import Sequence

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.events import Key, Paste, Resize
from textual.widgets import OptionList, Static

from fuzzy_rank.models import Match
from fuzzy_rank.rendering import (
    format_match_summary,
    highlight_match,
    render_match_details,
)
from fuzzy_rank.search import find
from fuzzy_rank.weights import DEFAULT_WEIGHTS, ScoringWeights


class FuzzyFinderTui(App[None]):
    CSS = """
    #body {
        height: 1fr;
    }
    #sidebar {
        width: 2fr;
        border: round $accent;
    }
    #results {
        height: 1fr;
    }
    #status {
        height: auto;
        color: $text-muted;
    }
    #main-panel {
        width: 3fr;
        border: round $accent;
    }
    """
    ENABLE_COMMAND_PALETTE = False
    DEFAULT_RESULT_LIMIT = 200
    BINDINGS = [
        Binding("escape", "escape", "Clear"),
        Binding("ctrl+c", "quit", "Quit"),
    ]

    def __init__(
        self,
        candidates: Sequence[str],
        *,
        limit: int = DEFAULT_RESULT_LIMIT,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
    ) -> None:
        super().__init__()
        self._candidates = candidates
        self._limit = max(1, limit)
        self._weights = weights
        self._search_query = ""
        self._matches: list[Match] = []
        self._visible_matches: list[Match] = []
        self._last_elapsed = 0.0

    def compose(self) -> ComposeResult:
        with Horizontal(id="body"):
            with Vertical(id="sidebar"):
                yield OptionList(id="results")
                yield Static("", id="status")
            with Vertical(id="main-panel"):
                yield Static("Type a pattern to search.", id="details")

    def on_mount(self) -> None:
        self.query_one("#results", OptionList).focus()
        self._filter_candidates()

    @property
    def pattern(self) -> str:
        return self._search_query.strip()

    def _filter_candidates(self) -> None:
        pattern = self.pattern
        started = time.perf_counter()
        self._matches = find(pattern, self._candidates, weights=self._weights)
        self._last_elapsed = time.perf_counter() - started
        self._visible_matches = self._matches[: self._limit]
        self._render_result_options()
        self._update_status()
        self._update_filter_indicator()
        if self._visible_matches:
            self._show_match_details(self._visible_matches[0])
        else:
            self._show_placeholder()

    def _render_result_options(self) -> None:
        results = self.query_one("#results", OptionList)
        results.clear_options()
        if self._visible_matches:
            results.add_options(highlight_match(match) for match in self._visible_matches)
            results.action_first()
            return
        if self.pattern:
            results.add_option("No candidates match the current pattern.")

    def _status_text(self) -> str:
        if not self.pattern:
            return f"{len(self._candidates):,} candidates loaded."
        summary = format_match_summary(len(self._matches), self._last_elapsed)
        hidden = len(self._matches) - len(self._visible_matches)
        if hidden > 0:
            summary += f" (showing first {len(self._visible_matches):,})"
        return summary

    def _update_status(self) -> None:
        self.query_one("#status", Static).update(self._status_text())

    def _filter_indicator_text(self) -> Text:
        indicator = Text()
        indicator.append(">", style="bold red")
        indicator.append(f" {self._search_query}_", style="bold white")
        return indicator

    def _update_filter_indicator(self) -> None:
        sidebar = self.query_one("#sidebar", Vertical)
        sidebar.border_title = self._filter_indicator_text()

    def _main_panel_content_width(self) -> int:
        main_panel = self.query_one("#main-panel", Vertical)
        return max(40, main_panel.size.width - 4)

    def _show_match_details(self, match: Match) -> None:
        self.query_one("#details", Static).update(
            render_match_details(
                self.pattern,
                match,
                content_width=self._main_panel_content_width(),
            )
        )

    def _show_placeholder(self) -> None:
        message = (
            "No candidates match the current pattern."
            if self.pattern
            else "Type a pattern to search."
        )
        self.query_one("#details", Static).update(message)

    def _set_search_query(self, query: str) -> None:
        self._search_query = query
        self._filter_candidates()

    def action_escape(self) -> None:
        if self._search_query:
            self._set_search_query("")
            return
        self.exit()

    def on_key(self, event: Key) -> None:
        if event.key == "backspace":
            self._set_search_query(self._search_query[:-1])
            event.stop()
            return

        if event.key == "space":
            self._set_search_query(self._search_query + " ")
            event.stop()
            return

        if event.character and event.character.isprintable():
            self._set_search_query(self._search_query + event.character)
            event.stop()

    def on_paste(self, event: Paste) -> None:
        sanitized = event.text.replace("\r", "").replace("\n", "")
        if not sanitized:
            return
        self._set_search_query(self._search_query + sanitized)
        event.stop()

    def on_resize(self, event: Resize) -> None:
        del event
        self.call_after_refresh(self._refresh_after_resize)

    def _refresh_after_resize(self) -> None:
        highlighted = self._highlighted_match()
        if highlighted is not None:
            self._show_match_details(highlighted)

    def _highlighted_match(self) -> Match | None:
        highlighted = self.query_one("#results", OptionList).highlighted
        if highlighted is None or highlighted >= len(self._visible_matches):
            return None
        return self._visible_matches[highlighted]

    def on_option_list_option_highlighted(
        self, event: OptionList.OptionHighlighted
    ) -> None:
        del event
        match = self._highlighted_match()
        if match is not None:
            self._show_match_details(match)

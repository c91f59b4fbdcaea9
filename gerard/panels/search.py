"""
Search Panel - The launcher window: search entry above a ranked result list.

Features:
- Every edit of the search entry re-ranks the pipeline (no debouncing)
- Result rows (icon + name) are rebuilt whenever a new view is published
- The best match is preselected, so typing then Enter launches it
- Keyboard navigation (arrow keys, Enter to launch, Escape to close)
- Click a row to launch it
"""

from ignis import widgets
from gi.repository import Gtk, Gdk
from loguru import logger

from gerard.search.entry import ScoredEntry
from gerard.search.pipeline import RankingPipeline
from gerard.services.launcher import Activator, LaunchFailure
from gerard.utils.helpers import exit_launcher


class SearchPanel:
    """
    View binding for the ranking pipeline.

    Renders pipeline.view and feeds the search text back into
    pipeline.set_query().
    """

    def __init__(self, pipeline: RankingPipeline, activator: Activator, settings: dict):
        self.pipeline = pipeline
        self.activator = activator
        self.width = settings["launcher"]["width"]
        self.height = settings["launcher"]["height"]

        # Rows currently displayed, in view order
        self.rows: list[ScoredEntry] = list(pipeline.view)

        # Widgets (created in create_window)
        self.search_entry = None
        self.results_box = None
        self.results_scroll = None

        # Keyboard navigation
        self.selected_index = 0 if self.rows else -1
        self.result_buttons = []

        self.pipeline.subscribe(self._on_view_changed)

    def create_window(self):
        """
        Create the launcher window.

        Returns:
            widgets.Window with the search entry and scrollable results
        """
        self.search_entry = widgets.Entry(
            placeholder_text="Search applications...",
            css_classes=["search-entry"],
            hexpand=True,
            on_change=lambda x: self._on_search_changed(),
        )

        self.results_box = widgets.Box(
            vertical=True,
            spacing=2,
            css_classes=["search-results"],
        )

        self.results_scroll = widgets.Scroll(
            vexpand=True,
            hscrollbar_policy="never",
            min_content_width=360,
            child=self.results_box,
        )

        # Initial population
        self._update_results()

        window = widgets.Window(
            namespace="gerard",
            exclusivity="normal",
            kb_mode="exclusive",
            layer="top",
            default_width=self.width,
            default_height=self.height,
            child=widgets.Box(
                vertical=True,
                spacing=1,
                css_classes=["panel", "search-panel"],
                child=[
                    self.search_entry,
                    self.results_scroll,
                ],
            ),
        )

        key_controller = Gtk.EventControllerKey()
        key_controller.connect("key-pressed", self._on_key_press)
        window.add_controller(key_controller)

        return window

    def _on_search_changed(self):
        """Handle search entry text changes."""
        self.pipeline.set_query(self.search_entry.text)

    def _on_view_changed(self, view):
        """Pipeline published a new view: redraw from scratch."""
        self.rows = list(view)
        self.selected_index = 0 if self.rows else -1
        if self.results_box is not None:
            self._update_results()

    def _update_results(self):
        """Rebuild results list from the current rows."""
        child = self.results_box.get_first_child()
        while child:
            next_child = child.get_next_sibling()
            self.results_box.remove(child)
            child = next_child

        self.result_buttons = []
        for scored in self.rows:
            button = self._create_result_button(scored)
            self.results_box.append(button)
            self.result_buttons.append(button)

        self._update_selection_highlight()

    def _create_result_button(self, scored: ScoredEntry):
        """
        Create a row for one result.

        Args:
            scored: Entry and its score for the current query

        Returns:
            widgets.Button with icon and label
        """
        return widgets.Button(
            css_classes=["app-item", "result-item"],
            on_click=lambda x, scored=scored: self._activate(scored),
            child=widgets.Box(
                spacing=8,
                child=[
                    widgets.Icon(
                        image=scored.icon_reference or "application-x-executable",
                        pixel_size=32,
                        css_classes=["app-icon"],
                    ),
                    widgets.Label(
                        label=scored.display_name,
                        css_classes=["app-name"],
                        ellipsize="end",
                        max_width_chars=45,
                    ),
                ],
            ),
        )

    def _activate(self, scored: ScoredEntry):
        """Launch the entry; on failure keep the launcher open."""
        try:
            self.activator.activate(scored.entry)
        except LaunchFailure:
            logger.exception(f"Launching {scored.display_name} failed")

    def _on_key_press(self, controller, keyval, keycode, state):
        """Handle keyboard events - arrows for navigation, Enter to launch, Escape to close."""
        if keyval == Gdk.KEY_Escape:
            exit_launcher()
            return True

        if not self.rows:
            return False

        if keyval == Gdk.KEY_Down:
            if self.selected_index < len(self.rows) - 1:
                self.selected_index += 1
                self._update_selection_highlight()
                self._scroll_to_selected()
            return True

        elif keyval == Gdk.KEY_Up:
            if self.selected_index > 0:
                self.selected_index -= 1
                self._update_selection_highlight()
                self._scroll_to_selected()
            return True

        elif keyval in (Gdk.KEY_Return, Gdk.KEY_KP_Enter):
            if 0 <= self.selected_index < len(self.rows):
                self._activate(self.rows[self.selected_index])
                return True

        return False

    def _update_selection_highlight(self):
        """Update visual highlight for keyboard navigation."""
        for i, button in enumerate(self.result_buttons):
            if i == self.selected_index:
                button.add_css_class("keyboard-selected")
            else:
                button.remove_css_class("keyboard-selected")

    def _scroll_to_selected(self):
        """Scroll the results so the selected row is visible, keeping entry focus."""
        if self.results_scroll is None or not 0 <= self.selected_index < len(self.result_buttons):
            return

        button = self.result_buttons[self.selected_index]
        found, bounds = button.compute_bounds(self.results_box)
        if not found:
            return

        top = bounds.get_y()
        self.results_scroll.get_vadjustment().clamp_page(top, top + bounds.get_height())

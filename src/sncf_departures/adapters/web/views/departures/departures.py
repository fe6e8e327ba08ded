"""Departures LiveView for displaying the SNCF departures table."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pyview import LiveView, LiveViewSocket
from pyview.template.live_template import LiveRender, LiveTemplate
from pyview.vendor import ibis

from sncf_departures.adapters.web.builders import DepartureViewBuilder
from sncf_departures.adapters.web.state import DeparturesState, State

logger = logging.getLogger(__name__)

TEMPLATE_PATH = Path(__file__).resolve().parent / "departures.html"


def load_template() -> ibis.Template:
    """Load the departures template from disk."""
    return ibis.Template(TEMPLATE_PATH.read_text(encoding="utf-8"))


class DeparturesLiveView(LiveView[DeparturesState]):
    """LiveView rendering the departures model loaded at startup."""

    def __init__(self, state_manager: State, view_builder: DepartureViewBuilder) -> None:
        """Initialize the LiveView.

        Args:
            state_manager: Shared state holding the departures model.
            view_builder: Builder turning the model into template assigns.
        """
        super().__init__()
        self.state_manager = state_manager
        self.view_builder = view_builder

    async def mount(self, socket: LiveViewSocket[DeparturesState], _session: dict) -> None:
        """Mount the LiveView with the shared departures state."""
        socket.context = self.state_manager.departures_state

    def _resolve_state(self, assigns: DeparturesState | dict) -> DeparturesState:
        """Get the state to render from assigns, falling back to the shared state."""
        if isinstance(assigns, DeparturesState):
            return assigns
        if isinstance(assigns, dict):
            state = assigns.get("context")
            if isinstance(state, DeparturesState):
                return state
        return self.state_manager.departures_state

    def build_template_assigns(self, state: DeparturesState) -> dict[str, Any]:
        """Build template variables for the given state."""
        return self.view_builder.build(state.model)

    async def render(self, assigns: DeparturesState | dict, meta: Any) -> LiveRender:
        """Render the HTML template."""
        state = self._resolve_state(assigns)
        template_assigns = self.build_template_assigns(state)
        logger.debug(f"Rendering departures view, branch={template_assigns['branch']}")
        return LiveRender(LiveTemplate(load_template()), template_assigns, meta)


def create_departures_live_view(
    state_manager: State, view_builder: DepartureViewBuilder
) -> type[DeparturesLiveView]:
    """Create a configured DeparturesLiveView class.

    PyView's add_live_view expects a class, not an instance, so the
    dependencies are captured in a subclass.

    Args:
        state_manager: Shared state holding the departures model.
        view_builder: Builder turning the model into template assigns.

    Returns:
        A configured DeparturesLiveView class that can be registered with PyView.
    """
    captured_state = state_manager
    captured_view_builder = view_builder

    class ConfiguredDeparturesLiveView(DeparturesLiveView):
        """Configured LiveView for the departures page."""

        def __init__(self) -> None:
            super().__init__(captured_state, captured_view_builder)

    return ConfiguredDeparturesLiveView

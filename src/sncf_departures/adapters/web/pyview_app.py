"""PyView web adapter for displaying departures."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sncf_departures.adapters.config import AppConfig
from sncf_departures.domain.ports import DisplayAdapter

from .builders import DepartureViewBuilder
from .formatters import DepartureFormatter
from .state import State
from .views.departures import create_departures_live_view

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from pyview import PyView

    from sncf_departures.application.services import DepartureLoadingService
    from sncf_departures.domain.models import DeparturesModel


class PyViewWebAdapter(DisplayAdapter):
    """PyView-based web adapter serving the departures page at '/'."""

    def __init__(self, loading_service: DepartureLoadingService, config: AppConfig) -> None:
        """Initialize the web adapter.

        Args:
            loading_service: Service performing the single departures fetch.
            config: Application configuration.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")

        self.loading_service = loading_service
        self.config = config
        self.state = State()
        self.view_builder = DepartureViewBuilder(DepartureFormatter(), config.title)
        self._server: Any | None = None

    async def display_model(self, model: DeparturesModel) -> None:
        """Store the model so every connection renders it."""
        self.state.set_model(model)

    async def load_departures(self) -> None:
        """Run the single departures fetch and display its result."""
        model = await self.loading_service.load(self.state.model)
        await self.display_model(model)

    def build_app(self) -> PyView:
        """Build the PyView application with the departures page and a health check."""
        from pyview import PyView
        from pyview.template import defaultRootTemplate
        from starlette.responses import Response
        from starlette.routing import Route

        app = PyView()
        app.rootTemplate = defaultRootTemplate(
            title=self.config.title,
            title_suffix="",  # Empty suffix to prevent " | LiveView" from appearing
        )

        app.add_live_view("/", create_departures_live_view(self.state, self.view_builder))

        async def healthz(_request: Any) -> Response:
            """Health check endpoint for load balancers and monitoring."""
            return Response(content="Ok", media_type="text/plain")

        app.routes.append(Route("/healthz", healthz, methods=["GET"]))
        return app

    async def start(self) -> None:
        """Fetch departures once, then start the web server."""
        import uvicorn

        if not self.state.is_loaded:
            await self.load_departures()

        app = self.build_app()
        config = uvicorn.Config(
            app,
            host=self.config.host,
            port=self.config.port,
            log_level="info",
        )
        self._server = uvicorn.Server(config)
        logger.info(f"Serving departures at http://{self.config.host}:{self.config.port}/")

        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._server:
            self._server.should_exit = True

"""Application wiring for the Carnavalito front-end."""

from __future__ import annotations

from typing import Optional

from carnavalito.utils.logging_config import configure_logging
from carnavalito.utils.observability import get_logger
from carnavalito.utils.telemetry import StructuredTelemetry, TelemetryLogger

from .config import Settings
from .services.poetry_service import PoetryService
from .ui.gradio import create_interface


class CarnavalitoApp:
    """High-level facade bundling settings, the poetry service and the UI."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        service: Optional[PoetryService] = None,
        telemetry: Optional[StructuredTelemetry] = None,
    ) -> None:
        self.settings = settings or Settings.from_env()
        self._logger = get_logger(__name__).bind(component="app_facade")

        if service is None:
            telemetry = telemetry or StructuredTelemetry(listeners=[TelemetryLogger()])
            service = PoetryService(settings=self.settings, telemetry=telemetry)
        self.service = service

        self._logger.info(
            "Application dependencies wired",
            context={
                "server_name": self.settings.server_name,
                "server_port": self.settings.server_port,
                "share": self.settings.share,
            },
        )

    def create_gradio_interface(self):
        return create_interface(self.service)

    def launch(self) -> None:
        interface = self.create_gradio_interface()
        interface.launch(
            server_name=self.settings.server_name,
            server_port=self.settings.server_port,
            share=self.settings.share,
        )


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    CarnavalitoApp(settings).launch()


__all__ = ["CarnavalitoApp", "main"]

import pytest

gr = pytest.importorskip("gradio")

from carnavalito.app.app import CarnavalitoApp
from carnavalito.app.config import Settings
from carnavalito.app.services.poetry_service import PoetryService
from carnavalito.app.ui.gradio import create_interface


def test_app_wires_a_service_from_settings():
    settings = Settings(server_port=9001)
    app = CarnavalitoApp(settings)

    assert app.settings is settings
    assert isinstance(app.service, PoetryService)
    assert app.service.settings is settings


def test_app_reuses_an_injected_service():
    service = PoetryService()
    app = CarnavalitoApp(Settings(), service=service)

    assert app.service is service


def test_create_interface_builds_blocks():
    demo = create_interface(PoetryService())

    assert isinstance(demo, gr.Blocks)


def test_launch_uses_server_settings(monkeypatch):
    calls = {}

    def fake_launch(self, **kwargs):
        calls.update(kwargs)

    monkeypatch.setattr(gr.Blocks, "launch", fake_launch)
    CarnavalitoApp(Settings(server_name="127.0.0.1", server_port=9002)).launch()

    assert calls == {"server_name": "127.0.0.1", "server_port": 9002, "share": False}

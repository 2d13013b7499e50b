"""Tests for the run.py launcher."""

import run


def test_main_returns_1_when_server_fails(monkeypatch, caplog):
    async def failing_run_api():
        raise OSError("address already in use")

    monkeypatch.setattr(run, "run_api", failing_run_api)
    assert run.main() == 1
    assert any("Server failed to start" in r.getMessage() for r in caplog.records)


def test_main_returns_0_on_interrupt(monkeypatch):
    async def interrupted_run_api():
        raise KeyboardInterrupt

    monkeypatch.setattr(run, "run_api", interrupted_run_api)
    assert run.main() == 0


def test_run_api_serves_configured_address(monkeypatch):
    captured = {}

    class FakeServer:
        def __init__(self, config):
            captured["config"] = config

        async def serve(self):
            captured["served"] = True

    monkeypatch.setattr(run, "Server", FakeServer)
    assert run.main() == 0
    config = captured["config"]
    assert config.host == run.settings.host
    assert config.port == run.settings.port
    assert config.app is run.app
    assert captured["served"] is True

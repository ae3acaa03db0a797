"""Entry point tests: configuration failures, uvicorn wiring, exit codes"""
from types import SimpleNamespace

import pytest
import uvicorn

from api import main as main_module


class FakeServer:
    """Stands in for uvicorn.Server and records how it was built"""
    instances = []
    fail_with = None

    def __init__(self, config):
        self.config = config
        self.ran = False
        FakeServer.instances.append(self)

    def run(self):
        self.ran = True
        if FakeServer.fail_with is not None:
            raise FakeServer.fail_with


@pytest.fixture
def fake_uvicorn(monkeypatch):
    FakeServer.instances = []
    FakeServer.fail_with = None
    monkeypatch.setattr(uvicorn, "Server", FakeServer)
    monkeypatch.setattr(uvicorn, "Config", lambda app, **kwargs: SimpleNamespace(app=app, **kwargs))
    for name in ("APP_PORT", "APP_HOST", "APP_LOG_LEVEL", "SHUTDOWN_GRACE_SECONDS", "TEMPLATES_DIR"):
        monkeypatch.delenv(name, raising=False)
    return FakeServer


def test_main_runs_server_with_settings(fake_uvicorn, monkeypatch):
    monkeypatch.setenv("APP_HOST", "127.0.0.1")
    monkeypatch.setenv("APP_PORT", "9123")
    monkeypatch.setenv("SHUTDOWN_GRACE_SECONDS", "7")

    main_module.main()

    server = fake_uvicorn.instances[0]
    assert server.ran
    assert server.config.host == "127.0.0.1"
    assert server.config.port == 9123
    assert server.config.timeout_graceful_shutdown == 7
    assert server.config.log_level == "info"
    assert server.config.app.state.catalog is not None


def test_invalid_port_exits_with_error(fake_uvicorn, monkeypatch):
    monkeypatch.setenv("APP_PORT", "0")

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 1
    assert fake_uvicorn.instances == []


def test_missing_templates_exits_with_error(fake_uvicorn, monkeypatch, tmp_path):
    monkeypatch.setenv("TEMPLATES_DIR", str(tmp_path / "missing"))

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 1
    assert fake_uvicorn.instances == []


def test_server_error_exits_non_zero(fake_uvicorn):
    fake_uvicorn.fail_with = OSError("address already in use")

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 1
    assert fake_uvicorn.instances[0].ran

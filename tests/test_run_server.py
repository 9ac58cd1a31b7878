from __future__ import annotations

import socket

import pytest

import run_server


def test_main_passes_host_and_port_to_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setattr(run_server.uvicorn, "run", lambda app, **kw: calls.append((app, kw)))

    assert run_server.main(["--host", "127.0.0.1", "--port", "9001"]) == 0
    assert calls == [("api.main:app", {"host": "127.0.0.1", "port": 9001, "log_config": None})]


def test_main_defaults_to_settings(monkeypatch):
    calls = []
    monkeypatch.setattr(run_server.uvicorn, "run", lambda app, **kw: calls.append(kw))

    run_server.main([])
    assert calls[0]["host"] == run_server.settings.HOST
    assert calls[0]["port"] == run_server.settings.PORT


def test_port_in_use_exits_non_zero_with_diagnostic(capsys):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as busy:
        busy.bind(("127.0.0.1", 0))
        busy.listen(1)
        port = busy.getsockname()[1]

        with pytest.raises(SystemExit) as exc:
            run_server.main(["--host", "127.0.0.1", "--port", str(port)])

    assert exc.value.code != 0
    assert f"Failed to start server on 127.0.0.1:{port}" in capsys.readouterr().err

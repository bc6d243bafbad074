"""Tests for main module."""

import pytest

from photo_gallery import main as main_module


def test_main_runs_uvicorn(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    calls: list[dict[str, object]] = []

    def fake_run(app: str, **kwargs: object) -> None:
        calls.append({"app": app, **kwargs})

    monkeypatch.setenv("PORT", "4321")
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.setattr(main_module.uvicorn, "run", fake_run)

    main_module.main()

    assert calls == [
        {
            "app": "photo_gallery.api.asgi:app",
            "host": "0.0.0.0",
            "port": 4321,
            "reload": False,
        }
    ]
    assert "Photo Gallery" in capsys.readouterr().out

# tests/test_bootstrap.py

from __future__ import annotations

from types import SimpleNamespace

from astronaut_scheduler.cli.bootstrap import create_initial_state
from astronaut_scheduler.config import Settings


def test_create_initial_state_watches_configured_crew() -> None:
    out: list[str] = []
    settings = SimpleNamespace(crew=["Neil", "Buzz"], default_priority="Medium")

    state = create_initial_state(settings=settings, emit=out.append)
    state.manager.notify("hello")

    assert state.manager.is_empty
    assert out == ["[NOTIFY Neil]: hello", "[NOTIFY Buzz]: hello"]


def test_settings_from_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("ASTRO_CREW", "Neil, Buzz Michael")
    monkeypatch.setenv("ASTRO_LOG_COLOR", "off")
    monkeypatch.setenv("ASTRO_LOG_DIR", str(tmp_path))
    monkeypatch.delenv("ASTRO_DEFAULT_PRIORITY", raising=False)

    settings = Settings.from_env()

    assert settings.crew == ["Neil", "Buzz", "Michael"]
    assert settings.log_color is False
    assert settings.log_dir == tmp_path
    assert settings.default_priority == "Medium"

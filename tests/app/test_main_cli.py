from __future__ import annotations

import pytest

from friendsync import main as main_module
from friendsync.config import SteamConfig
from friendsync.domain.errors import FetchTransportError, StoreFailure


@pytest.fixture
def steam_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STEAM_API_KEY", "env-key")
    monkeypatch.setenv("STEAM_ROOT_ID", "76561197996714010")


@pytest.mark.usefixtures("steam_env")
def test_main_cli_runs_sync_with_environment_config(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_sync(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(main_module, "sync_steam_friends", fake_sync)

    main_module.main([])

    config = captured["config"]
    assert isinstance(config, SteamConfig)
    assert config.api_key == "env-key"
    assert config.root_steam_id == 76561197996714010


def test_main_cli_missing_root_id_exits_with_config_error(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("STEAM_API_KEY", "env-key")
    monkeypatch.delenv("STEAM_ROOT_ID", raising=False)

    def fake_sync(**_: object) -> None:
        raise AssertionError("sync should not run")

    monkeypatch.setattr(main_module, "sync_steam_friends", fake_sync)

    with pytest.raises(SystemExit) as excinfo:
        main_module.main([])

    assert excinfo.value.code == 2


@pytest.mark.usefixtures("steam_env")
@pytest.mark.parametrize(
    "error",
    [FetchTransportError("HTTP 401", status_code=401), StoreFailure("disk full")],
)
def test_main_cli_sync_failure_exits_with_error(
    monkeypatch: pytest.MonkeyPatch,
    error: Exception,
) -> None:
    def fake_sync(**_: object) -> None:
        raise error

    monkeypatch.setattr(main_module, "sync_steam_friends", fake_sync)

    with pytest.raises(SystemExit) as excinfo:
        main_module.main([])

    assert excinfo.value.code == 1


def test_main_cli_rejects_unknown_flags() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["--limit", "5"])

    assert excinfo.value.code == 2

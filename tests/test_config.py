import pytest

from task_tracker.core.config import Settings, is_production, validate_config


def test_defaults_are_valid() -> None:
    config = Settings(DATABASE_URL="sqlite://")

    validate_config(config)

    assert config.PORT == 8080
    assert not is_production(config)


def test_values_come_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql://tasks@db/tasks")
    monkeypatch.setenv("DB_POOL_SIZE", "20")
    monkeypatch.setenv("ENVIRONMENT", "production")

    config = Settings()

    assert config.DATABASE_URL == "postgresql://tasks@db/tasks"
    assert config.DB_POOL_SIZE == 20
    assert is_production(config)


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"ENVIRONMENT": "qa"}, "ENVIRONMENT"),
        ({"DB_POOL_SIZE": 0}, "DB_POOL_SIZE"),
        ({"DB_MAX_OVERFLOW": -1}, "DB_MAX_OVERFLOW"),
        ({"DB_POOL_TIMEOUT": -5}, "DB_POOL_TIMEOUT"),
        ({"DATABASE_URL": ""}, "DATABASE_URL"),
        ({"ENVIRONMENT": "production", "DEBUG": True}, "DEBUG"),
    ],
)
def test_validate_config_rejects_bad_settings(overrides: dict, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        validate_config(Settings(**overrides))

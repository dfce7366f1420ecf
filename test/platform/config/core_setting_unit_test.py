from pathlib import Path

import pytest

from src.platform.config.core_setting import Settings


pytestmark = pytest.mark.unit

ENV_EXAMPLE = Path(__file__).resolve().parents[3] / '.env.example'


class TestSettings:
    def test_shipped_env_example_loads(self, monkeypatch):
        monkeypatch.delenv('BACKEND_CORS_ORIGINS', raising=False)

        settings = Settings(_env_file=ENV_EXAMPLE)

        assert settings.BACKEND_CORS_ORIGINS == ['http://localhost:3000']
        assert settings.UTILIZATION_TIME_UNIT == 30
        assert settings.MIN_HOURS_FOR_SAME_DAY_RESERVATION == 3

    def test_cors_origins_from_comma_separated_env(self, monkeypatch):
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', 'http://a.test, http://b.test,')

        settings = Settings(_env_file=None)

        assert settings.BACKEND_CORS_ORIGINS == ['http://a.test', 'http://b.test']

    def test_cors_origins_from_json_list_env(self, monkeypatch):
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', '["http://a.test"]')

        settings = Settings(_env_file=None)

        assert settings.BACKEND_CORS_ORIGINS == ['http://a.test']

    def test_time_unit_must_fit_in_an_hour(self, monkeypatch):
        monkeypatch.setenv('UTILIZATION_TIME_UNIT', '60')

        with pytest.raises(ValueError):
            Settings(_env_file=None)

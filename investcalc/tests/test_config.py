from investcalc.app import create_app
from investcalc.app.config import DEFAULT_CORS_ORIGINS, AppSettings


def test_settings_defaults_without_environment():
    settings = AppSettings.from_env({})

    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert settings.log_level == "INFO"


def test_settings_read_from_environment():
    settings = AppSettings.from_env(
        {
            "INVESTCALC_CORS_ORIGINS": "https://calc.example.com, http://localhost:3000,",
            "INVESTCALC_LOG_LEVEL": "debug",
        }
    )

    assert settings.cors_origins == ("https://calc.example.com", "http://localhost:3000")
    assert settings.log_level == "DEBUG"


def test_create_app_keeps_settings():
    settings = AppSettings(cors_origins=("http://localhost:3000",), log_level="WARNING")

    app = create_app(settings)

    assert app.config["INVESTCALC_SETTINGS"] is settings

import os


def get_settings_module() -> str:
    # APP_ENV selects the settings module, default 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "checkin_system.settings.production"

    if env in {"test", "testing"}:
        return "checkin_system.settings.testing"

    return "checkin_system.settings.development"

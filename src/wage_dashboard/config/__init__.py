import os


def get_settings_module() -> str:
    # Environment comes from APP_ENV, default is 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "wage_dashboard.config.production"

    if env in {"test", "testing"}:
        return "wage_dashboard.config.testing"

    return "wage_dashboard.config.development"

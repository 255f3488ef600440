from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # App
    app_name: str = "weather-widget"
    log_level: str = "INFO"

    # Provider
    openweather_api_key: str
    openweather_base_url: str = "https://api.openweathermap.org/data/2.5"

    # Gateway (as seen by the widget)
    gateway_url: str = "http://127.0.0.1:8000/api/weather"
    gateway_timeout_seconds: float = 10.0

    # Widget
    default_city: str = "Nairobi"
    hint_show_after_ms: int = 1000
    hint_hide_after_ms: int = 4000


settings = Settings()

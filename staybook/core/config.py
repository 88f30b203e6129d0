from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    BOOKING_API_BASE_URL: str | None = None
    PROPERTY_API_BASE_URL: str | None = None
    HTTP_TIMEOUT_SECONDS: float = 10.0

    BOOKING_CONFIRMATION_DELAY_SECONDS: float = 2.0
    # Card number is sent grouped ("1234 5678 ...") unless this is enabled.
    BOOKING_DESPACE_CARD_NUMBER: bool = False

    REVIEWS_PREVIEW_COUNT: int = 3


settings = Settings()

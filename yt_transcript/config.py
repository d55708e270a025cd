from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Transcript Defaults
    TRANSCRIPT_LANG: str = "en"
    OUTPUT_FORMAT: str = "json"

    # Innertube Player API
    INNERTUBE_PLAYER_URL: str = "https://www.youtube.com/youtubei/v1/player"
    INNERTUBE_CLIENT_NAME: str = "ANDROID"
    INNERTUBE_CLIENT_VERSION: str = "20.10.38"

    # System Settings
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()

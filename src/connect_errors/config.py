from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables.

    Fields map to CONNECT_ERRORS_* env vars (case-insensitive). In development
    a .env file is also read if present.
    """

    # Shown by ClassifiedError.user_message() when there is no known code,
    # no backend message and no caller-supplied fallback
    fallback_message: str = "An error occurred"

    # Log a warning when a response carries a code missing from ErrorCode.
    # That usually means this client is behind the backend's code list.
    warn_on_unknown_code: bool = True

    model_config = SettingsConfigDict(
        env_prefix="CONNECT_ERRORS_",
        env_file=".env",  # Load from .env in development
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


settings = Settings()

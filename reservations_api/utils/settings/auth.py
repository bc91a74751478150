from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Plain string so tests can sign tokens with the same value
    JWT_SECRET: str = "change-me-local-development-secret"
    JWT_ISSUER: str = "reservations-api"
    JWT_AUDIENCE: str = "reservations-api"
    JWT_EXPIRE_DAYS: int = 1

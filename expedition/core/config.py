from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    DEFAULT_LANGUAGE: str = "fr"

    # "sqlite" (local snapshot), "supabase" (remote table) or "memory"
    STORE_BACKEND: str = "sqlite"

    LOCAL_SNAPSHOT_PATH: str = "./data/registrations.sqlite.b64"
    LOCAL_BASELINE_PATH: str = "./data/database.sqlite"

    SUPABASE_URL: str | None = None
    SUPABASE_ANON_KEY: str | None = None
    # Key used by the admin dashboard (select, update, delete); falls back to the anon key
    SUPABASE_SERVICE_KEY: str | None = None
    SUPABASE_TABLE: str = "registrations"
    SUPABASE_TIMEOUT_SECONDS: float = 10.0

    ADMIN_PASSWORD: str = "admin123"
    ADMIN_SESSION_TTL_SECONDS: int = 8 * 60 * 60

    WIZARD_SESSION_TTL_SECONDS: int = 60 * 60
    REGISTRATION_STRICT_VALIDATION: bool = True


settings = Settings()

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


_ENV_PATH = str(Path(__file__).resolve().parents[1] / ".env")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=_ENV_PATH, extra="ignore")

    # Empty key disables AI structuring; parsing then returns empty records.
    openai_api_key: str = ""

    supabase_url: str = ""
    supabase_key: str = ""
    resume_bucket: str = "resumes"

    log_level: str = "INFO"
    frontend_origin: str = "http://localhost:3000"


settings = Settings()

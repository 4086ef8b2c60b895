from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = "sqlite:///./worklog.db"
    log_level: str = "INFO"
    export_company_name: str = "Worklog"

    model_config = SettingsConfigDict(env_file=".env", env_prefix="")


settings = Settings()

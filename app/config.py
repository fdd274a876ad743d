from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

DEFAULT_CATEGORIES = ["Work", "Education", "Personal", "Travel", "Health", "Relationships"]


class Settings(BaseSettings):
    model_config = {"env_prefix": "LT_", "env_file": ".env", "env_file_encoding": "utf-8"}

    data_file: str = Field(default="data.json")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, validation_alias=AliasChoices("LT_PORT", "PORT"))
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)
    cors_origins: str = Field(default="*")
    static_dir: str = Field(default="public")
    seed_categories: list[str] = Field(default_factory=lambda: list(DEFAULT_CATEGORIES))

    # Client side
    preferences_file: str = Field(default="preferences.json")
    api_base_url: str = Field(default="http://localhost:3000/api")
    client_timeout: float = Field(default=10.0, gt=0)

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()

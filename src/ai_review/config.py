from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MODEL = "gpt-4.1-nano"


class Settings(BaseSettings):
    # GitHub Actions передаёт inputs как INPUT_<NAME>
    model_config = SettingsConfigDict(
        env_prefix="INPUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    github_token: str
    openai_api_key: str
    openai_api_model: str = DEFAULT_MODEL
    exclude: str = ""
    max_comments_per_pr: int = Field(default=10, ge=0)
    github_api_url: str = Field(
        default="https://api.github.com",
        validation_alias=AliasChoices("INPUT_GITHUB_API_URL", "GITHUB_API_URL"),
    )

    max_changes_per_chunk: int = 100
    min_changes_per_chunk: int = 3
    whole_file_max_hunks: int = 3
    min_comment_length: int = 20

    @field_validator("openai_api_model", mode="before")
    @classmethod
    def _default_model(cls, value):
        return value or DEFAULT_MODEL

    @field_validator("max_comments_per_pr", mode="before")
    @classmethod
    def _default_max_comments(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return 10
        return value

    @property
    def exclude_patterns(self) -> list[str]:
        return [p.strip() for p in self.exclude.split(",") if p.strip()]


def get_settings(**overrides) -> Settings:
    """Загрузить настройки из окружения, значения None из overrides игнорируются."""
    values = {k: v for k, v in overrides.items() if v is not None}
    return Settings(**values)

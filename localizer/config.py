import re

from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from localizer.i18n.culture import is_well_formed_culture

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Localizer"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Localization settings
    supported_cultures: list[str] = ["en", "ga"]
    default_culture: str = "en"
    default_ui_culture: str | None = None
    culture_parameter_index: int = Field(default=1, ge=0)
    excluded_routes: list[str] = [r"^/api/", r"^/docs", r"^/redoc", r"^/openapi\.json$", r"^/health$"]

    # Culture cookie settings
    culture_cookie_name: str = "culture"
    culture_cookie_max_age: int = 60 * 60 * 24 * 365
    set_culture_cookie: bool = False

    # Redirect "/" to "/<culture>" once a culture is resolved
    redirect_to_culture_path: bool = False

    # Logging settings
    log_level: str = "INFO"
    log_json: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("supported_cultures")
    @classmethod
    def validate_supported_cultures(cls, v):
        """Every supported culture must be of the form xx or xx-YY"""
        if not v:
            raise ValueError("At least one supported culture is required")
        for name in v:
            if not is_well_formed_culture(name):
                raise ValueError(f"Culture name '{name}' is not of the form 'xx' or 'xx-YY'")
        return v

    @field_validator("default_culture", "default_ui_culture")
    @classmethod
    def validate_default_culture(cls, v):
        if v is not None and not is_well_formed_culture(v):
            raise ValueError(f"Culture name '{v}' is not of the form 'xx' or 'xx-YY'")
        return v

    @field_validator("excluded_routes")
    @classmethod
    def validate_excluded_routes(cls, v):
        """Reject patterns that do not compile so a bad rule never goes unnoticed"""
        for pattern in v:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Excluded route pattern '{pattern}' is not a valid regular expression: {e}") from e
        return v

    @model_validator(mode="after")
    def fill_default_ui_culture(self):
        if self.default_ui_culture is None:
            self.default_ui_culture = self.default_culture
        return self


settings = Settings()

from pydantic import BaseModel, ConfigDict, Field, field_validator

VARIANT_RANGE = (8, 11)
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class TemplateRules(BaseModel):
    missing_value: str = ""


class PluckRules(BaseModel):
    path_separator: str = "."

    @field_validator("path_separator")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("path_separator must not be empty")
        return value


class UuidRules(BaseModel):
    variant_digits: list[int] = Field(default_factory=lambda: [8, 9, 10, 11])

    @field_validator("variant_digits")
    @classmethod
    def _rfc4122_variant(cls, value: list[int]) -> list[int]:
        if not value:
            raise ValueError("variant_digits must not be empty")
        low, high = VARIANT_RANGE
        bad = [d for d in value if not low <= d <= high]
        if bad:
            raise ValueError(f"variant_digits must be within {low}..{high}, got {bad}")
        return value


class LoggingRules(BaseModel):
    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}. Allowed: {list(LOG_LEVELS)}")
        return level


class Rules(BaseModel):
    """
    Library configuration.

    Every section has defaults, so Rules() is a complete configuration.
    Also serves as the RulesPort for every component.
    """

    template: TemplateRules = Field(default_factory=TemplateRules)
    pluck: PluckRules = Field(default_factory=PluckRules)
    uuid: UuidRules = Field(default_factory=UuidRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)

    model_config = ConfigDict(extra="forbid", frozen=True)

    def get_missing_value(self) -> str:
        return self.template.missing_value

    def get_path_separator(self) -> str:
        return self.pluck.path_separator

    def get_variant_digits(self) -> tuple[int, ...]:
        return tuple(self.uuid.variant_digits)

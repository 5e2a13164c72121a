"""Demo configuration schema."""
from typing import List

from pydantic import BaseModel, Field, field_validator

from solid_showcase.domain.base.value_objects import Principle, Variant
from solid_showcase.domain.principles.dip import DATA_SOURCES


class DemoConfig(BaseModel):
    """Which demos are available and how they run by default."""

    default_variant: Variant = Field(Variant.GOOD, description="Variant used when none is given")
    data_source: str = Field("firebase", description="Backend injected into the DIP demo")
    enabled_principles: List[Principle] = Field(
        default_factory=lambda: list(Principle),
        description="Principles whose demos are registered, in display order",
    )

    @field_validator("data_source")
    @classmethod
    def validate_data_source(cls, v: str) -> str:
        if v not in DATA_SOURCES:
            raise ValueError(f"Data source must be one of {list(DATA_SOURCES)}")
        return v

    @field_validator("enabled_principles")
    @classmethod
    def validate_enabled_principles(cls, v: List[Principle]) -> List[Principle]:
        """Drop duplicates while keeping the configured order."""
        seen: List[Principle] = []
        for principle in v:
            if principle not in seen:
                seen.append(principle)
        return seen

"""Data transfer objects returned by the demo application service."""
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from solid_showcase.domain.base.value_objects import Principle, Variant


class DemoSummary(BaseModel):
    """Description of one registered demo."""
    model_config = ConfigDict(frozen=True)

    principle: Principle
    name: str
    title: str
    summary: str

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


class DemoRun(BaseModel):
    """Captured output of one demo variant."""
    model_config = ConfigDict(frozen=True)

    principle: Principle
    variant: Variant
    title: str
    lines: List[str] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")

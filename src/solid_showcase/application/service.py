"""Demo application service - lists and runs the registered demos."""
from typing import List, Optional

from solid_showcase.application.dto import DemoRun, DemoSummary
from solid_showcase.domain.base.exceptions import DemoNotFoundError
from solid_showcase.domain.base.ports import DemoPort
from solid_showcase.domain.base.value_objects import Principle, Variant
from solid_showcase.infrastructure.adapters.output_adapters import RecordingOutputAdapter
from solid_showcase.infrastructure.logging.logger import get_logger
from solid_showcase.infrastructure.registry.demo_registry import DemoRegistry, UnsupportedDemoError


class DemoApplicationService:
    """Application service for listing and running principle demos."""

    def __init__(self, registry: DemoRegistry, default_variant: Variant = Variant.GOOD):
        self._registry = registry
        self._default_variant = default_variant
        self._logger = get_logger(__name__)

    @property
    def default_variant(self) -> Variant:
        return self._default_variant

    def list_demos(self) -> List[DemoSummary]:
        """List registered demos in registration order."""
        return [self.describe(principle) for principle in self._registry.get_registered_principles()]

    def describe(self, principle: Principle) -> DemoSummary:
        demo = self._create_demo(principle)
        return DemoSummary(
            principle=principle,
            name=principle.full_name,
            title=demo.title,
            summary=demo.summary,
        )

    def run_demo(self, principle: Principle, variant: Optional[Variant] = None) -> List[DemoRun]:
        """
        Run one demo and capture its output.

        Args:
            principle: Principle whose demo to run
            variant: bad, good or both; the configured default when None

        Returns:
            One DemoRun per concrete variant, violation first

        Raises:
            DemoNotFoundError: If no demo is registered for the principle
        """
        variant = variant or self._default_variant
        demo = self._create_demo(principle)
        return [self._run_variant(demo, concrete) for concrete in variant.expand()]

    def run_all(self, variant: Optional[Variant] = None) -> List[DemoRun]:
        """Run every registered demo in registration order."""
        runs: List[DemoRun] = []
        for principle in self._registry.get_registered_principles():
            runs.extend(self.run_demo(principle, variant))
        return runs

    def _create_demo(self, principle: Principle) -> DemoPort:
        try:
            return self._registry.create_demo(principle)
        except UnsupportedDemoError as e:
            available = [p.value for p in self._registry.get_registered_principles()]
            raise DemoNotFoundError(principle.value, available) from e

    def _run_variant(self, demo: DemoPort, variant: Variant) -> DemoRun:
        output = RecordingOutputAdapter()
        demo.run(variant, output)
        self._logger.info(
            "Demo executed",
            principle=demo.principle.value,
            variant=variant.value,
            line_count=len(output.lines),
        )
        return DemoRun(
            principle=demo.principle,
            variant=variant,
            title=demo.title,
            lines=output.lines,
        )

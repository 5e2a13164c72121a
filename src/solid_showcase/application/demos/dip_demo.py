"""DIP demo entry point."""
from solid_showcase.domain.base.ports import DemoPort, OutputPort
from solid_showcase.domain.base.value_objects import Principle
from solid_showcase.domain.principles.dip import DataFetcher, DataSource, LegacyDataFetcher, get_data_source_class
from solid_showcase.infrastructure.di.container import DIContainer


class DipDemo(DemoPort):
    """
    The refactored side resolves DataFetcher from a container in which
    DataSource is bound to the configured backend.
    """

    principle = Principle.DIP
    title = "Data fetcher"
    summary = (
        "The legacy fetcher builds its Firebase storage itself. "
        "The refactored fetcher receives any DataSource from the outside."
    )

    def __init__(self, data_source: str = "firebase"):
        self._data_source_class = get_data_source_class(data_source)

    def run_violation(self, output: OutputPort) -> None:
        LegacyDataFetcher(output).fetch()

    def run_refactored(self, output: OutputPort) -> None:
        container = DIContainer()
        container.register_instance(OutputPort, output)
        container.register_singleton(DataSource, self._data_source_class)
        container.get(DataFetcher).fetch()

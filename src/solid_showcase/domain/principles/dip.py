"""Dependency Inversion Principle - fetching data from a storage backend."""
from abc import ABC, abstractmethod
from typing import Dict, Type

from solid_showcase.domain.base.exceptions import ConfigurationError
from solid_showcase.domain.base.ports import OutputPort


class DataSource(ABC):
    """Storage backend the fetcher syncs from."""

    @abstractmethod
    def sync(self) -> None:
        pass


class FirebaseStorage(DataSource):
    def __init__(self, output: OutputPort):
        self._output = output

    def sync(self) -> None:
        self._output.write_line("Syncing the data from the firebase storage")


class LocalStorage(DataSource):
    def __init__(self, output: OutputPort):
        self._output = output

    def sync(self) -> None:
        self._output.write_line("Syncing the data from the local storage")


class LegacyDataFetcher:
    """Fetcher hard-wired to Firebase; the backend cannot be swapped."""

    def __init__(self, output: OutputPort):
        self._storage = FirebaseStorage(output)

    def fetch(self) -> None:
        self._storage.sync()


class DataFetcher:
    """Fetcher that receives its backend from the outside."""

    def __init__(self, data_source: DataSource):
        self._data_source = data_source

    def fetch(self) -> None:
        self._data_source.sync()


DATA_SOURCES: Dict[str, Type[DataSource]] = {
    "firebase": FirebaseStorage,
    "local": LocalStorage,
}


def get_data_source_class(name: str) -> Type[DataSource]:
    """Look up a DataSource implementation by its configuration name."""
    try:
        return DATA_SOURCES[name]
    except KeyError as e:
        raise ConfigurationError(
            f"Unknown data source '{name}'. Available: {', '.join(DATA_SOURCES)}"
        ) from e

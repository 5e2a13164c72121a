"""Tests for the DIP data fetcher types."""
from unittest.mock import Mock

import pytest

from solid_showcase.domain.base.exceptions import ConfigurationError
from solid_showcase.domain.principles.dip import (
    DataFetcher,
    DataSource,
    FirebaseStorage,
    LegacyDataFetcher,
    LocalStorage,
    get_data_source_class,
)


class TestDataFetcher:
    def test_fetch_from_firebase(self, recording_output):
        DataFetcher(FirebaseStorage(recording_output)).fetch()
        assert recording_output.lines == ["Syncing the data from the firebase storage"]

    def test_fetch_from_local_storage(self, recording_output):
        DataFetcher(LocalStorage(recording_output)).fetch()
        assert recording_output.lines == ["Syncing the data from the local storage"]

    def test_fetch_delegates_to_injected_source(self):
        source = Mock(spec=DataSource)
        DataFetcher(source).fetch()
        source.sync.assert_called_once_with()


class TestLegacyDataFetcher:
    def test_always_uses_firebase(self, recording_output):
        LegacyDataFetcher(recording_output).fetch()
        assert recording_output.lines == ["Syncing the data from the firebase storage"]


class TestDataSourceLookup:
    def test_known_names(self):
        assert get_data_source_class("firebase") is FirebaseStorage
        assert get_data_source_class("local") is LocalStorage

    def test_unknown_name_raises(self):
        with pytest.raises(ConfigurationError, match="Unknown data source 's3'"):
            get_data_source_class("s3")

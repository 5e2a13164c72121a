"""Tests for the LSP click listener types."""
from unittest.mock import Mock

from solid_showcase.domain.principles.lsp import (
    Button,
    ClickHandler,
    ClickListener,
    LegacyButton,
    LegacyClickHandler,
    LegacyRadioButton,
    RadioButton,
)


class TestClickHandler:
    def test_radio_button_enables_itself(self, recording_output):
        ClickHandler().perform_click(RadioButton(recording_output))
        assert recording_output.lines == ["Enable the radio button", "Clicked RadioButton 1"]

    def test_button_is_substitutable(self, recording_output):
        ClickHandler().perform_click(Button(recording_output))
        assert recording_output.lines == ["Enable the button", "Clicked Button 1"]

    def test_handler_only_calls_on_click(self):
        listener = Mock(spec=ClickListener)
        ClickHandler().perform_click(listener)
        listener.on_click.assert_called_once_with()


class TestLegacyClickHandler:
    def test_radio_button_needs_special_case(self, recording_output):
        LegacyClickHandler().perform_click(LegacyRadioButton(recording_output))
        assert recording_output.lines == ["Enable the radio button", "Clicked RadioButton 1"]

    def test_legacy_radio_button_alone_is_not_enabled(self, recording_output):
        LegacyRadioButton(recording_output).on_click()
        assert recording_output.lines == ["Clicked RadioButton 1"]

    def test_plain_button(self, recording_output):
        LegacyClickHandler().perform_click(LegacyButton(recording_output))
        assert recording_output.lines == ["Clicked Button 1"]

"""Tests for CLI output formatters."""
import json

import yaml

from solid_showcase.cli.formatters import format_output

RUN_SRP = {
    "principle": "srp",
    "variant": "good",
    "title": "User adapter",
    "lines": [
        "Name has been set as Android User to TextView",
        "Mobile number has been set as 987654321, 9999999999 to TextView",
    ],
}
RUN_OCP_BAD = {"principle": "ocp", "variant": "bad", "title": "Vehicle mileage calculator", "lines": ["50"]}
DEMO = {
    "principle": "lsp",
    "name": "Liskov Substitution Principle",
    "title": "Click listener",
    "summary": "Subtypes stand in for their base type.",
}


class TestTextFormat:
    def test_single_run_prints_lines_only(self):
        assert format_output({"runs": [RUN_SRP]}, "text") == "\n".join(RUN_SRP["lines"])

    def test_multiple_runs_have_headers(self):
        text = format_output({"runs": [RUN_OCP_BAD, RUN_SRP]}, "text")
        assert text.splitlines() == [
            "== OCP (bad): Vehicle mileage calculator ==",
            "50",
            "",
            "== SRP (good): User adapter ==",
            *RUN_SRP["lines"],
        ]

    def test_demo_listing(self):
        text = format_output({"demos": [DEMO]}, "text")
        assert text == "lsp  Liskov Substitution Principle  Click listener"

    def test_empty_listing(self):
        assert format_output({"demos": []}, "text") == "No demos registered."

    def test_demo_detail(self):
        text = format_output({"demo": DEMO}, "text")
        assert text.splitlines()[0] == "Principle: lsp"
        assert "  Summary: Subtypes stand in for their base type." in text.splitlines()


class TestStructuredFormats:
    def test_json(self):
        data = {"runs": [RUN_SRP]}
        assert json.loads(format_output(data, "json")) == data

    def test_yaml(self):
        data = {"demos": [DEMO]}
        assert yaml.safe_load(format_output(data, "yaml")) == data

    def test_unknown_format_falls_back_to_json(self):
        data = {"runs": [RUN_OCP_BAD]}
        assert json.loads(format_output(data, "xml")) == data


class TestTableFormat:
    def test_demo_table(self):
        table = format_output({"demos": [DEMO]}, "table")
        assert "Liskov Substitution Principle" in table
        assert "Click listener" in table

    def test_runs_table(self):
        table = format_output({"runs": [RUN_OCP_BAD]}, "table")
        assert "ocp" in table
        assert "50" in table

    def test_empty_runs_table(self):
        assert format_output({"runs": []}, "table") == "No demos run."

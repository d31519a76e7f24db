"""Tests for the text, JSON and table renderers."""

import json

from rich.console import Console

from adapters.json_exporter import JsonRenderer, parse_records_json
from adapters.text_exporter import HEADER, TextRenderer
from cli.ui_components import build_usage_table, format_free_pct
from core.domain.models import PoolUsageRecord
from core.domain.output import OutputFormat
from core.interfaces.renderer import RecordRenderer

RECORDS = [
    PoolUsageRecord(interface="bridge-lan", used=3, size=10),
    PoolUsageRecord(interface="vlan20", used=25, size=20),
]


def split_line(line: str) -> list[str]:
    return [cell.strip() for cell in line.split("\t")]


class TestTextRenderer:
    """Tests for TextRenderer."""

    def test_header_then_one_line_per_record(self):
        lines = TextRenderer().render(RECORDS).splitlines()

        assert lines[0] == "Interface\tUsed\tFree"
        assert split_line(lines[1]) == ["bridge-lan", "3", "7"]
        assert split_line(lines[2]) == ["vlan20", "25", "-5"]
        assert len(lines) == 3

    def test_keeps_historical_column_widths(self):
        line = TextRenderer().render(RECORDS[:1]).splitlines()[1]

        assert line == "bridge-lan\t           3\t   7"

    def test_no_records_prints_header_only(self):
        assert TextRenderer().render([]) == HEADER

    def test_error_with_detail(self):
        message = TextRenderer().render_error("Error fetching pool usage for pool p", "HTTP 500: boom")

        assert message == "Error fetching pool usage for pool p: HTTP 500: boom"


class TestJsonRenderer:
    """Tests for JsonRenderer."""

    def test_records_use_public_field_names(self):
        payload = json.loads(JsonRenderer().render(RECORDS))

        assert payload == [
            {"Interface": "bridge-lan", "Used": 3, "Size": 10},
            {"Interface": "vlan20", "Used": 25, "Size": 20},
        ]

    def test_output_is_compact(self):
        text = JsonRenderer().render(RECORDS[:1])

        assert text == '[{"Interface":"bridge-lan","Used":3,"Size":10}]'

    def test_empty_list(self):
        assert JsonRenderer().render([]) == "[]"

    def test_round_trip(self):
        assert parse_records_json(JsonRenderer().render(RECORDS)) == RECORDS

    def test_error_object_has_single_field(self):
        text = JsonRenderer().render_error("Error connecting to router", "HTTP 401: Unauthorized")

        assert json.loads(text) == {"Error": "Error connecting to router"}


def test_renderers_satisfy_protocol():
    assert isinstance(TextRenderer(), RecordRenderer)
    assert isinstance(JsonRenderer(), RecordRenderer)


class TestUsageTable:
    """Tests for the rich table output."""

    def test_free_percentage(self):
        assert format_free_pct(RECORDS[0]) == "70.0%"
        assert format_free_pct(PoolUsageRecord(interface="x", used=0, size=0)) == "n/a"

    def test_table_lists_every_interface(self):
        console = Console(width=120, record=True)
        console.print(build_usage_table(RECORDS))
        text = console.export_text()

        assert "bridge-lan" in text
        assert "vlan20" in text
        assert "-5" in text
        assert build_usage_table(RECORDS).row_count == 2


def test_output_format_resolution():
    assert OutputFormat.from_flags(json_flag=True, fmt=OutputFormat.TABLE) is OutputFormat.JSON
    assert OutputFormat.from_flags(json_flag=False, fmt=None) is OutputFormat.TEXT
    assert OutputFormat.from_flags(json_flag=False, fmt=OutputFormat.TABLE) is OutputFormat.TABLE
    assert OutputFormat.JSON.structured and not OutputFormat.TABLE.structured

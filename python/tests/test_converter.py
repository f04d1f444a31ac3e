"""Unit tests for the dict / JSON / YAML rendering

Tests cover:
- signal_to_dict: byte order, sign, verbatim scaling text, multiplexer
- message_to_dict: extended frames, senders
- dbc_to_dict / render: full documents in JSON and YAML
- convert_dbc_file: file I/O
"""

import json
from pathlib import Path

import pytest
import yaml

from dbc_import import Message, Node, Signal, Dbc
from dbc_import.converter import (
    convert_dbc_file,
    dbc_to_dict,
    message_to_dict,
    render,
    signal_to_dict,
)


def _signal(**overrides) -> Signal:
    fields = {
        "name": "Speed",
        "start_bit": 0,
        "size": 16,
        "is_little_endian": True,
        "is_signed": False,
        "factor": "0.01",
        "offset": "0",
        "value_min": "0",
        "value_max": "655.35",
        "unit": "kph",
        "receivers": ("ABS",),
    }
    fields.update(overrides)
    return Signal(**fields)


# ============================================================================
# SIGNAL CONVERSION
# ============================================================================

class TestSignalConversion:
    """Test signal_to_dict function"""

    def test_basic_signal(self):
        result = signal_to_dict(_signal())

        assert result == {
            "name": "Speed",
            "startBit": 0,
            "length": 16,
            "byteOrder": "little_endian",
            "signed": False,
            "factor": "0.01",
            "offset": "0",
            "minimum": "0",
            "maximum": "655.35",
            "unit": "kph",
            "receivers": ["ABS"],
        }

    def test_signal_big_endian_signed(self):
        result = signal_to_dict(_signal(is_little_endian=False, is_signed=True))

        assert result["byteOrder"] == "big_endian"
        assert result["signed"] is True

    def test_scientific_factor_kept(self):
        result = signal_to_dict(_signal(factor="1E-007"))

        assert result["factor"] == "1E-007"

    def test_multiplexer_only_when_present(self):
        assert "multiplexer" not in signal_to_dict(_signal())
        assert signal_to_dict(_signal(multiplexer_indicator="M"))["multiplexer"] == "M"


# ============================================================================
# MESSAGE CONVERSION
# ============================================================================

class TestMessageConversion:
    """Test message_to_dict function"""

    def test_standard_message(self):
        msg = Message(id=0x100, name="Engine", size=8, signals=(_signal(),), sender="ECU1")
        result = message_to_dict(msg)

        assert result["id"] == 0x100
        assert result["dlc"] == 8
        assert result["sender"] == "ECU1"
        assert len(result["signals"]) == 1
        assert "extended" not in result

    def test_extended_message(self):
        msg = Message(id=2566117891, name="MsgDummy1", size=8)
        result = message_to_dict(msg)

        assert result["extended"] is True
        assert result["id"] == 2566117891 - 0x80000000


# ============================================================================
# DOCUMENT RENDERING
# ============================================================================

class TestRender:
    """Test dbc_to_dict and render"""

    def test_dbc_to_dict(self, parser, sample_dbc_text):
        result = dbc_to_dict(parser.parse(sample_dbc_text))

        assert result["nodes"] == [{"name": "TCU"}, {"name": "VEHICLE"}]
        assert [len(m["signals"]) for m in result["messages"]] == [4, 2, 1]

    def test_empty_dbc(self):
        assert dbc_to_dict(Dbc()) == {"nodes": [], "messages": []}

    def test_json(self, parser, sample_dbc_text):
        data = json.loads(render(parser.parse(sample_dbc_text), "json"))

        assert data["messages"][1]["signals"][0]["minimum"] == "-214.7483648"

    def test_yaml(self, parser, sample_dbc_text):
        data = yaml.safe_load(render(parser.parse(sample_dbc_text), "yaml"))

        assert data["messages"][1]["signals"][0]["factor"] == "1E-007"
        assert data["nodes"][0]["name"] == "TCU"

    def test_text_not_supported(self):
        with pytest.raises(ValueError, match="cannot render"):
            render(Dbc(nodes=(Node("A"),)), "text")

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            render(Dbc(), "xml")


# ============================================================================
# FILE CONVERSION
# ============================================================================

class TestConvertDbcFile:
    """Test convert_dbc_file"""

    def test_returns_json(self, sample_dbc_file):
        data = json.loads(convert_dbc_file(sample_dbc_file))

        assert len(data["messages"]) == 3

    def test_writes_output(self, sample_dbc_file, tmp_path: Path):
        out = tmp_path / "out.yaml"
        rendered = convert_dbc_file(sample_dbc_file, out, fmt="yaml")

        assert out.read_text() == rendered
        assert yaml.safe_load(rendered)["messages"][2]["name"] == "MsgDummy3"

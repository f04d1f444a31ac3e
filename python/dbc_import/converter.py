"""Render a parsed ``Dbc`` as plain dicts, JSON or YAML.

The dict layout follows ``dbc_import.protocols``.  Scaling values are
emitted as the literal decimal text so nothing is rounded on the way
out.
"""

from __future__ import annotations

import json
from pathlib import Path

import yaml  # type: ignore[import-untyped]

from .loader import load_dbc
from .model import Dbc, Message, Node, Signal
from .protocols import (
    ByteOrder,
    DBCDefinition,
    DBCMessage,
    DBCNode,
    DBCSignal,
    OutputFormat,
)


def node_to_dict(node: Node) -> DBCNode:
    return {"name": node.name}


def signal_to_dict(signal: Signal) -> DBCSignal:
    """Convert a Signal to its dict form."""
    byte_order = ByteOrder.LITTLE_ENDIAN if signal.is_little_endian else ByteOrder.BIG_ENDIAN

    sig_dict: DBCSignal = {
        "name": signal.name,
        "startBit": signal.start_bit,
        "length": signal.size,
        "byteOrder": byte_order.value,
        "signed": signal.is_signed,
        "factor": signal.factor,
        "offset": signal.offset,
        "minimum": signal.value_min,
        "maximum": signal.value_max,
        "unit": signal.unit,
        "receivers": list(signal.receivers),
    }

    if signal.multiplexer_indicator is not None:
        sig_dict["multiplexer"] = signal.multiplexer_indicator

    return sig_dict


def message_to_dict(message: Message) -> DBCMessage:
    """Convert a Message and its signals to dict form."""
    msg_dict: DBCMessage = {
        "id": message.frame_id,
        "name": message.name,
        "dlc": message.size,
        "sender": message.sender,
        "signals": [signal_to_dict(sig) for sig in message.signals],
    }

    # Add extended field if needed
    if message.is_extended_frame:
        msg_dict["extended"] = True

    return msg_dict


def dbc_to_dict(dbc: Dbc) -> DBCDefinition:
    """Convert a whole Dbc to dict form."""
    return {
        "nodes": [node_to_dict(node) for node in dbc.nodes],
        "messages": [message_to_dict(msg) for msg in dbc.messages],
    }


def render(dbc: Dbc, fmt: OutputFormat | str = OutputFormat.JSON) -> str:
    """Serialize a Dbc as JSON or YAML.

    Raises:
        ValueError: If *fmt* is not "json" or "yaml"
    """
    fmt = OutputFormat(fmt)
    data = dbc_to_dict(dbc)

    if fmt is OutputFormat.JSON:
        return json.dumps(data, indent=2)
    if fmt is OutputFormat.YAML:
        return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)
    raise ValueError(f"cannot render DBC as {fmt.value!r}")


def convert_dbc_file(
    dbc_path: str | Path,
    output_path: str | Path | None = None,
    fmt: OutputFormat | str = OutputFormat.JSON,
    encoding: str = "cp1252",
) -> str:
    """
    Parse a .dbc file and render it, optionally writing the result.

    Args:
        dbc_path: Path to the .dbc file
        output_path: Optional path to write the rendered output
        fmt: "json" or "yaml"
        encoding: Text encoding of the .dbc file

    Returns:
        The rendered string

    Raises:
        DbcReadError: If the file cannot be read
        DbcParseError: If the file contains a malformed line
    """
    rendered = render(load_dbc(dbc_path, encoding=encoding), fmt)

    if output_path:
        Path(output_path).write_text(rendered)

    return rendered

"""Type definitions for the dict/JSON rendering of a parsed DBC

Defines TypedDict classes and Enums for the structures produced by
``dbc_import.converter``.
"""

from __future__ import annotations

from enum import Enum
from typing import NotRequired, TypedDict


class ByteOrder(str, Enum):
    """CAN signal byte order"""
    LITTLE_ENDIAN = "little_endian"
    BIG_ENDIAN = "big_endian"


class OutputFormat(str, Enum):
    """Renderings supported by the converter and CLI"""
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


# ============================================================================
# DBC Structure Types
# ============================================================================

class DBCNode(TypedDict):
    """Bus participant"""
    name: str


class DBCSignal(TypedDict):
    """DBC signal definition; scaling values stay as decimal text"""
    name: str
    startBit: int
    length: int
    byteOrder: str  # "little_endian" | "big_endian"
    signed: bool
    factor: str
    offset: str
    minimum: str
    maximum: str
    unit: str
    receivers: list[str]
    multiplexer: NotRequired[str]  # raw "M" / "m<n>" indicator


class DBCMessage(TypedDict):
    """DBC message definition structure"""
    id: int
    name: str
    dlc: int
    sender: str
    signals: list[DBCSignal]
    extended: NotRequired[bool]  # Present and true for 29-bit identifiers


class DBCDefinition(TypedDict):
    """Complete DBC file structure"""
    nodes: list[DBCNode]
    messages: list[DBCMessage]

"""Line classification and field extraction for DBC constructs

Each extractor looks at a single line and answers with one of three
outcomes:

    Unrelated      the line does not start with the construct's tag
    Malformed      the tag is there but the line breaks the grammar
    Recognized     the line matches; ``value`` holds the typed record

Usage:
    extractor = MessageHeaderExtractor()
    result = extractor.classify("BO_ 256 EngineStatus: 8 ECU1", line_number=3)
    if isinstance(result, Recognized):
        print(result.value.name)

Only node lists (``BU_:``), message headers (``BO_``) and signals
(``SG_``) are understood.  Everything else is Unrelated.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

from .errors import DbcParseError
from .model import Message, Node, Signal

_T = TypeVar("_T")


class Construct(str, Enum):
    """DBC line types understood by the parser"""
    NODE_LIST = "node list"
    MESSAGE_HEADER = "message header"
    SIGNAL = "signal"


# ============================================================================
# Classification results
# ============================================================================

class Unrelated:
    """The line belongs to some other construct (or none)."""

    _instance: Unrelated | None = None

    def __new__(cls) -> Unrelated:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNRELATED"


UNRELATED = Unrelated()


@dataclass(frozen=True)
class Malformed:
    """The line carries the construct's tag but fails its grammar."""

    line_number: int
    line: str
    construct: Construct

    def to_error(self) -> DbcParseError:
        return DbcParseError(self.line_number, self.line, self.construct.value)


@dataclass(frozen=True)
class Recognized(Generic[_T]):
    """The line matched; ``value`` is the extracted record."""

    value: _T


Classification = Union[Unrelated, Malformed, Recognized[_T]]


# ============================================================================
# Grammar building blocks
# ============================================================================

# Decimal text as found in scaling fields: 1, -0.5, .25, 1E-007, +3.e2
_NUMBER = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"

_U8_MAX = 0xFF
_U16_MAX = 0xFFFF
_U32_MAX = 0xFFFFFFFF


def _bounded_int(text: str, maximum: int) -> int | None:
    """Parse a digit string, returning None if it exceeds *maximum*."""
    value = int(text)
    return value if value <= maximum else None


# ============================================================================
# Extractors
# ============================================================================

class NodeListExtractor:
    """``BU_: TCU VEHICLE`` -> [Node("TCU"), Node("VEHICLE")]

    ``BU_:`` with no names is Unrelated and leaves earlier nodes alone.  A line
    starting ``BU_ `` without the colon is treated as a broken node list
    rather than ignored.
    """

    construct = Construct.NODE_LIST
    tags = ("BU_:", "BU_ ")

    def __init__(self) -> None:
        self._pattern = re.compile(r"BU_\s*:\s*(\w+(?:\s+\w+)*)?")

    def classify(self, line: str, line_number: int = 0) -> Classification[list[Node]]:
        text = line.strip()
        if not text.startswith(self.tags):
            return UNRELATED

        match = self._pattern.fullmatch(text)
        if match is None:
            return Malformed(line_number, line, self.construct)

        if not match.group(1):
            return UNRELATED

        return Recognized([Node(name) for name in match.group(1).split()])


class MessageHeaderExtractor:
    """``BO_ <id> <name>: <size> <sender>`` -> Message without signals

    The id must fit in 32 bits and the size in 8 bits; anything larger is
    Malformed.
    """

    construct = Construct.MESSAGE_HEADER
    tags = ("BO_ ",)

    def __init__(self) -> None:
        self._pattern = re.compile(r"BO_\s+(\d+)\s+(\w+)\s*:\s*(\d+)\s+(\w+).*")

    def classify(self, line: str, line_number: int = 0) -> Classification[Message]:
        text = line.strip()
        if not text.startswith(self.tags):
            return UNRELATED

        match = self._pattern.fullmatch(text)
        if match is None:
            return Malformed(line_number, line, self.construct)

        msg_id = _bounded_int(match.group(1), _U32_MAX)
        size = _bounded_int(match.group(3), _U8_MAX)
        if msg_id is None or size is None:
            return Malformed(line_number, line, self.construct)

        return Recognized(Message(
            id=msg_id,
            name=match.group(2),
            size=size,
            sender=match.group(4),
        ))


class SignalExtractor:
    """``SG_ <name> : <start>|<size>@<order><sign> (f,o) [min|max] "unit" rx``

    Order ``1`` is little-endian (Intel), ``0`` big-endian (Motorola).
    Sign ``-`` is signed.  Scaling fields and unit are copied verbatim.
    A multiplexer indicator (``M``, ``m3``) after the name is kept as raw
    text but not interpreted.
    """

    construct = Construct.SIGNAL
    tags = ("SG_ ",)

    def __init__(self) -> None:
        self._pattern = re.compile(
            r"SG_\s+(?P<name>\w+)(?:\s+(?P<mux>M|m\d+M?))?\s*:"
            + r"\s*(?P<start>\d+)\|(?P<size>\d+)@(?P<order>[01])(?P<sign>[+-])"
            + rf"\s*\((?P<factor>{_NUMBER}),(?P<offset>{_NUMBER})\)"
            + rf"\s*\[(?P<min>{_NUMBER})\|(?P<max>{_NUMBER})\]"
            + r'\s*"(?P<unit>[^"]*)"'
            + r"\s+(?P<receivers>\S.*)"
        )
        self._receiver_sep = re.compile(r"[\s,]+")

    def classify(self, line: str, line_number: int = 0) -> Classification[Signal]:
        text = line.strip()
        if not text.startswith(self.tags):
            return UNRELATED

        match = self._pattern.fullmatch(text)
        if match is None:
            return Malformed(line_number, line, self.construct)

        start_bit = _bounded_int(match["start"], _U16_MAX)
        size = _bounded_int(match["size"], _U16_MAX)
        if start_bit is None or size is None:
            return Malformed(line_number, line, self.construct)

        receivers = tuple(r for r in self._receiver_sep.split(match["receivers"]) if r)

        return Recognized(Signal(
            name=match["name"],
            start_bit=start_bit,
            size=size,
            is_little_endian=match["order"] == "1",
            is_signed=match["sign"] == "-",
            factor=match["factor"],
            offset=match["offset"],
            value_min=match["min"],
            value_max=match["max"],
            unit=match["unit"],
            receivers=receivers,
            multiplexer_indicator=match["mux"],
        ))

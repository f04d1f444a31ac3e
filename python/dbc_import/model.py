"""In-memory model of a parsed DBC file

Records are frozen: a ``Dbc`` is built once by the parser and never
mutated afterwards.  Scaling values (factor, offset, minimum, maximum)
are kept as the literal decimal text found in the file so that values
like ``1E-007`` survive without float rounding.
"""

from __future__ import annotations

from dataclasses import dataclass, field

_EXTENDED_FRAME_FLAG = 0x80000000


@dataclass(frozen=True)
class Node:
    """A bus participant (ECU)."""

    name: str


@dataclass(frozen=True)
class Signal:
    """A bit-field inside a message payload."""

    name: str
    start_bit: int
    size: int
    is_little_endian: bool
    is_signed: bool
    factor: str
    offset: str
    value_min: str
    value_max: str
    unit: str
    receivers: tuple[str, ...] = ()
    multiplexer_indicator: str | None = None


@dataclass(frozen=True)
class Message:
    """A CAN frame definition and the signals packed into it.

    ``id`` is the identifier exactly as written in the file.  DBC marks
    29-bit identifiers by setting bit 31, see ``is_extended_frame`` and
    ``frame_id``.
    """

    id: int
    name: str
    size: int
    signals: tuple[Signal, ...] = ()
    sender: str = ""

    @property
    def is_extended_frame(self) -> bool:
        return bool(self.id & _EXTENDED_FRAME_FLAG)

    @property
    def frame_id(self) -> int:
        """Arbitration ID with the extended-frame flag removed."""
        return self.id & ~_EXTENDED_FRAME_FLAG


@dataclass(frozen=True)
class Dbc:
    """Root of a parsed DBC file."""

    nodes: tuple[Node, ...] = field(default_factory=tuple)
    messages: tuple[Message, ...] = field(default_factory=tuple)

    def get_message(self, name: str) -> Message | None:
        """Return the first message called *name*, or None."""
        for message in self.messages:
            if message.name == name:
                return message
        return None

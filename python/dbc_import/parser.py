"""Assemble classified DBC lines into a ``Dbc``

The parser walks the text once, line by line, in one of two states:

    outside a message   node lists replace the node set, a message
                        header opens a new message block
    inside a message    signal lines are collected; the first line that
                        is not a signal closes the block

The line that closes a block is consumed by the close and is not looked
at again, so a header written directly under a signal block (with no
blank line between them) is skipped.  A second node list replaces the
first one instead of adding to it.

Usage:
    parser = DbcParser()
    dbc = parser.parse(Path("vehicle.dbc").read_text())
    for message in dbc.messages:
        print(message.name, len(message.signals))
"""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum

from .lines import (
    Malformed,
    MessageHeaderExtractor,
    NodeListExtractor,
    Recognized,
    SignalExtractor,
)
from .model import Dbc, Message, Node, Signal

logger = logging.getLogger(__name__)


class _State(Enum):
    OUTSIDE = "outside"
    IN_MESSAGE = "in_message"


class DbcParser:
    """Parser owning the compiled line grammars.

    Build one and reuse it; ``parse`` keeps no state between calls.
    """

    def __init__(self) -> None:
        self.node_extractor = NodeListExtractor()
        self.message_extractor = MessageHeaderExtractor()
        self.signal_extractor = SignalExtractor()

    def parse(self, contents: str) -> Dbc:
        """Parse DBC text.

        Args:
            contents: Full text of a .dbc file

        Returns:
            The parsed ``Dbc``

        Raises:
            DbcParseError: On the first line that has a node list, message
                or signal tag but breaks that construct's grammar
        """
        nodes: list[Node] = []
        messages: list[Message] = []
        pending: list[Signal] = []
        state = _State.OUTSIDE

        for line_number, raw in enumerate(contents.split("\n"), start=1):
            line = raw.rstrip("\r")

            if state is _State.OUTSIDE:
                node_result = self.node_extractor.classify(line, line_number)
                if isinstance(node_result, Malformed):
                    raise node_result.to_error()
                if isinstance(node_result, Recognized):
                    if nodes:
                        logger.debug("line %d: node list replaces %d earlier nodes",
                                     line_number, len(nodes))
                    nodes = node_result.value

                msg_result = self.message_extractor.classify(line, line_number)
                if isinstance(msg_result, Malformed):
                    raise msg_result.to_error()
                if isinstance(msg_result, Recognized):
                    messages.append(msg_result.value)
                    state = _State.IN_MESSAGE
                    logger.debug("line %d: message %s opened",
                                 line_number, msg_result.value.name)
            else:
                sig_result = self.signal_extractor.classify(line, line_number)
                if isinstance(sig_result, Malformed):
                    raise sig_result.to_error()
                if isinstance(sig_result, Recognized):
                    pending.append(sig_result.value)
                else:
                    messages[-1] = _close_message(messages[-1], pending)
                    pending = []
                    state = _State.OUTSIDE

        if state is _State.IN_MESSAGE:
            messages[-1] = _close_message(messages[-1], pending)

        logger.debug("parsed %d nodes, %d messages", len(nodes), len(messages))
        return Dbc(nodes=tuple(nodes), messages=tuple(messages))


def _close_message(message: Message, signals: list[Signal]) -> Message:
    """Attach the collected signals to a message whose block just ended."""
    logger.debug("message %s closed with %d signals", message.name, len(signals))
    return replace(message, signals=tuple(signals))


def parse_dbc(contents: str) -> Dbc:
    """Parse DBC text with a fresh ``DbcParser``."""
    return DbcParser().parse(contents)

"""dbc_import - CAN communication matrix (.dbc) parser

Reads the node list (``BU_:``), message headers (``BO_``) and signal
definitions (``SG_``) of a DBC file into frozen dataclasses:

    from dbc_import import DbcParser, load_dbc

    dbc = load_dbc("vehicle.dbc")
    for message in dbc.messages:
        print(f"0x{message.frame_id:X} {message.name}")
        for signal in message.signals:
            print(f"  {signal.name} {signal.start_bit}|{signal.size} x{signal.factor}")

    # Or from text already in memory
    parser = DbcParser()
    dbc = parser.parse(text)

A line that starts with one of those tags but does not follow its
grammar raises ``DbcParseError`` with the 1-based line number; every
other line is ignored.
"""

from dbc_import.errors import DbcImportError, DbcParseError, DbcReadError
from dbc_import.model import Dbc, Node, Message, Signal
from dbc_import.lines import (
    Construct,
    Malformed,
    Recognized,
    Unrelated,
    UNRELATED,
    NodeListExtractor,
    MessageHeaderExtractor,
    SignalExtractor,
)
from dbc_import.parser import DbcParser, parse_dbc
from dbc_import.loader import load_dbc, read_dbc_text
from dbc_import.converter import dbc_to_dict, render, convert_dbc_file

__version__ = "0.1.0"
__all__ = [
    "DbcImportError",
    "DbcParseError",
    "DbcReadError",
    "Dbc",
    "Node",
    "Message",
    "Signal",
    "Construct",
    "Malformed",
    "Recognized",
    "Unrelated",
    "UNRELATED",
    "NodeListExtractor",
    "MessageHeaderExtractor",
    "SignalExtractor",
    "DbcParser",
    "parse_dbc",
    "load_dbc",
    "read_dbc_text",
    "dbc_to_dict",
    "render",
    "convert_dbc_file",
]

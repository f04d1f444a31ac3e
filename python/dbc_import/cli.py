"""Command-line interface for dbc-import

Parses one .dbc file and prints the nodes, messages and signals found.

Usage:
    dbc-import vehicle.dbc
    dbc-import vehicle.dbc --format json --output vehicle.json
    python -m dbc_import vehicle.dbc --format yaml --log-level debug
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import LOG_LEVEL_ENV, configure_logger
from .converter import render
from .errors import DbcParseError, DbcReadError
from .loader import DEFAULT_ENCODING, load_dbc
from .model import Dbc, Message, Signal
from .protocols import OutputFormat


# ============================================================================
# Exit codes
# ============================================================================

_EXIT_OK = 0
_EXIT_PARSE_ERROR = 1
_EXIT_ERROR = 2


# ============================================================================
# Text output
# ============================================================================

def _format_signal_line(sig: Signal) -> str:
    """Format a single signal as a one-line summary."""
    order = "LE" if sig.is_little_endian else "BE"
    sign = "signed" if sig.is_signed else "unsigned"
    offset = sig.offset if sig.offset.startswith(("-", "+")) else f"+{sig.offset}"

    return (
        f"  {sig.name:<20s} bits[{sig.start_bit}:{sig.size}]"
        + f"   {order}  {sign:<10s}"
        + f"  x{sig.factor} {offset}"
        + f"  {sig.unit:>6s}  [{sig.value_min}, {sig.value_max}]"
    )


def _format_message_header(msg: Message) -> str:
    sender_part = f", sender {msg.sender}" if msg.sender else ""
    ext_part = " extended" if msg.is_extended_frame else ""
    return f"Message 0x{msg.frame_id:X}{ext_part} {msg.name} (DLC {msg.size}{sender_part})"


def format_text(dbc: Dbc) -> str:
    """Render a Dbc in human-readable text form."""
    lines: list[str] = []

    if dbc.nodes:
        lines.append("Nodes: " + ", ".join(node.name for node in dbc.nodes))
    else:
        lines.append("Nodes: (none)")
    lines.append("")

    total_signals = 0
    for msg in dbc.messages:
        lines.append(_format_message_header(msg))
        for sig in msg.signals:
            total_signals += 1
            lines.append(_format_signal_line(sig))
        lines.append("")

    lines.append(
        f"{len(dbc.nodes)} nodes, {len(dbc.messages)} messages, {total_signals} signals"
    )
    return "\n".join(lines)


# ============================================================================
# Argument parser
# ============================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="dbc-import",
        description="Parse a CAN .dbc file into nodes, messages and signals",
    )
    parser.add_argument("dbc", help=".dbc file to parse")
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.TEXT.value,
        help="output format (default: text)",
    )
    parser.add_argument("--output", help="write output to this file instead of stdout")
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"text encoding of the .dbc file (default: {DEFAULT_ENCODING})",
    )
    parser.add_argument(
        "--log-level",
        help=f"console log level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    return parser


# ============================================================================
# Entry point
# ============================================================================

def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code."""
    parser = _build_parser()

    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else _EXIT_ERROR

    configure_logger(args.log_level)

    try:
        dbc = load_dbc(args.dbc, encoding=args.encoding)
    except DbcReadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return _EXIT_ERROR
    except DbcParseError as e:
        print(f"Parse error: {e}", file=sys.stderr)
        return _EXIT_PARSE_ERROR

    fmt = OutputFormat(args.format)
    output = format_text(dbc) if fmt is OutputFormat.TEXT else render(dbc, fmt)

    if args.output:
        try:
            Path(args.output).write_text(output)
        except OSError as e:
            print(f"Error: cannot write {args.output}: {e}", file=sys.stderr)
            return _EXIT_ERROR
    else:
        print(output)

    return _EXIT_OK

"""Shared test fixtures for all test modules

Provides the sample matrix used across parser, loader, converter and
CLI tests.
"""

from pathlib import Path

import pytest

from dbc_import import DbcParser


SAMPLE_DBC = """
BU_: TCU VEHICLE

BO_ 2566117891 MsgDummy1: 8 Vector__XXX
 SG_ dummy1sg1 : 34|2@1+ (1,0) [0|3] "kkk" Vector__XXX
 SG_ dummy1sg2 : 18|16@1- (1,0) [0|65535] "" Vector__XXX
 SG_ dummy1sg3 : 2|16@1+ (1,0) [0|65535] "" Vector__XXX
 SG_ dummy1sg4 : 0|2@1+ (1,0) [0|3] "" Vector__XXX

BO_ 2565921559 MsgDummy2: 8 Vector__XXX
 SG_ gps_longitude : 39|32@0- (1E-007,0) [-214.7483648|214.7483647] "deg" Vector__XXX
 SG_ gps_latitude : 7|32@0- (1E-007,0) [-214.7483648|214.7483647] "deg" Vector__XXX

BO_ 2565986819 MsgDummy3: 8 TCU
 SG_ dummy3sg1 : 16|16@1+ (0.125,0) [0|8191.875] "" Vector__XXX"""


@pytest.fixture
def sample_dbc_text():
    """Three message blocks with 4, 2 and 1 signals; no trailing newline"""
    return SAMPLE_DBC


@pytest.fixture
def parser():
    """Fresh DbcParser"""
    return DbcParser()


@pytest.fixture
def sample_dbc_file(tmp_path: Path, sample_dbc_text: str) -> Path:
    """Sample matrix written to a temporary .dbc file"""
    path = tmp_path / "sample.dbc"
    path.write_text(sample_dbc_text, encoding="cp1252")
    return path

# tests/conftest.py
"""Shared fixtures: sample INI texts and files written into `tmp_path`."""

import pytest

GAME_INI = """\
; Fallout76Custom.ini
bSkipIntro=1

[Display]
iSize W=1920
iSize H = 1080   ; native
# vsync
iPresentInterval=0

[General]
sIntroSequence=
uGridsToLoad=5

[display]
iSize W=2560
"""


@pytest.fixture
def game_ini_text() -> str:
    return GAME_INI


@pytest.fixture
def write_file(tmp_path):
    """`write_file('a.ini', text)` -> path of the written file."""
    def _write(name: str, text: str, encoding: str = 'utf-8') -> str:
        path = tmp_path / name
        path.write_bytes(text.encode(encoding))
        return str(path)
    return _write

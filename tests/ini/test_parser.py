# tests/ini/test_parser.py
"""
Permissive grammar: duplicates, comments, keys outside sections, and the
lines that still make a parse fail.
"""

import os

import pytest

from pyinistore.ini import IniDocument, IniParseError, IniParser
from pyinistore.ini.parser import split_comment


def test_duplicate_key_last_wins():
    doc = IniParser.loads('[A]\nk=1\nk=2\n')
    assert doc['A']['k'] == '2'
    assert len(doc['A']) == 1


def test_duplicate_section_merges():
    doc = IniParser.loads('[A]\nk=1\n[A]\nj=2\n')
    assert list(doc) == ['A']
    assert dict(doc['A']) == {'k': '1', 'j': '2'}


def test_sample_file(game_ini_text):
    doc = IniParser.loads(game_ini_text)
    assert dict(doc.header) == {'bSkipIntro': '1'}
    assert list(doc) == ['Display', 'General']
    display = doc['display']
    assert display['iSize W'] == '2560'
    assert display['isize h'] == '1080'
    assert display.entry('iSize H').inline == '; native'
    assert display.entry('iPresentInterval').comments == ['# vsync']
    assert doc['General']['sIntroSequence'] == ''
    # the leading file comment precedes the header key
    assert doc.header.entry('bSkipIntro').comments == ['; Fallout76Custom.ini']


def test_whitespace_around_separator_and_names():
    doc = IniParser.loads('  [ Spaced ]  \n  key   =   some value  \n')
    assert doc['Spaced']['key'] == 'some value'


def test_value_keeps_extra_equals():
    doc = IniParser.loads('[A]\nsExpr=a=b\n')
    assert doc['A']['sExpr'] == 'a=b'


def test_hash_and_semicolon_both_start_comments():
    doc = IniParser.loads('[A]\nx=1#one\ny=2;two\n')
    assert doc['A']['x'] == '1'
    assert doc['A']['y'] == '2'


def test_crlf_and_bare_lines():
    doc = IniParser.loads('[A]\r\nk=1\r\n\r\n[B]\r\nj=2\r\n')
    assert dict(doc['A']) == {'k': '1'}
    assert dict(doc['B']) == {'j': '2'}


def test_trailing_comments_are_kept():
    doc = IniParser.loads('[A]\nk=1\n; the end\n')
    assert doc.trailing_comments == ['; the end']


def test_empty_section_is_parsed_but_not_written():
    doc = IniParser.loads('[Empty]\n[A]\nk=1\n')
    assert 'Empty' in doc
    assert IniParser.dumps(doc) == '[A]\nk=1\n'


@pytest.mark.parametrize('line', [
    'no separator here',
    '[unterminated',
    '[]',
    '=value without key',
    '[a]b]',
])
def test_unparseable_line_fails(line):
    with pytest.raises(IniParseError) as info:
        IniParser.loads(f'[A]\nk=1\n{line}\n', source='broken.ini')
    assert info.value.path == 'broken.ini'
    assert info.value.lineno == 3
    assert info.value.line == line


def test_split_comment():
    assert split_comment('a=b ;c') == ('a=b ', ';c')
    assert split_comment('a=b') == ('a=b', None)
    assert split_comment('x#y;z') == ('x', '#y;z')


def test_dumps_layout():
    doc = IniParser.loads(
        'g=1\n; about A\n[A] ; header\nk=1 ; inline\n[B]\nj=2\n; bye\n')
    assert IniParser.dumps(doc) == (
        'g=1\n'
        '\n'
        '; about A\n'
        '[A] ; header\n'
        'k=1 ; inline\n'
        '\n'
        '[B]\n'
        'j=2\n'
        '\n'
        '; bye\n')
    assert IniParser.dumps(doc, blank_lines=0).count('\n\n') == 0


def test_round_trip_is_a_fixed_point(game_ini_text):
    once = IniParser.dumps(IniParser.loads(game_ini_text))
    twice = IniParser.dumps(IniParser.loads(once))
    assert once == twice
    assert IniParser.loads(once) == IniParser.loads(game_ini_text)


def test_dumps_empty_document():
    assert IniParser.dumps(IniDocument()) == ''


def test_read_and_write_file(write_file, game_ini_text, tmp_path):
    path = write_file('game.ini', game_ini_text)
    doc = IniParser(path).read()
    assert doc['Display']['iSize W'] == '2560'

    out = tmp_path / 'out.ini'
    IniParser(out).write(doc)
    raw = out.read_bytes()
    assert not raw.startswith(b'\xef\xbb\xbf')
    assert raw.decode('utf-8').count(os.linesep) >= 1
    assert IniParser(out).read() == doc


def test_read_tolerates_bom(write_file):
    path = write_file('bom.ini', '\ufeff[A]\nk=ä\n')
    assert IniParser(path).read()['A']['k'] == 'ä'


def test_read_rejects_non_utf8(write_file):
    path = write_file(
        'latin.ini', '[Général]\nsNom=Élève éà\n' * 20, encoding='cp1252')
    with pytest.raises(IniParseError) as info:
        IniParser(path).read()
    assert info.value.path == path
    assert 'UTF-8' in str(info.value)


def test_readfiles_layers_in_order(write_file):
    base = write_file('base.ini', '[A]\nx=1\ny=1\n')
    mid = write_file('mid.ini', '[A]\nx=2\n[B]\nz=1\n')
    top = write_file('top.ini', '[a]\ny=3\n')
    doc = IniParser(base).readfiles(None, mid, top)
    assert dict(doc['A']) == {'x': '2', 'y': '3'}
    assert dict(doc['B']) == {'z': '1'}


def test_readfiles_skips_missing_layer(write_file, tmp_path):
    base = write_file('base.ini', '[A]\nx=1\n')
    with pytest.warns(UserWarning, match='not found'):
        doc = IniParser(base).readfiles(None, tmp_path / 'nope.ini')
    assert dict(doc['A']) == {'x': '1'}


def test_comments_of_empty_sections_are_kept():
    doc = IniParser.loads('; keep\n[Empty] ; me too\n[A]\nk=1\n')
    assert IniParser.dumps(doc) == '; keep\n; me too\n[A]\nk=1\n'

    doc = IniParser.loads('[A]\nk=1\n; about B\n[B]\n; end\n')
    assert IniParser.dumps(doc) == '[A]\nk=1\n\n; about B\n; end\n'

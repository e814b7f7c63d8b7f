# tests/test_fsattr.py
"""Read-only flag through file permissions."""

import os
import stat

from pyinistore.fsattr import StatFileAttributes


def test_toggle_is_idempotent(tmp_path):
    path = tmp_path / 'a.ini'
    path.write_text('[A]\n', encoding='utf-8')
    path = str(path)
    attrs = StatFileAttributes()
    assert not attrs.is_read_only(path)

    attrs.set_read_only(path, True)
    attrs.set_read_only(path, True)
    assert attrs.is_read_only(path)
    assert not os.stat(path).st_mode & stat.S_IWUSR

    attrs.set_read_only(path, False)
    attrs.set_read_only(path, False)
    assert not attrs.is_read_only(path)
    assert os.stat(path).st_mode & stat.S_IWUSR


def test_missing_file(tmp_path):
    attrs = StatFileAttributes()
    path = str(tmp_path / 'missing.ini')
    assert not attrs.is_read_only(path)
    attrs.set_read_only(path, True)
    assert not os.path.exists(path)


def test_owner_write_bit_decides(tmp_path):
    path = tmp_path / 'a.ini'
    path.write_text('[A]\n', encoding='utf-8')
    path = str(path)
    attrs = StatFileAttributes()
    # group can write, owner can't
    os.chmod(path, 0o464)
    assert attrs.is_read_only(path)
    os.chmod(path, 0o644)
    assert not attrs.is_read_only(path)


def test_snapshot_and_restore_exact_mode(tmp_path):
    path = tmp_path / 'a.ini'
    path.write_text('[A]\n', encoding='utf-8')
    path = str(path)
    attrs = StatFileAttributes()
    os.chmod(path, 0o464)
    state = attrs.snapshot(path)
    attrs.set_read_only(path, False)
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o664
    attrs.restore(path, state)
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o464

    missing = str(tmp_path / 'missing.ini')
    assert attrs.snapshot(missing) is None
    attrs.restore(missing, None)
    assert not os.path.exists(missing)

import struct
import unittest

import pytest

from app_state import AppState
from errors import BadMagic, TerminfoIOError


def _entry(booleans=(1, 0), numbers=(7,), magic=0o432):
    names = b"abcd"
    heap = b"ab\0c"
    header = struct.pack("<6H", magic, len(names), len(booleans), len(numbers), 1, len(heap))
    body = names + bytes(booleans)
    body += struct.pack(f"<{len(numbers)}h", *numbers) + struct.pack("<H", 0)
    return header + body + heap


@pytest.fixture
def entry_files(tmp_path):
    small = tmp_path / "small"
    small.write_bytes(_entry())
    big = tmp_path / "big"
    big.write_bytes(_entry(booleans=(1,) * 30, numbers=tuple(range(20))))
    broken = tmp_path / "broken"
    broken.write_bytes(_entry(magic=0))
    return small, big, broken


def test_from_file(entry_files):
    small, _, _ = entry_files
    state = AppState.from_file(str(small))
    assert state.total_lines == 4
    assert state.file_path == str(small)
    assert state.viewport.state.total_lines == 4


def test_from_file_large_entry(entry_files):
    _, big, _ = entry_files
    state = AppState.from_file(str(big))
    assert state.total_lines == 51
    assert state.record.number_at(19) == 19
    assert state.record.string_at(0) == b"ab"
    assert state.viewport.state.total_lines == 51


def test_failed_from_file_raises_before_building_state(entry_files, monkeypatch):
    _, _, broken = entry_files
    built = []
    monkeypatch.setattr(AppState, "__init__", lambda self, *a, **k: built.append(a))
    with pytest.raises(BadMagic):
        AppState.from_file(str(broken))
    with pytest.raises(TerminfoIOError):
        AppState.from_file(str(broken) + ".missing")
    assert built == []


class AppStateCatalogTests(unittest.TestCase):
    def test_default_catalog(self):
        from capability_record import CapabilityRecord
        from terminfo_names import NameCatalog

        state = AppState(CapabilityRecord(b"", [], [], [], b""))
        self.assertIsInstance(state.catalog, NameCatalog)
        self.assertEqual(state.total_lines, 0)

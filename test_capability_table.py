import io

import pandas as pd

from capability_record import CapabilityRecord
from capability_table import COLUMNS, capability_frame, dump_csv
from terminfo_names import NameCatalog


def _record():
    return CapabilityRecord(b"abcd", [1, 0], [7], [0, 9], b"ab\0c")


def test_frame_has_one_row_per_line():
    df = capability_frame(_record(), NameCatalog())
    assert list(df.columns) == COLUMNS
    assert len(df) == 5
    assert df["line"].tolist() == [0, 1, 2, 3, 4]
    assert df["class"].tolist() == ["boolean", "boolean", "number", "string", "string"]
    assert df["name"].tolist() == ["bw", "am", "cols", "cbt", "bel"]
    assert df["value"].tolist() == ["true", "false", "7", "ab", "absent"]


def test_frame_for_empty_record():
    df = capability_frame(CapabilityRecord(b"", [], [], [], b""), NameCatalog())
    assert df.empty
    assert list(df.columns) == COLUMNS


def test_dump_csv_round_trips_through_pandas():
    out = io.StringIO()
    dump_csv(_record(), NameCatalog(), out)
    out.seek(0)
    df = pd.read_csv(out, dtype=str, keep_default_na=False)
    assert df.loc[2, "name"] == "cols"
    assert df.loc[2, "value"] == "7"
    assert df.loc[3, "value"] == "ab"

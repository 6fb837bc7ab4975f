import pandas as pd

COLUMNS = ["line", "class", "index", "name", "value"]


def capability_frame(record, catalog) -> pd.DataFrame:
    """One row per logical line, in the order the viewer lists them."""
    rows = []
    for line in range(record.total_lines):
        cap_class, index = record.line_at(line)
        rows.append(
            {
                "line": line,
                "class": cap_class.value,
                "index": index,
                "name": catalog.name_for(cap_class, index),
                "value": record.value_text(cap_class, index),
            }
        )
    df = pd.DataFrame(rows, columns=COLUMNS)
    return df.astype({"line": "int64", "index": "int64"})


def dump_csv(record, catalog, out) -> None:
    capability_frame(record, catalog).to_csv(out, index=False)

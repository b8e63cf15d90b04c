import pandas as pd

from stats19.shared.errors import NoFilesFoundError
from .files import locate_one_file
from .select import raise_on_ambiguous, resolve_ambiguous

# applied in order, after lower-casing
COLUMN_REPLACEMENTS = [
    (r" ", "_"),
    (r"\(|\)", ""),
    (r"1st", "first"),
    (r"2nd", "second"),
    (r"-", "_"),
    (r"\?", ""),
]


def format_column_names(column_names):
    """
    Turns DfT column headers into snake_case names.

    "Accident Severity" -> "accident_severity"
    "1st Road Class"    -> "first_road_class"

    A leading byte order mark, as found in some older DfT csv files, is
    dropped.
    """
    names = pd.Index(column_names).astype(str).str.replace("\ufeff", "", regex=False)
    names = names.str.strip().str.lower()
    for old, new in COLUMN_REPLACEMENTS:
        names = names.str.replace(old, new, regex=True)
    return names.tolist()


def read_stats19(
    year=None,
    type="Accidents",
    filename=None,
    data_dir=None,
    format: bool = True,
    chooser=raise_on_ambiguous,
) -> pd.DataFrame:
    """
    Reads a downloaded STATS19 csv into a DataFrame.

    The file is found with locate_one_file; when several match, chooser
    picks one (the default raises AmbiguousFileError).
    """
    path = resolve_ambiguous(
        locate_one_file(filename=filename, data_dir=data_dir, year=year, type=type),
        chooser,
    )
    if path is None:
        raise NoFilesFoundError(
            f"No csv file of type '{type}' found for year {year!r}, try dl_stats19() first"
        )

    print(f"[read] {path}")
    df = pd.read_csv(path, low_memory=False)
    if format:
        df.columns = format_column_names(df.columns)
    return df

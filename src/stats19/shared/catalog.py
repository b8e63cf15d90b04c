# src/stats19/shared/catalog.py

from functools import lru_cache

import pandas as pd

from .config import CATALOG_PATH


@lru_cache(maxsize=None)
def _read_catalog(path):
    catalog = pd.read_csv(path, dtype=str)
    catalog["file_name"] = catalog["file_name"].str.strip()
    return catalog


def load_catalog(path=CATALOG_PATH) -> pd.DataFrame:
    """
    Loads the known DfT file names, one row per published file.

    Columns: group (the release the file belongs to) and file_name.
    Row order is the catalog order every lookup preserves. Each call gets
    its own copy.
    """
    return _read_catalog(path).copy()


def file_names() -> pd.Series:
    """All catalog file names as a Series, in catalog order."""
    return load_catalog()["file_name"].reset_index(drop=True)


def file_names_by_group() -> dict[str, list[str]]:
    catalog = load_catalog()
    return {
        group: rows["file_name"].tolist()
        for group, rows in catalog.groupby("group", sort=False)
    }

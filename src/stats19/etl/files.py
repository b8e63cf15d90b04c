# src/stats19/etl/files.py

import os

from stats19.shared.catalog import file_names
from stats19.shared.config import get_data_directory
from stats19.shared.errors import (
    DirectoryNotFoundError,
    EmptyResultError,
    NoFilesFoundError,
    NoMatchingTypeError,
)
from .years import normalize

BUNDLE_1979_FILE = "Stats19-Data1979-2004.zip"

AMBIGUOUS_MESSAGE = "More than one csv file found."


class AmbiguousResult(str):
    """
    Returned by locate_one_file when several csv files match.

    Compares equal to "More than one csv file found." and keeps the
    matching paths in .candidates so the caller can choose one.
    """

    def __new__(cls, candidates):
        obj = super().__new__(cls, AMBIGUOUS_MESSAGE)
        obj.candidates = list(candidates)
        return obj

    def __repr__(self):
        return f"AmbiguousResult({self.candidates!r})"


def _is_csv(name) -> bool:
    return os.path.splitext(str(name))[1].lower() == ".csv"


def find_file_name(years=None, type=None, quiet: bool = False) -> list[str]:
    """
    Finds the DfT file names for the given year(s) and record type.

    type is one of 'Accidents', 'Casualties', 'Vehicles' or any part of
    them ('cas', 'accid'); case is ignored.

    find_file_name(2016)
    find_file_name(1985, type="Accidents")
    find_file_name(type="cas")
    """
    result = file_names()

    if years is not None:
        representative = normalize(years, quiet=quiet)
        years_regex = "|".join(str(y) for y in sorted(representative))
        result = result[result.str.contains(years_regex, regex=True)]

    if type is not None:
        result_type = result[result.str.contains(type, case=False, regex=False)]
        if len(result_type) > 0:
            result = result_type
        elif years is None:
            raise NoMatchingTypeError(f"No files of type '{type}' found")
        elif not quiet:
            print("[info] No files of that type found for that year.")

    if (result == BUNDLE_1979_FILE).any() and not quiet:
        print("[warn] This will download 240 MB+ (1.8 GB unzipped).")
        print("[warn] Coordinates and other variables may be unreliable in these datasets.")
        print(
            "[warn] See https://github.com/ropensci/stats19/issues/101 "
            "and https://github.com/ropensci/stats19/issues/102"
        )

    result = result.drop_duplicates()
    if len(result) < 1:
        raise EmptyResultError(
            f"No files of that type exist (years={years!r}, type={type!r}); "
            "a recent release may not be in the file name catalog yet"
        )
    return result.tolist()


def _subdirectories(data_dir):
    for root, dirs, _ in os.walk(data_dir):
        for d in dirs:
            yield os.path.relpath(os.path.join(root, d), data_dir)


def locate_files(data_dir=None, type=None, years=None, quiet: bool = False) -> list[str]:
    """
    Locates downloaded files under data_dir.

    When every matching file name is a csv, returns data_dir/<name> paths
    without checking the disk. Otherwise returns the archive names (without
    extension) that have an extracted directory somewhere under data_dir.
    An empty list means nothing was found.
    """
    if data_dir is None:
        data_dir = get_data_directory()
    data_dir = str(data_dir)
    if not os.path.isdir(data_dir):
        raise DirectoryNotFoundError(f"Directory not found: {data_dir}")

    names = find_file_name(years=years, type=type, quiet=quiet)
    if all(_is_csv(n) for n in names):
        return [os.path.join(data_dir, n) for n in names]

    stems = [os.path.splitext(n)[0] for n in names]
    dir_files = list(_subdirectories(data_dir))
    on_disk = [s for s in stems if any(s in d for d in dir_files)]

    if not quiet:
        for s in on_disk:
            print(f"[found] {s} under {data_dir}")
    return on_disk


def _scan(data_dir, entry):
    path = os.path.join(data_dir, entry)
    if os.path.isfile(path):
        return [path] if _is_csv(path) else []
    if not os.path.isdir(path):
        return []
    return sorted(
        os.path.join(path, f)
        for f in os.listdir(path)
        if _is_csv(f) and os.path.isfile(os.path.join(path, f))
    )


def _matches(pattern, path, data_dir) -> bool:
    rel = os.path.relpath(path, data_dir)
    return str(pattern).lower() in rel.lower()


def locate_one_file(filename=None, data_dir=None, year=None, type=None):
    """
    Pins down a single csv file on disk.

    Returns the path of the one file found, an AmbiguousResult when more
    than one csv matches, or None when the located archives hold no
    matching csv. Raises NoFilesFoundError when nothing is located at all.
    """
    if data_dir is None:
        data_dir = get_data_directory()
    data_dir = str(data_dir)

    path = locate_files(data_dir=data_dir, type=type, years=year, quiet=True)
    if len(path) == 0:
        raise NoFilesFoundError(f"No files found under: {data_dir}")

    # single csv on disk, the flat layout
    if len(path) == 1 and os.path.isfile(path[0]) and _is_csv(path[0]):
        return path[0]

    res = []
    for entry in path:
        found = _scan(data_dir, entry)
        if type is not None:
            found = [f for f in found if _matches(type, f, data_dir)]
        res.extend(found)

    if filename is not None:
        res = [f for f in res if str(filename) in os.path.relpath(f, data_dir)]

    if len(res) > 1:
        return AmbiguousResult(res)
    if len(res) == 1:
        return res[0]
    return None

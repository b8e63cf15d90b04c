# src/stats19/shared/config.py

import os
import tempfile
import threading
from pathlib import Path

from .errors import DirectoryNotFoundError

DOWNLOAD_DIRECTORY_ENV = "STATS19_DOWNLOAD_DIRECTORY"

DEFAULT_DOMAIN = "http://data.dft.gov.uk.s3.amazonaws.com"
DEFAULT_URL_DIRECTORY = "road-accidents-safety-data"

FIRST_YEAR = 1979

CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "file_names.csv"

_directory_lock = threading.Lock()


def get_data_directory() -> str:
    """
    Returns the directory downloads go to and reads look in.

    STATS19_DOWNLOAD_DIRECTORY wins when set; otherwise the system temp dir.
    """
    data_directory = os.environ.get(DOWNLOAD_DIRECTORY_ENV, "")
    if data_directory != "":
        return data_directory
    return tempfile.gettempdir()


def set_data_directory(data_path, overwrite: bool = True) -> bool:
    """
    Points STATS19_DOWNLOAD_DIRECTORY at an existing directory.

    Returns True when the setting changed. With overwrite=False an existing
    setting is left alone.
    """
    data_path = str(data_path)
    if not os.path.isdir(data_path):
        raise DirectoryNotFoundError(
            f"Directory does not exist, please create it first: {data_path}"
        )

    with _directory_lock:
        current = os.environ.get(DOWNLOAD_DIRECTORY_ENV, "")
        if current != "" and not overwrite:
            print(f"[info] {DOWNLOAD_DIRECTORY_ENV} is already set to {current}, leaving it")
            return False

        os.environ[DOWNLOAD_DIRECTORY_ENV] = data_path
        if current != "":
            print(f"[info] Overwrote {DOWNLOAD_DIRECTORY_ENV} ({current} -> {data_path})")
        else:
            print(f"[info] {DOWNLOAD_DIRECTORY_ENV} is set, undo with unset_data_directory()")
        return True


def unset_data_directory() -> None:
    with _directory_lock:
        os.environ.pop(DOWNLOAD_DIRECTORY_ENV, None)

# src/stats19/etl/download.py

import os
import shutil
import tempfile
import zipfile

import requests

from stats19.shared.config import DEFAULT_DOMAIN, DEFAULT_URL_DIRECTORY, get_data_directory
from stats19.shared.errors import DirectoryNotFoundError, NoFilesFoundError
from .files import find_file_name
from .select import phrase, select_file

CHUNK_SIZE = 1024 * 1024


def get_url(file_name: str = "", domain: str = DEFAULT_DOMAIN, directory: str = DEFAULT_URL_DIRECTORY) -> str:
    """
    Builds the download url for a DfT file name, e.g.

    http://data.dft.gov.uk.s3.amazonaws.com/road-accidents-safety-data/RoadSafetyData_2015.zip
    """
    parts = [domain.rstrip("/"), directory.strip("/")]
    if file_name:
        parts.append(file_name.lstrip("/"))
    return "/".join(parts)


def download_file(url: str, dest_path: str) -> str:
    print(f"[download] {url}")
    resp = requests.get(url, stream=True, timeout=60)
    resp.raise_for_status()

    # .part until the stream completes
    part_path = dest_path + ".part"
    try:
        with open(part_path, "wb") as f:
            for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
                if chunk:
                    f.write(chunk)
    except BaseException:
        if os.path.exists(part_path):
            os.remove(part_path)
        raise
    os.replace(part_path, dest_path)

    print(f"[ok] saved to {dest_path}")
    return dest_path


def extract_zip(zip_path: str, dest_dir: str) -> str:
    """Extracts zip_path into dest_dir, which locate_files then finds by name."""
    print(f"[unzip] {os.path.basename(zip_path)} -> {dest_dir}")
    parent = os.path.dirname(os.path.abspath(dest_dir))
    tmp_dir = tempfile.mkdtemp(prefix=".unzip-", dir=parent)
    try:
        with zipfile.ZipFile(zip_path, "r") as zf:
            zf.extractall(tmp_dir)
    except BaseException:
        shutil.rmtree(tmp_dir, ignore_errors=True)
        raise
    os.replace(tmp_dir, dest_dir)
    return dest_dir


def dl_stats19(
    year=None,
    type=None,
    file_name=None,
    data_dir=None,
    ask: bool = False,
    chooser=select_file,
    input_func=input,
):
    """
    Downloads (and unzips) one STATS19 file into data_dir.

    When year/type match several files, chooser picks one; the default
    asks on the console. Returns the local path of the csv or of the
    directory a zip was extracted to, or None when nothing was downloaded.
    """
    if data_dir is None:
        data_dir = get_data_directory()
    data_dir = str(data_dir)
    if not os.path.isdir(data_dir):
        raise DirectoryNotFoundError(f"Directory not found: {data_dir}")

    if file_name is None:
        fnames = find_file_name(years=year, type=type)
        if len(fnames) > 1:
            file_name = chooser(fnames)
            if file_name is None:
                print("[skip] nothing selected")
                return None
        else:
            file_name = fnames[0]
    elif file_name not in find_file_name(quiet=True):
        raise NoFilesFoundError(f"Unknown file name: {file_name}")

    stem, ext = os.path.splitext(file_name)
    dest_path = os.path.join(data_dir, file_name)
    target = os.path.join(data_dir, stem) if ext.lower() == ".zip" else dest_path

    if os.path.exists(target):
        print(f"[skip] {target} already exists")
        return target

    url = get_url(file_name)
    if ask:
        print(f"Files identified: {file_name}")
        print(f"   {url}")
        answer = input_func(phrase()).strip().lower()
        if answer not in ("", "y", "yes"):
            print("[skip] stopping as requested")
            return None

    download_file(url, dest_path)
    if ext.lower() == ".zip":
        try:
            extract_zip(dest_path, target)
        except zipfile.BadZipFile:
            print(f"[error] {dest_path} is not a valid zip, removing it")
            os.remove(dest_path)
            raise
    return target

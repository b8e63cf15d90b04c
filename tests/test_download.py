import io
import os
import zipfile
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import requests

from stats19.etl.download import dl_stats19, extract_zip, get_url
from stats19.etl.files import locate_one_file
from stats19.shared.errors import DirectoryNotFoundError, NoFilesFoundError


def _response(content: bytes):
    resp = Mock()
    resp.raise_for_status.return_value = None
    resp.iter_content.return_value = [content]
    return resp


def _zip_bytes(members: dict) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        for name, text in members.items():
            zf.writestr(name, text)
    return buf.getvalue()


def test_get_url_defaults():
    assert get_url() == "http://data.dft.gov.uk.s3.amazonaws.com/road-accidents-safety-data"


def test_get_url_joins_file_name():
    url = get_url("RoadSafetyData_2015.zip", domain="https://example.org/", directory="data")
    assert url == "https://example.org/data/RoadSafetyData_2015.zip"


def test_download_csv(tmp_path):
    with patch("stats19.etl.download.requests.get", return_value=_response(b"a,b\n1,2\n")) as get:
        path = dl_stats19(year=2016, type="Accidents", data_dir=tmp_path)

    assert path == os.path.join(str(tmp_path), "dftRoadSafetyData_Accidents_2016.csv")
    assert Path(path).read_text() == "a,b\n1,2\n"
    assert get.call_args[0][0] == get_url("dftRoadSafetyData_Accidents_2016.csv")


def test_download_skips_existing_file(tmp_path, capsys):
    (tmp_path / "dftRoadSafetyData_Accidents_2016.csv").write_text("old")
    with patch("stats19.etl.download.requests.get") as get:
        dl_stats19(year=2016, type="Accidents", data_dir=tmp_path)

    get.assert_not_called()
    assert "[skip]" in capsys.readouterr().out


def test_download_extracts_zip_where_locate_finds_it(tmp_path):
    content = _zip_bytes({"DfTRoadSafety_Accidents_2009.csv": "Accident_Index\n1\n"})
    with patch("stats19.etl.download.requests.get", return_value=_response(content)):
        target = dl_stats19(year=2009, type="Accidents", data_dir=tmp_path)

    assert target == os.path.join(str(tmp_path), "DfTRoadSafety_Accidents_2009")
    found = locate_one_file(data_dir=tmp_path, year=2009, type="Accidents")
    assert found == os.path.join(target, "DfTRoadSafety_Accidents_2009.csv")


def test_chooser_picks_between_matches(tmp_path):
    offered = []

    def chooser(fnames):
        offered.extend(fnames)
        return fnames[1]

    with patch("stats19.etl.download.requests.get", return_value=_response(b"x")):
        path = dl_stats19(year=2016, data_dir=tmp_path, chooser=chooser)

    assert len(offered) == 3
    assert os.path.basename(path) == "dftRoadSafetyData_Casualties_2016.csv"


def test_chooser_can_cancel(tmp_path):
    with patch("stats19.etl.download.requests.get") as get:
        assert dl_stats19(year=2016, data_dir=tmp_path, chooser=lambda f: None) is None
    get.assert_not_called()


def test_ask_declined(tmp_path):
    with patch("stats19.etl.download.requests.get") as get:
        result = dl_stats19(
            year=2017, type="Vehicles", data_dir=tmp_path, ask=True, input_func=lambda prompt: "n"
        )
    assert result is None
    get.assert_not_called()


def test_ask_accepted_on_enter(tmp_path):
    with patch("stats19.etl.download.requests.get", return_value=_response(b"x")) as get:
        dl_stats19(year=2017, type="Vehicles", data_dir=tmp_path, ask=True, input_func=lambda prompt: "")
    get.assert_called_once()


def test_explicit_file_name(tmp_path):
    with patch("stats19.etl.download.requests.get", return_value=_response(b"x")) as get:
        dl_stats19(file_name="dftRoadSafetyData_Casualties_2018.csv", data_dir=tmp_path)
    assert get.call_args[0][0].endswith("/dftRoadSafetyData_Casualties_2018.csv")


def test_unknown_file_name(tmp_path):
    with pytest.raises(NoFilesFoundError):
        dl_stats19(file_name="not-a-dft-file.csv", data_dir=tmp_path)


def test_missing_data_dir(tmp_path):
    with pytest.raises(DirectoryNotFoundError):
        dl_stats19(year=2016, type="Accidents", data_dir=tmp_path / "nope")


def test_http_errors_propagate(tmp_path):
    resp = _response(b"")
    resp.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
    with patch("stats19.etl.download.requests.get", return_value=resp):
        with pytest.raises(requests.HTTPError):
            dl_stats19(year=2016, type="Accidents", data_dir=tmp_path)


def test_extract_zip(tmp_path):
    zip_path = tmp_path / "bundle.zip"
    zip_path.write_bytes(_zip_bytes({"Accidents0514.csv": "a\n", "Vehicles0514.csv": "b\n"}))
    dest = extract_zip(str(zip_path), str(tmp_path / "bundle"))
    assert sorted(os.listdir(dest)) == ["Accidents0514.csv", "Vehicles0514.csv"]


def test_interrupted_download_is_not_kept(tmp_path):
    def cut_off(chunk_size):
        yield b"a,b\n1,"
        raise requests.ConnectionError("connection reset")

    resp = _response(b"")
    resp.iter_content.side_effect = cut_off
    with patch("stats19.etl.download.requests.get", return_value=resp):
        with pytest.raises(requests.ConnectionError):
            dl_stats19(year=2016, type="Accidents", data_dir=tmp_path)

    assert os.listdir(tmp_path) == [], "no partial file should be left behind"

    with patch("stats19.etl.download.requests.get", return_value=_response(b"a,b\n1,2\n")) as get:
        path = dl_stats19(year=2016, type="Accidents", data_dir=tmp_path)

    get.assert_called_once()
    assert Path(path).read_text() == "a,b\n1,2\n"


def test_bad_zip_leaves_nothing_behind(tmp_path):
    with patch("stats19.etl.download.requests.get", return_value=_response(b"not a zip")):
        with pytest.raises(zipfile.BadZipFile):
            dl_stats19(year=2009, type="Accidents", data_dir=tmp_path)

    assert os.listdir(tmp_path) == [], "no zip or empty extraction dir should remain"

    content = _zip_bytes({"DfTRoadSafety_Accidents_2009.csv": "Accident_Index\n1\n"})
    with patch("stats19.etl.download.requests.get", return_value=_response(content)) as get:
        target = dl_stats19(year=2009, type="Accidents", data_dir=tmp_path)

    get.assert_called_once()
    assert os.listdir(target) == ["DfTRoadSafety_Accidents_2009.csv"]


def test_extract_bad_zip_creates_no_directory(tmp_path):
    zip_path = tmp_path / "broken.zip"
    zip_path.write_bytes(b"not a zip")
    with pytest.raises(zipfile.BadZipFile):
        extract_zip(str(zip_path), str(tmp_path / "broken"))
    assert sorted(os.listdir(tmp_path)) == ["broken.zip"]

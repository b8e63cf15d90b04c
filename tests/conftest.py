import pytest

from stats19.shared.config import DOWNLOAD_DIRECTORY_ENV


@pytest.fixture(autouse=True)
def clean_download_directory(monkeypatch):
    """Keep STATS19_DOWNLOAD_DIRECTORY from leaking between tests."""
    monkeypatch.delenv(DOWNLOAD_DIRECTORY_ENV, raising=False)


@pytest.fixture
def bundle_dir(tmp_path):
    """A data dir holding the extracted 2005-2014 bundle."""
    bundle = tmp_path / "Stats19_Data_2005-2014"
    bundle.mkdir()
    (bundle / "Accidents0514.csv").write_text("Accident_Index\n1\n")
    (bundle / "Casualties0514.csv").write_text("Accident_Index\n1\n")
    return tmp_path

"""Find, download and read UK road safety (STATS19) data files."""

from .etl.cleaning import format_column_names, read_stats19
from .etl.download import dl_stats19, get_url
from .etl.files import AmbiguousResult, find_file_name, locate_files, locate_one_file
from .etl.geo import format_sf
from .etl.select import first_match, raise_on_ambiguous, resolve_ambiguous, select_file
from .etl.years import current_year, normalize
from .shared.config import get_data_directory, set_data_directory, unset_data_directory
from .shared.errors import (
    AmbiguousFileError,
    DirectoryNotFoundError,
    EmptyResultError,
    InvalidYearError,
    NoFilesFoundError,
    NoMatchingTypeError,
    Stats19Error,
)

__version__ = "0.1.0"

# src/stats19/etl/years.py

import numbers
from datetime import date

from stats19.shared.config import FIRST_YEAR
from stats19.shared.errors import InvalidYearError

# (first, last, representative) for years published inside a multi-year bundle
BUNDLE_1979 = (1979, 2004, 1979)
BUNDLE_2005 = (2005, 2014, 2005)

# Years that always map onto the 2005-2014 bundle. 2009-2014 were also
# released as standalone files.
BUNDLE_2005_ONLY = range(2005, 2009)


def current_year() -> int:
    return date.today().year


def _as_year(value) -> int:
    if isinstance(value, bool):
        raise ValueError(value)
    if isinstance(value, str):
        value = value.strip()
    number = float(value)
    if not number.is_integer():
        raise ValueError(value)
    return int(number)


def _as_year_list(year_or_years):
    if year_or_years is None:
        return []
    if isinstance(year_or_years, (str, bytes, numbers.Number)):
        return [year_or_years]
    return list(year_or_years)


def normalize(year_or_years, prefer_bundle: bool = False, quiet: bool = False) -> set[int]:
    """
    Validates year(s) and maps each onto the year its data is published under.

    1979 ... 2004 ---> 1979       (Stats19-Data1979-2004)
    2005 ... 2008 ---> 2005       (Stats19_Data_2005-2014)
    2009          ---> 2009
    ...
    last year     ---> last year

    With prefer_bundle=True, 2009-2014 also collapse onto 2005 whenever any
    requested year falls in 2005-2008.

    Raises InvalidYearError for non-numeric, out of range, or empty input.
    """
    last_year = current_year() - 1
    msg = f"Years must be in range {FIRST_YEAR}:{last_year}"

    try:
        years = [_as_year(v) for v in _as_year_list(year_or_years)]
    except (TypeError, ValueError):
        raise InvalidYearError(f"{msg}, got {year_or_years!r}") from None

    if len(years) == 0:
        raise InvalidYearError(msg)

    bad = [y for y in years if y < FIRST_YEAR or y > last_year]
    if bad:
        raise InvalidYearError(f"{msg}, got {bad}")

    first, last, representative = BUNDLE_1979
    if any(first <= y <= last for y in years):
        if not quiet:
            print(f"[info] Year not in range, changing to match {first}:{last} data")
        years = [representative if first <= y <= last else y for y in years]

    first, last, representative = BUNDLE_2005
    if any(y in BUNDLE_2005_ONLY for y in years):
        if not quiet:
            print(f"[info] Year not in range, changing to match {first}:{last} data")
        absorbed = range(first, last + 1) if prefer_bundle else BUNDLE_2005_ONLY
        years = [representative if y in absorbed else y for y in years]

    return set(years)

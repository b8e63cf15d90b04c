# src/stats19/cli.py

import argparse
import sys

from .etl.download import dl_stats19, get_url
from .etl.files import AmbiguousResult, find_file_name, locate_one_file
from .shared.errors import Stats19Error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stats19", description="Find and download STATS19 data files")
    sub = parser.add_subparsers(dest="command", required=True)

    find = sub.add_parser("find", help="List matching DfT file names and urls")
    find.add_argument("--year", type=int, nargs="*", default=None)
    find.add_argument("--type", default=None, help="Accidents, Casualties or Vehicles (any part, any case)")

    locate = sub.add_parser("locate", help="Pin down one downloaded csv file")
    locate.add_argument("--year", type=int, default=None)
    locate.add_argument("--type", default=None)
    locate.add_argument("--filename", default=None)
    locate.add_argument("--data-dir", default=None)

    download = sub.add_parser("download", help="Download and unzip one file")
    download.add_argument("--year", type=int, default=None)
    download.add_argument("--type", default=None)
    download.add_argument("--file-name", default=None)
    download.add_argument("--data-dir", default=None)
    download.add_argument("--ask", action="store_true")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.command == "find":
            years = args.year if args.year else None
            for name in find_file_name(years=years, type=args.type):
                print(f"{name}\t{get_url(name)}")

        elif args.command == "locate":
            result = locate_one_file(
                filename=args.filename, data_dir=args.data_dir, year=args.year, type=args.type
            )
            if isinstance(result, AmbiguousResult):
                print(result)
                for path in result.candidates:
                    print(f"  {path}")
                return 2
            if result is None:
                print("No csv file found.")
                return 1
            print(result)

        elif args.command == "download":
            path = dl_stats19(
                year=args.year,
                type=args.type,
                file_name=args.file_name,
                data_dir=args.data_dir,
                ask=args.ask,
            )
            if path is None:
                return 1
            print(path)

    except Stats19Error as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

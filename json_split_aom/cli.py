from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .errors import SplitError
from .splitter import SplitOptions, split_files

log = logging.getLogger(__name__)

EPILOG = """\
assumptions:
  The JSON dotted path keys for array and ID don't have periods.

examples:
  1. json-split-aom -a 'Apple.Banana' -i 'id' file.json
     extracts objects to files named 'Apple.Banana-id-ID.json' given:
     {"Apple":{"Banana":[{"id":"12",...},...]}}

  2. json-split-aom -a 'Apple' -i 'Banana.id' file.json
     extracts objects to files named 'Apple-Banana.id-ID.json' given:
     {"Apple":[{"Banana":{"id":"12",...}},...]}

  3. json-split-aom -a 'Apple.Banana' -i 'Cherry.id' file.json
     extracts objects to files named 'Apple.Banana-Cherry.id-ID.json' given:
     {"Apple":{"Banana":[{"Cherry":{"id":"12",...}},...]}}
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='json-split-aom',
        description='Split a JSON array of objects into one file per object, named by ID.',
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('-a', '--array-path', required=True, metavar='JSON_PATH',
                        help='Dotted JSON path to an array in the input file')
    parser.add_argument('-i', '--id-path', required=True, metavar='JSON_PATH',
                        help='Dotted JSON path to the ID in the array element')
    parser.add_argument('-p', '--pretty', action='store_true',
                        help='Pretty print output files')
    parser.add_argument('-c', '--collisions', action='store_true',
                        help='Allow ID path collisions; still gives warnings but duplicates will overwrite previous files')
    parser.add_argument('-o', '--output-dir', default='.', metavar='DIR',
                        help='Directory for output files (default: current directory)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('files', nargs='+', metavar='FILE', help='Input file(s)')
    return parser


def options_from_args(args: argparse.Namespace) -> SplitOptions:
    return SplitOptions(
        array_path=args.array_path,
        id_path=args.id_path,
        pretty=args.pretty,
        allow_collisions=args.collisions,
        output_dir=args.output_dir,
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(message)s',
        stream=sys.stderr,
    )

    try:
        split_files(args.files, options_from_args(args))
    except SplitError as e:
        log.error('Error: %s', e)
        return 1

    log.info('\nDone!')
    return 0


if __name__ == '__main__':
    sys.exit(main())

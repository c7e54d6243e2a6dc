"""

Command line utility to convert DBML files to Avro schemas.

"""

import argparse
import logging
import sys

from dbmlavro import _version
from dbmlavro.dbmltoavro import DbmlToAvro, build_config, convert_dbml_to_avro


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(description='Convert DBML tables and enums to Avro schemas.')
    parser.add_argument('--version', action='store_true', help='Print the version of dbmlavro.')
    parser.add_argument('input', nargs='?', help='Path to the DBML file. Reads from stdin if omitted.')
    parser.add_argument('--out', help='Output directory for the .avsc files. Prints to stdout if omitted.')
    parser.add_argument('--namespace', default='', help='Namespace of the generated Avro schemas.')
    parser.add_argument('--default-scale', type=int, default=0,
                        help='Scale of decimals declared without a scale.')
    parser.add_argument('--type-mapping', action='append', default=[], metavar='AVROTYPE=DBMLTYPE',
                        help='Map DBML types starting with DBMLTYPE to AVROTYPE. Can be repeated.')
    parser.add_argument('--verbose', action='store_true', help='Log translation details.')
    return parser


def main(argv=None):
    """Main function for the command line utility."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f'dbmlavro {_version.version}')
        return

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        if args.out:
            if not args.input:
                parser.error('--out requires an input file')
            print(f'Converting {args.input} to Avro schemas in {args.out}')
            for file_path in convert_dbml_to_avro(args.input, args.out, args.namespace,
                                                  args.default_scale, args.type_mapping):
                print(f'Wrote {file_path}')
            return

        translator = DbmlToAvro(build_config(args.namespace, args.default_scale, args.type_mapping))
        if args.input:
            with open(args.input, 'r', encoding='utf-8') as dbml_file:
                results = translator.translate_dbml(dbml_file)
        else:
            results = translator.translate_dbml(sys.stdin.read())
        print('\n\n'.join(result.schema for result in results))
    except Exception as e:
        print("Error: ", str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()

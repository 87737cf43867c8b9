import argparse
import sys

from chatstats.common.defaults import *
from chatstats.data.data_source_type import DataSourceType


def validate_xlsx_file(file_path):
    if not file_path.lower().endswith('.xlsx'):
        raise argparse.ArgumentTypeError("File must have a .xlsx extension.")
    return file_path


def validate_non_negative(value):
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"Value must be zero or greater: {value}")
    return number


def validate_year(value):
    year = int(value)
    if not 1 <= year <= 9999:
        raise argparse.ArgumentTypeError(f"Invalid year: {value}")
    return year


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(prog="chatstats", add_help=False,
                                     description="""This tool produces a transcript and statistics for a conversation
                                     exported from Apple Messages (chat.db) or a CSV export.""",
                                     formatter_class=lambda prog: argparse.HelpFormatter(prog, max_help_position=80,
                                                                                         width=140))

    required_group = parser.add_argument_group('Input / Output arguments (one input source is required)')
    field_group = parser.add_argument_group('CSV field mapping arguments')
    aggregation_group = parser.add_argument_group('Aggregation arguments')
    output_group = parser.add_argument_group('Transcript arguments')
    usage = parser.add_argument_group('Usage')

    source = required_group.add_mutually_exclusive_group(required=True)
    source.add_argument('-d', '--database', metavar='<chat.db>', dest="database", type=str,
                        help='Apple Messages database to read.')
    source.add_argument('-i', '--input', metavar='<file>', dest="input_files", nargs='+', type=str,
                        help='CSV export files to read (date, is_from_me, text).')

    required_group.add_argument('-c', '--contact', metavar='<id>', dest="contact", type=str, default='',
                                help='Chat identifier: Apple ID email or phone number with country code, '
                                     'e.g. foo@mydomain.com or +16789998212')

    required_group.add_argument('-o', '--output', metavar='<xlsx>', dest="output_file",
                                type=validate_xlsx_file, required=False,
                                help='Optional workbook report.')

    field_group.add_argument('--date', metavar='DateField', dest="date_field", type=str,
                             default=DEFAULT_DATE_FIELD,
                             help=f'CSV field of message date/time. (default={DEFAULT_DATE_FIELD})')

    field_group.add_argument('--from-me', metavar='FromMeField', dest="from_me_field", type=str,
                             default=DEFAULT_FROM_ME_FIELD,
                             help=f'CSV field flagging messages you sent. (default={DEFAULT_FROM_ME_FIELD})')

    field_group.add_argument('--text', metavar='TextField', dest="text_field", type=str,
                             default=DEFAULT_TEXT_FIELD,
                             help=f'CSV field of message text. (default={DEFAULT_TEXT_FIELD})')

    field_group.add_argument('--date-format', metavar='DateFormat', dest="date_format", type=str,
                             default=DEFAULT_DATE_FORMAT,
                             help="Date format used to parse the timestamps. (default={})".format(
                                 DEFAULT_DATE_FORMAT.replace('%', '%%')))

    aggregation_group.add_argument('--first-year', metavar='YYYY', dest="first_year", type=validate_year,
                                   default=DEFAULT_FIRST_YEAR,
                                   help=f'First year counted, inclusive. (default={DEFAULT_FIRST_YEAR})')

    aggregation_group.add_argument('--last-year', metavar='YYYY', dest="last_year", type=validate_year,
                                   default=DEFAULT_LAST_YEAR,
                                   help=f'Last year counted, inclusive. (default={DEFAULT_LAST_YEAR})')

    aggregation_group.add_argument('--levels', metavar='N', dest="heap_levels", type=validate_non_negative,
                                   default=DEFAULT_HEAP_LEVELS,
                                   help=f'Track the 2^N - 1 longest droughts. (default={DEFAULT_HEAP_LEVELS})')

    aggregation_group.add_argument('--exact-top-k', action='store_true', dest="exact_top_k",
                                   help='Evict the true shortest drought instead of only scanning the heap leaves')

    aggregation_group.add_argument('--exact', default=DEFAULT_EXACT_MESSAGES, metavar='<text>',
                                   dest="exact_messages", nargs='+', type=str,
                                   help='Messages to count as exact text.')

    aggregation_group.add_argument('--substr', default=DEFAULT_SUBSTR_MESSAGES, metavar='<text>',
                                   dest="substr_messages", nargs='+', type=str,
                                   help='Messages to count as a substring.')

    output_group.add_argument('-t', '--transcript', metavar='<txt>', dest="transcript_file", type=str,
                              default=DEFAULT_TRANSCRIPT_FILE,
                              help=f'Transcript output file. (default={DEFAULT_TRANSCRIPT_FILE})')

    output_group.add_argument('--no-transcript', action='store_true', dest="no_transcript",
                              help='Write only the statistics, not the message lines')

    output_group.add_argument('--your-name', metavar='<name>', dest="your_name", type=str,
                              default=DEFAULT_YOUR_NAME,
                              help=f'Name used for your messages. (default={DEFAULT_YOUR_NAME})')

    output_group.add_argument('--their-name', metavar='<name>', dest="their_name", type=str,
                              default=DEFAULT_THEIR_NAME,
                              help=f'Name used for their messages. (default={DEFAULT_THEIR_NAME})')

    usage.add_argument('-h', '--help', action='help', help='Show this help message and exit')

    if argv is None and len(sys.argv) == 1:
        parser.print_usage()  # Print usage information if no arguments are passed
        sys.exit(1)

    args = parser.parse_args(argv)
    args.source_type = DataSourceType.SQLITE if args.database else DataSourceType.CSV

    if args.first_year > args.last_year:
        parser.error(f"--first-year {args.first_year} is after --last-year {args.last_year}")

    if args.source_type == DataSourceType.SQLITE and not args.contact:
        parser.error("--contact is required when reading a Messages database")

    return args

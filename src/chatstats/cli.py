import sqlite3
import sys

from chatstats.cli_args import parse_arguments
from chatstats.common.config import Config
from chatstats.common.errors import NonMonotonicInputError
from chatstats.common.utils import format_average, print_list_with_title, print_summary
from chatstats.data.data_source_type import DataSourceType
from chatstats.processing.data_source_manager import DataSourceManager
from chatstats.processing.pipeline_manager import PipelineManager
from chatstats.processing.pipeline_processor import PipelineProcessor
from chatstats.reporting.pipeline_processor_report import PipelineProcessorReport
from chatstats.reporting.transcript_report import TranscriptReport


def main(argv=None):
    # Config object stores all arguments parsed
    config = Config(parse_arguments(argv))

    if config.source_type == DataSourceType.CSV:
        print_list_with_title("Files to be processed:", config.input_files)
    print_list_with_title("Exact messages counted:", config.exact_messages)
    print_list_with_title("Substring messages counted:", config.substr_messages)

    try:
        data_source_manager = DataSourceManager(config)
    except FileNotFoundError as e:
        print(f"ERROR: {e}")
        return 1

    with TranscriptReport(config.transcript_file, config.your_name, config.their_name) as transcript:
        pipeline_manager = PipelineManager(config, None if config.no_transcript else transcript)
        processor = PipelineProcessor(data_source_manager, pipeline_manager)

        try:
            processor.process_data()
        except NonMonotonicInputError as e:
            print(f"ERROR: Aborting, input is out of order: {e}")
            return 1
        except (sqlite3.Error, ValueError) as e:
            print(f"ERROR: Failed to read messages: {e}")
            return 1

        processors = pipeline_manager.get_processor_manager()
        kinds = processors.message_kind_processor
        matches = processors.text_match_processor
        driver = processors.stream_driver
        snapshot = driver.snapshot()

        transcript.write_summary(
            snapshot,
            reactions=kinds.reactions,
            drawn=kinds.drawn,
            expressive=kinds.expressive,
            exact_counts=matches.get_exact_counts(),
            substr_counts=matches.get_substr_counts(),
        )

    # Display filtering statistics
    pipeline_manager.get_filter_manager().display_summary()
    print_summary("Outside year range", driver.out_of_range_count)
    print_summary("Messages counted", snapshot.total_count)
    print(f"Avg Msg Length: {format_average(snapshot.average_length)}")
    print("Please see transcript: {}".format(config.transcript_file))

    if config.output_file:
        report = PipelineProcessorReport(config.output_file, pipeline_manager)
        report.generate()
        report.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())

import zipfile

import pytest

from chatstats.cli import main
from chatstats.cli_args import parse_arguments
from chatstats.common.buckets import Band, Season
from chatstats.common.config import Config
from chatstats.common.errors import NonMonotonicInputError
from chatstats.processing.data_source_manager import DataSourceManager
from chatstats.processing.pipeline_manager import PipelineManager
from chatstats.processing.pipeline_processor import PipelineProcessor
from chatstats.reporting.pipeline_processor_report import PipelineProcessorReport

CONVERSATION = (
    "date,is_from_me,text\n"
    "2020-03-01 08:00:00,1,Hi\n"
    "2020-03-01 09:00:00,0,lol that's funny\n"
    "2020-07-04 14:30:00,1,:) LOL\n"
    "2020-07-04 14:30:00,0,\n"
    "1999-12-31 23:00:00,0,Goodnight\n"
    "2021-12-25 20:00:00,0,Happy Birthday!\n"
)


@pytest.fixture
def export(tmp_path):
    path = tmp_path / "conversation.csv"
    path.write_text(CONVERSATION, encoding="utf-8")
    return str(path)


def run_pipeline(argv):
    config = Config(parse_arguments(argv))
    pipeline_manager = PipelineManager(config)
    PipelineProcessor(DataSourceManager(config), pipeline_manager).process_data()
    return pipeline_manager


def test_pipeline_counts(export):
    pipeline_manager = run_pipeline(["-i", export])
    processors = pipeline_manager.get_processor_manager()
    snapshot = processors.stream_driver.snapshot()

    assert processors.message_kind_processor.drawn == 1
    assert processors.message_kind_processor.reactions == 0
    assert pipeline_manager.get_filter_manager().exclude_non_text_filter.get_excluded_count() == 1
    assert processors.stream_driver.out_of_range_count == 1

    assert snapshot.sent_count == 2
    assert snapshot.received_count == 2
    assert snapshot.total_length == 39
    assert snapshot.average_length == 9.75
    assert snapshot.season_counts == {Season.SPRING: 2, Season.SUMMER: 1, Season.FALL: 0, Season.WINTER: 1}
    assert snapshot.band_counts == {Band.MORNING: 2, Band.AFTERNOON: 1, Band.EVENING: 1, Band.NIGHT: 0}
    assert snapshot.year_counts[20] == 3
    assert snapshot.year_counts[21] == 1

    assert processors.text_match_processor.get_exact_counts() == {
        "Hi": 1, "ETA?": 0, "Goodnight": 1, "Happy Birthday!": 1,
    }
    assert processors.text_match_processor.get_substr_counts() == {":)": 1, "🤣": 0, "lol": 2}

    droughts = snapshot.droughts()
    assert len(droughts) == 3
    assert droughts[-1].duration == 3600
    assert droughts[0].end.year == 2021


def test_pipeline_year_range_and_levels(export):
    pipeline_manager = run_pipeline(["-i", export, "--first-year", "2021", "--last-year", "2021", "--levels", "1"])
    snapshot = pipeline_manager.get_processor_manager().stream_driver.snapshot()
    assert snapshot.total_count == 1
    assert snapshot.gap_records == ()


def test_reportables_in_pipeline_order(export):
    pipeline_manager = run_pipeline(["-i", export])
    names = [type(r).__name__ for r in pipeline_manager.get_reportables()]
    assert names == ["MessageKindProcessor", "TextMatchProcessor", "StreamDriver"]


def test_workbook_report(export, tmp_path):
    pipeline_manager = run_pipeline(["-i", export])
    output = tmp_path / "report.xlsx"
    report = PipelineProcessorReport(str(output), pipeline_manager)
    report.generate()
    report.close()
    assert zipfile.is_zipfile(output)


def test_out_of_order_input_aborts(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text(
        "date,is_from_me,text\n"
        "2020-01-01 00:00:00,1,a\n"
        "2020-01-01 00:00:10,1,b\n"
        "2020-01-01 00:00:05,1,c\n",
        encoding="utf-8",
    )
    with pytest.raises(NonMonotonicInputError):
        run_pipeline(["-i", str(path)])


def test_cli_writes_transcript_and_workbook(export, tmp_path, capsys):
    transcript = tmp_path / "transcript.txt"
    workbook = tmp_path / "stats.xlsx"
    assert main(["-i", export, "-t", str(transcript), "-o", str(workbook)]) == 0

    text = transcript.read_text(encoding="utf-8")
    assert text.startswith("2020-03-01 08:00:00 Alice: Hi\n2020-03-01 09:00:00 Bob: lol that's funny\n")
    assert "Total: 4\n" in text
    assert "Avg Msg Length: 9.750000\n" in text
    assert zipfile.is_zipfile(workbook)
    out = capsys.readouterr().out
    assert "Outside year range: 1\n" in out
    assert "Messages counted: 4\n" in out
    assert "Please see report:" in out


def test_cli_no_transcript_keeps_summary(export, tmp_path):
    transcript = tmp_path / "summary.txt"
    assert main(["-i", export, "-t", str(transcript), "--no-transcript", "--your-name", "Me"]) == 0
    text = transcript.read_text(encoding="utf-8")
    assert text.startswith("\nMsg Counts:\n")
    assert "Me:" not in text


def test_cli_reports_out_of_order_input(tmp_path, capsys):
    path = tmp_path / "bad.csv"
    path.write_text("date,is_from_me,text\n2020-01-02 00:00:00,1,a\n2020-01-01 00:00:00,1,b\n", encoding="utf-8")
    assert main(["-i", str(path), "-t", str(tmp_path / "t.txt")]) == 1
    assert "out of order" in capsys.readouterr().out


def test_cli_missing_database(tmp_path, capsys):
    assert main(["-d", str(tmp_path / "nope.db"), "-c", "+15550001111", "-t", str(tmp_path / "t.txt")]) == 1
    assert "ERROR:" in capsys.readouterr().out


def test_arguments_reject_bad_values(export):
    with pytest.raises(SystemExit):
        parse_arguments(["-i", export, "-o", "report.csv"])
    with pytest.raises(SystemExit):
        parse_arguments(["-i", export, "--first-year", "2022", "--last-year", "2000"])
    with pytest.raises(SystemExit):
        parse_arguments(["-i", export, "--levels", "-1"])
    with pytest.raises(SystemExit):
        parse_arguments(["-d", "chat.db"])


def test_config_capacity_and_files(export, tmp_path):
    config = Config(parse_arguments(["-i", str(tmp_path / "*.csv"), "--levels", "3", "--exact", "Hi", "Hi"]))
    assert config.input_files == [export]
    assert config.capacity == 7
    assert config.exact_messages == ["Hi"]


def test_cli_reports_short_csv_row(tmp_path, capsys):
    path = tmp_path / "short.csv"
    path.write_text("date,is_from_me,text\n2020-01-01 09:00:00,1\n", encoding="utf-8")
    assert main(["-i", str(path), "-t", str(tmp_path / "t.txt")]) == 1
    assert "ERROR: Failed to read messages" in capsys.readouterr().out

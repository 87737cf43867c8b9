import pytest

from chatstats.core.processors import MessageKindProcessor, TextMatchProcessor
from chatstats.core.processors.text_match_processor import compile_substr_pattern
from chatstats.data.message_data import MessageData


def message(text, *, is_reaction=False, is_expressive=False) -> MessageData:
    data = MessageData()
    data.text = text
    data.is_reaction = is_reaction
    data.is_expressive = is_expressive
    return data


@pytest.fixture
def processor() -> TextMatchProcessor:
    return TextMatchProcessor(["Hi", "ETA?"], [":)", "lol", "🤣"])


def test_exact_match_is_case_sensitive(processor):
    for text in ["Hi", "hi", "Hi!", "Hi"]:
        processor.execute(message(text))
    assert processor.get_exact_counts() == {"Hi": 2, "ETA?": 0}


def test_exact_match_treats_punctuation_literally(processor):
    processor.execute(message("ETA?"))
    processor.execute(message("ETA"))
    assert processor.get_exact_counts()["ETA?"] == 1


def test_substring_match_ignores_ascii_case(processor):
    for text in ["LOL", "trolling", "haha lol lol", "l.o.l"]:
        processor.execute(message(text))
    assert processor.get_substr_counts()["lol"] == 3


def test_substring_special_characters_are_literal(processor):
    processor.execute(message("see you :)"))
    processor.execute(message(":-)"))
    assert processor.get_substr_counts()[":)"] == 1


def test_one_message_can_match_several_substrings(processor):
    processor.execute(message("lol :) 🤣🤣"))
    assert processor.get_substr_counts() == {":)": 1, "lol": 1, "🤣": 1}


def test_substr_pattern_like_semantics():
    pattern = compile_substr_pattern("Hello")
    assert pattern.search("oh HELLO there")
    assert not pattern.search("hell o")


def test_report_rows(processor):
    processor.execute(message("Hi"))
    (name, rows), = processor.report()
    rows = list(rows)
    assert name == "Text Matches"
    assert rows[0] == ["Phrase", "Match", "Messages"]
    assert ["Hi", "Exact", 1] in rows
    assert ["lol", "Substring", 0] in rows


def test_message_kinds_are_counted_independently():
    kinds = MessageKindProcessor()
    kinds.execute(message("Loved “hey”", is_reaction=True))
    kinds.execute(message(None))
    kinds.execute(message("Happy Birthday!", is_expressive=True))
    kinds.execute(message("plain"))
    assert (kinds.reactions, kinds.drawn, kinds.expressive) == (1, 1, 1)

from typing import Dict, Iterator, List, Optional, Tuple

import regex as re

from chatstats.data.message_data import MessageData
from chatstats.interfaces.processor import Processor
from chatstats.interfaces.reportable import Reportable


def compile_substr_pattern(phrase: str) -> re.Pattern:
    """
    Builds a pattern with SQL LIKE '%phrase%' semantics: a literal match,
    case-insensitive for ASCII letters only.

    :param phrase: The text to search for.
    :return: A compiled regex object.
    """
    return re.compile(re.escape(phrase), flags=re.IGNORECASE | re.ASCII)


class TextMatchProcessor(Processor[MessageData], Reportable):
    """
    Tallies messages that are exactly one of the configured phrases, and
    messages that contain one of the configured substrings. Reactions count
    too, since their text quotes the message they react to.
    """

    def __init__(self, exact_messages: List[str], substr_messages: List[str]):
        super().__init__()
        self.__exact_counts: Dict[str, int] = {phrase: 0 for phrase in exact_messages}
        self.__substr_patterns = [(phrase, compile_substr_pattern(phrase)) for phrase in substr_messages]
        self.__substr_counts: Dict[str, int] = {phrase: 0 for phrase in substr_messages}

    def execute(self, data: MessageData) -> None:
        text = data.text
        if text is None:
            return
        if text in self.__exact_counts:
            self.__exact_counts[text] += 1
        for phrase, pattern in self.__substr_patterns:
            if pattern.search(text):
                self.__substr_counts[phrase] += 1

    def get_exact_counts(self) -> Dict[str, int]:
        return dict(self.__exact_counts)

    def get_substr_counts(self) -> Dict[str, int]:
        return dict(self.__substr_counts)

    def report(self, context: Optional = None) -> Iterator[Tuple[str, Iterator[list]]]:
        def get_report_name():
            return "Text Matches"

        def get_report_data():
            yield ["Phrase", "Match", "Messages"]
            for phrase, count in self.__exact_counts.items():
                yield [phrase, "Exact", count]
            for phrase, count in self.__substr_counts.items():
                yield [phrase, "Substring", count]

        yield get_report_name(), get_report_data()

    @property
    def create_data_table(self) -> bool:
        return True

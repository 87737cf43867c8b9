from typing import Iterator, Optional, Tuple

from chatstats.data.message_data import MessageData
from chatstats.interfaces.processor import Processor
from chatstats.interfaces.reportable import Reportable


class MessageKindProcessor(Processor[MessageData], Reportable):
    """
    Counts the message kinds that never reach the statistics: reactions,
    drawn (text-less) messages and expressive sends.
    """

    def __init__(self):
        super().__init__()
        self.__reactions = 0
        self.__drawn = 0
        self.__expressive = 0

    def execute(self, data: MessageData) -> None:
        if data.is_reaction:
            self.__reactions += 1
        if data.text is None:
            self.__drawn += 1
        if data.is_expressive:
            self.__expressive += 1

    @property
    def reactions(self) -> int:
        return self.__reactions

    @property
    def drawn(self) -> int:
        return self.__drawn

    @property
    def expressive(self) -> int:
        return self.__expressive

    def report(self, context: Optional = None) -> Iterator[Tuple[str, Iterator[list]]]:
        def get_report_name():
            return "Message Kinds"

        def get_report_data():
            yield ["Kind", "Messages"]
            yield ["Reactions", self.__reactions]
            yield ["Drawn", self.__drawn]
            yield ["Expressive", self.__expressive]

        yield get_report_name(), get_report_data()

    @property
    def create_data_table(self) -> bool:
        return True

from chatstats.data.message_data import MessageData
from chatstats.interfaces.processor import Processor
from chatstats.reporting.transcript_report import TranscriptReport


class TranscriptProcessor(Processor[MessageData]):
    def __init__(self, transcript: TranscriptReport):
        super().__init__()
        self.__transcript = transcript

    def execute(self, data: MessageData) -> None:
        self.__transcript.write_message(data)

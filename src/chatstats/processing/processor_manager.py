from chatstats.common.config import Config
from chatstats.core.processors import MessageKindProcessor, TextMatchProcessor
from chatstats.processing.stream_driver import StreamDriver


class ProcessorManager:
    def __init__(self, config: Config):
        self.message_kind_processor = MessageKindProcessor()
        self.text_match_processor = TextMatchProcessor(config.exact_messages, config.substr_messages)
        self.stream_driver = StreamDriver(config.first_year, config.last_year,
                                          config.capacity, config.eviction_policy)

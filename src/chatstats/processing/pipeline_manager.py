from typing import List, Optional

from chatstats.common.config import Config
from chatstats.core.processors import TranscriptProcessor
from chatstats.core.transformers import DateTransform
from chatstats.data.message_data import MessageData
from chatstats.interfaces.handler import Handler
from chatstats.interfaces.processor import Processor
from chatstats.interfaces.reportable import Reportable
from chatstats.processing.filter_manager import FilterManager
from chatstats.processing.processor_manager import ProcessorManager
from chatstats.reporting.transcript_report import TranscriptReport


class PipelineManager:
    def __init__(self, config: Config, transcript: Optional[TranscriptReport] = None):
        self.__date_transform = DateTransform(config.date_format)
        self.__filter_manager = FilterManager()
        self.__processor_manager = ProcessorManager(config)
        self.__transcript_processor = TranscriptProcessor(transcript) if transcript else None
        self.__pipeline = self.__build_pipeline()

    def __build_pipeline(self) -> Handler[MessageData]:
        pipeline = (self.__date_transform
                    .set_next(self.__processor_manager.message_kind_processor)
                    .set_next(self.__processor_manager.text_match_processor)
                    .set_next(self.__filter_manager.exclude_non_text_filter))

        if self.__transcript_processor:
            pipeline.set_next(self.__transcript_processor)

        pipeline.set_next(self.__processor_manager.stream_driver)
        return pipeline

    def get_pipeline(self) -> Handler[MessageData]:
        return self.__pipeline

    def get_filter_manager(self) -> FilterManager:
        return self.__filter_manager

    def get_processor_manager(self) -> ProcessorManager:
        return self.__processor_manager

    def get_active_processors(self) -> List[Processor]:
        processors = []
        current = self.__pipeline
        while current is not None:
            if isinstance(current, Processor):
                processors.append(current)
            current = current.get_next()
        return processors

    def get_reportables(self) -> List[Reportable]:
        return [p for p in self.get_active_processors() if isinstance(p, Reportable)]

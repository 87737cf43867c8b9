from chatstats.processing.data_source_manager import DataSourceManager
from chatstats.processing.pipeline_manager import PipelineManager


class PipelineProcessor:
    def __init__(self, data_source_manager: DataSourceManager, pipeline_manager: PipelineManager):
        self.__data_source = data_source_manager.get_data_source()
        self.__pipeline = pipeline_manager.get_pipeline()

    def process_data(self):
        for message_data in self.__data_source.read_data():
            self.__pipeline.handle(message_data)

from chatstats.common.config import Config
from chatstats.core.mappers.csv_mapper import CSVMapper
from chatstats.data.csv_data_source import CSVDataSource
from chatstats.data.data_source_type import DataSourceType
from chatstats.data.sqlite_data_source import SQLiteDataSource


class DataSourceManager:
    def __init__(self, config: Config):
        if config.source_type == DataSourceType.SQLITE:
            self.__data_source = SQLiteDataSource(config.database, config.contact)
        elif config.source_type == DataSourceType.CSV:
            mapper = CSVMapper({
                'date': config.date_field,
                'is_from_me': config.from_me_field,
                'text': config.text_field,
            })
            self.__data_source = CSVDataSource(config.input_files, mapper)
        else:
            raise ValueError("Unsupported source type. Use DataSourceType.SQLITE or DataSourceType.CSV.")

    def get_data_source(self):
        return self.__data_source

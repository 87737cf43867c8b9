import csv
from typing import Iterator, List

from chatstats.core.mappers.csv_mapper import CSVMapper
from chatstats.data.message_data import MessageData
from chatstats.interfaces.data_source import DataSource


class CSVDataSource(DataSource):
    def __init__(self, input_files: List[str], field_mapper: CSVMapper):
        self.__input_files = input_files
        self.__field_mapper = field_mapper

    def read_data(self) -> Iterator[MessageData]:
        f_current = 1
        f_total = len(self.__input_files)
        for input_file in self.__input_files:
            print("Processing:", input_file, f'({f_current} of {f_total})')
            with open(input_file, 'r', encoding='utf-8-sig', newline='') as file:
                reader = csv.reader(file)
                headers = next(reader, None)
                if headers is None:
                    f_current += 1
                    continue
                self.__field_mapper.configure(headers)
                for csv_line in reader:
                    if not csv_line:
                        continue
                    yield self.__field_mapper.map_fields(csv_line)
            f_current += 1

from typing import Dict, List

from chatstats.data.message_data import MessageData

TRUE_VALUES = {'1', 'true', 'yes', 'y', 'me', 'sent'}


class CSVMapper:
    """
    Maps CSV rows onto MessageData once configure() has seen the header row.
    """

    def __init__(self, mappings: Dict[str, str]):
        self.mappings = mappings
        self.__index_map: Dict[str, int] = {}

    def configure(self, headers: List[str]):
        headers = [h.casefold() for h in headers]
        self.__index_map = {}
        for field, column in self.mappings.items():
            column = column.casefold()
            if column not in headers:
                raise ValueError(f"Column '{column}' for field '{field}' not found in CSV headers: {headers}")
            self.__index_map[field] = headers.index(column)

    def map_fields(self, csv_row: List[str]) -> MessageData:
        if not self.__index_map:
            raise ValueError("CSVMapper used before configure() was called with the header row.")
        if len(csv_row) <= max(self.__index_map.values()):
            raise ValueError(f"CSV row has {len(csv_row)} fields, expected at least "
                             f"{max(self.__index_map.values()) + 1}: {csv_row}")
        data = MessageData()
        text = csv_row[self.__index_map['text']] if 'text' in self.__index_map else ''
        data.date = csv_row[self.__index_map['date']].strip()
        data.is_from_me = csv_row[self.__index_map['is_from_me']].strip().casefold() in TRUE_VALUES
        data.text = text if text != '' else None
        data.length = len(text)
        data.is_reaction = False
        data.is_expressive = False
        return data

    def __repr__(self):
        return f"CSVMapper(mappings={self.mappings})"

from datetime import datetime

from chatstats.data.message_data import MessageData
from chatstats.interfaces.transform import Transform


class DateTransform(Transform[MessageData]):
    def __init__(self, date_format: str):
        super().__init__()
        self.__date_format = date_format

    def transform(self, data: MessageData) -> MessageData:
        # Sources that deliver datetimes have already set date_text
        if isinstance(data.date, datetime):
            return data
        data.date_text = data.date
        data.date = datetime.strptime(data.date, self.__date_format)
        return data

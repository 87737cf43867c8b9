import os
import sqlite3
from datetime import datetime, timezone
from typing import Iterator

from chatstats.common.defaults import DEFAULT_DATE_FORMAT as DATE_TEXT_FORMAT, PROGRESS_INTERVAL
from chatstats.data.message_data import MessageData
from chatstats.interfaces.data_source import DataSource

# Apple stores message_date as nanoseconds since 2001-01-01; selected as unix epoch seconds
MESSAGE_HISTORY_QUERY = """
SELECT chat_message_join.message_date / 1000000000 + strftime('%s', '2001-01-01') AS epoch_seconds,
       message.text,
       message.is_from_me,
       LENGTH(message.text),
       message.associated_message_type,
       message.expressive_send_style_id
FROM chat
JOIN chat_message_join ON chat."ROWID" = chat_message_join.chat_id
JOIN message ON chat_message_join.message_id = message."ROWID"
WHERE chat.chat_identifier = ?
ORDER BY chat_message_join.message_date
"""


class SQLiteDataSource(DataSource):
    """
    Streams one conversation out of an Apple Messages chat.db.

    Every row is yielded, including tapback reactions, drawn messages (no text)
    and expressive sends; the pipeline decides what reaches the statistics.
    """

    def __init__(self, database: str, contact: str):
        if not os.path.isfile(database):
            raise FileNotFoundError(f"Message database not found: {database}")
        self.__database = database
        self.__contact = contact

    def read_data(self) -> Iterator[MessageData]:
        connection = sqlite3.connect(f"file:{self.__database}?mode=ro", uri=True)
        data_count = 0
        try:
            for row in connection.execute(MESSAGE_HISTORY_QUERY, (self.__contact,)):
                yield self.__to_message_data(row)
                data_count += 1
                if data_count % PROGRESS_INTERVAL == 0:
                    print(f"Records fetched so far: {data_count}")
        finally:
            connection.close()
        print(f"Successfully collected {data_count} records.")

    @staticmethod
    def __to_message_data(row) -> MessageData:
        epoch_seconds, text, is_from_me, length, associated_type, expressive_style = row
        # Aware local time: ordering and gaps follow absolute time across DST changes
        date = datetime.fromtimestamp(int(epoch_seconds), timezone.utc).astimezone()
        data = MessageData()
        data.date = date
        data.date_text = date.strftime(DATE_TEXT_FORMAT)
        data.text = text
        data.is_from_me = bool(is_from_me)
        data.length = int(length or 0)
        data.is_reaction = bool(associated_type)
        data.is_expressive = expressive_style is not None
        return data

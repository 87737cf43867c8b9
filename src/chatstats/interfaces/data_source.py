from abc import ABC, abstractmethod
from typing import Iterator

from chatstats.data.message_data import MessageData


class DataSource(ABC):
    @abstractmethod
    def read_data(self) -> Iterator[MessageData]:
        pass

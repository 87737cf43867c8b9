from abc import abstractmethod
from typing import Optional, final, Generic

from chatstats.interfaces.handler import AbstractHandler, TData


class Filter(AbstractHandler[TData], Generic[TData]):
    """
    Passes a record down the chain only when filter() accepts it.
    Every rejected record is counted so the CLI can summarize exclusions.
    """

    def __init__(self):
        self._excluded = 0

    @final
    def handle(self, data: TData) -> Optional[TData]:
        if self.filter(data):
            return super().handle(data)
        self._excluded += 1
        return None

    @abstractmethod
    def filter(self, data: TData) -> bool:
        pass

    def get_excluded_count(self) -> int:
        return self._excluded

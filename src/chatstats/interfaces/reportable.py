from abc import ABC, abstractmethod
from typing import Iterator, Optional, Tuple


class Reportable(ABC):
    @abstractmethod
    def report(self, context: Optional = None) -> Iterator[Tuple[str, Iterator[list]]]:
        """
        Yields (sheet name, rows) pairs; the first row of each sheet is the header.
        """
        pass

    @property
    @abstractmethod
    def create_data_table(self) -> bool:
        pass

from enum import Enum


class DataSourceType(Enum):
    SQLITE = "SQLITE"
    CSV = "CSV"

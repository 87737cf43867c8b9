from .data_source import DataSource
from .filter import Filter
from .handler import Handler
from .processor import Processor
from .reportable import Reportable
from .transform import Transform

__all__ = [
    'DataSource',
    'Filter',
    'Handler',
    'Processor',
    'Reportable',
    'Transform'
]

from .date_transform import DateTransform

__all__ = [
    'DateTransform'
]

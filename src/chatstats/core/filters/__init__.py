from .exclude_non_text_filter import ExcludeNonTextFilter

__all__ = [
    'ExcludeNonTextFilter'
]

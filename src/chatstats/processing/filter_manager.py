from chatstats.core.filters import ExcludeNonTextFilter


class FilterManager:
    def __init__(self):
        self.exclude_non_text_filter = ExcludeNonTextFilter()

    def display_summary(self):
        print("\nFiltering Statistics:")
        print(f"Excluded non-text messages: {self.exclude_non_text_filter.get_excluded_count()}")

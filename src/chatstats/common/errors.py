from datetime import datetime


class NonMonotonicInputError(ValueError):
    """
    Raised when the event source delivers a timestamp earlier than the last accepted one.
    """

    def __init__(self, timestamp: datetime, previous: datetime):
        self.timestamp = timestamp
        self.previous = previous
        super().__init__(
            f"Event at {timestamp:%Y-%m-%d %H:%M:%S} arrived after {previous:%Y-%m-%d %H:%M:%S}; "
            f"events must be in non-decreasing time order"
        )

from chatstats.data.message_data import MessageData
from chatstats.interfaces.filter import Filter


class ExcludeNonTextFilter(Filter[MessageData]):
    """
    Drops tapback reactions and messages without text (drawings, attachments).
    """

    def __init__(self):
        super().__init__()

    def filter(self, data: MessageData) -> bool:
        if data.is_reaction or data.text is None:
            return False  # Exclude record
        return True

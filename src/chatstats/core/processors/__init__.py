from .message_kind_processor import MessageKindProcessor
from .text_match_processor import TextMatchProcessor
from .transcript_processor import TranscriptProcessor

__all__ = [
    'MessageKindProcessor',
    'TextMatchProcessor',
    'TranscriptProcessor'
]

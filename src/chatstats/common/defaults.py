# Range of years messages can fall in (inclusive)
DEFAULT_FIRST_YEAR = 2000
DEFAULT_LAST_YEAR = 2022

# Gap tracker holds 2^levels - 1 droughts
DEFAULT_HEAP_LEVELS = 4

DEFAULT_YOUR_NAME = "Alice"
DEFAULT_THEIR_NAME = "Bob"

DEFAULT_TRANSCRIPT_FILE = "transcript.txt"

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Messages to search as exact text
DEFAULT_EXACT_MESSAGES = ["Hi", "ETA?", "Goodnight", "Happy Birthday!"]

# Messages to search as a substring
DEFAULT_SUBSTR_MESSAGES = [":)", "🤣", "lol"]

# CSV export field names
DEFAULT_DATE_FIELD = "date"
DEFAULT_FROM_ME_FIELD = "is_from_me"
DEFAULT_TEXT_FIELD = "text"

DAY_SECONDS = 60 * 60 * 24
HOUR_SECONDS = 60 * 60

PROGRESS_INTERVAL = 5000

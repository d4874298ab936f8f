"""Game constants."""

BLANK = "?"

DEFAULT_HAND_SIZE = 7
DEFAULT_MIN_WORD_LENGTH = 2
BINGO_BONUS = 50  # awarded for playing a full hand
MAX_PLAYERS = 8

# Board file square codes. Anything not listed here is a triple word square.
PLAIN_SQUARE = "."
DOUBLE_LETTER = "2"
TRIPLE_LETTER = "3"
DOUBLE_WORD = "d"

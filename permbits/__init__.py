import logging

WORD_BITS = 64  # width of a permission word; matches an unsigned long long on the supported platforms
WORD_MASK = (1 << WORD_BITS) - 1

LOG_FLAGS = 5  # below DEBUG, only seen when explicitly asked for
logging.addLevelName(LOG_FLAGS, "FLAGS")

from permbits.errors import PermbitsError, FlagIndexError, WordRangeError
from permbits.pycore.bitwise import set_flag, clear_flag, check_flag   # make the pure python flags available at the top level

# names used by the original permission flag API
add = set_flag
rm = clear_flag
check = check_flag

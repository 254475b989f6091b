"""
Permission flag manipulations on a single permission word.

A permission word is an unsigned WORD_BITS bit integer where each bit is one boolean flag, numbered from 0 at the
least significant bit.  All of these return a new word (or a bool) and never touch any state, so they are safe to
call from anywhere.
"""
import logging

from permbits import WORD_BITS, WORD_MASK, LOG_FLAGS
from permbits.errors import FlagIndexError, WordRangeError


def _check_args(word, index):
    """
    Fail fast on a word or index that a native WORD_BITS bit shift could not represent
    """
    if not 0 <= index < WORD_BITS:
        logging.log(LOG_FLAGS, "rejected flag index {} (word {})".format(index, word), extra={"source": "flags"})
        raise FlagIndexError(index, WORD_BITS)
    if not 0 <= word <= WORD_MASK:
        logging.log(LOG_FLAGS, "rejected permission word {}".format(word), extra={"source": "flags"})
        raise WordRangeError(word, WORD_BITS)


def set_flag(word, index):
    """
    Returns word but with the flag at index set to 1
    e.g. set_flag(0b001, 1) == 0b011
    """
    _check_args(word, index)
    return word | (1 << index)

def clear_flag(word, index):
    """
    Returns word but with the flag at index set to 0
    e.g. clear_flag(0b111, 2) == 0b011
    """
    _check_args(word, index)
    return word & ~(1 << index)

def check_flag(word, index):
    """
    Returns whether the flag at index is set in word
    e.g. check_flag(5, 2) == True    (5 = 0b101, so bit 2 is high)
         check_flag(5, 1) == False
    """
    _check_args(word, index)
    return (word >> index) & 1 == 1

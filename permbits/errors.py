"""
Exceptions raised when a permission word or flag index is out of range.
"""


class PermbitsError(Exception):
    pass


class FlagIndexError(PermbitsError, IndexError):
    """
    A flag index outside [0, WORD_BITS)
    """
    def __init__(self, index, word_bits):
        super().__init__("flag index {} out of range for a {} bit permission word".format(index, word_bits))
        self.index = index
        self.word_bits = word_bits


class WordRangeError(PermbitsError, OverflowError):
    """
    A permission word that does not fit in WORD_BITS unsigned bits
    """
    def __init__(self, word, word_bits):
        super().__init__("permission word {} does not fit in {} unsigned bits".format(word, word_bits))
        self.word = word
        self.word_bits = word_bits

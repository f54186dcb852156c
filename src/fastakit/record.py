# This source code is part of the fastakit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
The module contains the :class:`SequenceRecord`, the pairing of an
identifier with a residue sequence, and the normalization rules applied
to both.
"""

__name__ = "fastakit"
__author__ = "The fastakit contributors"
__all__ = [
    "SequenceRecord",
    "normalize_identifier",
    "normalize_sequence",
    "is_valid_symbol",
]

import functools
import string
from numbers import Integral
import numpy as np
from .copyable import Copyable


# Lookup table over all byte values:
# True for ASCII letters, '-' (gap) and '*' (stop)
_VALID_SYMBOLS = np.zeros(256, dtype=bool)
_VALID_SYMBOLS[
    np.frombuffer((string.ascii_letters + "-*").encode("ASCII"), dtype=np.ubyte)
] = True


def normalize_identifier(text):
    """
    Normalize a raw identifier, e.g. a header line of a FASTA file.

    First, all non-printable characters (control characters, tabs,
    line terminators, etc.) are removed.
    Then a leading ``>`` header marker is removed, if present.
    Finally, leading and trailing whitespace is stripped.

    Parameters
    ----------
    text : str
        The raw identifier.

    Returns
    -------
    identifier : str
        The normalized identifier.

    Examples
    --------

    >>> print(repr(normalize_identifier(">  seq1 desc\\r")))
    'seq1 desc'
    """
    text = "".join([char for char in text if char.isprintable()])
    if text.startswith(">"):
        text = text[1:]
    return text.strip()


def normalize_sequence(text):
    """
    Normalize a raw sequence string.

    Only ASCII letters, ``-`` and ``*`` are retained, all other
    characters (digits, whitespace, punctuation, non-ASCII
    characters) are removed.
    The letter case is kept.

    Parameters
    ----------
    text : str
        The raw sequence string.

    Returns
    -------
    sequence : str
        The normalized sequence string.

    Examples
    --------

    >>> print(normalize_sequence("ACGT acgt-*\\n99"))
    ACGTacgt-*
    """
    # Non-ASCII characters are never valid -> drop them while encoding
    code = np.frombuffer(text.encode("ASCII", errors="ignore"), dtype=np.ubyte)
    return code[_VALID_SYMBOLS[code]].tobytes().decode("ASCII")


def is_valid_symbol(char):
    """
    Check whether the given character may be part of a sequence.

    Parameters
    ----------
    char : str
        A single character.

    Returns
    -------
    valid : bool
        True, if `char` is an ASCII letter, ``-`` or ``*``.
    """
    if not isinstance(char, str) or len(char) != 1:
        return False
    code = ord(char)
    return code < 256 and bool(_VALID_SYMBOLS[code])


@functools.total_ordering
class SequenceRecord(Copyable):
    """
    A single sequence together with its identifier.

    Both, the identifier and the sequence, are normalized each time they
    are set, i.e. on construction and on every assignment to
    :attr:`identifier` or :attr:`sequence`.
    Invalid characters are silently removed instead of raising an
    exception.
    If a strict validation is required, the length of the normalized
    value can be compared to the input.

    Records are ordered by their identifier first and by their sequence
    second.
    Two records are equal, if both identifier and sequence are equal.

    Indexing a record accesses the residues of its sequence.

    Parameters
    ----------
    identifier : str, optional
        The identifier of the sequence, e.g. a FASTA header line.
        A leading ``>`` is removed.
    sequence : str, optional
        The residues of the sequence.

    Attributes
    ----------
    identifier : str
        The normalized identifier.
    sequence : str
        The normalized sequence.

    Examples
    --------

    >>> record = SequenceRecord(">seq1 desc", "ACGT acgt 99")
    >>> print(record.identifier)
    seq1 desc
    >>> print(record.sequence)
    ACGTacgt
    >>> print(len(record))
    8
    >>> print(record[4])
    a
    >>> record.append("N", 3)
    >>> print(record)
    >seq1 desc
    ACGTacgtNNN
    """

    def __init__(self, identifier="", sequence=""):
        self.identifier = identifier
        self.sequence = sequence

    @property
    def identifier(self):
        return self._identifier

    @identifier.setter
    def identifier(self, value):
        self._identifier = normalize_identifier(value)

    @property
    def sequence(self):
        return self._sequence

    @sequence.setter
    def sequence(self, value):
        self._sequence = normalize_sequence(value)

    def append(self, symbol, count=1):
        """
        Append a symbol multiple times to the sequence.

        Nothing is appended, if the symbol is not a valid sequence
        character or `count` is not positive.

        Parameters
        ----------
        symbol : str
            A single sequence character.
        count : int, optional
            The number of times `symbol` is appended.
        """
        if count > 0 and is_valid_symbol(symbol):
            self._sequence += symbol * count

    def extend(self, text, max_count=None):
        """
        Append characters from the given text to the sequence.

        The already stored residues are not normalized again.
        Only the appended characters are checked individually and
        invalid ones are skipped.

        Parameters
        ----------
        text : str
            The text to take the characters from.
        max_count : int, optional
            The maximum number of characters taken from the beginning of
            `text`.
            By default, the complete `text` is used.
        """
        if max_count is not None:
            if max_count <= 0:
                return
            text = text[:max_count]
        self._sequence += normalize_sequence(text)

    def __copy_create__(self):
        return SequenceRecord(self._identifier, self._sequence)

    def __len__(self):
        return len(self._sequence)

    def __getitem__(self, index):
        # Raises 'IndexError' for out of range positions
        return self._sequence[index]

    def __setitem__(self, index, symbol):
        if not isinstance(index, Integral):
            raise TypeError(
                f"Only single positions can be assigned, not "
                f"'{type(index).__name__}'"
            )
        if not is_valid_symbol(symbol):
            raise ValueError(f"{repr(symbol)} is not a valid sequence character")
        length = len(self._sequence)
        if index < -length or index >= length:
            raise IndexError(
                f"Index {index} is out of range for a sequence of length {length}"
            )
        if index < 0:
            index += length
        self._sequence = (
            self._sequence[:index] + symbol + self._sequence[index + 1 :]
        )

    def __iter__(self):
        return iter(self._sequence)

    def __eq__(self, item):
        if not isinstance(item, SequenceRecord):
            return NotImplemented
        return (
            self._identifier == item._identifier
            and self._sequence == item._sequence
        )

    def __lt__(self, item):
        if not isinstance(item, SequenceRecord):
            return NotImplemented
        return (self._identifier, self._sequence) < (
            item._identifier,
            item._sequence,
        )

    def __repr__(self):
        return f"SequenceRecord({repr(self._identifier)}, {repr(self._sequence)})"

    def __str__(self):
        if len(self._sequence) == 0:
            return ">" + self._identifier
        return ">" + self._identifier + "\n" + self._sequence

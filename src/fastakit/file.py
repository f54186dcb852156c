# This source code is part of the fastakit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "fastakit"
__author__ = "The fastakit contributors"
__all__ = [
    "File",
    "read_lines",
    "write_lines",
    "wrap_string",
]

import abc
import io
from os import PathLike
from .copyable import Copyable


class File(Copyable, metaclass=abc.ABCMeta):
    """
    Base class for all objects that are read from or written to a file.

    The constructor creates an empty object, that can be filled with
    data using the class specific methods.
    Conversely, the class method :func:`read()` parses a file from disk
    (or a file-like object from other sources).
    In order to write the content into a file the :func:`write()`
    method is used.
    """

    @classmethod
    @abc.abstractmethod
    def read(cls, file):
        """
        Parse a file (or file-like object).

        Parameters
        ----------
        file : file-like object or str or PathLike
            The file to be read.
            Alternatively a file path can be supplied.

        Returns
        -------
        file : File
            An instance of the respective :class:`File` subclass
            representing the parsed file.
        """
        pass

    @abc.abstractmethod
    def write(self, file):
        """
        Write the contents of this object into a file.

        Parameters
        ----------
        file : file-like object or str or PathLike
            The file to be written to.
            Alternatively a file path can be supplied.
        """
        pass


def read_lines(file):
    """
    Create an iterator over each line of the given text file.

    Line terminators are not part of the yielded lines.
    The file is read lazily, so arbitrarily large files can be
    processed.

    Parameters
    ----------
    file : file-like object or str or PathLike
        The file to be read.
        Alternatively a file path can be supplied, in which case the
        file is opened as UTF-8 text.
        A leading byte order mark is skipped and undecodable bytes do
        not raise an exception.

    Yields
    ------
    line : str
        The current line in the file.

    Raises
    ------
    OSError
        If the file cannot be opened or read.
    TypeError
        If a file object is given that was not opened in text mode.
    """
    # File name
    if is_open_compatible(file):
        # Undecodable bytes become lone surrogates, which are neither
        # printable nor ASCII and hence removed by normalization
        with open(
            file, "r", encoding="utf-8-sig", errors="surrogateescape"
        ) as f:
            for line in f:
                yield _strip_terminator(line)
    # File object
    else:
        if not is_text(file):
            raise TypeError("A file opened in 'text' mode is required")
        for line in file:
            yield _strip_terminator(line)


def write_lines(file, lines):
    """
    Write each of the given `lines` into the specified `file`.

    Each line is directly written, so no intermediate list of lines is
    held in memory, if `lines` is a generator.

    Parameters
    ----------
    file : file-like object or str or PathLike
        The file to be written to.
        Alternatively a file path can be supplied, in which case the
        file is created or truncated.
    lines : iterable object of str
        The lines of text to be written.
        Must not include line break characters.

    Raises
    ------
    OSError
        If the file cannot be opened or written.
    TypeError
        If a file object is given that was not opened in text mode.
    """
    if is_open_compatible(file):
        with open(file, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
    else:
        if not is_text(file):
            raise TypeError("A file opened in 'text' mode is required")
        for line in lines:
            file.write(line + "\n")


def wrap_string(text, width):
    """
    Wrap the given `text` after every `width` characters, ignoring
    whitespaces, sentences, etc.

    This is a much simpler and faster version of :func:`textwrap.wrap()`.

    Parameters
    ----------
    text : str
        The text to be wrapped.
    width : int
        The maximum number of characters per line.
        If 0, the text is not wrapped at all.

    Returns
    -------
    lines : list of str
        The wrapped lines.
        An empty text gives no lines.

    Examples
    --------

    >>> print(wrap_string("ACGTACGTAC", 4))
    ['ACGT', 'ACGT', 'AC']
    >>> print(wrap_string("ACGTACGTAC", 0))
    ['ACGTACGTAC']
    """
    if width < 0:
        raise ValueError(f"Line width must not be negative, got {width}")
    if len(text) == 0:
        return []
    if width == 0:
        return [text]
    return [text[i : i + width] for i in range(0, len(text), width)]


def _strip_terminator(line):
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def is_text(file):
    if isinstance(file, io.TextIOBase):
        return True
    # for file wrappers, e.g. 'TemporaryFile'
    return hasattr(file, "file") and isinstance(file.file, io.TextIOBase)


def is_open_compatible(file):
    return isinstance(file, (str, bytes, PathLike))

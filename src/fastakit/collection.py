# This source code is part of the fastakit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
The module contains the :class:`SequenceCollection`, which holds
:class:`SequenceRecord` objects grouped by their identifier and
converts them from and to the FASTA format.
"""

__name__ = "fastakit"
__author__ = "The fastakit contributors"
__all__ = ["SequenceCollection", "IdentifierNotFoundError"]

import warnings
from .file import File, read_lines, write_lines, wrap_string
from .record import SequenceRecord


class SequenceCollection(File):
    """
    An ordered collection of sequence records, keyed by their
    identifiers.

    Records with the same identifier are stored in a common *bucket*,
    in the order they were inserted.
    Iterating over the collection yields the records of all buckets,
    where the buckets are visited in lexicographic order of their
    identifiers.
    This is also the order in which the records are written into a
    FASTA file.

    A FASTA file contains so called *header* lines, beginning with
    ``>``, that describe the following sequence.
    The corresponding sequence starts at the line after the header line
    and ends at the next header line or at the end of file.

    Parameters
    ----------
    allow_duplicates : bool, optional
        If false, at most one record (the first inserted one) is kept
        per identifier.

    Notes
    -----
    Inserted records are copied, a collection never shares records
    with the caller or with other collections.
    The records yielded by iteration or returned by :meth:`lookup()`
    are the stored objects, so their sequences can be edited in place.
    However, the bucket of a record is determined at insertion.
    Changing the :attr:`SequenceRecord.identifier` of a stored record
    does not move it into another bucket.

    Examples
    --------

    >>> import os.path
    >>> collection = SequenceCollection()
    >>> collection.insert_all([
    ...     SequenceRecord("seq2", "TTTT"),
    ...     SequenceRecord("seq1", "ACGT"),
    ...     SequenceRecord("seq1", "GGCC"),
    ... ])
    3
    >>> print(collection.identifiers())
    ['seq1', 'seq2']
    >>> for record in collection:
    ...     print(record.identifier, record.sequence)
    seq1 ACGT
    seq1 GGCC
    seq2 TTTT
    >>> collection.set_duplicate_policy(False)
    >>> print(collection)
    >seq1
    ACGT
    >seq2
    TTTT
    >>> collection.write(os.path.join(path_to_directory, "test.fasta"))
    """

    def __init__(self, allow_duplicates=True):
        super().__init__()
        self._allow_duplicates = allow_duplicates
        self._buckets = {}

    @property
    def allow_duplicates(self):
        return self._allow_duplicates

    @classmethod
    def read(cls, file, allow_duplicates=True):
        """
        Read a FASTA file.

        Any text is accepted:
        Each line starting with ``>`` begins a new record, all other
        lines are sequence data of the current record.
        Sequence data preceding the first header line is stored in a
        record with an empty identifier.

        The duplicate policy is applied after all records of the file
        have been read, i.e. for each identifier the first record in the
        file is kept.

        Parameters
        ----------
        file : file-like object or str or PathLike
            The file to be read.
            Alternatively a file path can be supplied.
        allow_duplicates : bool, optional
            If false, only the first record of each identifier is
            kept.

        Returns
        -------
        file_object : SequenceCollection
            The parsed file.

        Raises
        ------
        OSError
            If the file cannot be opened or read.
        """
        collection = cls()
        collection._insert_owned(cls.read_iter(file))
        collection.set_duplicate_policy(allow_duplicates)
        return collection

    @staticmethod
    def read_iter(file):
        """
        Create an iterator over each record of the given FASTA file.

        Parameters
        ----------
        file : file-like object or str or PathLike
            The file to be read.
            Alternatively a file path can be supplied.

        Yields
        ------
        record : SequenceRecord
            The current record, in the order of the file.

        Notes
        -----
        This approach gives the records in file order, whereas the
        iteration over a :class:`SequenceCollection` is ordered by
        identifier.
        No duplicate policy is applied.
        """
        header = None
        seq_str_list = []
        for line in read_lines(file):
            if line.startswith(">"):
                # New entry -> yield previous entry
                if header is not None or len(seq_str_list) > 0:
                    yield _create_record(header, seq_str_list)
                # Track new header and reset sequence
                header = line
                seq_str_list = []
            else:
                # Normalization takes place when the record is created
                seq_str_list.append(line)
        # Yield final entry
        if header is not None or len(seq_str_list) > 0:
            yield _create_record(header, seq_str_list)

    def write(self, file, chars_per_line=80):
        """
        Write the records of this collection into a FASTA file.

        Parameters
        ----------
        file : file-like object or str or PathLike
            The file to be written to.
            Alternatively a file path can be supplied.
        chars_per_line : int, optional
            The number of characters in a line containing sequence data
            after which a line break is inserted.
            If 0, each sequence is written into a single line.

        Raises
        ------
        OSError
            If the file cannot be opened or written.
        """
        SequenceCollection.write_iter(file, self, chars_per_line)

    @staticmethod
    def write_iter(file, records, chars_per_line=80):
        """
        Iterate over the given `records` and write each of them into
        the specified `file`.

        In contrast to :meth:`write()`, the records need not be part of
        a :class:`SequenceCollection` and are written in the given
        order.
        Hence, this static method may save a large amount of memory if
        a large file should be written, especially if the `records`
        are provided as generator.

        Parameters
        ----------
        file : file-like object or str or PathLike
            The file to be written to.
            Alternatively a file path can be supplied.
        records : iterable object of SequenceRecord
            The records to be written into the file.
        chars_per_line : int, optional
            The number of characters in a line containing sequence data
            after which a line break is inserted.
            If 0, each sequence is written into a single line.
        """
        if chars_per_line < 0:
            raise ValueError(
                f"Line width must not be negative, got {chars_per_line}"
            )
        write_lines(file, _to_lines(records, chars_per_line))

    def insert(self, record):
        """
        Insert a single record.

        Parameters
        ----------
        record : SequenceRecord
            The record to be inserted.

        Returns
        -------
        count : int
            1 if the record was inserted, 0 if it was rejected, because
            duplicates are not allowed and its identifier is already
            present.
        """
        return self.insert_all([record])

    def insert_all(self, records):
        """
        Insert the given records in the given order.

        If duplicates are not allowed, a record is rejected, if a record
        with the same identifier is already part of the collection.

        The collection stores copies of the given records, so later
        changes to the given objects do not affect the collection.
        All records are type checked before the first one is inserted.

        Parameters
        ----------
        records : iterable object of SequenceRecord
            The records to be inserted.

        Returns
        -------
        count : int
            The number of records that were actually inserted.
        """
        records = list(records)
        for record in records:
            if not isinstance(record, SequenceRecord):
                raise TypeError(
                    f"Expected 'SequenceRecord', "
                    f"but got '{type(record).__name__}'"
                )
        return self._insert_owned([record.copy() for record in records])

    def _insert_owned(self, records):
        # The records must not be referenced outside of this collection
        count = 0
        for record in records:
            bucket = self._buckets.get(record.identifier)
            if bucket is None:
                self._buckets[record.identifier] = [record]
            elif self._allow_duplicates:
                bucket.append(record)
            else:
                continue
            count += 1
        return count

    def set_duplicate_policy(self, allow=True):
        """
        Set whether multiple records may share the same identifier.

        If duplicates are disallowed, all records except the first
        inserted one are removed from each bucket.
        The removed records are not restored, if duplicates are allowed
        again afterwards.

        Parameters
        ----------
        allow : bool, optional
            Whether duplicate identifiers are allowed.
        """
        self._allow_duplicates = allow
        if not allow:
            for bucket in self._buckets.values():
                del bucket[1:]

    def lookup(self, identifier):
        """
        Get all records with the given identifier.

        Parameters
        ----------
        identifier : str
            The identifier to look up.

        Returns
        -------
        records : list of SequenceRecord
            The records in the order of insertion.

        Raises
        ------
        IdentifierNotFoundError
            If no record has the given identifier.
        """
        try:
            bucket = self._buckets[identifier]
        except KeyError:
            raise IdentifierNotFoundError(
                f"The collection contains no record with identifier "
                f"'{identifier}'"
            )
        return list(bucket)

    def identifiers(self):
        """
        Get the distinct identifiers of the records in this collection.

        Returns
        -------
        identifiers : list of str
            The identifiers in lexicographic order.
        """
        return sorted(self._buckets)

    def __copy_create__(self):
        return SequenceCollection(self._allow_duplicates)

    def __copy_fill__(self, clone):
        super().__copy_fill__(clone)
        clone._buckets = {
            identifier: [record.copy() for record in bucket]
            for identifier, bucket in self._buckets.items()
        }

    def __getitem__(self, identifier):
        return self.lookup(identifier)

    def __contains__(self, identifier):
        return identifier in self._buckets

    def __iter__(self):
        for identifier in sorted(self._buckets):
            yield from self._buckets[identifier]

    def __len__(self):
        return sum([len(bucket) for bucket in self._buckets.values()])

    def __str__(self):
        return "\n".join(_to_lines(self, 80))


class IdentifierNotFoundError(KeyError):
    """
    This exception is raised, when a :class:`SequenceCollection` is
    queried for an identifier it does not contain.
    """

    pass


def _to_lines(records, chars_per_line):
    for record in records:
        if not isinstance(record, SequenceRecord):
            raise TypeError(
                f"Expected 'SequenceRecord', "
                f"but got '{type(record).__name__}'"
            )
        yield ">" + record.identifier
        yield from wrap_string(record.sequence, chars_per_line)


def _create_record(header, seq_str_list):
    if header is None:
        warnings.warn(
            "Sequence data precedes the first header line, "
            "it is stored under an empty identifier"
        )
        header = ""
    return SequenceRecord(header, "".join(seq_str_list))

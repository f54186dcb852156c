# This source code is part of the fastakit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import string
import numpy as np
import pytest
import fastakit


def _random_text(length, seed):
    """
    Random text mixing letters, digits, whitespace, punctuation,
    control and non-ASCII characters.
    """
    characters = list(
        string.ascii_letters + string.digits + string.punctuation
        + " \t\n\r\x00\x07\x1b\x7f" + "äßλ→"
    )
    rng = np.random.default_rng(seed)
    return "".join(rng.choice(characters, size=length))


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("seq1", "seq1"),
        (">seq1 desc", "seq1 desc"),
        ("  >seq1", ">seq1"),
        (">  seq1  ", "seq1"),
        (">>seq1", ">seq1"),
        ("seq\t1\r\n", "seq1"),
        ("\x00>seq1", "seq1"),
        (">", ""),
        ("", ""),
        ("Hämoglobin α", "Hämoglobin α"),
    ]
)
def test_identifier_normalization(raw, expected):
    assert fastakit.normalize_identifier(raw) == expected
    assert fastakit.SequenceRecord(raw).identifier == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("ACGT", "ACGT"),
        ("acgtXY99", "acgtXY"),
        ("AC GT\nac\tgt", "ACGTacgt"),
        ("MK-T*", "MK-T*"),
        ("A.C_G+T", "ACGT"),
        ("AäCλG", "ACG"),
        ("1234", ""),
        ("", ""),
    ]
)
def test_sequence_normalization(raw, expected):
    assert fastakit.normalize_sequence(raw) == expected
    assert fastakit.SequenceRecord("id", raw).sequence == expected


@pytest.mark.parametrize("seed", range(10))
def test_normalization_filter(seed):
    """
    Check that normalized values contain only allowed characters
    for random input.
    """
    text = _random_text(200, seed)

    identifier = fastakit.normalize_identifier(text)
    assert all([char.isprintable() for char in identifier])
    assert identifier == identifier.strip()

    sequence = fastakit.normalize_sequence(text)
    allowed = set(string.ascii_letters + "-*")
    assert set(sequence) <= allowed
    # Every allowed character of the input is retained in order
    assert sequence == "".join([char for char in text if char in allowed])


@pytest.mark.parametrize("seed", range(10))
def test_normalization_idempotence(seed):
    """
    Normalizing an already normalized value must not change it.
    The only exception is an identifier that still starts with a
    header marker, which is removed again.
    """
    text = _random_text(200, seed)
    identifier = fastakit.normalize_identifier(text)
    sequence = fastakit.normalize_sequence(text)
    if identifier.startswith(">"):
        assert fastakit.normalize_identifier(identifier) == identifier[1:].strip()
    else:
        assert fastakit.normalize_identifier(identifier) == identifier
    assert fastakit.normalize_sequence(sequence) == sequence


def test_identifier_fixed_point():
    for identifier in ["seq1", "seq 1 desc", "a|b|c", "x>y"]:
        assert fastakit.normalize_identifier(identifier) == identifier


@pytest.mark.parametrize(
    "raw, first, second",
    [
        (">>x", ">x", "x"),
        ("  >x", ">x", "x"),
        ("> >x", ">x", "x"),
    ]
)
def test_identifier_marker_not_fixed_point(raw, first, second):
    """
    Only a single header marker is removed before stripping, so an
    identifier starting with '>' changes when normalized again.
    """
    assert fastakit.normalize_identifier(raw) == first
    assert fastakit.normalize_identifier(first) == second


def test_setters_normalize():
    record = fastakit.SequenceRecord("seq1", "ACGT")
    record.identifier = ">seq2\n"
    record.sequence = "tt 99 gg"
    assert record.identifier == "seq2"
    assert record.sequence == "ttgg"


def test_append():
    record = fastakit.SequenceRecord("seq1", "AC")
    record.append("G")
    record.append("T", 3)
    assert record.sequence == "ACGTTT"
    # Invalid characters and empty counts are silently ignored
    record.append("1", 5)
    record.append(" ")
    record.append("A", 0)
    record.append("A", -1)
    record.append("AC")
    assert record.sequence == "ACGTTT"
    record.append("-", 2)
    record.append("*")
    assert record.sequence == "ACGTTT--*"


@pytest.mark.parametrize(
    "text, max_count, expected",
    [
        ("GGTT", None, "ACGGTT"),
        ("GGTT", 2, "ACGG"),
        ("GGTT", 10, "ACGGTT"),
        ("GGTT", 0, "AC"),
        ("G1G T", 3, "ACGG"),
        ("", 5, "AC"),
    ]
)
def test_extend(text, max_count, expected):
    record = fastakit.SequenceRecord("seq1", "AC")
    record.extend(text, max_count)
    assert record.sequence == expected


def test_length():
    record = fastakit.SequenceRecord("a rather long identifier", "ACGT")
    assert len(record) == 4
    assert len(fastakit.SequenceRecord()) == 0


def test_element_access():
    record = fastakit.SequenceRecord("seq1", "ACGT")
    assert record[0] == "A"
    assert record[3] == "T"
    assert record[-1] == "T"
    assert record[1:3] == "CG"
    assert list(record) == ["A", "C", "G", "T"]
    with pytest.raises(IndexError):
        record[4]
    with pytest.raises(IndexError):
        fastakit.SequenceRecord()[0]


def test_element_assignment():
    record = fastakit.SequenceRecord("seq1", "ACGT")
    record[0] = "T"
    record[-1] = "-"
    assert record.sequence == "TCG-"
    # No automatic extension of the sequence
    with pytest.raises(IndexError):
        record[4] = "A"
    with pytest.raises(IndexError):
        record[-5] = "A"
    with pytest.raises(ValueError):
        record[0] = "1"
    with pytest.raises(ValueError):
        record[0] = "AC"
    with pytest.raises(TypeError):
        record[0:2] = "AC"
    assert record.sequence == "TCG-"


def test_equality():
    assert fastakit.SequenceRecord("a", "AC") == fastakit.SequenceRecord(">a", "A C")
    assert fastakit.SequenceRecord("a", "AC") != fastakit.SequenceRecord("a", "AG")
    assert fastakit.SequenceRecord("a", "AC") != fastakit.SequenceRecord("b", "AC")
    assert fastakit.SequenceRecord("a", "AC") != "AC"


def test_ordering():
    records = [
        fastakit.SequenceRecord("b", "AA"),
        fastakit.SequenceRecord("a", "TT"),
        fastakit.SequenceRecord("a", "CC"),
        fastakit.SequenceRecord("B", "GG"),
    ]
    assert [(r.identifier, r.sequence) for r in sorted(records)] == [
        ("B", "GG"),
        ("a", "CC"),
        ("a", "TT"),
        ("b", "AA"),
    ]
    low = fastakit.SequenceRecord("a", "CC")
    high = fastakit.SequenceRecord("a", "TT")
    assert low < high
    assert low <= high
    assert high > low
    assert high >= low
    assert low <= fastakit.SequenceRecord("a", "CC")
    # Identifier takes precedence over the sequence
    assert fastakit.SequenceRecord("a", "ZZ") < fastakit.SequenceRecord("b", "AA")


def test_copy():
    record = fastakit.SequenceRecord("seq1", "ACGT")
    clone = record.copy()
    assert clone == record
    assert clone is not record
    clone[0] = "T"
    clone.identifier = "seq2"
    assert record.sequence == "ACGT"
    assert record.identifier == "seq1"


def test_str():
    assert str(fastakit.SequenceRecord("seq1", "ACGT")) == ">seq1\nACGT"
    assert str(fastakit.SequenceRecord("seq1")) == ">seq1"


def test_repr():
    record = fastakit.SequenceRecord("seq1", "ACGT")
    assert eval(repr(record), {"SequenceRecord": fastakit.SequenceRecord}) == record


@pytest.mark.parametrize(
    "char, valid",
    [
        ("A", True),
        ("z", True),
        ("-", True),
        ("*", True),
        ("1", False),
        (" ", False),
        (".", False),
        ("ä", False),
        ("AC", False),
        ("", False),
        (None, False),
    ]
)
def test_is_valid_symbol(char, valid):
    assert fastakit.is_valid_symbol(char) == valid

import io
import numpy as np
import pytest
import fastakit


@pytest.fixture(scope="module")
def fasta_text():
    rng = np.random.default_rng(0)
    symbols = np.array(list("ACGT"))
    collection = fastakit.SequenceCollection()
    for i in range(1000):
        collection.insert(fastakit.SequenceRecord(
            f"seq_{i}", "".join(rng.choice(symbols, size=1000))
        ))
    text = io.StringIO()
    collection.write(text)
    return text.getvalue()


@pytest.mark.benchmark
def benchmark_read(fasta_text):
    fastakit.SequenceCollection.read(io.StringIO(fasta_text))


@pytest.mark.benchmark
def benchmark_write(fasta_text):
    collection = fastakit.SequenceCollection.read(io.StringIO(fasta_text))
    collection.write(io.StringIO())


@pytest.mark.benchmark
def benchmark_normalize_sequence():
    fastakit.normalize_sequence("ACGT acgt 1234\n" * 10000)

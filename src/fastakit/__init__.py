# This source code is part of the fastakit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This is the top-level package of *fastakit*.

It provides the :class:`SequenceRecord`, a normalized pair of an
identifier and a sequence, and the :class:`SequenceCollection`, which
groups records by identifier and reads and writes them in the FASTA
format.
"""

__version__ = "0.3.0"
__name__ = "fastakit"
__author__ = "The fastakit contributors"

from .copyable import *
from .file import *
from .record import *
from .collection import *

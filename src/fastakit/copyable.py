# This source code is part of the fastakit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "fastakit"
__author__ = "The fastakit contributors"
__all__ = ["Copyable"]

import abc


class Copyable(metaclass=abc.ABCMeta):
    """
    Base class for records and collections that can be deep copied.

    :meth:`copy()` instantiates a fresh, empty object via
    :meth:`__copy_create__()` and afterwards lets every class in the
    hierarchy transfer its own state via :meth:`__copy_fill__()`,
    starting at the uppermost base class.
    Hence each class only needs to know about the attributes it
    introduces itself.

    The resulting object shares no mutable state with the original:
    a copied :class:`SequenceCollection` owns new
    :class:`SequenceRecord` objects.
    """

    def copy(self):
        """
        Copy the object.

        Returns
        -------
        copy
            An independent copy of this object.
        """
        clone = self.__copy_create__()
        self.__copy_fill__(clone)
        return clone

    def __copy_create__(self):
        """
        Instantiate a new object of this class.

        Only the constructor should be called here, all other state is
        transferred in :meth:`__copy_fill__()`.
        Override this method if the constructor requires parameters.

        Returns
        -------
        copy
            A freshly instantiated object of the same type as *self*.
        """
        return type(self)()

    def __copy_fill__(self, clone):
        """
        Transfer the state of this object into `clone`.

        Overriding methods must call the ``super()`` method first.

        Parameters
        ----------
        clone
            The object created by :meth:`__copy_create__()`.
        """
        pass

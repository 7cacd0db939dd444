"""Permutations: rearrangements of a sequence into a new order."""

import random as _random

from roadnet.binary_io import read_array, write_array


class Permutation:
    """A permutation where self[i] is the new location of the element at location i."""

    def __init__(self, new_positions=()):
        self._perm = [int(pos) for pos in new_positions]
        if not self.validate():
            raise ValueError(f"not a permutation -- {self._perm}")

    @classmethod
    def random(cls, size, rng=None):
        """Return a uniformly random permutation of the given size."""
        rng = _random.Random() if rng is None else rng
        positions = list(range(size))
        rng.shuffle(positions)
        return cls(positions)

    def __len__(self):
        return len(self._perm)

    def __getitem__(self, old_pos):
        if not 0 <= old_pos < len(self._perm):
            raise IndexError(f"position out of range -- {old_pos}")
        return self._perm[old_pos]

    def __iter__(self):
        return iter(self._perm)

    def __eq__(self, other):
        if not isinstance(other, Permutation):
            return NotImplemented
        return self._perm == other._perm

    __hash__ = None

    def __repr__(self):
        return f"Permutation({self._perm!r})"

    def inverse(self):
        """Return the inverse permutation, mapping new locations to old ones."""
        inv = [0] * len(self._perm)
        for old_pos, new_pos in enumerate(self._perm):
            inv[new_pos] = old_pos
        return Permutation(inv)

    def invert(self):
        """Replace this permutation by its inverse."""
        self._perm = self.inverse()._perm

    def apply_to(self, seq):
        """Return a list with the elements of seq moved to their new locations."""
        items = list(seq)
        if len(items) != len(self._perm):
            raise ValueError(f"sequence of length {len(items)} for permutation of size {len(self)}")
        result = [None] * len(items)
        for new_pos, item in zip(self._perm, items):
            result[new_pos] = item
        return result

    def validate(self):
        """Return True if every location 0..n-1 occurs exactly once."""
        return sorted(self._perm) == list(range(len(self._perm)))

    @classmethod
    def read_from(cls, stream):
        """Read a permutation from a binary stream."""
        return cls(read_array(stream, "i"))

    def write_to(self, stream):
        """Write the permutation to a binary stream."""
        write_array(stream, self._perm, "i")
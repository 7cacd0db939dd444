"""Order-preserving maps from a set of global IDs onto sequential local IDs."""

from itertools import accumulate

from roadnet.bit_vector import BitVector
from roadnet.bitwise import bit_count, bit_count_before_index


def _prefix_table(chunk_counts):
    """Return the running totals of mapped IDs before every chunk, starting at zero."""
    return [0, *accumulate(chunk_counts)]


class LocalIdMap:
    """Maps the set bits of a BitVector of size m onto 0..n-1, preserving order."""

    def __init__(self, mapped_global_ids, k=64):
        if k <= 0 or k % BitVector.BITS_PER_BLOCK:
            raise ValueError(f"k must be a positive multiple of {BitVector.BITS_PER_BLOCK} -- {k}")
        self._k = k
        self._mapped = mapped_global_ids
        blocks_per_rank = k // BitVector.BITS_PER_BLOCK
        num_blocks = mapped_global_ids.num_blocks
        num_chunks = -(-len(mapped_global_ids) // k)
        counts = (
            sum(
                bit_count(mapped_global_ids.block(j))
                for j in range(i * blocks_per_rank, min((i + 1) * blocks_per_rank, num_blocks))
            )
            for i in range(num_chunks)
        )
        self._prefix = _prefix_table(counts)

    def num_global_ids(self):
        """Return the size m of the range of global IDs."""
        return len(self._mapped)

    def num_local_ids(self):
        """Return the size n of the range of local IDs."""
        return self._prefix[-1]

    def _check_global_id(self, global_id):
        if not 0 <= global_id < self.num_global_ids():
            raise IndexError(f"global ID out of range -- {global_id}")

    def is_global_id_mapped(self, global_id):
        """Return True if the global ID is mapped to a local ID."""
        self._check_global_id(global_id)
        return self._mapped[global_id]

    def to_local_id(self, global_id):
        """Return the local ID the global ID is mapped to."""
        if not self.is_global_id_mapped(global_id):
            raise KeyError(f"global ID is not mapped -- {global_id}")
        return self.num_mapped_global_ids_before(global_id)

    def num_mapped_global_ids_before(self, global_id):
        """Return the number of mapped global IDs smaller than global_id."""
        self._check_global_id(global_id)
        bits = BitVector.BITS_PER_BLOCK
        first_block = global_id // self._k * self._k // bits
        last_block, offset = divmod(global_id, bits)
        total = self._prefix[global_id // self._k]
        total += sum(bit_count(self._mapped.block(b)) for b in range(first_block, last_block))
        return total + bit_count_before_index(self._mapped.block(last_block), offset)


class ConcurrentLocalIdMap:
    """Maps the nonzero entries of a sequence of small integers onto 0..n-1, preserving order."""

    def __init__(self, mapped_global_ids, k=64):
        if k <= 0:
            raise ValueError(f"k must be positive -- {k}")
        self._k = k
        self._mapped = mapped_global_ids
        size = len(mapped_global_ids)
        counts = (
            sum(mapped_global_ids[j] for j in range(i * k, min((i + 1) * k, size)))
            for i in range(-(-size // k))
        )
        self._prefix = _prefix_table(counts)

    def num_global_ids(self):
        """Return the size m of the range of global IDs."""
        return len(self._mapped)

    def num_local_ids(self):
        """Return the size n of the range of local IDs."""
        return self._prefix[-1]

    def _check_global_id(self, global_id):
        if not 0 <= global_id < self.num_global_ids():
            raise IndexError(f"global ID out of range -- {global_id}")

    def is_global_id_mapped(self, global_id):
        """Return True if the global ID is mapped to a local ID."""
        self._check_global_id(global_id)
        return bool(self._mapped[global_id])

    def to_local_id(self, global_id):
        """Return the local ID the global ID is mapped to."""
        if not self.is_global_id_mapped(global_id):
            raise KeyError(f"global ID is not mapped -- {global_id}")
        return self.num_mapped_global_ids_before(global_id)

    def num_mapped_global_ids_before(self, global_id):
        """Return the number of mapped global IDs smaller than global_id."""
        self._check_global_id(global_id)
        start = global_id // self._k * self._k
        return self._prefix[global_id // self._k] + sum(
            self._mapped[j] for j in range(start, global_id)
        )
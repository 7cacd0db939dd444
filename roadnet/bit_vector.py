"""A fixed-size vector of bits stored in 64-bit blocks."""

from roadnet.bitwise import get_bit, num_trailing_zeros, set_bit


class BitVector:
    """A vector of bits divided into 64-bit blocks. Bits past the end are always zero."""

    BITS_PER_BLOCK = 64
    _FULL_BLOCK = (1 << BITS_PER_BLOCK) - 1

    def __init__(self, size, init=False):
        if size < 0:
            raise ValueError(f"negative size -- {size}")
        self._size = size
        num_blocks = -(-size // self.BITS_PER_BLOCK)
        self._blocks = [self._FULL_BLOCK if init else 0] * num_blocks
        tail = size % self.BITS_PER_BLOCK
        if init and tail:
            self._blocks[-1] = (1 << tail) - 1

    def __len__(self):
        return self._size

    @property
    def num_blocks(self):
        """The number of blocks holding the bits."""
        return len(self._blocks)

    def _check_index(self, index):
        if not 0 <= index < self._size:
            raise IndexError(f"bit index out of range -- {index}")

    def __getitem__(self, index):
        self._check_index(index)
        block, offset = divmod(index, self.BITS_PER_BLOCK)
        return get_bit(self._blocks[block], offset)

    def __setitem__(self, index, value):
        self._check_index(index)
        block, offset = divmod(index, self.BITS_PER_BLOCK)
        self._blocks[block] = set_bit(self._blocks[block], offset, bool(value))

    def __iter__(self):
        return (self[i] for i in range(self._size))

    def block(self, index):
        """Return the block with the given index."""
        if not 0 <= index < len(self._blocks):
            raise IndexError(f"block index out of range -- {index}")
        return self._blocks[index]

    def _first_set_bit_from_block(self, start_block):
        for block_index in range(start_block, len(self._blocks)):
            block = self._blocks[block_index]
            if block:
                return block_index * self.BITS_PER_BLOCK + num_trailing_zeros(block)
        return -1

    def first_set_bit(self):
        """Return the index of the first one bit, or -1 if there is none."""
        return self._first_set_bit_from_block(0)

    def next_set_bit(self, from_index):
        """Return the index of the first one bit after from_index, or -1 if there is none."""
        self._check_index(from_index)
        start = from_index + 1
        if start == self._size:
            return -1
        block_index, offset = divmod(start, self.BITS_PER_BLOCK)
        first = self._blocks[block_index] >> offset
        if first:
            return start + num_trailing_zeros(first)
        return self._first_set_bit_from_block(block_index + 1)
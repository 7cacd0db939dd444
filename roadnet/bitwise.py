"""Bit-manipulation helpers on non-negative integers."""


def _check_index(bit_index):
    if bit_index < 0:
        raise ValueError(f"negative bit index -- {bit_index}")


def _check_value(val):
    if val < 0:
        raise ValueError(f"negative value -- {val}")


def get_bit(val, bit_index):
    """Return the bit with the given index in val."""
    _check_index(bit_index)
    return bool((val >> bit_index) & 1)


def set_bit(val, bit_index, bit_value=True):
    """Return val with the bit at bit_index set to bit_value."""
    _check_index(bit_index)
    mask = 1 << bit_index
    return val | mask if bit_value else val & ~mask


def num_leading_zeros(val, width=64):
    """Return the number of zero bits preceding the highest one bit in a width-bit word."""
    _check_value(val)
    if val.bit_length() > width:
        raise ValueError(f"value does not fit in {width} bits -- {val}")
    return width - val.bit_length()


def num_trailing_zeros(val, width=64):
    """Return the number of zero bits following the lowest one bit, or width if val is zero."""
    _check_value(val)
    if val == 0:
        return width
    return (val & -val).bit_length() - 1


def bit_count(val):
    """Return the number of one bits in val."""
    _check_value(val)
    return val.bit_count()


def bit_count_before_index(val, bit_index):
    """Return the number of one bits in val below the given index."""
    _check_index(bit_index)
    return bit_count(val & ((1 << bit_index) - 1))


def highest_one_bit(val):
    """Return the index of the highest one bit, or -1 if val is zero."""
    _check_value(val)
    return val.bit_length() - 1


def lowest_one_bit(val):
    """Return the index of the lowest one bit, or -1 if val is zero."""
    _check_value(val)
    if val == 0:
        return -1
    return (val & -val).bit_length() - 1


def highest_differing_bit(x, y):
    """Return the index of the highest differing bit, or -1 if x and y are equal."""
    return highest_one_bit(x ^ y)
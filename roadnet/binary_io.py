"""Reading and writing values, strings, arrays and bit sequences in a binary format.

Scalars are stored little-endian with the layout given by a struct format
character. Strings are stored null-terminated. Arrays are stored as a 32-bit
element count followed by the packed elements. Bit sequences are stored as a
32-bit bit count followed by an array of 64-bit blocks, lowest bit first.
"""

import struct

_COUNT_FMT = "i"
_BLOCK_FMT = "Q"
_BITS_PER_BLOCK = 64


def _struct(fmt):
    return struct.Struct("<" + fmt)


def _read_exact(inp, num_bytes):
    data = inp.read(num_bytes)
    if len(data) != num_bytes:
        raise EOFError(f"expected {num_bytes} bytes, got {len(data)}")
    return data


def _pack(packer, value):
    return packer.pack(*value) if isinstance(value, tuple) else packer.pack(value)


def _single_or_tuple(fields):
    return fields[0] if len(fields) == 1 else fields


def write_scalar(out, value, fmt):
    """Write a single value (or a tuple for a multi-field format) to a binary stream."""
    out.write(_pack(_struct(fmt), value))


def read_scalar(inp, fmt):
    """Read a single value (or a tuple for a multi-field format) from a binary stream."""
    packer = _struct(fmt)
    return _single_or_tuple(packer.unpack(_read_exact(inp, packer.size)))


def write_string(out, text):
    """Write a string as UTF-8 followed by a null byte."""
    data = text.encode("utf-8")
    if b"\0" in data:
        raise ValueError("string contains a null character")
    out.write(data + b"\0")


def read_string(inp):
    """Read a null-terminated UTF-8 string."""
    chunks = bytearray()
    while True:
        byte = inp.read(1)
        if not byte:
            raise EOFError("string is not null-terminated")
        if byte == b"\0":
            return chunks.decode("utf-8")
        chunks += byte


def write_array(out, values, fmt):
    """Write a 32-bit element count followed by the packed elements."""
    packer = _struct(fmt)
    values = list(values)
    write_scalar(out, len(values), _COUNT_FMT)
    out.write(b"".join(_pack(packer, value) for value in values))


def read_array(inp, fmt):
    """Read an array written by write_array and return its elements as a list."""
    packer = _struct(fmt)
    count = read_scalar(inp, _COUNT_FMT)
    if count < 0:
        raise ValueError(f"negative array length -- {count}")
    data = _read_exact(inp, count * packer.size)
    return [_single_or_tuple(fields) for fields in packer.iter_unpack(data)]


def _num_blocks(num_bits):
    return -(-num_bits // _BITS_PER_BLOCK)


def write_bits(out, bits):
    """Write a sequence of truth values as a bit count followed by 64-bit blocks."""
    bits = [bool(bit) for bit in bits]
    blocks = [
        sum(1 << offset for offset, bit in enumerate(bits[start:start + _BITS_PER_BLOCK]) if bit)
        for start in range(0, len(bits), _BITS_PER_BLOCK)
    ]
    write_scalar(out, len(bits), _COUNT_FMT)
    write_array(out, blocks, _BLOCK_FMT)


def read_bits(inp):
    """Read a bit sequence written by write_bits and return it as a list of bools."""
    size = read_scalar(inp, _COUNT_FMT)
    if size < 0:
        raise ValueError(f"negative number of bits -- {size}")
    blocks = read_array(inp, _BLOCK_FMT)
    if len(blocks) != _num_blocks(size):
        raise ValueError(f"{len(blocks)} blocks cannot hold exactly {size} bits")
    return [
        bool((blocks[i // _BITS_PER_BLOCK] >> (i % _BITS_PER_BLOCK)) & 1) for i in range(size)
    ]


def size_of_string(text):
    """Return the number of bytes the string occupies on disk."""
    return len(text.encode("utf-8")) + 1


def size_of_array(values, fmt):
    """Return the number of bytes the array occupies on disk."""
    return struct.calcsize("<" + _COUNT_FMT) + len(values) * _struct(fmt).size


def size_of_bits(bits):
    """Return the number of bytes the bit sequence occupies on disk."""
    count_size = struct.calcsize("<" + _COUNT_FMT)
    return 2 * count_size + _num_blocks(len(bits)) * struct.calcsize("<" + _BLOCK_FMT)
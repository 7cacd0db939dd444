import pytest
from hypothesis import given
from hypothesis import strategies as st

from roadnet.bit_vector import BitVector
from roadnet.local_id_map import ConcurrentLocalIdMap, LocalIdMap


def _bit_vector(bits):
    vec = BitVector(len(bits))
    for i, bit in enumerate(bits):
        vec[i] = bit
    return vec


@given(st.lists(st.booleans(), min_size=1, max_size=400), st.sampled_from([64, 128, 256]))
def test_local_id_map_counts_and_order(bits, k):
    id_map = LocalIdMap(_bit_vector(bits), k)
    assert id_map.num_global_ids() == len(bits)
    assert id_map.num_local_ids() == sum(bits)
    for g in range(len(bits)):
        assert id_map.num_mapped_global_ids_before(g) == sum(bits[:g])
        assert id_map.is_global_id_mapped(g) == bits[g]
    local_ids = [id_map.to_local_id(g) for g, bit in enumerate(bits) if bit]
    assert local_ids == list(range(sum(bits)))


@given(st.lists(st.integers(min_value=0, max_value=1), min_size=1, max_size=400),
       st.sampled_from([1, 7, 64, 100]))
def test_concurrent_map_counts_and_order(flags, k):
    id_map = ConcurrentLocalIdMap(flags, k)
    assert id_map.num_global_ids() == len(flags)
    assert id_map.num_local_ids() == sum(flags)
    for g in range(len(flags)):
        assert id_map.num_mapped_global_ids_before(g) == sum(flags[:g])
        assert id_map.is_global_id_mapped(g) == bool(flags[g])
    local_ids = [id_map.to_local_id(g) for g, flag in enumerate(flags) if flag]
    assert local_ids == list(range(sum(flags)))


@given(st.lists(st.booleans(), min_size=1, max_size=300))
def test_both_maps_agree(bits):
    bit_map = LocalIdMap(_bit_vector(bits))
    flag_map = ConcurrentLocalIdMap([int(bit) for bit in bits])
    assert bit_map.num_local_ids() == flag_map.num_local_ids()
    for g in range(len(bits)):
        assert bit_map.num_mapped_global_ids_before(g) == flag_map.num_mapped_global_ids_before(g)


def test_all_set_maps_identity():
    id_map = LocalIdMap(BitVector(200, True))
    assert [id_map.to_local_id(g) for g in range(200)] == list(range(200))


def test_empty_maps():
    assert LocalIdMap(BitVector(0)).num_local_ids() == 0
    assert ConcurrentLocalIdMap([]).num_local_ids() == 0


def test_unmapped_id_raises():
    vec = BitVector(10)
    vec[3] = True
    with pytest.raises(KeyError):
        LocalIdMap(vec).to_local_id(2)
    with pytest.raises(KeyError):
        ConcurrentLocalIdMap([0, 1]).to_local_id(0)


def test_out_of_range_raises():
    with pytest.raises(IndexError):
        LocalIdMap(BitVector(10)).num_mapped_global_ids_before(10)
    with pytest.raises(IndexError):
        ConcurrentLocalIdMap([1, 0]).is_global_id_mapped(2)


def test_invalid_k_raises():
    with pytest.raises(ValueError):
        LocalIdMap(BitVector(10), 32)
    with pytest.raises(ValueError):
        ConcurrentLocalIdMap([1], 0)
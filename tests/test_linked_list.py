import io
import struct

import pytest

from taskbench.linked_list import LinkedList


def _build(*texts):
    items = LinkedList()
    for text in texts:
        items.add_tail(text)
    return items


def _round_trip(items):
    buffer = io.BytesIO()
    items.serialize(buffer)
    buffer.seek(0)
    restored = LinkedList()
    restored.deserialize(buffer)
    return restored


def test_add_tail_keeps_order_and_links():
    items = _build("abc", "efg", "hij")
    nodes = list(items)
    assert [node.data for node in nodes] == ["abc", "efg", "hij"]
    assert len(items) == 3
    assert nodes[0].prev is None
    assert nodes[-1].next is None
    for left, right in zip(nodes, nodes[1:]):
        assert left.next is right
        assert right.prev is left


def test_link_next_as_random():
    items = _build("abc", "efg", "hij")
    items.link_next_as_random()
    nodes = list(items)
    assert [node.rand for node in nodes] == [nodes[1], nodes[2], None]


def test_describe_format():
    items = _build("abc", "efg")
    items.link_next_as_random()
    assert items.describe() == " data = abc rand data = efg\n data = efg"


def test_empty_list_serializes_to_zero_count():
    buffer = io.BytesIO()
    LinkedList().serialize(buffer)
    assert buffer.getvalue() == b"\x00\x00\x00\x00"


def test_single_node_wire_layout():
    buffer = io.BytesIO()
    _build("abc").serialize(buffer)
    expected = struct.pack("<I", 1) + struct.pack("<I", 3) + b"abc" + struct.pack("<i", -1)
    assert buffer.getvalue() == expected


def test_round_trip_preserves_data_and_rand_links():
    items = _build("abc", "efg", "hij", "")
    nodes = list(items)
    nodes[0].rand = nodes[2]
    nodes[1].rand = nodes[1]
    nodes[3].rand = nodes[0]
    restored = _round_trip(items)
    restored_nodes = list(restored)
    assert [node.data for node in restored_nodes] == ["abc", "efg", "hij", ""]
    assert restored_nodes[0].rand is restored_nodes[2]
    assert restored_nodes[1].rand is restored_nodes[1]
    assert restored_nodes[2].rand is None
    assert restored_nodes[3].rand is restored_nodes[0]


def test_round_trip_describe_matches():
    items = _build("один", "two", "three")
    items.link_next_as_random()
    assert _round_trip(items).describe() == items.describe()


def test_deserialize_empty_stream_leaves_list_empty():
    items = LinkedList()
    items.deserialize(io.BytesIO(b""))
    assert len(items) == 0
    assert list(items) == []


def test_deserialize_zero_count():
    items = LinkedList()
    items.deserialize(io.BytesIO(struct.pack("<I", 0)))
    assert len(items) == 0


def test_deserialize_into_non_empty_list_raises():
    items = _build("abc")
    with pytest.raises(ValueError):
        items.deserialize(io.BytesIO(struct.pack("<I", 0)))


def test_deserialize_truncated_raises():
    buffer = io.BytesIO()
    _build("abc", "efg").serialize(buffer)
    data = buffer.getvalue()[:-2]
    items = LinkedList()
    with pytest.raises(ValueError):
        items.deserialize(io.BytesIO(data))
    assert len(items) == 0


def test_deserialize_bad_rand_index_raises():
    data = struct.pack("<I", 1) + struct.pack("<I", 1) + b"a" + struct.pack("<i", 5)
    with pytest.raises(ValueError):
        LinkedList().deserialize(io.BytesIO(data))


def test_serialize_rand_outside_list_raises():
    items = _build("abc")
    stranger = _build("zzz")
    list(items)[0].rand = list(stranger)[0]
    with pytest.raises(ValueError):
        items.serialize(io.BytesIO())
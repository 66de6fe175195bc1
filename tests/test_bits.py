import io

import pytest

from taskbench.bits import BitReader, BitWriter


def _written(bits=(), byte_values=()):
    stream = io.BytesIO()
    writer = BitWriter(stream)
    for bit in bits:
        writer.write_bit(bit)
    for value in byte_values:
        writer.write_byte(value)
    writer.flush()
    return stream.getvalue()


def test_bits_are_packed_msb_first():
    assert _written(bits=(1, 0, 1)) == b"\xa0"


def test_flush_without_bits_writes_zero_byte():
    assert _written() == b"\x00"


def test_full_byte_round_trip():
    assert _written(byte_values=(0x5A,)) == bytes([0x5A])


@pytest.mark.parametrize("values", [[0], [255], [1, 2, 3], list(range(0, 256, 17))])
def test_byte_round_trip(values):
    data = _written(byte_values=values)
    reader = BitReader(io.BytesIO(data))
    assert [reader.read_byte() for _ in values] == values


def test_mixed_bits_and_bytes_round_trip():
    stream = io.BytesIO()
    writer = BitWriter(stream)
    writer.write_bit(1)
    writer.write_byte(200)
    writer.write_bit(0)
    writer.write_byte(7)
    writer.flush()
    reader = BitReader(io.BytesIO(stream.getvalue()))
    assert reader.read_bit() == 1
    assert reader.read_byte() == 200
    assert reader.read_bit() == 0
    assert reader.read_byte() == 7


def test_output_length_is_whole_bytes():
    data = _written(bits=[1] * 9)
    assert len(data) == 2


def test_reader_raises_at_end_of_stream():
    reader = BitReader(io.BytesIO(b""))
    with pytest.raises(EOFError):
        reader.read_bit()


def test_reader_reads_exactly_eight_bits_per_byte():
    reader = BitReader(io.BytesIO(bytes([0xFF])))
    assert [reader.read_bit() for _ in range(8)] == [1] * 8
    with pytest.raises(EOFError):
        reader.read_bit()
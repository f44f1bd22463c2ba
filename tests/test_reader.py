import pytest

from swipekit.reader import BufferReader, Reader, StringReader, buffer_hash


def test_hash_of_empty_is_zero():
    assert buffer_hash(b"") == 0


def test_hash_of_single_byte_is_its_value():
    assert buffer_hash(b"a") == ord("a")


def test_hash_stays_in_signed_32_bit_range():
    value = buffer_hash(bytes(range(256)) * 10)
    assert -(2**31) <= value < 2**31


def test_sequential_reads():
    r = BufferReader(b"hello")
    assert r.read(2) == b"he"
    assert r.tell() == 2
    assert r.bytes_remaining() == 3
    assert r.read_rest() == b"llo"
    assert r.reached_end()
    assert r.read(4) == b""


def test_read_clamps_to_remaining():
    r = BufferReader(b"abc")
    assert r.read(10) == b"abc"
    assert r.tell() == r.size()


def test_seek_from_end():
    r = BufferReader(b"hello")
    r.seek_from_end(2)
    assert r.read(5) == b"lo"


def test_read_whole_rewinds():
    r = BufferReader(b"payload")
    r.read(3)
    assert r.read_whole() == b"payload"


def test_seek_outside_buffer_raises():
    r = BufferReader(b"abc")
    with pytest.raises(ValueError):
        r.seek_from_begin(4)
    with pytest.raises(ValueError):
        r.seek_from_end(-1)


def test_string_reader_uses_utf8():
    text = "h\u00e9llo"
    r = StringReader(text)
    assert r.size() == len(text.encode("utf-8"))
    assert r.read_whole().decode("utf-8") == text


def test_reader_is_abstract():
    with pytest.raises(TypeError):
        Reader()
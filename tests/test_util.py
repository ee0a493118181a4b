import errno
import io
import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tcpbits.errors import UnixError
from tcpbits.util import (
    InternetChecksum,
    format_hexdump,
    get_random_generator,
    hexdump,
    system_call,
    timestamp_ms,
)

IPV4_HEADER = bytes.fromhex("450000730000400040110000c0a80001c0a800c7")


def test_timestamp_is_monotonic():
    first = timestamp_ms()
    second = timestamp_ms()
    assert 0 <= first <= second


def test_system_call_passes_success():
    assert system_call("write", 3) == 3


def test_system_call_raises():
    with pytest.raises(UnixError) as info:
        system_call("open", -errno.EACCES)
    assert info.value.error_code == errno.EACCES
    assert info.value.attempt == "open"


def test_system_call_masked_errno_is_returned():
    assert system_call("read", -errno.EAGAIN, errno.EAGAIN) == -errno.EAGAIN


def test_random_generator_produces_values():
    gen = get_random_generator()
    assert isinstance(gen, random.Random)
    values = [gen.randint(0, 10) for _ in range(50)]
    assert all(0 <= v <= 10 for v in values)


def test_checksum_worked_example():
    checksum = InternetChecksum()
    checksum.add(IPV4_HEADER)
    assert checksum.value() == 0xB861


def test_checksum_of_correct_header_is_zero():
    checksum = InternetChecksum()
    checksum.add(IPV4_HEADER)
    value = checksum.value()
    filled = IPV4_HEADER[:10] + value.to_bytes(2, "big") + IPV4_HEADER[12:]
    verify = InternetChecksum()
    verify.add(filled)
    assert verify.value() == 0


@given(st.binary(max_size=200), st.integers(min_value=0, max_value=200))
def test_checksum_split_adds_match(data, cut):
    whole = InternetChecksum()
    whole.add(data)
    parts = InternetChecksum()
    parts.add(data[:cut])
    parts.add(data[cut:])
    assert whole.value() == parts.value()


def test_checksum_initial_sum_counts():
    plain = InternetChecksum()
    plain.add(b"\x12\x34")
    seeded = InternetChecksum(0x1234)
    doubled = InternetChecksum()
    doubled.add(b"\x12\x34\x12\x34")
    assert seeded.value() != InternetChecksum().value()
    seeded.add(b"\x12\x34")
    assert seeded.value() == doubled.value()


def test_hexdump_short_line():
    expected = "00000000:    4142" + " " * 39 + "AB\n\n"
    assert format_hexdump(b"AB") == expected


def test_hexdump_full_lines_have_equal_width():
    text = format_hexdump(bytes(range(48)), indent=2)
    lines = text.split("\n")
    assert lines[-2:] == ["", ""]
    body = lines[:-2]
    assert len(body) == 3
    assert len({len(line) for line in body}) == 1
    assert body[1].startswith("  00000010:    ")


def test_hexdump_nonprintable_shown_as_dots():
    text = format_hexdump(b"\x00a\x7f")
    assert text.rstrip("\n").endswith(".a.")


def test_hexdump_partial_line_aligns_with_full_line():
    text = format_hexdump(b"x" * 20)
    first, second = text.split("\n")[:2]
    assert len(first) == len(second) + 12
    assert second.endswith("xxxx")


def test_hexdump_writes_to_file():
    out = io.StringIO()
    hexdump(b"hello world", indent=4, file=out)
    assert out.getvalue() == format_hexdump(b"hello world", 4)
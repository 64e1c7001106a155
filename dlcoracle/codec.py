#!/usr/bin/env python3

# Copyright (C) The dlcoracle developers
#
# This file is part of dlcoracle. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of dlcoracle including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Byte-level conventions of the oracle scheme.

Scalars are always fixed-width (32 bytes) big-endian unsigned integers,
zero-padded on the left.

Numeric outcomes are wrapped in a 32 bytes message:
the int64 value is taken as a 64-bit two's complement pattern
and zero-padded on the left, i.e. the value is printed
as a 64 hex-digit string. Hence:

* 42 -> 00..00 000000000000002a
* -1 -> 00..00 ffffffffffffffff

so that negative values never sign-extend beyond the lowest 8 bytes.

The challenge hash input uses the x-coordinate of the nonce point
as a minimal big-endian two's complement integer
(i.e. with a sign byte when the high bit is set),
with the leading zero (sign) byte removed.
"""

from btclib.alias import Integer, Octets
from btclib.utils import bytes_from_octets, hex_string, int_from_integer

from dlcoracle.exceptions import DLCOracleValueError, EmptyInput, ScalarTooLarge

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

SCALAR_SIZE = 32


def encode_scalar(i: Integer, size: int = SCALAR_SIZE) -> bytes:
    "Return the fixed-width big-endian encoding of a non-negative integer."
    i = int_from_integer(i)
    if i < 0:
        raise DLCOracleValueError(f"negative scalar: {i}")
    if i.bit_length() > size * 8:
        raise ScalarTooLarge(f"scalar too large for {size} bytes: '{hex_string(i)}'")
    return i.to_bytes(size, byteorder="big", signed=False)


def decode_scalar(octets: Octets) -> int:
    "Return the unsigned big-endian integer of the octets."
    octets = bytes_from_octets(octets)
    return int.from_bytes(octets, byteorder="big", signed=False)


def numeric_message(value: int) -> bytes:
    """Return the 32 bytes message attesting a numeric outcome.

    The int64 two's complement pattern of the value is zero-padded
    on the left to 32 bytes.
    """
    if not isinstance(value, int):
        raise DLCOracleValueError(f"not an integer: {value!r}")
    if not INT64_MIN <= value <= INT64_MAX:
        raise DLCOracleValueError(f"value not in int64 range: {value}")
    return (value & 0xFFFFFFFFFFFFFFFF).to_bytes(SCALAR_SIZE, byteorder="big")


def strip_leading_zero_byte(octets: Octets) -> bytes:
    "Remove a single leading zero byte, if present."
    octets = bytes_from_octets(octets)
    if not octets:
        raise EmptyInput("empty byte string")
    return octets[1:] if octets[0] == 0 else octets


def x_coord_hash_bytes(x: int) -> bytes:
    "Return the coordinate bytes as used in the challenge hash input."
    if x < 0:
        raise DLCOracleValueError(f"negative coordinate: {x}")
    # minimal two's complement length, sign bit included
    size = x.bit_length() // 8 + 1
    return strip_leading_zero_byte(x.to_bytes(size, byteorder="big", signed=True))

#!/usr/bin/env python3

# Copyright (C) The dlcoracle developers
#
# This file is part of dlcoracle. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of dlcoracle including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""secp256k1 curve context.

Elliptic curve arithmetic and SEC 1 point encoding are provided by btclib.ec.
On top of it, this module restricts the accepted points
to finite curve points with coordinates in 0..p-1,
and reports any malformed point as InvalidPointEncoding.
"""

from btclib.alias import Octets, Point
from btclib.ec import Curve, bytes_from_point, mult, secp256k1
from btclib.ec import point_from_octets as sec_point_from_octets

from dlcoracle.exceptions import InvalidPointEncoding

__all__ = [
    "Curve",
    "bytes_from_point",
    "mult",
    "negate",
    "point_from_octets",
    "require_valid_point",
    "secp256k1",
]


def negate(Q: Point, ec: Curve = secp256k1) -> Point:
    """Return the opposite point.

    The y-coordinate is negated modulo the field prime p,
    not modulo the group order n.
    """
    return Q[0], (ec.p - Q[1]) % ec.p


def require_valid_point(Q: Point, ec: Curve = secp256k1) -> Point:
    """Return the input if it is a finite curve point in canonical form.

    Both coordinates must be field elements, i.e. x in 0..p-1
    and y in 1..p-1: a coordinate congruent to a valid one
    but not reduced mod p is rejected.
    """
    if not isinstance(Q, tuple) or len(Q) != 2:
        raise InvalidPointEncoding(f"not a point: {Q!r}")
    x_Q, y_Q = Q
    if not isinstance(x_Q, int) or not isinstance(y_Q, int):
        raise InvalidPointEncoding(f"not a point: {Q!r}")
    if y_Q == 0:
        raise InvalidPointEncoding("infinity point is not a valid point")
    if not 0 <= x_Q < ec.p:
        raise InvalidPointEncoding(f"x-coordinate not in 0..p-1: {hex(x_Q)}")
    if not 0 < y_Q < ec.p:
        raise InvalidPointEncoding(f"y-coordinate not in 1..p-1: {hex(y_Q)}")
    if not ec.is_on_curve(Q):
        raise InvalidPointEncoding(f"point not on curve: ({hex(x_Q)}, {hex(y_Q)})")
    return Q


def point_from_octets(pub_key: Octets, ec: Curve = secp256k1) -> Point:
    """Return the curve point of a SEC 1 encoding.

    Both compressed (ec.p_size + 1 bytes)
    and uncompressed (2 * ec.p_size + 1 bytes) encodings are accepted.
    """
    try:
        Q = sec_point_from_octets(pub_key, ec)
    except (ValueError, TypeError) as e:
        raise InvalidPointEncoding(f"not a point: {e}") from e
    return require_valid_point(Q, ec)

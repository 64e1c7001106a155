#!/usr/bin/env python3

# Copyright (C) The dlcoracle developers
#
# This file is part of dlcoracle. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of dlcoracle including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Private scalar validation and public key derivation.

The same functions serve both the oracle long-term key pair (a, A=aG)
and the one-time nonce pair (k, R=kG).
"""

import logging
from typing import Union

from btclib.alias import Point
from btclib.utils import bytes_from_octets

from dlcoracle.curve import (
    Curve,
    bytes_from_point,
    mult,
    point_from_octets,
    require_valid_point,
    secp256k1,
)
from dlcoracle.exceptions import InvalidScalar

logger = logging.getLogger(__name__)

# private key inputs: native int or ec.n_size Octets
PrvKey = Union[int, bytes, str]

# public key inputs: native tuple or SEC Octets
PubKey = Union[Point, bytes, str]


def int_from_prv_key(prv_key: PrvKey, ec: Curve = secp256k1) -> int:
    """Return a verified-as-valid private scalar in 1..n-1.

    It supports:

    - integer (native int)
    - Octets (bytes or hex-string, ec.n_size big-endian)
    """

    if isinstance(prv_key, int):
        q = prv_key
    else:
        try:
            q = int.from_bytes(bytes_from_octets(prv_key, ec.n_size), "big")
        except (ValueError, TypeError) as e:
            raise InvalidScalar(f"not a private key: {prv_key!r}") from e

    if not 0 < q < ec.n:
        raise InvalidScalar(f"private key not in 1..n-1: {hex(q)}")

    return q


def point_from_pub_key(pub_key: PubKey, ec: Curve = secp256k1) -> Point:
    "Return a verified-as-valid public key as Point tuple."
    if isinstance(pub_key, tuple):
        return require_valid_point(pub_key, ec)
    return point_from_octets(pub_key, ec)


def pub_key_from_prv_key(prv_key: PrvKey, ec: Curve = secp256k1) -> bytes:
    """Return the compressed SEC public key of a private scalar.

    The private scalar is first validated to be in 1..n-1.
    """
    q = int_from_prv_key(prv_key, ec)
    pub_key = bytes_from_point(mult(q, ec.G, ec), ec)
    logger.debug("derived public key %s", pub_key.hex())
    return pub_key

#!/usr/bin/env python3

# Copyright (C) The dlcoracle developers
#
# This file is part of dlcoracle. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of dlcoracle including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `dlcoracle.keys` module."

import pytest

from dlcoracle.curve import mult, point_from_octets, secp256k1
from dlcoracle.exceptions import (
    DLCOracleValueError,
    InvalidPointEncoding,
    InvalidScalar,
)
from dlcoracle.keys import int_from_prv_key, point_from_pub_key, pub_key_from_prv_key

# https://en.bitcoin.it/wiki/Technical_background_of_version_1_Bitcoin_addresses
q = 0x18E14A7B6A307F426A94F8114701E7C8E774E7F9A47E2C2035DB29A206321725
Q_compressed = "0250863AD64A87AE8A2FE83C1AF1A8403CB53F53E486D8511DAD8A04887E5B2352"


def test_int_from_prv_key() -> None:
    assert int_from_prv_key(q) == q
    assert int_from_prv_key(q.to_bytes(32, "big")) == q
    assert int_from_prv_key(q.to_bytes(32, "big").hex()) == q
    assert int_from_prv_key(1) == 1
    assert int_from_prv_key(secp256k1.n - 1) == secp256k1.n - 1

    err_msg = "private key not in 1..n-1: "
    for invalid in (0, -1, secp256k1.n, secp256k1.p, b"\x00" * 32, b"\xff" * 32):
        with pytest.raises(InvalidScalar, match=err_msg):
            int_from_prv_key(invalid)

    err_msg = "not a private key: "
    for invalid in (b"\x01" * 31, b"\x01" * 33, "not a key", ""):
        with pytest.raises(InvalidScalar, match=err_msg):
            int_from_prv_key(invalid)

    # InvalidScalar is a ValueError
    with pytest.raises(ValueError):
        int_from_prv_key(0)


def test_pub_key_from_prv_key() -> None:
    assert pub_key_from_prv_key(q).hex().upper() == Q_compressed
    assert pub_key_from_prv_key(q.to_bytes(32, "big")).hex().upper() == Q_compressed

    G_bytes = pub_key_from_prv_key(1)
    assert G_bytes.hex() == (
        "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    )
    G_bytes = pub_key_from_prv_key(secp256k1.n - 1)
    assert G_bytes.hex() == (
        "0379be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    )
    G2_bytes = pub_key_from_prv_key(2)
    assert G2_bytes.hex() == (
        "02c6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5"
    )

    for prv_key in (1, 2, 3, q, secp256k1.n - 1):
        pub_key = pub_key_from_prv_key(prv_key)
        # deterministic
        assert pub_key == pub_key_from_prv_key(prv_key)
        assert len(pub_key) == 33
        assert pub_key[0] in (2, 3)
        # on curve
        Q = point_from_octets(pub_key)
        assert secp256k1.is_on_curve(Q)
        assert Q == mult(prv_key)

    for invalid in (0, secp256k1.n, b"\x00" * 32):
        with pytest.raises(InvalidScalar, match="private key not in 1..n-1: "):
            pub_key_from_prv_key(invalid)


def test_point_from_pub_key() -> None:
    Q = mult(q)
    assert point_from_pub_key(Q) == Q
    assert point_from_pub_key(Q_compressed) == Q
    assert point_from_pub_key(bytes.fromhex(Q_compressed)) == Q

    with pytest.raises(InvalidPointEncoding, match="infinity point"):
        point_from_pub_key((5, 0))
    with pytest.raises(DLCOracleValueError, match="point not on curve"):
        point_from_pub_key((Q[0], Q[0]))
    with pytest.raises(InvalidPointEncoding, match="not a point: "):
        point_from_pub_key(b"\x02" * 10)

    # tuple coordinates must be reduced mod p
    p = secp256k1.p
    with pytest.raises(InvalidPointEncoding, match="x-coordinate not in 0..p-1: "):
        point_from_pub_key((Q[0] + p, Q[1]))
    with pytest.raises(InvalidPointEncoding, match="y-coordinate not in 1..p-1: "):
        point_from_pub_key((Q[0], Q[1] + p))

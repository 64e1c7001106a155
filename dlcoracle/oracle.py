#!/usr/bin/env python3

# Copyright (C) The dlcoracle developers
#
# This file is part of dlcoracle. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of dlcoracle including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Oracle signatures for Discreet Log Contracts.

The oracle owns a long-term key pair (a, A=aG) and,
for each message to be attested, a one-time key pair (k, R=kG):
R is published in advance, before the outcome is known.

Given the challenge

    e = int(hf(msg || bytes(x_R)))

the oracle attestation of msg is the scalar

    s = k - e*a (mod n)

and (R, s) is a Schnorr-like signature.

Anyone holding only A and R can compute, for every possible msg,
the signature point

    S = R - e*A

that the eventual signature scalar will satisfy as S = sG:
this allows DLC counterparties to build settlement transactions
that only the oracle attestation of msg can unlock.

Note that e is not reduced mod n in the hash-to-integer conversion;
bytes(x_R) is the minimal big-endian x_R encoding
(see dlcoracle.codec.x_coord_hash_bytes).
"""

from __future__ import annotations

import logging
from dataclasses import InitVar, dataclass
from hashlib import sha256
from typing import Tuple

from btclib.alias import HashF, Octets, Point
from btclib.hashes import reduce_to_hlen
from btclib.utils import bytes_from_octets

from dlcoracle.codec import encode_scalar, x_coord_hash_bytes
from dlcoracle.curve import (
    Curve,
    bytes_from_point,
    mult,
    negate,
    point_from_octets,
    require_valid_point,
    secp256k1,
)
from dlcoracle.exceptions import DLCOracleRuntimeError, DLCOracleValueError
from dlcoracle.keys import PrvKey, PubKey, int_from_prv_key, point_from_pub_key

logger = logging.getLogger(__name__)


def challenge_(msg: Octets, x_R: int, hf: HashF = sha256) -> int:
    """Return the challenge e = int(hf(msg || bytes(x_R))).

    The result is not reduced mod n.
    """
    msg = bytes_from_octets(msg)
    t = msg + x_coord_hash_bytes(x_R)
    return int.from_bytes(reduce_to_hlen(t, hf), byteorder="big", signed=False)


def _signature_point_(e: int, A: Point, R: Point, ec: Curve) -> Point:
    # S = R - e*A, with the opposite of e*A obtained negating
    # its y-coordinate modulo the field prime p
    S = ec.add(negate(mult(e, A, ec), ec), R)
    if S[1] == 0:
        raise DLCOracleRuntimeError("INF signature point")  # pragma: no cover
    return S


def compute_signature_pub_key(
    pub_a: PubKey,
    pub_r: PubKey,
    msg: Octets,
    ec: Curve = secp256k1,
    hf: HashF = sha256,
) -> bytes:
    """Return the compressed signature point S = R - e*A.

    It only requires public data: the oracle public key A,
    the one-time public key R committed for the message,
    and the message itself.
    Malformed points raise InvalidPointEncoding.
    """
    A = point_from_pub_key(pub_a, ec)
    R = point_from_pub_key(pub_r, ec)

    e = challenge_(msg, R[0], hf)
    S = _signature_point_(e, A, R, ec)

    sig_pub_key = bytes_from_point(S, ec)
    logger.debug("signature point %s", sig_pub_key.hex())
    return sig_pub_key


def _sign_(e: int, a: int, k: int, ec: Curve) -> int:
    # s=0 is ok: there is no inverse of s anywhere
    return (k - e * a) % ec.n


def _attest_(
    prv_a: PrvKey, nonce_k: PrvKey, msg: Octets, ec: Curve, hf: HashF
) -> Tuple[Point, int]:
    a = int_from_prv_key(prv_a, ec)
    k = int_from_prv_key(nonce_k, ec)

    R = mult(k, ec.G, ec)
    e = challenge_(msg, R[0], hf)
    return R, _sign_(e, a, k, ec)


def compute_signature(
    prv_a: PrvKey,
    nonce_k: PrvKey,
    msg: Octets,
    ec: Curve = secp256k1,
    hf: HashF = sha256,
) -> bytes:
    """Return the ec.n_size bytes signature scalar s = k - e*a (mod n).

    The one-time signing key must be the one whose public key R
    has been committed for this message, and it must never be reused
    for another message.
    Both private scalars must be in 1..n-1, otherwise InvalidScalar is raised.
    """
    R, s = _attest_(prv_a, nonce_k, msg, ec, hf)
    logger.debug("signature scalar computed for x_R %s", hex(R[0]))
    return encode_scalar(s, ec.n_size)


@dataclass(frozen=True)
class Attestation:
    """Oracle attestation, i.e. the (R, s) signature of a message.

    - R is the committed one-time public key, a curve point (not INF)
    - s is a scalar, 0 <= s < ec.n

    The serialization is the compressed R (ec.p_size + 1 bytes)
    followed by s (ec.n_size bytes).
    """

    R: Point
    s: int
    ec: Curve = secp256k1
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        # R must be a finite point on curve
        require_valid_point(self.R, self.ec)

        # s is a scalar, fail if s is not in [0, n-1]
        if not 0 <= self.s < self.ec.n:
            raise DLCOracleValueError(f"scalar s not in 0..n-1: {hex(self.s)}")

    @property
    def sig_scalar(self) -> bytes:
        "The signature scalar as published by compute_signature."
        return encode_scalar(self.s, self.ec.n_size)

    def serialize(self, check_validity: bool = True) -> bytes:
        if check_validity:
            self.assert_valid()

        return bytes_from_point(self.R, self.ec) + self.sig_scalar

    @classmethod
    def parse(
        cls: type[Attestation],
        data: Octets,
        ec: Curve = secp256k1,
        check_validity: bool = True,
    ) -> Attestation:
        r_size = ec.p_size + 1
        try:
            data = bytes_from_octets(data, r_size + ec.n_size)
        except ValueError as e:
            raise DLCOracleValueError(f"not an attestation: {e}") from e
        R = point_from_octets(data[:r_size], ec)
        s = int.from_bytes(data[r_size:], byteorder="big", signed=False)
        return cls(R, s, ec, check_validity)

    @classmethod
    def sign(
        cls: type[Attestation],
        prv_a: PrvKey,
        nonce_k: PrvKey,
        msg: Octets,
        ec: Curve = secp256k1,
        hf: HashF = sha256,
    ) -> Attestation:
        "Return the attestation of msg, bundling R=kG with the scalar s."
        R, s = _attest_(prv_a, nonce_k, msg, ec, hf)
        return cls(R, s, ec)

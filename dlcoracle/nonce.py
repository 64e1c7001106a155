#!/usr/bin/env python3

# Copyright (C) The dlcoracle developers
#
# This file is part of dlcoracle. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of dlcoracle including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""One-time signing keys (nonces) and key pairs.

A nonce k must be generated once per attested message,
kept unmodified until the message is signed,
and never reused: two signatures with the same k
(and different messages) leak the oracle private key.

The nonce is drawn as raw random bytes, not reduced mod n:
the probability of the result not being in 1..n-1
is about 2^-128 for secp256k1.
"""

from __future__ import annotations

import logging
import secrets

from dlcoracle.curve import Curve, secp256k1
from dlcoracle.exceptions import WeakNonce
from dlcoracle.keys import PrvKey, int_from_prv_key, pub_key_from_prv_key

logger = logging.getLogger(__name__)


def gen_nonce(check_validity: bool = True, ec: Curve = secp256k1) -> bytes:
    """Return a fresh ec.n_size bytes one-time signing key.

    If check_validity is True, WeakNonce is raised when the drawn
    bytes are not a valid private scalar (zero or not less than n).
    """
    nonce = secrets.token_bytes(ec.n_size)
    if check_validity:
        k = int.from_bytes(nonce, byteorder="big", signed=False)
        if not 0 < k < ec.n:
            raise WeakNonce("nonce not in 1..n-1")
    logger.debug("generated one-time signing key")
    return nonce


def gen_keys(
    prv_key: PrvKey | None = None, ec: Curve = secp256k1
) -> tuple[bytes, bytes]:
    """Return a (private scalar, compressed public point) key pair.

    If no private key is provided, a random one is generated.
    """
    if prv_key is None:
        q = 1 + secrets.randbelow(ec.n - 1)
    else:
        q = int_from_prv_key(prv_key, ec)

    return q.to_bytes(ec.n_size, byteorder="big"), pub_key_from_prv_key(q, ec)

#!/usr/bin/env python3

# Copyright (C) The dlcoracle developers
#
# This file is part of dlcoracle. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of dlcoracle including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The base classes only discriminate between Exceptions being raised
by dlcoracle from those raised by other codebase:
they derive from the regular ValueError and RuntimeError.

The specialized ValueError subclasses name the malformed input
(point encoding, scalar, codec input) so that callers can tell
them apart without parsing error messages.
"""


class DLCOracleValueError(ValueError):
    pass


class DLCOracleRuntimeError(RuntimeError):
    pass


class InvalidPointEncoding(DLCOracleValueError):
    """Octets do not decode to a valid curve point."""


class InvalidScalar(DLCOracleValueError):
    """Scalar is zero or not less than the curve order."""


class WeakNonce(InvalidScalar):
    """Freshly drawn nonce bytes are not a valid private scalar."""


class ScalarTooLarge(DLCOracleValueError):
    """Integer does not fit in the requested number of bytes."""


class EmptyInput(DLCOracleValueError):
    pass

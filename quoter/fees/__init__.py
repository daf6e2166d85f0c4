"""Fee handling for the quoter.

Trading fees are charged per band by the curve integrators (see
quoter.curve.tier_fees). This package splits the collected total between the
protocol, the host, the pool manager and the pool itself.

Usage:
    from quoter.fees import split_fees

    split = split_fees(total_fees, snapshot.fee_recipients)
    assert split.total == total_fees
"""

from quoter.fees.splitter import split_fees

__all__ = ["split_fees"]

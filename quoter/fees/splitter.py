"""Fee split between protocol, host, manager and pool."""

from quoter.constants import FEE_SHARE_BASE
from quoter.math.fixed_point import mul_div
from quoter.models.pool import FeeRecipients
from quoter.models.quote import FeeSplit


def split_fees(total_fees: int, recipients: FeeRecipients) -> FeeSplit:
    """Partition collected fees by recipient.

    Protocol, host and manager each take `share / 100` of the total, rounded
    down. The pool keeps the residual, so rounding dust always stays in the
    pool and the parts sum exactly to `total_fees`.

    The shares are not validated here: a configuration whose shares add up to
    more than 100 produces a negative pool share. Snapshots loaded through
    FeeRecipientsModel are rejected before they get this far.

    Args:
        total_fees: Fees collected on the trade, in output asset units
        recipients: Percent shares of the three external recipients

    Returns:
        FeeSplit whose parts sum to total_fees
    """
    protocol = mul_div(total_fees, recipients.protocol_bps, FEE_SHARE_BASE)
    host = mul_div(total_fees, recipients.host_bps, FEE_SHARE_BASE)
    manager = mul_div(total_fees, recipients.manager_bps, FEE_SHARE_BASE)
    return FeeSplit(
        protocol=protocol,
        host=host,
        manager=manager,
        pool=total_fees - protocol - host - manager,
    )

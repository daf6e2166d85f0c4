"""Fund swap quoter - prices swaps against a managed multi-asset pool."""

from quoter.engine import QuoteEngine, get_default_engine
from quoter.errors import QuoteOutcome, QuoteRejected, RejectionReason
from quoter.models import PoolSnapshot, QuoteRequest, QuoteResult, load_snapshot

__version__ = "0.1.0"
__all__ = [
    "QuoteEngine",
    "get_default_engine",
    "QuoteOutcome",
    "QuoteRejected",
    "RejectionReason",
    "PoolSnapshot",
    "QuoteRequest",
    "QuoteResult",
    "load_snapshot",
    "__version__",
]

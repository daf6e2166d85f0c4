"""API endpoints for the quoter."""

import structlog
from fastapi import APIRouter, Depends, HTTPException

from quoter.engine import QuoteEngine, get_default_engine
from quoter.errors import InvalidSnapshotError, QuoteRejected
from quoter.models.api import (
    DescribeTradeResponse,
    QuoteBody,
    QuoteModel,
    QuoteResponse,
    RejectionModel,
    ReserveAssetsResponse,
    SnapshotBody,
    TradeLegModel,
)
from quoter.models.pool import PoolSnapshot
from quoter.models.snapshot import SnapshotModel

logger = structlog.get_logger()

router = APIRouter()


def get_engine() -> QuoteEngine:
    """Dependency provider for the engine instance.

    Override this in tests to inject an engine with a custom config:
        app.dependency_overrides[get_engine] = lambda: QuoteEngine(config)

    Returns:
        The engine used to price requests.
    """
    return get_default_engine()


def _build_snapshot(model: SnapshotModel) -> PoolSnapshot:
    try:
        return model.to_snapshot()
    except InvalidSnapshotError as e:
        logger.warning("invalid_snapshot", pool_id=model.pool_id, error=str(e))
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/quote", response_model_exclude_none=True)
async def quote(body: QuoteBody, engine: QuoteEngine = Depends(get_engine)) -> QuoteResponse:
    """Price a swap against the supplied pool snapshot.

    Error Handling:
        - Invalid request schema: Returns 422 Validation Error (Pydantic)
        - Pool refuses the trade: Returns 200 with a rejection instead of a quote
    """
    snapshot = _build_snapshot(body.snapshot)
    request = body.to_request()

    logger.info(
        "received_quote_request",
        pool_id=snapshot.pool_id,
        input_mint=request.input_mint,
        output_mint=request.output_mint,
        amount=request.amount,
    )

    try:
        result = engine.quote(snapshot, request)
    except QuoteRejected as e:
        logger.info("quote_rejected", pool_id=snapshot.pool_id, reason=e.reason.value)
        return QuoteResponse(rejection=RejectionModel.from_error(e))

    return QuoteResponse(quote=QuoteModel.from_result(result))


@router.post("/describe-trade", response_model_exclude_none=True)
async def describe_trade(
    body: QuoteBody, engine: QuoteEngine = Depends(get_engine)
) -> DescribeTradeResponse:
    """Return the asset ids and amounts an instruction encoder needs."""
    snapshot = _build_snapshot(body.snapshot)
    try:
        legs = engine.describe_trade(snapshot, body.to_request())
    except QuoteRejected as e:
        return DescribeTradeResponse(rejection=RejectionModel.from_error(e))
    return DescribeTradeResponse(legs=[TradeLegModel.from_leg(leg) for leg in legs])


@router.post("/reserve-assets")
async def reserve_assets(
    body: SnapshotBody, engine: QuoteEngine = Depends(get_engine)
) -> ReserveAssetsResponse:
    """List the mints this pool can currently swap."""
    snapshot = _build_snapshot(body.snapshot)
    return ReserveAssetsResponse(mints=engine.reserve_assets(snapshot))

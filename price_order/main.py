from fastapi import FastAPI, HTTPException, status
import logging
from contextlib import asynccontextmanager

# Use relative imports
from . import schemas, logic, config

# Basic logging setup
logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s [%(levelname)s] %(name)s: %(message)s')
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Price Order Service starting up...")
    logger.info(f"Listening on {config.APP_HOST}:{config.APP_PORT}")
    yield
    logger.info("Price Order Service shutting down...")

app = FastAPI(
    title="Price Order Service",
    description="Prices a single-product order in two phases: volume discount, then shipping. Every field is required; pass null for an unbounded threshold.",
    version="0.1.0",
    lifespan=lifespan
)


@app.get("/health", tags=["Monitoring"], summary="Health Check")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy"}

@app.post(
    "/price_order",
    response_model=schemas.PriceOrderResponse,
    tags=["Pricing"],
    summary="Price Order"
)
async def price_order_endpoint(request_data: schemas.PriceOrderRequest):
    """
    Runs both pricing phases and returns the breakdown
    (base price, discount, shipping cost) together with the total.
    """
    logger.info(f"Received price order request for quantity {request_data.quantity}")
    try:
        total = logic.price_order(request_data.product, request_data.quantity, request_data.shipping_method)
        # Breakdown for the response
        pricing_data = logic.compute_pricing_data(request_data.product, request_data.quantity)
        shipping_cost = logic.shipping_cost(pricing_data, request_data.shipping_method)
    except Exception as e:
        logger.exception(f"Error pricing order: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred during price calculation."
        )

    return schemas.PriceOrderResponse(
        base_price=pricing_data.base_price,
        discount=pricing_data.discount,
        shipping_cost=shipping_cost,
        total=total
    )

@app.post(
    "/pricing_data",
    response_model=schemas.PricingData,
    tags=["Pricing"],
    summary="Compute Pricing Data"
)
async def pricing_data_endpoint(request_data: schemas.PricingDataRequest):
    """Phase 1 only: base price and volume discount."""
    try:
        return logic.compute_pricing_data(request_data.product, request_data.quantity)
    except Exception as e:
        logger.exception(f"Error computing pricing data: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred while computing pricing data."
        )

@app.post(
    "/apply_shipping",
    response_model=schemas.ApplyShippingResponse,
    tags=["Pricing"],
    summary="Apply Shipping"
)
async def apply_shipping_endpoint(request_data: schemas.ApplyShippingRequest):
    """Phase 2 only: adds shipping to previously computed pricing data."""
    try:
        total = logic.apply_shipping(request_data.pricing_data, request_data.shipping_method)
    except Exception as e:
        logger.exception(f"Error applying shipping: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred while applying shipping."
        )
    return schemas.ApplyShippingResponse(total=total)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.APP_HOST, port=config.APP_PORT)

from pydantic import BaseModel, ConfigDict, Field, conint, confloat, model_validator
from typing import Optional
import math

# Finite, non-negative amounts. None on a threshold means "unbounded".
Amount = confloat(ge=0, allow_inf_nan=False)
Threshold = Optional[Amount]


def _is_finite(*terms) -> bool:
    """True when the sum of the given products of factors stays a finite float."""
    try:
        total = sum(math.prod(float(f) for f in factors) for factors in terms)
    except OverflowError: # int quantity too large for a float
        return False
    return math.isfinite(total)


# All fields are required: pass null explicitly for an unbounded threshold
class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_price: confloat(gt=0, allow_inf_nan=False) # Price per unit
    discount_threshold: Threshold # Units above this earn a discount
    discount_rate: Amount # Fraction of base_price off per discounted unit


class ShippingMethod(BaseModel):
    model_config = ConfigDict(frozen=True)

    discount_threshold: Threshold # Base price cutoff for discount_fee
    discount_fee: Amount # Per case, when base price is above the threshold
    fee_per_case: Amount # Per case otherwise


class PricingData(BaseModel):
    """Hand-off from the pricing phase to the shipping phase."""
    model_config = ConfigDict(frozen=True)

    base_price: Amount
    quantity: conint(gt=0)
    discount: Amount


# Request bodies for the service endpoints.
# Each one rejects inputs whose arithmetic would overflow a float.
class PricingDataRequest(BaseModel):
    product: Product
    quantity: conint(gt=0)

    @model_validator(mode="after")
    def check_pricing_is_finite(self):
        product = self.product
        if not _is_finite((product.base_price, self.quantity)):
            raise ValueError("base_price * quantity is too large to price")

        threshold = product.discount_threshold
        discounted_units = 0 if threshold is None else max(self.quantity - threshold, 0)
        if not _is_finite((discounted_units, product.base_price, product.discount_rate)):
            raise ValueError("discount for this quantity is too large to price")
        return self


class PriceOrderRequest(PricingDataRequest):
    shipping_method: ShippingMethod

    @model_validator(mode="after")
    def check_total_is_finite(self):
        fee = max(self.shipping_method.discount_fee, self.shipping_method.fee_per_case)
        if not _is_finite((self.product.base_price, self.quantity), (self.quantity, fee)):
            raise ValueError("shipping cost for this quantity is too large to price")
        return self


class ApplyShippingRequest(BaseModel):
    pricing_data: PricingData
    shipping_method: ShippingMethod

    @model_validator(mode="after")
    def check_total_is_finite(self):
        fee = max(self.shipping_method.discount_fee, self.shipping_method.fee_per_case)
        if not _is_finite((self.pricing_data.base_price,), (self.pricing_data.quantity, fee)):
            raise ValueError("shipping cost for this quantity is too large to price")
        return self


# Response bodies
class PriceOrderResponse(BaseModel):
    base_price: float = Field(ge=0)
    discount: float = Field(ge=0, default=0.0)
    shipping_cost: float = Field(ge=0, default=0.0)
    total: float


class ApplyShippingResponse(BaseModel):
    total: float

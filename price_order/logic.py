from . import schemas # Use relative import within the package
import logging

logger = logging.getLogger(__name__)


def compute_pricing_data(product: schemas.Product, quantity: int) -> schemas.PricingData:
    """
    Phase 1: base price for the ordered quantity plus the volume discount.

    Every unit beyond the product's discount threshold earns
    base_price * discount_rate off. An unbounded threshold never discounts.
    """
    base_price = product.base_price * quantity

    if product.discount_threshold is None:
        discounted_units = 0
    else:
        discounted_units = max(quantity - product.discount_threshold, 0)
    discount = discounted_units * product.base_price * product.discount_rate

    logger.debug(f"Pricing data: base_price={base_price}, quantity={quantity}, discounted_units={discounted_units}, discount={discount}")
    return schemas.PricingData(base_price=base_price, quantity=quantity, discount=discount)


def shipping_cost(pricing_data: schemas.PricingData, shipping_method: schemas.ShippingMethod) -> float:
    threshold = shipping_method.discount_threshold
    # Strictly greater: a base price equal to the threshold pays the regular fee
    if threshold is not None and pricing_data.base_price > threshold:
        shipping_per_case = shipping_method.discount_fee
    else:
        shipping_per_case = shipping_method.fee_per_case

    logger.debug(f"Shipping per case = {shipping_per_case} (base_price={pricing_data.base_price}, threshold={threshold})")
    return pricing_data.quantity * shipping_per_case


def apply_shipping(pricing_data: schemas.PricingData, shipping_method: schemas.ShippingMethod) -> float:
    """Phase 2: add shipping to the discounted base price."""
    cost = shipping_cost(pricing_data, shipping_method)
    return pricing_data.base_price - pricing_data.discount + cost


def price_order(product: schemas.Product, quantity: int, shipping_method: schemas.ShippingMethod) -> float:
    pricing_data = compute_pricing_data(product, quantity)
    price = apply_shipping(pricing_data, shipping_method)
    logger.info(f"Priced order of {quantity} unit(s): total = {price}")
    return price

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from ..core.types import CatalogEntry, Condition, OfferQuote
from ..utils.config import settings
from ..utils.error_handler import UnsupportedConditionError

_CENT = Decimal("0.01")


def round2(value: Union[Decimal, float, int]) -> Decimal:
    """Round to cents, half-up. Floats go through str() so 0.125 stays 0.125."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


class OfferPricer:
    """Prices a catalog entry at a condition and derives the buy-back offer."""

    def __init__(self, offer_ratio: Optional[float] = None):
        self.offer_ratio = settings.OFFER_RATIO if offer_ratio is None else offer_ratio

    def price(self, entry: CatalogEntry, condition: Condition) -> OfferQuote:
        """market = round2(catalog price x multiplier); offer = round2(market x ratio)."""
        if condition not in entry.supported_conditions:
            raise UnsupportedConditionError(
                f"{entry.name} ({entry.set_name}) is not offered in {condition.value} condition",
                details={
                    "entry_id": entry.id,
                    "condition": condition.value,
                    "supported": sorted(c.value for c in entry.supported_conditions),
                }
            )

        market = round2(Decimal(str(entry.market_price)) * Decimal(str(condition.multiplier)))
        offer = round2(market * Decimal(str(self.offer_ratio)))
        return OfferQuote(market_price=float(market), offer_price=float(offer))

# Global instance
offer_pricer = OfferPricer()

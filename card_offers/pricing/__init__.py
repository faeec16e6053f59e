"""Pricing package for buy-back offers."""

from .offer import OfferPricer, offer_pricer, round2

__all__ = ["OfferPricer", "offer_pricer", "round2"]

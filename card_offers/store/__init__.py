"""Result export."""

from .writer import OfferCSVWriter, csv_writer

__all__ = ["OfferCSVWriter", "csv_writer"]

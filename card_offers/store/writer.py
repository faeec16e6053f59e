"""CSV export of identified cards with a fixed header."""

import csv
import os
from pathlib import Path
from typing import Any, Dict, Union

from ..core.constants import CSV_HEADER
from ..core.types import IdentifiedCard, ProcessingResult
from ..utils.error_handler import WriterError
from ..utils.log import get_logger


def _money(value):
    return "" if value is None else f"{value:.2f}"


class OfferCSVWriter:
    """Writes one row per identified card, header first."""

    def __init__(self):
        self.logger = get_logger(__name__)

    def build_row(self, card: IdentifiedCard) -> Dict[str, Any]:
        """Row dictionary in CSV_HEADER order."""
        return {
            "id": card.id,
            "entry_id": card.entry.id,
            "name": card.name,
            "set_name": card.set_name,
            "number": card.number,
            "condition": card.condition.value if card.condition else "",
            "market_price": _money(card.market_price),
            "offer_price": _money(card.offer_price),
            "confidence": f"{card.confidence:.2f}",
            "source_text": card.source_text,
        }

    def write(self, result: ProcessingResult, csv_path: Union[str, Path]) -> Path:
        """Write every matched card of ``result`` to ``csv_path``, replacing the file."""
        path = Path(csv_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', newline='', encoding='utf-8') as f:
                writer = csv.DictWriter(f, fieldnames=CSV_HEADER)
                writer.writeheader()
                for card in result.matched:
                    writer.writerow(self.build_row(card))
                f.flush()
                os.fsync(f.fileno())
        except OSError as e:
            raise WriterError(
                f"Failed to write offers CSV: {path}",
                details={"path": str(path), "error": str(e)}
            )

        self.logger.info("Offers CSV written", path=str(path), rows=result.matched_count)
        return path


# Global singleton
csv_writer = OfferCSVWriter()

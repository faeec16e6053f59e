"""Command-line interface for Card Offers - identify cards and quote buy-back offers."""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .catalog import Catalog, catalog_provider, load_catalog
from .core.types import IdentifiedCard, ProcessingResult
from .match.matcher import CatalogMatcher
from .ocr.extract import OCRAnnotation, annotations_from_vision_response
from .process.processor import FragmentProcessor
from .store.writer import csv_writer
from .utils.error_handler import CardOffersError, OCRError
from .utils.log import configure_logging, get_logger

logger = get_logger(__name__)

# Rich console
console = Console()

app = typer.Typer(
    name="card-offers",
    help="Card Offers - identify trading cards from text or OCR output and quote buy-back offers",
    add_completion=False
)


def card_to_dict(card: IdentifiedCard) -> Dict[str, Any]:
    """Response shape for one identified card."""
    return {
        "id": card.id,
        "name": card.name,
        "set": card.set_name,
        "number": card.number,
        "condition": card.condition.value if card.condition else None,
        "marketPrice": card.market_price,
        "ourOffer": card.offer_price,
        "confidence": card.confidence,
        "originalText": card.source_text,
    }


def text_response(result: ProcessingResult) -> Dict[str, Any]:
    return {
        "cards": [card_to_dict(card) for card in result.matched],
        "totalLines": result.total,
        "matched": result.matched_count,
        "unmatched": list(result.unmatched),
        "unmatchedLines": result.unmatched_count,
    }


def images_response(result: ProcessingResult, total_images: int) -> Dict[str, Any]:
    return {
        "cards": [card_to_dict(card) for card in result.matched],
        "totalImages": total_images,
        "processedImages": result.total,
        "matched": result.matched_count,
        "unmatched": list(result.unmatched),
        "unmatchedLines": result.unmatched_count,
    }


def read_ocr_images(data: Any) -> List[List[OCRAnnotation]]:
    """
    Accept a Vision batch response (``{"responses": [...]}``) or a list with
    one entry per image, each a list of annotation records or plain strings.
    """
    if isinstance(data, dict) and "responses" in data:
        return [annotations_from_vision_response(r) for r in data["responses"]]

    if not isinstance(data, list):
        raise OCRError("OCR input must be a list of images or a Vision batch response")

    images = []
    for image in data:
        if not isinstance(image, list):
            raise OCRError("Each image must be a list of annotations", details={"got": type(image).__name__})
        images.append([
            OCRAnnotation(text=item) if isinstance(item, str) else OCRAnnotation.from_vision(item)
            for item in image
        ])
    return images


def _build_processor(catalog_path: Optional[Path], min_score: Optional[int], workers: Optional[int]) -> FragmentProcessor:
    catalog: Catalog = load_catalog(catalog_path) if catalog_path else catalog_provider.current
    return FragmentProcessor(catalog=catalog, matcher=CatalogMatcher(min_score), max_workers=workers)


def _money(value: Optional[float]) -> str:
    return "[yellow]n/a[/yellow]" if value is None else f"${value:,.2f}"


def _render(result: ProcessingResult, title: str) -> None:
    table = Table(title=title)
    table.add_column("#", style="dim")
    table.add_column("Card", style="cyan")
    table.add_column("Set")
    table.add_column("Number")
    table.add_column("Condition")
    table.add_column("Market", justify="right")
    table.add_column("Offer", justify="right", style="green")
    table.add_column("Confidence", justify="right")

    for card in result.matched:
        table.add_row(
            str(card.id),
            card.name,
            card.set_name,
            card.number,
            card.condition.value if card.condition else "[yellow]unknown[/yellow]",
            _money(card.market_price),
            _money(card.offer_price),
            f"{card.confidence:.2f}",
        )
    console.print(table)

    total_market = sum(c.market_price for c in result.matched if c.market_price is not None)
    total_offer = sum(c.offer_price for c in result.matched if c.offer_price is not None)
    console.print(Panel.fit(
        f"Matched: [bold]{result.matched_count}[/bold]   Unmatched: [bold]{result.unmatched_count}[/bold]\n"
        f"Total market value: {_money(total_market)}   Our offer: [bold green]{_money(total_offer)}[/bold green]",
        border_style="blue"
    ))

    for text in result.unmatched:
        console.print(f"[yellow]⚠ No match:[/yellow] {escape(text)}")


def _finish(result: ProcessingResult, response: Dict[str, Any], title: str, as_json: bool, csv_path: Optional[Path]) -> None:
    if csv_path:
        csv_writer.write(result, csv_path)
    if as_json:
        typer.echo(json.dumps(response, indent=2))
    else:
        _render(result, title)


@app.command()
def text(
    source: str = typer.Argument("-", help="File with one card per line, or '-' for stdin"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="Catalog JSON file"),
    min_score: Optional[int] = typer.Option(None, "--min-score", help="Minimum match score"),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help="Worker threads"),
    csv_path: Optional[Path] = typer.Option(None, "--csv", help="Also write offers to this CSV file"),
    as_json: bool = typer.Option(False, "--json", help="Print the response as JSON"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override LOG_LEVEL"),
):
    """Identify cards from typed lines: "Charizard Base Set Near Mint"."""
    configure_logging(level=log_level)

    try:
        raw = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
        processor = _build_processor(catalog_path, min_score, workers)
        result = processor.process_text(raw)
    except (CardOffersError, OSError) as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        logger.error("Text processing failed", error=str(e), error_type=type(e).__name__)
        raise typer.Exit(1)

    _finish(result, text_response(result), "Card List Offer", as_json, csv_path)


@app.command()
def ocr(
    source: Path = typer.Argument(..., help="JSON file with OCR annotations per image"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="Catalog JSON file"),
    min_score: Optional[int] = typer.Option(None, "--min-score", help="Minimum match score"),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help="Worker threads"),
    csv_path: Optional[Path] = typer.Option(None, "--csv", help="Also write offers to this CSV file"),
    as_json: bool = typer.Option(False, "--json", help="Print the response as JSON"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override LOG_LEVEL"),
):
    """Identify cards from OCR provider output, one fragment per image."""
    configure_logging(level=log_level)

    try:
        data = json.loads(source.read_text(encoding="utf-8"))
        images = read_ocr_images(data)
        processor = _build_processor(catalog_path, min_score, workers)
        result = processor.process_ocr(images)
    except json.JSONDecodeError as e:
        console.print(f"[red]❌ Invalid JSON in {source}: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except (CardOffersError, OSError) as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        logger.error("OCR processing failed", error=str(e), error_type=type(e).__name__)
        raise typer.Exit(1)

    _finish(result, images_response(result, len(images)), "Photo Offer", as_json, csv_path)


@app.command()
def catalog(
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="Catalog JSON file"),
):
    """List the catalog entries offers are made against."""
    configure_logging()

    try:
        entries = load_catalog(catalog_path) if catalog_path else catalog_provider.current
    except CardOffersError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Catalog ({len(entries)} entries)")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Set")
    table.add_column("Number")
    table.add_column("Market (NM)", justify="right")
    for entry in entries:
        table.add_row(str(entry.id), entry.name, entry.set_name, entry.number, f"${entry.market_price:,.2f}")
    console.print(table)


def main():
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()

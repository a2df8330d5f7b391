"""Command-line interface for Ayah Cards."""

import logging
import random
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ayah_cards import __version__
from ayah_cards.quran.editions import LANGUAGE_EDITIONS

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool) -> None:
    """Ayah Cards - Turn Quran verse ranges into themed, render-ready cards."""
    from ayah_cards._logging import configure_logging

    configure_logging(level=logging.DEBUG if verbose else logging.WARNING)


@main.command()
@click.argument("surah", type=click.IntRange(1, 114))
@click.argument("start", type=click.IntRange(min=1))
@click.option("--end", "-e", type=int, help="Last ayah (defaults to START)")
@click.option(
    "--language", "-l",
    type=click.Choice(sorted(LANGUAGE_EDITIONS)),
    help="Translation language",
)
@click.option("--capacity", "-c", type=click.IntRange(min=1), help="Max Arabic characters per card")
@click.option("--seed", type=int, help="Seed for the random theme fallback")
@click.option("--output", "-o", type=click.Path(), help="Write cards to this JSON file or directory")
@click.option("--save", "-s", is_flag=True, help="Write cards into the configured output directory")
def cards(
    surah: int,
    start: int,
    end: int | None,
    language: str | None,
    capacity: int | None,
    seed: int | None,
    output: str | None,
    save: bool,
) -> None:
    """Group a verse range into cards and pick their background."""
    from ayah_cards.cards import export_cards, generate_cards
    from ayah_cards.quran.client import QuranAPIError, get_quran_client

    rng = random.Random(seed) if seed is not None else None

    try:
        with console.status("Fetching verses..."):
            card_set = generate_cards(
                surah,
                start,
                end,
                language=language,
                capacity=capacity,
                client=get_quran_client(),
                rng=rng,
            )
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="START")
    except QuranAPIError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        raise SystemExit(1)

    console.print(
        f"[green]✓[/green] {card_set.surah_name}: "
        f"{len(card_set.cards)} card{'s' if len(card_set.cards) != 1 else ''}"
    )

    design = card_set.design
    if design:
        note = " [dim](random, no keywords matched)[/dim]" if design.fallback else ""
        console.print(f"[bold]Theme:[/bold] {design.background_type.value}{note}\n")

    table = Table(title=f"Cards ({card_set.language})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Ayah", style="cyan")
    table.add_column("Chars", style="green", justify="right")
    table.add_column("Translation")

    for i, segment in enumerate(card_set.segments, start=1):
        preview = segment.translation
        if len(preview) > 80:
            preview = preview[:80] + "..."
        table.add_row(str(i), segment.ayah, f"{len(segment.arabic):,}", preview)

    console.print(table)

    if output or save:
        if output:
            target = Path(output)
        else:
            from ayah_cards.config import get_settings

            target = get_settings().output_dir
            target.mkdir(parents=True, exist_ok=True)

        path = export_cards(card_set, target)
        console.print(f"\n[green]✓[/green] Cards saved to {path}")


@main.command()
@click.argument("text")
@click.option("--seed", type=int, help="Seed for the random fallback")
def theme(text: str, seed: int | None) -> None:
    """Show which background a piece of text would get."""
    from ayah_cards.cards.theme import CATEGORY_PRIORITY, classify_theme

    rng = random.Random(seed) if seed is not None else None
    decision = classify_theme(text, rng=rng)

    table = Table(title="Keyword Scores")
    table.add_column("Category", style="cyan")
    table.add_column("Score", style="green", justify="right")

    for category in CATEGORY_PRIORITY:
        table.add_row(category.value, str(decision.scores.get(category, 0)))

    console.print(table)

    note = " [dim](random, no keywords matched)[/dim]" if decision.fallback else ""
    console.print(f"\n[bold]Theme:[/bold] {decision.background_type.value}{note}")


@main.command()
@click.argument("surah", type=click.IntRange(1, 114))
@click.option("--limit", "-n", type=click.IntRange(min=1), default=10, show_default=True)
def preview(surah: int, limit: int) -> None:
    """List the opening ayahs of a surah."""
    from ayah_cards.quran.client import QuranAPIError, get_quran_client
    from ayah_cards.quran.surahs import get_surah

    info = get_surah(surah)
    console.print(f"[bold]{info.number}. {info.name}[/bold] [dim]({info.verse_count} ayahs)[/dim]\n")

    try:
        with console.status("Fetching surah..."):
            verses = get_quran_client().fetch_surah_preview(surah)
    except QuranAPIError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        raise SystemExit(1)

    for number, text in verses[:limit]:
        console.print(f"  [cyan]{number:>3}[/cyan]  {text}")

    if len(verses) > limit:
        console.print(f"  [dim]... {len(verses) - limit} more[/dim]")


@main.command()
def surahs() -> None:
    """List all surahs with their verse counts."""
    from ayah_cards.quran.surahs import SURAHS

    table = Table(title="Surahs")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Ayahs", style="green", justify="right")

    for info in SURAHS:
        table.add_row(str(info.number), info.name, str(info.verse_count))

    console.print(table)


@main.command()
def languages() -> None:
    """List translation languages and their editions."""
    table = Table(title="Translations")
    table.add_column("Language", style="cyan")
    table.add_column("Edition", style="green")

    for language, edition in LANGUAGE_EDITIONS.items():
        table.add_row(language, edition)

    console.print(table)


@main.command()
def visits() -> None:
    """Bump the shared visit counter and show its value."""
    from ayah_cards.counter import hit_counter

    count = hit_counter()
    if count is None:
        console.print("[yellow]Visit counter unavailable[/yellow]")
        return

    console.print(f"[bold]Visits:[/bold] {count:,}")


if __name__ == "__main__":
    main()

"""Command-line interface for Harmonic Tuner.

Provides commands for:
- ratio: Show the integer chord ratio of a set of notes
- frequencies: Show per-note ratios and frequencies
- modes: List the available tuning modes
"""

from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from .core import BaseReference, UnknownTuningModeError, note_name, parse_note_name
from .core.constants import DEFAULT_BASE_NOTE
from .tuning import TuningCoordinator, TuningMode

app = typer.Typer(
    name="harmonic-tuner",
    help="Just-intonation frequencies and chord ratios for sounding notes",
    rich_markup_mode="markdown",
)
console = Console()

MODE_DESCRIPTIONS = {
    TuningMode.EQUAL: "12-tone equal temperament",
    TuningMode.JUST: "5-limit just intonation measured from the base note",
    TuningMode.AUTO: "Each note tuned to its harmonically nearest neighbour",
}


def _parse_notes(notes: List[str]) -> List[int]:
    """Parse note arguments, exiting with an error on bad input."""
    try:
        return [parse_note_name(n) for n in notes]
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def _build_coordinator(
    mode: str, base_note: str, base_frequency: Optional[float]
) -> TuningCoordinator:
    """Create a coordinator from CLI options, exiting on invalid values."""
    note = _parse_notes([base_note])[0]
    if base_frequency is None:
        base_frequency = BaseReference.from_note(note).frequency

    try:
        return TuningCoordinator(base_frequency=base_frequency, base_note=note, mode=mode)
    except UnknownTuningModeError as e:
        console.print(f"[red]Error: {e}. Valid: {', '.join(TuningMode.names())}[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def ratio(
    notes: List[str] = typer.Argument(..., help="Notes as numbers or names, e.g. 60 64 67 or C4 E4 G4"),
    mode: str = typer.Option("auto", "-m", "--mode", help="Tuning mode: equal/just/auto"),
    base_note: str = typer.Option(
        str(DEFAULT_BASE_NOTE), "-b", "--base-note", help="Base note (ratio 1/1)"
    ),
    base_frequency: Optional[float] = typer.Option(
        None, "-f", "--base-frequency", help="Base frequency in Hz (default: equal-tempered pitch of the base note)"
    ),
):
    """Show the integer chord ratio of a set of notes.

    **Examples:**

        harmonic-tuner ratio C4 E4 G4

        harmonic-tuner ratio 60 63 67 --mode just
    """
    active = _parse_notes(notes)
    coordinator = _build_coordinator(mode, base_note, base_frequency)

    display = coordinator.ratio_display_for(active)
    if display:
        console.print(display)
    else:
        console.print("[dim](no ratio)[/dim]")


@app.command()
def frequencies(
    notes: List[str] = typer.Argument(..., help="Notes as numbers or names"),
    mode: str = typer.Option("auto", "-m", "--mode", help="Tuning mode: equal/just/auto"),
    base_note: str = typer.Option(
        str(DEFAULT_BASE_NOTE), "-b", "--base-note", help="Base note (ratio 1/1)"
    ),
    base_frequency: Optional[float] = typer.Option(
        None, "-f", "--base-frequency", help="Base frequency in Hz (default: equal-tempered pitch of the base note)"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
):
    """Show the tuned frequency of each note.

    **Examples:**

        harmonic-tuner frequencies C4 E4 G4 Bb4

        harmonic-tuner frequencies 57 60 64 --mode just --base-frequency 440 -b 69
    """
    active = _parse_notes(notes)
    coordinator = _build_coordinator(mode, base_note, base_frequency)

    freqs = coordinator.frequencies_for(active)
    display = coordinator.ratio_display_for(active)
    strategy = coordinator.strategy

    if json_output:
        result = {
            "mode": coordinator.mode.value,
            "base_note": coordinator.reference.note,
            "base_frequency": coordinator.reference.frequency,
            "notes": [
                {
                    "note": note,
                    "name": note_name(note),
                    "ratio": strategy.ratio(note),
                    "frequency": freq,
                }
                for note, freq in freqs.items()
            ],
            "ratio_display": display,
        }
        console.print_json(data=result)
        return

    _show_frequencies_table(freqs, strategy)
    if display:
        console.print(f"Chord ratio: [bold]{display}[/bold]")


@app.command()
def modes():
    """List the available tuning modes."""
    table = Table(title="Tuning Modes")
    table.add_column("Mode", style="cyan")
    table.add_column("Description", style="green")

    for mode in TuningMode:
        table.add_row(mode.value, MODE_DESCRIPTIONS[mode])

    console.print(table)


def _show_frequencies_table(freqs, strategy):
    """Display note frequencies in a table."""
    table = Table(title=f"Frequencies ({strategy.mode.value})")
    table.add_column("Note", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Ratio", style="yellow")
    table.add_column("Frequency (Hz)", style="magenta")

    for note, freq in freqs.items():
        table.add_row(
            str(note),
            note_name(note),
            f"{strategy.ratio(note):.6f}",
            f"{freq:.2f}",
        )

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()

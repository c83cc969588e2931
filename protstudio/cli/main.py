"""
ProtStudio Command Line Interface.

Thin presentation layer over the analysis engine, built with Click and
Rich. It is a caller of the engine like any other: it reads sequences and
datasets, runs :func:`protstudio.analyze` and renders the reports.

Usage:
    protstudio analyze MQIFVKTLTGKTITLEVEPSDTIENVKAKIQDKEGIPPDQQRLIFAGKQLEDGRTLSDYNIQKESTLHLVLRLRGG
    protstudio residue C H Z
    protstudio dataset proteins.fasta -o reports.json
    protstudio samples --analyze
    protstudio motifs
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .. import __version__
from ..analysis import AnalysisConfig, SequenceAnalyzer
from ..core.models import AnalysisReport
from ..core.residues import describe_residue
from ..core.sequence import unrecognized_residues
from ..datasets import SAMPLE_DATASET, DatasetError, load_dataset
from ..features.motifs import DEFAULT_MOTIFS

# Initialize rich console for pretty output
console = Console()

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Route log records through rich; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def report_table(report: AnalysisReport, title: Optional[str] = None) -> Table:
    """Render one analysis report as a two-column table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    comp = report.composition
    table.add_row("Length", str(report.length))
    table.add_row("Hydrophobic %", f"{comp.hydrophobic_pct}")
    table.add_row("Polar %", f"{comp.polar_pct}")
    table.add_row("Positive %", f"{comp.positive_pct}")
    table.add_row("Negative %", f"{comp.negative_pct}")
    table.add_row("Special %", f"{comp.special_pct}")
    table.add_row("Net charge (pH 7, approx.)", f"{report.net_charge}")
    table.add_row("Aromaticity %", f"{report.aromaticity_pct}")
    table.add_row("Aliphatic index", f"{report.aliphatic_index}")
    table.add_row("Molecular weight (Da)", str(report.molecular_weight_da))
    table.add_row("GRAVY", f"{report.gravy}")
    table.add_row("Longest hydrophobic run", str(report.longest_hydrophobic_run))
    table.add_row("Motifs", "\n".join(report.motifs) if report.motifs else "None detected")
    return table


@click.group()
@click.version_option(version=__version__, prog_name="ProtStudio")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, verbose: bool):
    """
    ProtStudio: composition, physicochemical indices and motifs for protein sequences.

    Run 'protstudio COMMAND --help' for command-specific help.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(verbose)


@cli.command("analyze")
@click.argument("sequence")
@click.option(
    "--clean",
    is_flag=True,
    help="Drop characters outside the 20 standard residues before analysis",
)
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
def analyze_cmd(sequence: str, clean: bool, as_json: bool):
    """
    Analyze a single protein SEQUENCE.

    \b
    Examples:
        protstudio analyze MKTAYIAKQR
        protstudio analyze "mkt ayi akq" --clean --json
    """
    if not clean:
        unknown = unrecognized_residues(sequence)
        if unknown:
            logger.warning(
                f"Counting non-standard characters {sorted(unknown)} as special; "
                "use --clean to drop them"
            )

    analyzer = SequenceAnalyzer(AnalysisConfig(clean_input=clean))
    report = analyzer.analyze(sequence)

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
        return

    console.print(report_table(report, title="Sequence statistics"))


@cli.command("residue")
@click.argument("codes", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print the descriptors as JSON")
def residue_cmd(codes: tuple, as_json: bool):
    """
    Describe one or more residue CODES.

    Unknown codes are reported with the fallback descriptor.
    """
    if as_json:
        click.echo(json.dumps([describe_residue(c).to_dict() for c in codes], indent=2))
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Code", style="bold")
    table.add_column("Name")
    table.add_column("Class")
    table.add_column("Note")

    for code in codes:
        info = describe_residue(code)
        table.add_row(info.code, info.name, info.residue_class.value, info.note or "-")

    console.print(table)


@cli.command("dataset")
@click.argument("input_file", type=click.Path(exists=True))
@click.option(
    "--output", "-o",
    type=click.Path(),
    default=None,
    help="Write all reports to this JSON file",
)
def dataset_cmd(input_file: str, output: Optional[str]):
    """
    Analyze every protein of a FASTA or JSON dataset.

    INPUT_FILE ending in .json is read as a JSON array of proteins; any other
    file is read as FASTA.
    """
    input_path = Path(input_file)

    try:
        records = load_dataset(input_path)
    except DatasetError as e:
        console.print(f"[red]✗ Error loading dataset:[/red] {e}")
        sys.exit(1)

    console.print(f"[green]✓[/green] Loaded {len(records)} protein(s) from {input_path}")

    analyzer = SequenceAnalyzer()
    results = []

    summary = Table(show_header=True, header_style="bold")
    summary.add_column("ID")
    summary.add_column("Name")
    summary.add_column("Length", justify="right")
    summary.add_column("MW (Da)", justify="right")
    summary.add_column("Net charge", justify="right")
    summary.add_column("GRAVY", justify="right")
    summary.add_column("Motifs", justify="right")

    for record in records:
        logger.debug(f"Analyzing {record.id} ({record.length} residues)")
        report = analyzer.analyze(record.sequence)
        results.append({
            "id": record.id,
            "name": record.name,
            "report": report.to_dict(),
        })
        summary.add_row(
            record.id,
            record.name,
            str(report.length),
            str(report.molecular_weight_da),
            f"{report.net_charge}",
            f"{report.gravy}",
            str(len(report.motifs)),
        )

    console.print(summary)

    if output:
        output_path = Path(output)
        with open(output_path, "w") as f:
            json.dump(results, f, indent=2)
        console.print(f"\n[green]✓[/green] Reports saved to: {output_path}")


@cli.command("samples")
@click.option("--analyze", "run_analysis", is_flag=True, help="Show full reports")
def samples_cmd(run_analysis: bool):
    """List the built-in sample proteins."""
    table = Table(title="Sample dataset", show_header=True, header_style="bold cyan")
    table.add_column("ID")
    table.add_column("Name", style="bold")
    table.add_column("Organism")
    table.add_column("Length", justify="right")
    table.add_column("Tags")

    for record in SAMPLE_DATASET:
        table.add_row(
            record.id,
            record.name,
            record.organism or "-",
            str(record.length),
            ", ".join(record.tags),
        )
    console.print(table)

    if run_analysis:
        analyzer = SequenceAnalyzer()
        for record in SAMPLE_DATASET:
            console.print(report_table(analyzer.analyze(record.sequence), title=record.name))


@cli.command("motifs")
def motifs_cmd():
    """List the registered motif patterns."""
    table = Table(title="Registered motifs", show_header=True, header_style="bold cyan")
    table.add_column("Label", style="bold")
    table.add_column("Pattern")
    table.add_column("Description")

    for motif in DEFAULT_MOTIFS:
        table.add_row(motif.label, motif.pattern, motif.description or "-")

    console.print(table)


def main():
    """Main entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()

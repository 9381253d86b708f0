"""GOF plot command: render observation/prediction tables to an image file."""

import re
from pathlib import Path
from typing import Optional

import polars as pl
import typer

from ..core.constants import OUTPUT_TYPE_COL
from ..plotting.gof import create_gof_plot, save_gof_plot
from ..plotting.theme import DEFAULT_TEXTSIZE

OUTPUT_SUFFIX: str = "_gof.png"


def read_table(path: Path) -> pl.DataFrame:
    """Read a CSV or parquet table, chosen by file suffix."""
    suffix = path.suffix.lower()
    if suffix == ".parquet":
        return pl.read_parquet(str(path))
    if suffix in (".csv", ".txt"):
        return pl.read_csv(str(path))
    raise ValueError(f"Unsupported table format '{path.suffix}' (expected .csv or .parquet)")


def default_output_path(name: str) -> Path:
    """``<slug>_gof.png`` in the working directory, e.g. ``alivevolume_gof.png``."""
    slug = re.sub(r"[^a-z0-9]+", "-", name.strip().lower()).strip("-")
    return Path(f"{slug or 'plot'}{OUTPUT_SUFFIX}")


def render_gof(
    observations_path: Path,
    predictions_path: Optional[Path] = None,
    output_path: Optional[Path] = None,
    title: Optional[str] = None,
    textsize: float = DEFAULT_TEXTSIZE,
    dpi: int = 150,
    strict: bool = True,
) -> Path:
    """
    Build a GOF plot from files and save it.

    Args:
        observations_path: CSV/parquet observation table
        predictions_path: Optional CSV/parquet prediction table
        output_path: Image path (defaults to <title or output type>_gof.png)
        title: Plot title; defaults to the OutputType value
        textsize: Font size of every text element
        dpi: Resolution of raster outputs
        strict: Fail on unknown output types

    Returns:
        Path to the saved image
    """
    typer.echo(f"Loading observations from {observations_path}...")
    observations = read_table(Path(observations_path))

    predictions = None
    if predictions_path is not None:
        typer.echo(f"Loading predictions from {predictions_path}...")
        predictions = read_table(Path(predictions_path))

    fig = create_gof_plot(
        observations, predictions, title=title, textsize=textsize, strict=strict
    )

    if output_path is None:
        name = title if title is not None else str(observations[OUTPUT_TYPE_COL][0])
        output_path = default_output_path(name)

    saved = save_gof_plot(fig, output_path, dpi=dpi)
    typer.echo(f"✓ Plot saved to {saved}")
    return saved


def gof_command(
    observations: Path = typer.Argument(
        ...,
        exists=True,
        readable=True,
        help="Observation table (.csv or .parquet)",
    ),
    predictions: Optional[Path] = typer.Option(
        None,
        "--predictions", "-p",
        exists=True,
        readable=True,
        help="Prediction table with AgeYr, Pred and Variance columns",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output", "-o",
        help="Output image path (defaults to <title or output type>_gof.png)",
    ),
    title: Optional[str] = typer.Option(
        None,
        "--title", "-t",
        help="Plot title (defaults to the OutputType value)",
    ),
    textsize: float = typer.Option(DEFAULT_TEXTSIZE, "--textsize", help="Font size"),
    dpi: int = typer.Option(150, "--dpi", help="Resolution of raster outputs"),
    lenient: bool = typer.Option(
        False,
        "--lenient",
        help="Leave the y label unset for unknown output types instead of failing",
    ),
) -> None:
    """Plot observed stand growth against age, with optional predictions.

    Observations need OutputType, StratumAgeYr, timeSinceInitialDateYr and
    Estimate columns, plus TotalVariance for confidence bands. All rows must
    share a single OutputType.
    """
    try:
        render_gof(
            observations,
            predictions_path=predictions,
            output_path=output,
            title=title,
            textsize=textsize,
            dpi=dpi,
            strict=not lenient,
        )
    except Exception as e:
        typer.echo(f"Error generating plot: {e}", err=True)
        raise typer.Exit(1)

"""CLI entry point for graphlayout."""

import logging
import sys

import click

from graphlayout import layout_json
from graphlayout.errors import LayoutError


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option(
    "--algorithm",
    "-a",
    "algorithm",
    type=click.Choice(["spring", "stress", "hierarchical"]),
    default="spring",
    help="Layout algorithm",
)
@click.option("--seed", "-s", "seed", type=int, default=None, help="Seed for the random initial placement")
@click.option(
    "--ordering",
    type=click.Choice(["optimal", "barycentric"]),
    default="optimal",
    help="Vertex ordering for hierarchical layout",
)
@click.option(
    "--coord",
    type=click.Choice(["optimal", "packed"]),
    default="optimal",
    help="Coordinate assignment for hierarchical layout",
)
@click.option("--xsep", type=float, default=3.0, help="Minimum horizontal gap between vertices")
@click.option("--ysep", type=float, default=20.0, help="Vertical distance between layers")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", is_flag=True, help="Log progress to stderr")
def main(
    input: str | None,
    algorithm: str,
    seed: int | None,
    ordering: str,
    coord: str,
    xsep: float,
    ysep: float,
    output: str | None,
    verbose: bool,
) -> None:
    """Compute vertex positions for a graph given as a JSON adjacency list."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        rendered = layout_json(
            text,
            algorithm=algorithm,
            seed=seed,
            ordering=ordering,
            coord=coord,
            xsep=xsep,
            ysep=ysep,
        )
    except LayoutError as e:
        click.echo(f"layout error: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"input error: {e}", err=True)
        sys.exit(1)

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered)


if __name__ == "__main__":
    main()

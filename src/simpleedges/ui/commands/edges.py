import typer
from pathlib import Path
from typing import Optional
from ...exporters.interfaces import ExporterProto
from ...exporters.table_exporter import EdgeTableExporter, TraceExporter
from ...graph import load_edgelist
from ...iterators import EdgeIterator


app = typer.Typer(help="Edge iteration")


def read_graph(path: Path, directed: bool = False, nv: int = 0):
    try:
        return load_edgelist(path, directed=directed, nv=nv)
    except OSError as e:
        raise typer.BadParameter(f"cannot read {path}: {e.strerror or e}")
    except (TypeError, ValueError) as e:
        raise typer.BadParameter(f"malformed edge list {path}: {e}")


def _edges(ctx: typer.Context) -> EdgeIterator:
    return EdgeIterator(ctx.obj["graph"])


@app.command("list")
def list_edges(
    ctx: typer.Context,
    tablefmt: str = typer.Option("simple", help="tabulate table format"),
) -> None:
    """Print every edge in canonical order"""
    exporter: ExporterProto = EdgeTableExporter(tablefmt=tablefmt)
    typer.echo(exporter(_edges(ctx)))


@app.command()
def count(ctx: typer.Context) -> None:
    """Print the number of edges"""
    typer.echo(len(_edges(ctx)))


@app.command()
def trace(
    ctx: typer.Context,
    limit: Optional[int] = typer.Option(None, min=0, help="Stop after this many steps"),
    tablefmt: str = typer.Option("simple", help="tabulate table format"),
) -> None:
    """Show each traversal step with its state"""
    exporter: ExporterProto = TraceExporter(tablefmt=tablefmt, limit=limit)
    typer.echo(exporter(_edges(ctx)))


@app.command()
def has(ctx: typer.Context, src: int, dst: int) -> None:
    """Check whether SRC-DST is an edge"""
    if (src, dst) in _edges(ctx):
        typer.echo("yes")
    else:
        typer.echo("no")
        raise typer.Exit(code=1)


@app.command()
def compare(ctx: typer.Context, other: Path = typer.Argument(..., help="Second edge list file")) -> None:
    """Compare the edges with those of another edge list"""
    cfg = ctx.obj
    theirs = EdgeIterator(read_graph(other, cfg["directed"], cfg["nv"]))
    if _edges(ctx) == theirs:
        typer.echo("equal")
    else:
        typer.echo("different")
        raise typer.Exit(code=1)

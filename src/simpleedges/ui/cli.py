import logging
import typer
from pathlib import Path
from .commands import edges
from .commands.edges import read_graph


app = typer.Typer(help="simpleedges — canonical edge iteration over adjacency graphs")
app.add_typer(edges.app, name="edges", help="Inspect the edges of a graph")


@app.callback()
def main(
    ctx: typer.Context,
    path: Path = typer.Option(..., "--path", help="Edge list file, one 'u v' pair per line"),
    directed: bool = typer.Option(False, "--directed", help="Treat pairs as directed edges"),
    nv: int = typer.Option(0, "--nv", min=0, help="Minimum number of vertices"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"path": path, "directed": directed, "nv": nv, "graph": read_graph(path, directed, nv)}

"""godepgraph CLI - builds the package graph and prints it as DOT."""

import os

import click
from rich.table import Table

from godepgraph import __version__
from godepgraph.config import GraphConfig, load_runtime_config
from godepgraph.graph import DependencyGraphBuilder, GraphVisualizer
from godepgraph.resolver import GoListResolver, StaticResolver
from godepgraph.utils.error_handler import handle_exceptions
from godepgraph.utils.ui import console, print_header


def print_stats(visualizer: GraphVisualizer) -> None:
    """Print node and edge counts of the last render to stderr."""
    print_header("GRAPH SUMMARY")

    table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    table.add_column("Kind", style="bold")
    table.add_column("Nodes", justify="right")

    for kind, style in (("root", "root"), ("stdlib", "stdlib"), ("cgo", "cgo"), ("default", "dim")):
        table.add_row(f"[{style}]{kind}[/{style}]", str(visualizer.kinds.get(kind, 0)))

    console.print(table)
    console.print(f"Edges: {visualizer.edge_count}")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="godepgraph")
@click.argument("packages", nargs=-1, required=True)
@click.option("-s", "ignore_stdlib", is_flag=True, help="ignore packages in the Go standard library")
@click.option("-d", "delve_goroot", is_flag=True, help="show dependencies of packages in the Go standard library")
@click.option("-p", "ignore_prefixes", default="", help="a comma-separated list of prefixes to ignore")
@click.option("-i", "ignore_packages", default="", help="a comma-separated list of packages to ignore")
@click.option("--tags", default="", help="a comma-separated list of build tags to consider satisfied during the build")
@click.option("--horizontal", is_flag=True, help="lay out the dependency graph horizontally instead of vertically")
@click.option("-t", "include_tests", is_flag=True, help="include test packages")
@click.option(
    "-V",
    "unvendor",
    is_flag=True,
    help="strip vendor prefixes from package import names (can help with dangling imports)",
)
@click.option(
    "--manifest",
    type=click.Path(exists=True, dir_okay=False),
    help="resolve packages from a YAML manifest instead of running go list",
)
@click.option("--stats", is_flag=True, help="print a node and edge summary to stderr")
@handle_exceptions
def main(packages, ignore_stdlib, delve_goroot, ignore_prefixes, ignore_packages, tags, horizontal,
         include_tests, unvendor, manifest, stats):
    """Print the import graph of PACKAGES in Graphviz DOT format.

    \b
    EXAMPLES:
      godepgraph github.com/example/app | dot -Tpng -o deps.png
      godepgraph -s -p golang.org/x github.com/example/app
      godepgraph -t -V --horizontal --tags integration .

    Exits non-zero without printing a graph if any package fails to resolve.
    """
    cwd = os.getcwd()
    runtime = load_runtime_config(cwd)

    config = GraphConfig.from_options(
        packages,
        ignore_prefixes=ignore_prefixes,
        ignore_packages=ignore_packages,
        tags=tags,
        runtime=runtime,
        ignore_stdlib=ignore_stdlib,
        delve_goroot=delve_goroot,
        horizontal=horizontal,
        include_tests=include_tests,
        unvendor=unvendor,
    )

    if manifest:
        resolver = StaticResolver.from_yaml(manifest)
    else:
        resolver = GoListResolver(
            build_tags=config.build_tags,
            go_binary=runtime["resolver"]["go_binary"],
            timeout=runtime["resolver"]["timeout"],
        )

    packages_map = DependencyGraphBuilder(resolver, config).build(cwd)

    visualizer = GraphVisualizer(config)
    click.echo(visualizer.generate_dot(packages_map), nl=False)

    if stats:
        print_stats(visualizer)


if __name__ == "__main__":
    main()

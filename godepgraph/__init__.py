"""godepgraph - render the transitive import graph of Go packages as DOT."""

__version__ = "0.1.0"

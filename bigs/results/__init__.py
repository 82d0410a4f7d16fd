"""Output construction, validation, persistence and rendering."""

from bigs.results.render import format_output, load_biadjacency, save_biadjacency
from bigs.results.run_id import generate_run_id
from bigs.results.schema import (
    build_output,
    graph_from_output,
    graph_to_dict,
    load_output,
    validate_output,
    write_output,
)

__all__ = [
    "build_output",
    "format_output",
    "generate_run_id",
    "graph_from_output",
    "graph_to_dict",
    "load_biadjacency",
    "load_output",
    "save_biadjacency",
    "validate_output",
    "write_output",
]

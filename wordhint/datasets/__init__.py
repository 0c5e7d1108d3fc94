from .validator import validate_frequency_list, pretty_summary
from .io import load_catalog, read_lines, write_lines

__all__ = ["validate_frequency_list", "pretty_summary", "load_catalog", "read_lines", "write_lines"]

from .validator import validate_dictionary, pretty_summary
from .io import read_lines, write_lines, load_words

__all__ = ["validate_dictionary", "pretty_summary", "read_lines", "write_lines", "load_words"]

"""Regular expressions compiled to DFAs and simultaneous finite automata for chunked matching."""

__version__ = "0.1.0"
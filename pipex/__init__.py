"""Run command pipelines from an input file or here-document to an output file."""

__version__ = "1.0.0"
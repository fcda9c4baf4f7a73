"""Process pipelines, child pipes and two small parsers."""

__version__ = "0.1.0"
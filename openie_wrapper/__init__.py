"""
openie-wrapper - run Stanford OpenIE from Python and the command line.

This library provides:
- Invocation of the Stanford OpenIE engine over a batch of text files
- Parsing of its ollie-format output into (subject, relation, object) triples
- Optional Graphviz rendering of the extracted relations
- YAML configuration of engine, Graphviz and workspace locations

Quick Start:
    >>> from openie_wrapper import extract
    >>>
    >>> for subject, relation, obj in extract(["text.txt"]):
    ...     print(subject, relation, obj)

For CLI usage:
    $ openie-wrapper -f text.txt -f text2.txt
    $ openie-wrapper -f text.txt --graphviz --verbose
"""

from .__version__ import (
    __version__,
    __version_info__,
    __title__,
    __description__,
    __author__,
    __license__,
)

# Engine and graph modules are imported on first access
def __getattr__(name):
    """Lazy import for the engine and graph modules."""
    if name in ["ExtractionRunner", "Extraction", "parse_ollie_line", "parse_ollie_output"]:
        from .engine import (
            ExtractionRunner,
            Extraction,
            parse_ollie_line,
            parse_ollie_output,
        )
        globals().update({
            "ExtractionRunner": ExtractionRunner,
            "Extraction": Extraction,
            "parse_ollie_line": parse_ollie_line,
            "parse_ollie_output": parse_ollie_output,
        })
        return globals()[name]

    elif name in ["RelationGraph", "render_graph"]:
        from .graph import RelationGraph, render_graph
        globals().update({
            "RelationGraph": RelationGraph,
            "render_graph": render_graph,
        })
        return globals()[name]

    elif name in ["OpenIEError", "EngineNotFoundError", "EngineError", "OutputParseError",
                  "GraphRenderError", "ConfigurationError", "ValidationError"]:
        from .exceptions import (
            OpenIEError,
            EngineNotFoundError,
            EngineError,
            OutputParseError,
            GraphRenderError,
            ConfigurationError,
            ValidationError,
        )
        globals().update({
            "OpenIEError": OpenIEError,
            "EngineNotFoundError": EngineNotFoundError,
            "EngineError": EngineError,
            "OutputParseError": OutputParseError,
            "GraphRenderError": GraphRenderError,
            "ConfigurationError": ConfigurationError,
            "ValidationError": ValidationError,
        })
        return globals()[name]

    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")

__all__ = [
    # Version
    "__version__",
    "__version_info__",
    "__title__",
    "__description__",
    "__author__",
    "__license__",

    # Engine
    "ExtractionRunner",
    "Extraction",
    "parse_ollie_line",
    "parse_ollie_output",

    # Graph
    "RelationGraph",
    "render_graph",

    # Exceptions
    "OpenIEError",
    "EngineNotFoundError",
    "EngineError",
    "OutputParseError",
    "GraphRenderError",
    "ConfigurationError",
    "ValidationError",

    # Convenience functions
    "extract",
]


def extract(input_files=None, verbose: bool = False, graphviz: bool = False,
            config_file: str = None, **overrides):
    """
    Convenience function to run one extraction.

    Args:
        input_files: Text files to extract from (default: samples.txt)
        verbose: Echo engine output while it runs
        graphviz: Render the result to out.dot / out.png in the run workspace
        config_file: Path to YAML configuration file
        **overrides: Config sections overriding the file, e.g.
            engine={"home": "/opt/stanford-openie"}

    Returns:
        List of Extraction triples

    Example:
        >>> triples = extract(["text.txt"], engine={"heap": "2g"})
        >>> print(f"Found {len(triples)} relations")
    """
    from .cli.config import load_config
    from .engine import ExtractionRunner

    config = load_config(config_file) if config_file else {}
    for section, values in overrides.items():
        existing = config.get(section) or {}
        config[section] = {**existing, **values}

    runner = ExtractionRunner(input_files, verbose=verbose, render_graph=graphviz, config=config)
    return runner.run()

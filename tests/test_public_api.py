"""
Test the public API to ensure clean imports and usage.
"""

import openie_wrapper


def test_imports():
    from openie_wrapper import (
        __version__,
        ExtractionRunner,
        Extraction,
        parse_ollie_output,
        RelationGraph,
        render_graph,
        extract,
    )
    assert __version__
    assert callable(extract)
    assert ExtractionRunner.__name__ == "ExtractionRunner"


def test_exception_hierarchy():
    from openie_wrapper import (
        OpenIEError,
        EngineNotFoundError,
        EngineError,
        OutputParseError,
        GraphRenderError,
        ConfigurationError,
        ValidationError,
    )
    for exc in (EngineNotFoundError, EngineError, OutputParseError,
                GraphRenderError, ConfigurationError, ValidationError):
        assert issubclass(exc, OpenIEError)


def test_unknown_attribute():
    try:
        openie_wrapper.no_such_name
    except AttributeError as e:
        assert "no_such_name" in str(e)
    else:
        raise AssertionError("expected AttributeError")


def test_extract(engine_config, tmp_path):
    config_file = tmp_path / "c.yaml"
    config_file.write_text(f"engine:\n  java_bin: {engine_config['engine']['java_bin']}\n")

    triples = openie_wrapper.extract(
        ["text.txt"],
        config_file=str(config_file),
        engine={"home": engine_config["engine"]["home"]},
        workspace=engine_config["workspace"],
    )
    assert [t.subject for t in triples] == ["Barack Obama", "Barack Obama"]

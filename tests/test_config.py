"""Test the configuration module functionality."""

from tracegraph.config import TRACE_CONFIG, TraceFormatConfig


def test_trace_format_config_defaults():
    config = TraceFormatConfig()

    assert config.record_separator == ","
    assert config.path_separator == "-"
    assert config.latency_attr == "latency"
    assert config.no_trace_text == "NO SUCH TRACE"


def test_split_path():
    config = TraceFormatConfig()

    assert config.split_path("A-B-C") == ["A", "B", "C"]
    assert config.split_path(" A - B ") == ["A", "B"]
    assert config.split_path("A") == ["A"]
    assert config.split_path("") == []
    assert config.split_path("--") == []


def test_split_path_custom_separator():
    config = TraceFormatConfig(path_separator=">")
    assert config.split_path("A>B") == ["A", "B"]


def test_global_config_instance():
    assert isinstance(TRACE_CONFIG, TraceFormatConfig)
    assert TRACE_CONFIG.latency_attr == "latency"

import json

import pytest
from pydantic import ValidationError

from .exceptions import UsageError
from .options import InvocationConfig, StubOptions, format_usage, parse_arguments


# --- Tests for parse_arguments ---

def test_parse_input_only():
    config = parse_arguments(["-i", "exports.txt"])
    assert config == InvocationConfig(input_path="exports.txt", compile=False, library_name=None)


def test_parse_input_and_compile():
    config = parse_arguments(["-i", "exports.txt", "-c=stubs"])
    assert config.input_path == "exports.txt"
    assert config.compile is True
    assert config.library_name == "stubs"


def test_parse_compile_before_input():
    config = parse_arguments(["-c=stubs", "-i", "exports.txt"])
    assert config.compile is True
    assert config.library_name == "stubs"
    assert config.input_path == "exports.txt"


def test_parse_last_compile_flag_wins():
    config = parse_arguments(["-c=first", "-i", "a.txt", "-c=second"])
    assert config.library_name == "second"


def test_parse_empty_arguments_shows_usage_only():
    with pytest.raises(UsageError) as excinfo:
        parse_arguments([])
    assert excinfo.value.message == ""


@pytest.mark.parametrize("flag", ["-x", "--input", "exports.txt", "-c"])
def test_parse_unknown_option(flag):
    with pytest.raises(UsageError) as excinfo:
        parse_arguments([flag])
    assert excinfo.value.message == f"Unknown option: {flag}"


def test_parse_unknown_option_after_valid_ones():
    with pytest.raises(UsageError) as excinfo:
        parse_arguments(["-i", "exports.txt", "-x"])
    assert excinfo.value.message == "Unknown option: -x"


def test_parse_missing_input_value():
    with pytest.raises(UsageError) as excinfo:
        parse_arguments(["-c=stubs", "-i"])
    assert excinfo.value.message == "Missing argument for -i."


def test_parse_input_required():
    with pytest.raises(UsageError) as excinfo:
        parse_arguments(["-c=stubs"])
    assert excinfo.value.message == "Input file is required."


def test_parse_empty_input_value_is_required_error():
    with pytest.raises(UsageError) as excinfo:
        parse_arguments(["-i", ""])
    assert excinfo.value.message == "Input file is required."


def test_invocation_config_is_frozen():
    config = parse_arguments(["-i", "exports.txt"])
    with pytest.raises(AttributeError):
        config.input_path = "other.txt"


def test_format_usage():
    usage = format_usage("export-stubs")
    lines = usage.splitlines()
    assert lines[0] == "Usage:"
    assert lines[1] == "export-stubs -i input.txt -c=output.dll"
    assert "  -i    Specify the input file containing export names." in lines
    assert lines[-1] == "  export-stubs -i input.txt -c=output.dll"


# --- Tests for StubOptions ---

def test_default_options():
    options = StubOptions()
    assert options.compiler == "gcc"
    assert options.compiler_flags == ["-shared", "-s", "-O3"]
    assert options.library_filename("stubs") == "stubs.dll"
    assert options.cleanup_temp is False
    assert options.abort_on_generation_failure is False


def test_options_reject_unknown_fields():
    with pytest.raises(ValidationError):
        StubOptions(unknown_field=True)


def test_options_reject_bad_suffix():
    with pytest.raises(ValidationError):
        StubOptions(library_suffix="so")


def test_options_validate_assignment():
    options = StubOptions()
    with pytest.raises(ValidationError):
        options.compiler = ""


def test_options_from_json(tmp_path):
    config_file = tmp_path / "options.json"
    config_file.write_text(
        json.dumps({"compiler": "x86_64-w64-mingw32-gcc", "library_suffix": ".so"}),
        encoding="utf-8",
    )
    options = StubOptions.from_file(config_file)
    assert options.compiler == "x86_64-w64-mingw32-gcc"
    assert options.library_filename("stubs") == "stubs.so"


def test_options_from_yaml(tmp_path):
    pytest.importorskip("yaml")
    config_file = tmp_path / "options.yaml"
    config_file.write_text("cleanup_temp: true\ncompiler_flags: [-shared]\n", encoding="utf-8")
    options = StubOptions.from_file(config_file)
    assert options.cleanup_temp is True
    assert options.compiler_flags == ["-shared"]


def test_options_from_invalid_json(tmp_path):
    config_file = tmp_path / "options.json"
    config_file.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        StubOptions.from_json(config_file)


def test_options_round_trip_dict():
    options = StubOptions(temp_prefix="gen_")
    assert StubOptions.from_dict(options.to_dict()) == options

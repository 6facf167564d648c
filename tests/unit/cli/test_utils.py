"""Unit tests for CLI utilities."""

import pytest

from tfscope.cli.utils import echo_error, read_source, resolve_node_id
from tfscope.core.exceptions import NodeNotFoundError, SourceNotFoundError
from tfscope.pipeline import run_pipeline


class TestReadSource:
    def test_reads_file(self, tmp_path, example_tf):
        f = tmp_path / "main.tf"
        f.write_text(example_tf)
        assert read_source(str(f)) == example_tf

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceNotFoundError) as exc:
            read_source(str(tmp_path / "missing.tf"))
        assert exc.value.code == "SOURCE_NOT_FOUND"
        assert "missing.tf" in exc.value.message

    def test_directory_is_not_a_source(self, tmp_path):
        with pytest.raises(SourceNotFoundError):
            read_source(str(tmp_path))


class TestResolveNodeId:
    @pytest.fixture
    def result(self, network_tf):
        return run_pipeline(network_tf)

    def test_exact(self, result):
        assert resolve_node_id(result, "aws_vpc.main") == "aws_vpc.main"

    def test_module_shorthand(self, result):
        assert resolve_node_id(result, "dns") == "module.dns"

    def test_unique_substring(self, result):
        assert resolve_node_id(result, "hook") == "null_resource.hook"

    def test_ambiguous_substring(self, result):
        # Matches aws_vpc.main, aws_subnet.a and aws_instance.web
        with pytest.raises(NodeNotFoundError):
            resolve_node_id(result, "aws_")

    def test_unknown(self, result):
        with pytest.raises(NodeNotFoundError, match="Node not found: ghost"):
            resolve_node_id(result, "ghost")


def test_echo_error_goes_to_stderr(capsys):
    echo_error("boom")
    captured = capsys.readouterr()
    assert "boom" in captured.err
    assert captured.out == ""

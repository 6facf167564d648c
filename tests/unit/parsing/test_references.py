"""Unit tests for reference extraction and depends_on parsing."""

import pytest

from tfscope.parsing.references import base_reference, extract_references, parse_depends_on


class TestExtractReferences:
    def test_resource_attribute_reference(self):
        assert extract_references("aws_instance.web.id") == ["aws_instance.web"]

    def test_interpolated_variable(self):
        assert extract_references('"${var.environment}-logs"') == ["var.environment"]

    def test_local_value(self):
        assert extract_references("local.common_tags") == ["local.common_tags"]

    def test_module_output_is_not_reported_twice(self):
        # Matched by both the resource and the module pattern
        assert extract_references("module.vpc.vpc_id") == ["module.vpc"]

    def test_data_source_overlap_keeps_first_match_order(self):
        refs = extract_references("data.aws_ami.ubuntu.id")
        assert refs == ["data.aws_ami", "data.aws_ami.ubuntu"]

    def test_pattern_order_wins_over_position(self):
        value = 'merge(local.common_tags, { Name = "${var.name}-web" })'
        assert extract_references(value) == ["var.name", "local.common_tags"]

    def test_multiple_resources_in_one_value(self):
        value = "[aws_subnet.a.id, aws_subnet.b.id, aws_subnet.a.arn]"
        assert extract_references(value) == ["aws_subnet.a", "aws_subnet.b"]

    @pytest.mark.parametrize("value", ['"ami-12345"', '"t2.micro"', '"10.0.0.0/16"', "true", ""])
    def test_literals_have_no_references(self, value):
        assert extract_references(value) == []

    def test_uppercase_is_not_a_reference(self):
        assert extract_references("AWS_INSTANCE.WEB.ID") == []

    def test_is_deterministic(self):
        value = "${aws_instance.web.id}-${var.env}-${module.net.id}"
        assert extract_references(value) == extract_references(value)


class TestBaseReference:
    def test_drops_final_segment(self):
        assert base_reference("aws_instance.web.public_ip") == "aws_instance.web"

    def test_two_segments_unchanged(self):
        assert base_reference("var.region") == "var.region"


class TestParseDependsOn:
    def test_mixed_quoted_and_bare(self):
        assert parse_depends_on('["aws_instance.web", module.vpc]') == ["aws_instance.web", "module.vpc"]

    def test_single_entry_list(self):
        assert parse_depends_on("[aws_instance.web]") == ["aws_instance.web"]

    def test_single_reference_without_brackets(self):
        assert parse_depends_on("aws_s3_bucket.logs") == ["aws_s3_bucket.logs"]

    def test_empty_list(self):
        assert parse_depends_on("[]") == []

    def test_open_bracket_of_multiline_list(self):
        assert parse_depends_on("[") == []

    def test_entries_without_dot_are_dropped(self):
        assert parse_depends_on('[foo, "data.aws_ami.ubuntu"]') == ["data.aws_ami.ubuntu"]

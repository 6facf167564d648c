"""Unit tests for building dependency graphs from scanned blocks."""

from tfscope.analysis.graph_builder import build_graph, build_graph_from_scan
from tfscope.core.types import RelationType
from tfscope.parsing.scanner import scan_text


def graph_for(text: str):
    return build_graph_from_scan(scan_text(text))


class TestBuildGraph:
    def test_example_has_one_implicit_edge(self, example_tf):
        graph = graph_for(example_tf)

        assert [n.id for n in graph.nodes] == ["aws_instance.web", "aws_s3_bucket.logs"]
        assert len(graph.edges) == 1
        edge = graph.edges[0]
        assert (edge.source, edge.target, edge.relation) == (
            "aws_instance.web", "aws_s3_bucket.logs", RelationType.IMPLICIT,
        )

    def test_resources_before_modules(self, network_tf):
        ids = [n.id for n in graph_for(network_tf).nodes]
        assert ids[-1] == "module.dns"

    def test_network_edges(self, network_tf):
        edges = {(e.source, e.target, e.relation.value) for e in graph_for(network_tf).edges}
        assert edges == {
            ("aws_vpc.main", "aws_subnet.a", "implicit"),
            ("aws_subnet.a", "aws_instance.web", "implicit"),
            ("aws_instance.web", "module.dns", "implicit"),
            ("google_storage_bucket.assets", "null_resource.hook", "explicit"),
        }

    def test_unresolved_references_are_dropped(self):
        text = (
            'resource "aws_instance" "web" {\n'
            "  ami       = var.ami\n"
            "  subnet_id = aws_subnet.elsewhere.id\n"
            "  tags      = local.tags\n"
            "}\n"
        )
        graph = graph_for(text)
        assert graph.node_count == 1
        assert graph.edges == []

    def test_reference_duplicating_depends_on_is_explicit_only(self):
        text = (
            'resource "aws_vpc" "main" {\n}\n'
            'resource "aws_subnet" "a" {\n'
            "  vpc_id     = aws_vpc.main.id\n"
            "  depends_on = [aws_vpc.main]\n"
            "}\n"
        )
        edges = graph_for(text).edges
        assert [(e.source, e.relation) for e in edges] == [("aws_vpc.main", RelationType.EXPLICIT)]

    def test_module_dependency(self):
        text = (
            'module "vpc" {\n  source = "./vpc"\n}\n'
            'resource "aws_instance" "web" {\n'
            "  subnet_id  = module.vpc.private_subnet\n"
            "}\n"
        )
        edge = graph_for(text).edges[0]
        assert (edge.source, edge.target) == ("module.vpc", "aws_instance.web")

    def test_duplicate_ids_collapse_to_last_payload(self):
        text = (
            'resource "aws_instance" "web" {\n  ami = "first"\n}\n'
            'resource "aws_instance" "web" {\n  ami = "second"\n}\n'
        )
        result = scan_text(text)
        graph = build_graph(result.resources, result.modules)

        assert len(result.resources) == 2
        assert graph.node_count == 1
        assert graph.get_node("aws_instance.web").payload.get_attribute("ami") == '"second"'

    def test_edges_only_between_known_nodes(self, network_tf, cycle_tf, example_tf):
        for text in (network_tf, cycle_tf, example_tf):
            graph = graph_for(text)
            ids = {n.id for n in graph.nodes}
            for edge in graph.edges:
                assert edge.source in ids
                assert edge.target in ids

    def test_output_referencing_resource_is_not_a_self_loop(self):
        text = (
            'resource "aws_instance" "web" {\n  ami = "ami-1"\n}\n'
            'output "web_id" {\n  value = aws_instance.web.id\n}\n'
        )
        graph = graph_for(text)

        assert graph.edges == []

    def test_empty_input(self):
        graph = build_graph([], [])
        assert graph.nodes == []
        assert graph.edges == []

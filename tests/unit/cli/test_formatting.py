"""Unit tests for human-readable output formatting."""

from tfscope.analysis.impact import ImpactReport
from tfscope.cli.formatting import format_graph, format_impact, format_scan
from tfscope.core.graph import DependencyGraph
from tfscope.core.types import Edge, Node, RelationType, ResourceBlock, ScanResult


def bracketed_block() -> ResourceBlock:
    return ResourceBlock(
        type="aws_vpc", name="[red]main", line_start=1, line_end=3,
        depends_on=["null_resource.[bold]hook"],
    )


class TestMarkupIsNotInterpreted:
    def test_scan_table(self):
        output = format_scan(ScanResult(resources=[bracketed_block()]))

        assert "aws_vpc.[red]main" in output
        assert "null_resource.[bold]hook" in output

    def test_graph_table(self):
        graph = DependencyGraph()
        graph.add_node(Node.from_block(bracketed_block()))
        graph.add_node(Node.from_block(ResourceBlock(type="aws_subnet", name="[b]a", line_start=4, line_end=6)))
        graph.add_edge(Edge(source="aws_vpc.[red]main", target="aws_subnet.[b]a", relation=RelationType.IMPLICIT))

        output = format_graph(graph)
        assert "aws_vpc.[red]main" in output
        assert "aws_subnet.[b]a" in output

    def test_impact_title(self):
        output = format_impact(ImpactReport(node_id="aws_vpc.[red]main"))
        assert "Impact Analysis: aws_vpc.[red]main" in output


class TestImpactLabels:
    def test_relation_labels(self):
        report = ImpactReport(
            node_id="aws_subnet.a",
            dependencies=[Edge(source="aws_vpc.main", target="aws_subnet.a", relation=RelationType.EXPLICIT)],
            dependents=[Edge(source="aws_subnet.a", target="aws_instance.web", relation=RelationType.IMPLICIT)],
        )
        output = format_impact(report)

        assert "aws_vpc.main (depends_on)" in output
        assert "aws_instance.web (references)" in output
        assert "No resources would be affected" in output

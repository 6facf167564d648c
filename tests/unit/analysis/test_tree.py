"""Unit tests for the dependency tree."""

from tfscope.analysis.tree import build_dependency_tree
from tfscope.core.types import BlockKind
from tfscope.parsing.scanner import scan_text


def tree_for(text: str):
    result = scan_text(text)
    return build_dependency_tree(result.resources, result.modules)


def all_ids(roots):
    ids = []
    for item in roots:
        ids.append(item.id)
        ids.extend(all_ids(item.children))
    return ids


class TestDependencyTree:
    def test_roots_are_blocks_without_dependencies(self, network_tf):
        roots = tree_for(network_tf)
        assert [r.id for r in roots] == ["aws_vpc.main", "google_storage_bucket.assets"]
        assert not any(r.orphan for r in roots)

    def test_dependents_are_nested(self, network_tf):
        vpc = tree_for(network_tf)[0]
        subnet = vpc.children[0]
        web = subnet.children[0]
        dns = web.children[0]

        assert (subnet.id, web.id, dns.id) == ("aws_subnet.a", "aws_instance.web", "module.dns")
        assert dns.level == 3
        assert dns.kind == BlockKind.MODULE

    def test_each_block_appears_once(self, network_tf):
        ids = all_ids(tree_for(network_tf))
        assert sorted(ids) == sorted(set(ids))
        assert len(ids) == 6

    def test_cycle_becomes_orphan_root(self, cycle_tf):
        roots = tree_for(cycle_tf)
        assert len(roots) == 1
        assert roots[0].orphan
        assert roots[0].id == "null_resource.a"
        assert [c.id for c in roots[0].children] == ["null_resource.b"]

    def test_dangling_references_do_not_block_roots(self):
        roots = tree_for('resource "aws_instance" "web" {\n  ami = var.ami\n}\n')
        assert [r.id for r in roots] == ["aws_instance.web"]

    def test_empty(self):
        assert tree_for("") == []

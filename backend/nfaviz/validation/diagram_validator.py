"""
Diagram Validator - checks a built DiagramIR against the NFA it came from.

Catches issues like:
- Node count differing from the NFA size
- Edge count differing from the number of NFA transitions
- Missing or duplicated start markers
- Done markers on non-Done nodes (or missing ones)
- is_neighbor flags that disagree with the edge endpoints
- Successor relations that do not chain consecutive indices
"""

from typing import List

from nfaviz.ir.nfa import NFA, Done
from nfaviz.ir.diagram import DiagramIR
from nfaviz.validation.issues import ValidationIssue, ValidationReport, ValidationSeverity


class DiagramValidator:
    def validate(self, nfa: NFA, diagram: DiagramIR) -> ValidationReport:
        issues: List[ValidationIssue] = []
        issues.extend(self._check_node_count(nfa, diagram))
        issues.extend(self._check_edge_count(nfa, diagram))
        issues.extend(self._check_start_marker(nfa, diagram))
        issues.extend(self._check_done_markers(nfa, diagram))
        issues.extend(self._check_neighbor_flags(diagram))
        issues.extend(self._check_successors(diagram))

        stats = {
            "nodes": len(diagram.nodes),
            "edges": len(diagram.edges),
            "neighbor_edges": sum(1 for e in diagram.edges if e.is_neighbor),
            "successors": len(diagram.successors),
        }
        return ValidationReport.from_issues(issues, stats=stats)

    def _check_node_count(self, nfa: NFA, diagram: DiagramIR) -> List[ValidationIssue]:
        if len(diagram.nodes) == len(nfa.nodes):
            return []
        return [ValidationIssue(
            severity=ValidationSeverity.ERROR,
            code="NODE_COUNT_MISMATCH",
            message=f"Diagram has {len(diagram.nodes)} nodes, NFA has {len(nfa.nodes)}",
        )]

    def _check_edge_count(self, nfa: NFA, diagram: DiagramIR) -> List[ValidationIssue]:
        expected = sum(len(node.targets()) for node in nfa.nodes)
        if len(diagram.edges) == expected:
            return []
        return [ValidationIssue(
            severity=ValidationSeverity.ERROR,
            code="EDGE_COUNT_MISMATCH",
            message=f"Diagram has {len(diagram.edges)} edges, NFA has {expected} transitions",
        )]

    def _check_start_marker(self, nfa: NFA, diagram: DiagramIR) -> List[ValidationIssue]:
        starts = [n.index for n in diagram.start_nodes]
        if starts == [nfa.start]:
            return []
        return [ValidationIssue(
            severity=ValidationSeverity.ERROR,
            code="START_MARKER",
            message=f"Start markers on {starts}, expected exactly [{nfa.start}]",
        )]

    def _check_done_markers(self, nfa: NFA, diagram: DiagramIR) -> List[ValidationIssue]:
        expected = {i for i, node in enumerate(nfa.nodes) if isinstance(node, Done)}
        actual = {n.index for n in diagram.done_nodes}
        if actual == expected:
            return []
        return [ValidationIssue(
            severity=ValidationSeverity.ERROR,
            code="DONE_MARKERS",
            message=f"Done markers on {sorted(actual)}, expected {sorted(expected)}",
        )]

    def _check_neighbor_flags(self, diagram: DiagramIR) -> List[ValidationIssue]:
        return [
            ValidationIssue(
                severity=ValidationSeverity.ERROR,
                code="NEIGHBOR_FLAG",
                message=(
                    f"Edge {edge.id} {edge.source_index}->{edge.target_index} "
                    f"has is_neighbor={edge.is_neighbor}"
                ),
                node_index=edge.source_index,
            )
            for edge in diagram.edges
            if edge.is_neighbor != (edge.target_index == edge.source_index - 1)
        ]

    def _check_successors(self, diagram: DiagramIR) -> List[ValidationIssue]:
        expected = [(n.id, p.id) for p, n in zip(diagram.nodes, diagram.nodes[1:])]
        actual = [(rel.node, rel.predecessor) for rel in diagram.successors]
        if actual == expected:
            return []
        return [ValidationIssue(
            severity=ValidationSeverity.WARNING,
            code="SUCCESSOR_ORDER",
            message="Successor relations do not chain the nodes in index order",
            suggestion="Layout order must follow node indices",
        )]


def check_diagram(nfa: NFA, diagram: DiagramIR) -> ValidationReport:
    """Convenience function to check a diagram against its NFA."""
    return DiagramValidator().validate(nfa, diagram)

"""
NFA Validator - checks an NFA before it is turned into a diagram.

Catches issues like:
- Start index outside the node array
- Transitions pointing outside the node array
- Nodes that cannot be reached from the start
- Automata with no accepting (Done) node
"""

from collections import deque
from typing import List, Set

from nfaviz.ir.nfa import NFA, Done, Fail
from nfaviz.ir.errors import MalformedNFAError
from nfaviz.validation.issues import ValidationIssue, ValidationReport, ValidationSeverity


class NFAValidator:
    """
    Usage:
        result = NFAValidator().validate(nfa)

        if not result.is_valid:
            for issue in result.issues:
                print(f"[{issue.severity.value}] {issue.message}")
    """

    def validate(self, nfa: NFA) -> ValidationReport:
        size = len(nfa.nodes)
        if size == 0:
            return ValidationReport.from_issues(
                [ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="EMPTY_NFA",
                    message="NFA has no nodes",
                    suggestion="An NFA needs at least a Done node",
                )],
                stats={"nodes": 0, "transitions": 0},
            )

        issues: List[ValidationIssue] = []
        issues.extend(self._check_start(nfa))
        issues.extend(self._check_targets(nfa))

        # Reachability only makes sense once every reference resolves.
        if not issues:
            reachable = self._reachable(nfa)
            issues.extend(self._check_unreachable(nfa, reachable))
            issues.extend(self._check_fail_nodes(nfa, reachable))
        issues.extend(self._check_done_present(nfa))

        return ValidationReport.from_issues(issues, stats=self._calculate_stats(nfa))

    def _check_start(self, nfa: NFA) -> List[ValidationIssue]:
        if _in_range(nfa.start, len(nfa.nodes)):
            return []
        return [ValidationIssue(
            severity=ValidationSeverity.ERROR,
            code="START_OUT_OF_RANGE",
            message=f"Start index {nfa.start} is outside 0..{len(nfa.nodes) - 1}",
        )]

    def _check_targets(self, nfa: NFA) -> List[ValidationIssue]:
        issues = []
        size = len(nfa.nodes)
        for i, node in enumerate(nfa.nodes):
            for field_name, target in node.targets():
                if not _in_range(target, size):
                    issues.append(ValidationIssue(
                        severity=ValidationSeverity.ERROR,
                        code="TARGET_OUT_OF_RANGE",
                        message=f"Node {i} ({node.kind}) {field_name}={target} is outside 0..{size - 1}",
                        node_index=i,
                        suggestion="Every transition must point at an existing node",
                    ))
        return issues

    def _check_done_present(self, nfa: NFA) -> List[ValidationIssue]:
        if any(isinstance(node, Done) for node in nfa.nodes):
            return []
        return [ValidationIssue(
            severity=ValidationSeverity.WARNING,
            code="NO_DONE_NODE",
            message="NFA has no Done node and can never accept",
        )]

    def _check_unreachable(self, nfa: NFA, reachable: Set[int]) -> List[ValidationIssue]:
        issues = []
        for i, node in enumerate(nfa.nodes):
            if i not in reachable:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.WARNING,
                    code="UNREACHABLE_NODE",
                    message=f"Node {i} ({node.kind}) is not reachable from start {nfa.start}",
                    node_index=i,
                ))
        return issues

    def _check_fail_nodes(self, nfa: NFA, reachable: Set[int]) -> List[ValidationIssue]:
        return [
            ValidationIssue(
                severity=ValidationSeverity.INFO,
                code="FAIL_NODE",
                message=f"Node {i} is a Fail node reachable from start",
                node_index=i,
            )
            for i in sorted(reachable)
            if isinstance(nfa.nodes[i], Fail)
        ]

    def _reachable(self, nfa: NFA) -> Set[int]:
        seen = {nfa.start}
        queue = deque([nfa.start])
        while queue:
            current = queue.popleft()
            for _, target in nfa.nodes[current].targets():
                if target not in seen:
                    seen.add(target)
                    queue.append(target)
        return seen

    def _calculate_stats(self, nfa: NFA) -> dict:
        kinds: dict = {}
        for node in nfa.nodes:
            kinds[node.kind] = kinds.get(node.kind, 0) + 1
        return {
            "nodes": len(nfa.nodes),
            "transitions": sum(len(node.targets()) for node in nfa.nodes),
            **kinds,
        }


def _in_range(index, size: int) -> bool:
    return isinstance(index, int) and 0 <= index < size


def validate_nfa(nfa: NFA) -> ValidationReport:
    """Convenience function to validate an NFA."""
    return NFAValidator().validate(nfa)


def raise_on_errors(nfa: NFA) -> None:
    """Validate an NFA and raise MalformedNFAError for the first bad reference."""
    size = len(nfa.nodes)
    if not _in_range(nfa.start, size):
        raise MalformedNFAError(index=None, field="start", target=nfa.start, size=size)
    for i, node in enumerate(nfa.nodes):
        for field_name, target in node.targets():
            if not _in_range(target, size):
                raise MalformedNFAError(index=i, field=field_name, target=target, size=size)

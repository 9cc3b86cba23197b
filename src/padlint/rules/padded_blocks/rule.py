import logging
from typing import Any, Callable, Dict, List, Optional

from tree_sitter import Node

from padlint_tree_sitter import ASTWalker, SourceCode
from padlint_tree_sitter import node_types as nt

from ...models import InternalIssue, Severity
from ..base import BaseRule, RuleContext
from .boundaries import locate_boundaries
from .classifier import classify, classify_block, is_interface_body
from .options import ConstructKind, PaddingPolicy, resolve_options
from .padding import observe_padding
from .reporter import PaddingViolation, report_padding
from .schema import PaddedBlocksOptions, parse_options

logger = logging.getLogger(__name__)

Handler = Callable[[Node, Optional[Node]], bool]


class PaddedBlocksRule(BaseRule):
    """Require or disallow blank lines just inside the braces of blocks, objects, switches, classes and interfaces."""

    @property
    def rule_id(self) -> str:
        return "padded-blocks"

    @property
    def name(self) -> str:
        return "padded-blocks"

    @property
    def severity(self) -> Severity:
        return Severity.STYLE

    @property
    def auto_fixable(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return "Require or disallow padding within blocks"

    def validate_options(self, options: Any) -> PaddedBlocksOptions:
        return parse_options(options)

    def check(self, context: RuleContext) -> List[InternalIssue]:
        options = parse_options(context.options)
        policy = resolve_options(options.style_value(), options.allowSingleLineBlocks)
        handlers = self._create_handlers(policy)
        if not handlers:
            return []

        issues = []
        for node, parent in ASTWalker.iter_with_parent(context.source_code.ast):
            handler = handlers.get(node.type)
            if handler is None or not handler(node, parent):
                continue
            for violation in self._check_padding(node, parent, policy, context.source_code):
                issues.append(self._to_issue(context, violation))
        return issues

    def _create_handlers(self, policy: PaddingPolicy) -> Dict[str, Handler]:
        """One handler per node type that at least one configured kind needs.

        A handler answers whether the node is a non-empty construct to check.
        """
        handlers: Dict[str, Handler] = {}

        def has_content(node: Node, parent: Optional[Node]) -> bool:
            return bool(ASTWalker.named_content_children(node))

        def is_checked_block(node: Node, parent: Optional[Node]) -> bool:
            if parent is not None and parent.type in nt.MODULE_BODY_PARENTS:
                return False
            return has_content(node, parent) and policy.observes(classify_block(parent))

        if policy.observes_blocks:
            handlers[nt.STATEMENT_BLOCK] = is_checked_block
        if policy.observes(ConstructKind.OBJECT_LITERAL):
            handlers[nt.OBJECT] = has_content
        if policy.observes(ConstructKind.SWITCH_BODY):
            handlers[nt.SWITCH_STATEMENT] = _switch_has_cases
        if policy.observes(ConstructKind.CLASS_BODY):
            handlers[nt.CLASS_BODY] = has_content
        if policy.observes(ConstructKind.INTERFACE_BODY):
            handlers[nt.INTERFACE_BODY] = has_content
            handlers[nt.OBJECT_TYPE] = lambda node, parent: is_interface_body(node, parent) and has_content(
                node, parent
            )
        return handlers

    def _check_padding(
        self, node: Node, parent: Optional[Node], policy: PaddingPolicy, source_code: SourceCode
    ) -> List[PaddingViolation]:
        kind = classify(node, parent)
        boundaries = locate_boundaries(node, source_code)
        observation = observe_padding(boundaries)
        violations = report_padding(
            boundaries,
            observation,
            policy.requires_padding(kind),
            policy.allow_single_line_blocks,
            source_code,
        )
        if violations:
            logger.debug(
                "%s at line %d: %s", kind.option_key, node.start_point[0] + 1, [v.message_id for v in violations]
            )
        return violations

    def _to_issue(self, context: RuleContext, violation: PaddingViolation) -> InternalIssue:
        return self._create_issue(
            file_path=context.file_path,
            line=violation.start.line,
            column=violation.start.column,
            end_line=violation.end.line,
            end_column=violation.end.column,
            message=violation.message,
            message_id=violation.message_id,
            fix=violation.fix,
        )


def _switch_has_cases(node: Node, parent: Optional[Node]) -> bool:
    body = node.child_by_field_name("body")
    return body is not None and any(child.type in nt.SWITCH_CASE_TYPES for child in body.named_children)

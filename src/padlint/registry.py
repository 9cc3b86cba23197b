from typing import Iterable

from .rules.base import BaseRule


class RuleRegistry:
    """Registry for managing and loading linting rules"""

    def __init__(self, load_builtins: bool = True):
        self._rules: dict[str, BaseRule] = {}
        if load_builtins:
            self._load_builtin_rules()

    def register(self, rule: BaseRule):
        self._rules[rule.rule_id] = rule

    def get(self, rule_id: str) -> BaseRule | None:
        return self._rules.get(rule_id)

    def get_all_rules(self) -> list[BaseRule]:
        return list(self._rules.values())

    def get_enabled_rules(
        self, select: Iterable[str] | None = None, ignore: Iterable[str] | None = None
    ) -> list[BaseRule]:
        """Rules whose id starts with a selected prefix and with no ignored prefix."""
        select = list(select) if select else [""]
        ignore = list(ignore or [])
        return [
            rule
            for rule in self._rules.values()
            if any(rule.rule_id.startswith(s) for s in select)
            and not any(rule.rule_id.startswith(i) for i in ignore)
        ]

    def _load_builtin_rules(self):
        from .rules.padded_blocks import PaddedBlocksRule

        self.register(PaddedBlocksRule())


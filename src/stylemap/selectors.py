"""Selector composition for nested rules."""

from __future__ import annotations

# Conditional group rules: their body is compiled against the enclosing
# selector and each resulting rule is wrapped in the at-rule.
GROUPING_RULE_PREFIXES: tuple[str, ...] = (
    "@media",
    "@supports",
    "@container",
    "@layer",
    "@scope",
    "@starting-style",
)


def is_grouping_rule(selector: str) -> bool:
    return selector.startswith(GROUPING_RULE_PREFIXES)


def compose_selector(parent: str, child: str) -> str:
    """Combine a nested *child* selector with its *parent*.

    ``&`` in the child is replaced by the parent (``"&:hover"`` under
    ``.x`` gives ``.x:hover``, ``"input&"`` gives ``input.x``); otherwise the
    two are joined as descendants. An empty parent leaves the child as-is.
    """
    if "&" in child:
        return child.replace("&", parent)
    if parent:
        return f"{parent} {child}"
    return child


def wrap_grouping_rule(at_rule: str, rule: str) -> str:
    return f"{at_rule} {{ {rule} }}"

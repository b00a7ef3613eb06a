"""Rule library — primitive, literal, and composite rule builders.

Every builder returns a rule built on ``vrule.core.rule.make_rule`` (or,
for lazy rules, a ``LazyRule``). Composite rules own their children by
reference and never mutate them.
"""

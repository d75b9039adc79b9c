"""Rule table: the ordered pattern rules and exception lists of one language."""
import re
from dataclasses import dataclass, field

from lingo.core.errors import invalid_pattern, raise_result

from .types import Direction, NumberTest, default_number_test


@dataclass(frozen=True, slots=True)
class Rule:
    """A pattern rule: where ``pattern`` matches, substitute ``substitution``.

    The substitution uses ``re`` template syntax, so ``\\1`` refers to the
    first capture group. Groups that took no part in the match expand to "".
    """
    pattern: re.Pattern
    substitution: str

    @classmethod
    def compile(cls, pattern: str | re.Pattern, substitution: str) -> "Rule":
        """Build a rule, compiling string patterns case-insensitively.

        Raises AppErrorException (E2002) when the pattern does not compile.
        """
        if isinstance(pattern, str):
            try:
                pattern = re.compile(pattern, re.IGNORECASE)
            except re.error as e:
                raise_result(invalid_pattern(pattern, e, origin="rule_table"))
        return cls(pattern, substitution)

    def matches(self, word: str) -> bool:
        return self.pattern.search(word) is not None

    def apply(self, word: str) -> str:
        # Only the first occurrence is rewritten
        return self.pattern.sub(self.substitution, word, count=1)


@dataclass(slots=True)
class RuleTable:
    """Inflection rules for one language.

    Pattern rules are kept newest first: a rule added later is tried before
    every rule added earlier. Irregular maps are keyed on the exact word;
    uncountable words are stored and looked up lower-cased.
    """
    plural_rules: list[Rule] = field(default_factory=list)
    singular_rules: list[Rule] = field(default_factory=list)
    irregular: dict[str, dict[str, str]] = field(
        default_factory=lambda: {"plural": {}, "singular": {}}
    )
    uncountable: set[str] = field(default_factory=set)
    plural_number_test: NumberTest | None = None

    def rules_for(self, direction: Direction) -> list[Rule]:
        if direction == "plural":
            return self.plural_rules
        return self.singular_rules

    def add_rule(self, direction: Direction, rule: Rule) -> None:
        self.rules_for(direction).insert(0, rule)

    def add_irregular(self, singular: str, plural: str) -> None:
        self.irregular["plural"][singular] = plural
        self.irregular["singular"][plural] = singular

    def add_uncountable(self, word: str) -> None:
        self.uncountable.add(word.lower())

    def is_uncountable(self, word: str) -> bool:
        return word.lower() in self.uncountable

    def number_is_plural(self, count: int | float) -> bool:
        test = self.plural_number_test or default_number_test
        return bool(test(count))

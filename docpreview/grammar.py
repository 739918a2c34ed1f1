"""
Grammar configurations for the markup transpiler.

Each grammar is a fixed set of line rules plus the marker widths used for
headings and the way runs of blank lines turn into spacers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class GrammarVariant(Enum):
    """Named grammars supported by the transpiler."""
    PREVIEWER = "previewer"
    DOC_STYLE = "doc_style"


class Rule(Enum):
    """Line rules, listed in the order they are tried."""
    TITLE = "title"
    SECTION_HEADER = "section_header"
    METADATA = "metadata"
    BULLET = "bullet"
    SUB_BULLET = "sub_bullet"
    LINK = "link"
    INLINE_EMPHASIS = "inline_emphasis"
    PARAGRAPH = "paragraph"
    SPACER = "spacer"


RULE_ORDER = tuple(Rule)


@dataclass(frozen=True)
class Grammar:
    """Configuration value selecting which rules apply and how."""
    variant: GrammarVariant
    title_marker: str
    section_marker: str
    rules: frozenset
    collapse_blank_runs: bool
    bullet_marker: str = "- "
    sub_bullet_marker: str = "+"
    link_token: str = "http"
    link_separator: str = ": "

    def __post_init__(self):
        if not self.title_marker or not self.section_marker:
            raise ValueError("Heading markers cannot be empty")
        unknown = [rule for rule in self.rules if not isinstance(rule, Rule)]
        if unknown:
            raise ValueError(f"Unknown rules in grammar: {unknown}")

    def uses(self, rule: Rule) -> bool:
        return rule in self.rules

    @property
    def ordered_rules(self) -> list[Rule]:
        """The grammar's rules in priority order."""
        return [rule for rule in RULE_ORDER if rule in self.rules]


PREVIEWER = Grammar(
    variant=GrammarVariant.PREVIEWER,
    title_marker="# ",
    section_marker="## ",
    rules=frozenset({
        Rule.TITLE,
        Rule.SECTION_HEADER,
        Rule.METADATA,
        Rule.BULLET,
        Rule.SUB_BULLET,
        Rule.LINK,
        Rule.PARAGRAPH,
        Rule.SPACER,
    }),
    collapse_blank_runs=True,
)

DOC_STYLE = Grammar(
    variant=GrammarVariant.DOC_STYLE,
    title_marker="## ",
    section_marker="### ",
    rules=frozenset({
        Rule.TITLE,
        Rule.SECTION_HEADER,
        Rule.INLINE_EMPHASIS,
        Rule.PARAGRAPH,
        Rule.SPACER,
    }),
    collapse_blank_runs=False,
)

GRAMMARS = {
    GrammarVariant.PREVIEWER: PREVIEWER,
    GrammarVariant.DOC_STYLE: DOC_STYLE,
}


def get_grammar(value: Union[Grammar, GrammarVariant, str]) -> Grammar:
    """
    Resolve a grammar from a config value, a variant, or its name.

    Raises:
        ValueError: If the name does not match a known grammar.
    """
    if isinstance(value, Grammar):
        return value
    if isinstance(value, GrammarVariant):
        return GRAMMARS[value]

    name = str(value).strip().lower().replace("-", "_")
    for variant, grammar in GRAMMARS.items():
        if variant.value == name:
            return grammar

    choices = ", ".join(variant.value for variant in GrammarVariant)
    raise ValueError(f"Unknown grammar: {value!r} (choose from {choices})")

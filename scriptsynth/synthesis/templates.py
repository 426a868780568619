"""
Token substitution for project generator templates.
"""
from typing import List, Sequence, Tuple

from scriptsynth.core import PropertySymbol, TypeEntity

Tokens = Sequence[Tuple[str, str]]


def expand_template(value: str, tokens: Tokens) -> str:
    """
    Replace every `{token}` placeholder in `value`.

    Tokens are substituted in the given order by plain text replacement.
    Placeholders without a matching token are left untouched.

    Args:
        value: The template string
        tokens: Ordered (token, replacement) pairs

    Returns:
        The expanded string
    """
    for token, replacement in tokens:
        value = value.replace("{" + token + "}", replacement)
    return value


def class_tokens(dbtype: TypeEntity) -> List[Tuple[str, str]]:
    return [("class", dbtype.name)]


def accessor_tokens(dbtype: TypeEntity, prop_type: TypeEntity, prop: PropertySymbol) -> List[Tuple[str, str]]:
    return [
        ("class", dbtype.name),
        ("propType", prop_type.name),
        ("propName", prop.name),
    ]

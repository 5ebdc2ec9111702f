"""
Naming utilities for safe code generation.

Handles case conversions, underscore handling and identifier checks
shared by every target language.
"""

import re
from typing import Dict, List, Optional, Tuple, Union
from enum import Enum


class NamingCase(Enum):
    """Different naming case styles."""

    KEEP = "keep"  # MyType_name
    PASCAL_CASE = "pascal"  # UserName
    CAMEL_CASE = "camel"  # userName
    CONSTANT_CASE = "constant"  # USER_NAME
    SNAKE_CASE = "snake"  # user_name
    KEBAB_CASE = "kebab"  # user-name
    LOWER_CASE = "lower"  # username
    UPPER_CASE = "upper"  # USERNAME


# Accepted spellings, compared after lower-casing and dropping separators
_CASE_ALIASES = {
    "keep": NamingCase.KEEP,
    "pascal": NamingCase.PASCAL_CASE,
    "pascalcase": NamingCase.PASCAL_CASE,
    "camel": NamingCase.CAMEL_CASE,
    "camelcase": NamingCase.CAMEL_CASE,
    "constant": NamingCase.CONSTANT_CASE,
    "constantcase": NamingCase.CONSTANT_CASE,
    "screamingsnake": NamingCase.CONSTANT_CASE,
    "snake": NamingCase.SNAKE_CASE,
    "snakecase": NamingCase.SNAKE_CASE,
    "kebab": NamingCase.KEBAB_CASE,
    "kebabcase": NamingCase.KEBAB_CASE,
    "param": NamingCase.KEBAB_CASE,
    "paramcase": NamingCase.KEBAB_CASE,
    "lower": NamingCase.LOWER_CASE,
    "lowercase": NamingCase.LOWER_CASE,
    "upper": NamingCase.UPPER_CASE,
    "uppercase": NamingCase.UPPER_CASE,
}

_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_UPPER_UPPER = re.compile(r"([A-Z])([A-Z][a-z])")
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")
_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def resolve_naming_case(value: Union[str, NamingCase, None]) -> NamingCase:
    """
    Resolve a naming case from its configured spelling.

    Accepts enum members, plain names ("pascal"), camelCase names
    ("pascalCase") and module-qualified names ("change-case-all#pascalCase").

    Raises:
        ValueError: If the spelling is not a known case style
    """
    if value is None:
        return NamingCase.PASCAL_CASE
    if isinstance(value, NamingCase):
        return value

    name = str(value).split("#")[-1]
    key = re.sub(r"[^a-z]", "", name.lower())
    if key not in _CASE_ALIASES:
        raise ValueError(f"Unknown naming convention: {value}")
    return _CASE_ALIASES[key]


def split_words(name: str) -> List[str]:
    """Split a name into words on case boundaries and non-alphanumerics."""
    spaced = _LOWER_UPPER.sub(r"\1 \2", name)
    spaced = _UPPER_UPPER.sub(r"\1 \2", spaced)
    return [word for word in _NON_ALNUM.split(spaced) if word]


def _pascal_word(word: str, index: int) -> str:
    converted = word[0].upper() + word[1:].lower()
    if index > 0 and word[0].isdigit():
        return f"_{converted}"
    return converted


def to_pascal_case(name: str) -> str:
    """Convert to PascalCase."""
    return "".join(_pascal_word(word, i) for i, word in enumerate(split_words(name)))


def to_camel_case(name: str) -> str:
    """Convert to camelCase."""
    words = split_words(name)
    if not words:
        return ""
    return words[0].lower() + "".join(
        _pascal_word(word, i) for i, word in enumerate(words[1:], start=1)
    )


def to_constant_case(name: str) -> str:
    """Convert to CONSTANT_CASE."""
    return "_".join(word.upper() for word in split_words(name))


def to_snake_case(name: str) -> str:
    """Convert to snake_case."""
    return "_".join(word.lower() for word in split_words(name))


def to_kebab_case(name: str) -> str:
    """Convert to kebab-case."""
    return "-".join(word.lower() for word in split_words(name))


_CONVERTERS = {
    NamingCase.KEEP: lambda name: name,
    NamingCase.PASCAL_CASE: to_pascal_case,
    NamingCase.CAMEL_CASE: to_camel_case,
    NamingCase.CONSTANT_CASE: to_constant_case,
    NamingCase.SNAKE_CASE: to_snake_case,
    NamingCase.KEBAB_CASE: to_kebab_case,
    NamingCase.LOWER_CASE: str.lower,
    NamingCase.UPPER_CASE: str.upper,
}


def convert_case(name: str, target_case: NamingCase) -> str:
    """Convert name to target case style."""
    return _CONVERTERS[target_case](name)


def convert_name_parts(
    name: str, target_case: NamingCase, transform_underscore: bool = False
) -> str:
    """
    Convert a name, optionally keeping its underscore-separated parts.

    Without transform_underscore each "_"-separated part is converted on its
    own and the parts are joined back with "_", so "My_Type" keeps its
    underscore under pascal case.
    """
    if target_case is NamingCase.KEEP:
        return name
    if transform_underscore:
        return convert_case(name, target_case)
    return "_".join(convert_case(part, target_case) for part in name.split("_"))


def is_identifier(name: str) -> bool:
    """Check whether name is a legal identifier in JavaScript-family languages."""
    return bool(_IDENTIFIER.match(name))


class NameSanitizer:
    """Handles case conversion with a per-run cache."""

    def __init__(self, default_case: NamingCase = NamingCase.PASCAL_CASE):
        """
        Initialize name sanitizer.

        Args:
            default_case: Case style used when none is given
        """
        self.default_case = default_case
        self._name_cache: Dict[Tuple[str, NamingCase, bool], str] = {}

    def sanitize_name(
        self,
        name: str,
        target_case: Optional[NamingCase] = None,
        transform_underscore: bool = False,
    ) -> str:
        """
        Convert a name to the target case.

        Args:
            name: Original schema name
            target_case: Desired case style
            transform_underscore: Treat underscores as word boundaries and drop them

        Returns:
            Converted name
        """
        target_case = target_case or self.default_case
        cache_key = (name, target_case, transform_underscore)
        if cache_key not in self._name_cache:
            self._name_cache[cache_key] = convert_name_parts(
                name, target_case, transform_underscore
            )
        return self._name_cache[cache_key]

    def reset(self):
        """Drop cached conversions."""
        self._name_cache.clear()

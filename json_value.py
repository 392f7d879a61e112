# json_value.py
# Document value model for json_parser.
#
# Parsed trees are plain Python values: dict, list, str, float, True, False
# and None. Kind names the variant of any node.

import enum
from typing import Dict, List, Union

JSONValue = Union[Dict[str, "JSONValue"], List["JSONValue"], str, float, bool, None]


class Kind(enum.Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"


# Bareword text that maps to a literal instead of a string.
KEYWORDS = {"true": True, "false": False, "null": None}


def kind_of(value) -> Kind:
    """
    Classify one node of a parsed tree.

    bool is tested before float since True and False are ints to Python.
    Raises TypeError for anything the parser never produces.
    """
    if value is None:
        return Kind.NULL
    if value is True:
        return Kind.TRUE
    if value is False:
        return Kind.FALSE
    if isinstance(value, float):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, list):
        return Kind.ARRAY
    if isinstance(value, dict):
        return Kind.OBJECT
    raise TypeError(f"not a document value: {type(value).__name__}")


def keyword_value(word: str) -> JSONValue:
    """Map a bareword to its literal, or keep it as string text."""
    if word in KEYWORDS:
        return KEYWORDS[word]
    return word

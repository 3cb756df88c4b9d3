from enum import Enum, unique, auto


@unique
class Token(Enum):
    COMMENT_SINGLE = auto()
    KEYWORD_CONSTANT = auto()
    NAME_BUILTIN = auto()
    NAME_ENTITY = auto()
    NAME_FUNCTION = auto()

    LITERAL_STRING = auto()
    STRING_AFFIX = auto()
    STRING_ESCAPE = auto()

    NUMBER_BINARY = auto()
    NUMBER_INT = auto()
    NUMBER_FLOAT = auto()

    OPERATOR = auto()
    PUNCTUATION = auto()

from typing import Set


class GoParsingConstants:
    LANGUAGE = "go"
    GO_EXTENSION = ".go"

    PACKAGE_CLAUSE = "package_clause"
    IMPORT_DECLARATION = "import_declaration"
    COMMENT = "comment"

    INTERPRETED_STRING = "interpreted_string_literal"
    RAW_STRING = "raw_string_literal"
    STRING_LITERAL_TYPES: Set[str] = {INTERPRETED_STRING, RAW_STRING}

    # Everything else tree-sitter accepts at file scope is a statement, which Go rejects
    TOP_LEVEL_DECLARATIONS: Set[str] = {
        PACKAGE_CLAUSE,
        IMPORT_DECLARATION,
        "function_declaration",
        "method_declaration",
        "const_declaration",
        "var_declaration",
        "type_declaration",
    }

    IMPORT_PATH_QUERY = """
        (import_spec path: (_) @path)
    """

    MAX_REPORTED_ERRORS = 10


class GoLiteralConstants:
    DOUBLE_QUOTE = '"'
    BACK_QUOTE = '`'

    SIMPLE_ESCAPES = {
        'a': '\a',
        'b': '\b',
        'f': '\f',
        'n': '\n',
        'r': '\r',
        't': '\t',
        'v': '\v',
        '\\': '\\',
        '"': '"',
    }

    # escape letter -> number of hex digits that follow
    HEX_ESCAPES = {
        'x': 2,
        'u': 4,
        'U': 8,
    }

    FORBIDDEN_IN_REPLACEMENT: Set[str] = {'"', '\\', '\n', '\x00'}

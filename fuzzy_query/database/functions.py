# Path: fuzzy_query/database/functions.py
"""
Dialect-Aware SQL Primitives

The matchers are written only in terms of the primitives below plus
lower(), replace() and trim(), which every supported backend shares.
Each primitive compiles to the native construct of the target dialect:

    primitive                default          sqlite                        mysql                 postgresql
    case_sensitive_like      col LIKE pat     col GLOB replace(pat,'%','*') col LIKE BINARY pat   col LIKE pat
    position                 instr(h, n)      instr(h, n)                   instr(h, n)           strpos(h, n)
    text_length              length(s)        length(s)                     char_length(s)        length(s)

Patterns are always passed as bound parameters.
"""

from sqlalchemy import Boolean, Integer
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement

from ..constants import LIKE_ESCAPE_CHAR, LIKE_WILDCARD_ANY, LIKE_WILDCARD_ONE


def escape_like(value: str) -> str:
    """
    Escape LIKE wildcards in a literal value.

    The escape character itself is escaped first, then '%' and '_'.
    Use together with ``.like(pattern, escape=LIKE_ESCAPE_CHAR)``.

    Args:
        value: Literal text to embed in a LIKE pattern

    Returns:
        Text matching itself literally inside a LIKE pattern
    """
    return (
        value
        .replace(LIKE_ESCAPE_CHAR, LIKE_ESCAPE_CHAR * 2)
        .replace(LIKE_WILDCARD_ANY, LIKE_ESCAPE_CHAR + LIKE_WILDCARD_ANY)
        .replace(LIKE_WILDCARD_ONE, LIKE_ESCAPE_CHAR + LIKE_WILDCARD_ONE)
    )


class case_sensitive_like(FunctionElement):
    """
    Case-sensitive prefix/substring pattern match.

    Pattern syntax is LIKE syntax with '%' as the only wildcard.

    Example:
        case_sensitive_like(users.c.name, 'J%A%D%')
    """
    type = Boolean()
    name = 'case_sensitive_like'
    inherit_cache = True


class position(FunctionElement):
    """
    1-based position of needle in haystack, 0 when not found.

    Example:
        position(func.lower(users.c.name), 'doe') > 0
    """
    type = Integer()
    name = 'position'
    inherit_cache = True


class text_length(FunctionElement):
    """Length of a string in characters."""
    type = Integer()
    name = 'text_length'
    inherit_cache = True


def _two_arguments(element, compiler, **kw) -> tuple[str, str]:
    """Compile the two arguments of a binary primitive."""
    first, second = list(element.clauses)
    return compiler.process(first, **kw), compiler.process(second, **kw)


# ==============================================================================
# case_sensitive_like
# ==============================================================================

@compiles(case_sensitive_like)
def _compile_case_sensitive_like(element, compiler, **kw):
    column, pattern = _two_arguments(element, compiler, **kw)
    return f"{column} LIKE {pattern}"


@compiles(case_sensitive_like, 'mysql')
def _compile_case_sensitive_like_mysql(element, compiler, **kw):
    column, pattern = _two_arguments(element, compiler, **kw)
    return f"{column} LIKE BINARY {pattern}"


@compiles(case_sensitive_like, 'sqlite')
def _compile_case_sensitive_like_sqlite(element, compiler, **kw):
    # SQLite LIKE ignores ASCII case; GLOB does not
    column, pattern = _two_arguments(element, compiler, **kw)
    return f"{column} GLOB replace({pattern}, '{LIKE_WILDCARD_ANY}', '*')"


# ==============================================================================
# position
# ==============================================================================

@compiles(position)
def _compile_position(element, compiler, **kw):
    haystack, needle = _two_arguments(element, compiler, **kw)
    return f"instr({haystack}, {needle})"


@compiles(position, 'postgresql')
def _compile_position_postgresql(element, compiler, **kw):
    haystack, needle = _two_arguments(element, compiler, **kw)
    return f"strpos({haystack}, {needle})"


# ==============================================================================
# text_length
# ==============================================================================

@compiles(text_length)
def _compile_text_length(element, compiler, **kw):
    return f"length({compiler.process(element.clauses, **kw)})"


@compiles(text_length, 'mysql')
def _compile_text_length_mysql(element, compiler, **kw):
    return f"char_length({compiler.process(element.clauses, **kw)})"


__all__ = [
    'escape_like',
    'case_sensitive_like',
    'position',
    'text_length',
]

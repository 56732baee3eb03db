"""Parsing and evaluation of calculator expressions."""

from __future__ import annotations

import logging

from lark import Lark, Tree
from lark.exceptions import UnexpectedEOF, UnexpectedInput, VisitError

from space_vectors.engine import Result
from space_vectors.errors import EvaluationError, ParseError, SpaceVectorsError
from space_vectors.grammar import GRAMMAR
from space_vectors.transform import ExpressionBuilder

logger = logging.getLogger(__name__)

_parser = Lark(GRAMMAR, parser="earley", lexer="dynamic", ambiguity="resolve")


def parse_tree(text: str) -> Tree:
    """Parse *text* into a raw lark tree.

    Raises:
        ParseError: If the input does not match the grammar.
    """
    source = text.strip()
    try:
        return _parser.parse(source)
    except UnexpectedEOF as e:
        raise ParseError(f"Unexpected end of input: {source!r}") from e
    except UnexpectedInput as e:
        context = e.get_context(source).rstrip("\n")
        raise ParseError(
            f"Syntax error at line {e.line}, column {e.column}:\n{context}"
        ) from e


def evaluate(text: str) -> Result:
    """Parse *text* and evaluate the expression it describes.

    Args:
        text: A single expression, e.g. ``"angle 1 0 0, 0 1 0"``.

    Returns:
        A vector, line, plane, pplane, number, boolean, tuple of points, or
        ``None`` when a geometric operation has no result.

    Raises:
        ParseError: On syntax errors.
        DispatchError: When a function is applied to kinds it does not support.
        EvaluationError: When a value is too large or small to compute with.
    """
    tree = parse_tree(text)
    logger.debug("Parsed %r into %s", text, tree)
    try:
        return ExpressionBuilder().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, SpaceVectorsError):
            raise e.orig_exc from None
        if isinstance(e.orig_exc, ArithmeticError):
            raise EvaluationError(f"Arithmetic error: {e.orig_exc}") from e
        raise

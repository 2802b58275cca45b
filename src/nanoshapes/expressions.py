"""Evaluation of closed-form algebraic constants at arbitrary precision.

Catalog vertex tables are written as strings such as
``"(1 + sqrt(5)) / 4"`` or ``"cbrt(17 + 3*sqrt(33))"``.  They are parsed
with :mod:`ast` and evaluated in an mpmath context, so the same table
yields correctly rounded coordinates at any requested precision.

Only a small arithmetic subset of Python syntax is accepted:

* integer and decimal literals;
* ``+``, ``-``, ``*``, ``/``, ``**`` and unary ``-``/``+``;
* ``sqrt(x)`` and ``cbrt(x)`` (the real cube root);
* the constants ``phi`` (golden ratio) and ``pi``.
"""

from __future__ import annotations

import ast
from collections.abc import Sequence
from decimal import Decimal
from fractions import Fraction
from functools import lru_cache
import numbers

import mpmath

from nanoshapes.model.errors import ExpressionError
from nanoshapes.model.vector import Scalar, Vector3, context_for, to_scalar

#: An algebraic expression string or a plain number.
Expr = str | int | float | Fraction | Decimal | mpmath.mpf

#: Three expressions, one per Cartesian component.
Vector3Expr = tuple[Expr, Expr, Expr]

_FUNCTIONS = ("sqrt", "cbrt")
_CONSTANTS = ("phi", "pi")


@lru_cache(maxsize=4096)
def parse(text: str) -> ast.expr:
    """Parse and validate an expression string.

    The result is cached, so catalog constants shared by many
    vertices are parsed once.

    Raises:
        ExpressionError: If *text* is not valid syntax or uses a
            construct outside the supported subset.
    """
    try:
        tree = ast.parse(text.strip(), mode="eval")
    except SyntaxError as exc:
        raise ExpressionError(f"invalid expression {text!r}: {exc.msg}") from exc
    _validate(tree.body, text)
    return tree.body


def _validate(node: ast.AST, text: str) -> None:
    if isinstance(node, ast.Constant):
        if isinstance(node.value, bool) or not isinstance(
            node.value, (int, float),
        ):
            raise ExpressionError(
                f"unsupported literal {node.value!r} in {text!r}"
            )
    elif isinstance(node, ast.Name):
        if node.id not in _CONSTANTS:
            raise ExpressionError(f"unknown name {node.id!r} in {text!r}")
    elif isinstance(node, ast.UnaryOp):
        if not isinstance(node.op, (ast.UAdd, ast.USub)):
            raise ExpressionError(f"unsupported unary operator in {text!r}")
        _validate(node.operand, text)
    elif isinstance(node, ast.BinOp):
        if not isinstance(
            node.op, (ast.Add, ast.Sub, ast.Mult, ast.Div, ast.Pow),
        ):
            raise ExpressionError(f"unsupported operator in {text!r}")
        _validate(node.left, text)
        _validate(node.right, text)
    elif isinstance(node, ast.Call):
        if (
            not isinstance(node.func, ast.Name)
            or node.func.id not in _FUNCTIONS
            or len(node.args) != 1
            or node.keywords
        ):
            raise ExpressionError(
                f"only sqrt(x) and cbrt(x) calls are allowed, in {text!r}"
            )
        _validate(node.args[0], text)
    else:
        raise ExpressionError(
            f"unsupported syntax {type(node).__name__} in {text!r}"
        )


def _real_cbrt(ctx: mpmath.MPContext, x):
    if x < 0:
        return -ctx.cbrt(-x)
    return ctx.cbrt(x)


def _eval(node: ast.expr, ctx: mpmath.MPContext, text: str):
    if isinstance(node, ast.Constant):
        if isinstance(node.value, int):
            return ctx.mpf(node.value)
        # Decimal literals are taken at their written value, not the
        # nearest double.
        return ctx.mpf(repr(node.value))
    if isinstance(node, ast.Name):
        return +ctx.phi if node.id == "phi" else +ctx.pi
    if isinstance(node, ast.UnaryOp):
        value = _eval(node.operand, ctx, text)
        return -value if isinstance(node.op, ast.USub) else value
    if isinstance(node, ast.Call):
        arg = _eval(node.args[0], ctx, text)
        if node.func.id == "sqrt":
            if arg < 0:
                raise ExpressionError(f"negative radicand {arg} in {text!r}")
            return ctx.sqrt(arg)
        return _real_cbrt(ctx, arg)

    left = _eval(node.left, ctx, text)
    right = _eval(node.right, ctx, text)
    if isinstance(node.op, ast.Add):
        return left + right
    if isinstance(node.op, ast.Sub):
        return left - right
    if isinstance(node.op, ast.Mult):
        return left * right
    if isinstance(node.op, ast.Div):
        if right == 0:
            raise ExpressionError(f"division by zero in {text!r}")
        return left / right
    # Power: integer exponents are exact; others need a positive base.
    if ctx.isint(right):
        if left == 0 and right < 0:
            raise ExpressionError(f"zero to a negative power in {text!r}")
        return left ** int(right)
    if left <= 0:
        raise ExpressionError(
            f"non-integer power of a non-positive base in {text!r}"
        )
    return ctx.power(left, right)


def evaluate_in(expr, ctx: mpmath.MPContext) -> Scalar:
    """Evaluate *expr* in an existing mpmath context.

    Args:
        expr: An expression string, or a number (int, Fraction,
            Decimal, float or mpf) which is converted directly.
        ctx: The context to evaluate in (see
            :func:`~nanoshapes.model.vector.context_for`).

    Raises:
        ExpressionError: If the expression is invalid or does not
            evaluate to a finite real number.
    """
    if isinstance(expr, str):
        value = _eval(parse(expr), ctx, expr)
    elif isinstance(expr, (numbers.Real, Decimal, Fraction)) or hasattr(
        expr, "_mpf_",
    ):
        value = to_scalar(expr, ctx)
    else:
        raise ExpressionError(
            f"expected an expression string or number, got "
            f"{type(expr).__name__}"
        )
    if not ctx.isfinite(value):
        raise ExpressionError(f"expression {expr!r} is not finite")
    return value


def evaluate(expr, precision: int) -> Scalar:
    """Evaluate an algebraic expression at *precision* decimal digits.

    For example ``evaluate("(1 + sqrt(5)) / 2", 30)`` is the golden
    ratio to 30 significant digits.

    Raises:
        ExpressionError: If the expression is invalid.
    """
    return evaluate_in(expr, context_for(precision))


def evaluate_vector_in(exprs: Sequence, ctx: mpmath.MPContext) -> Vector3:
    """Evaluate a three-component expression in *ctx*.

    Raises:
        ExpressionError: If *exprs* does not have three components or
            any component is invalid.
    """
    if isinstance(exprs, str) or len(exprs) != 3:
        raise ExpressionError(
            f"a vertex needs exactly 3 components, got {exprs!r}"
        )
    return Vector3(*(evaluate_in(e, ctx) for e in exprs))


def evaluate_vector(exprs: Sequence, precision: int) -> Vector3:
    """Evaluate a three-component expression at *precision* digits."""
    return evaluate_vector_in(exprs, context_for(precision))


def negate(expr) -> str:
    """Return the expression string for ``-expr``.

    Zero stays ``"0"`` so that sign expansion of orbit seeds does not
    produce a distinct negative zero.
    """
    text = str(expr).strip()
    if _is_zero(text):
        return "0"
    if text.startswith("-(") and text.endswith(")") and _balanced(text[2:-1]):
        return text[2:-1]
    return f"-({text})"


def _balanced(text: str) -> bool:
    depth = 0
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def _is_zero(text: str) -> bool:
    try:
        return Decimal(text) == 0
    except ArithmeticError:
        return False

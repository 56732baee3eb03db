"""Lark grammar for the calculator's expression language.

Spaces, tabs and commas are interchangeable separators and are ignored
between tokens. The grammar is ambiguous (a ``+`` may link two vectors of a
line or sign the next number), so it is parsed with Earley and the dynamic
lexer; competing readings of such inputs evaluate to the same value.
"""

GRAMMAR = r"""
?start: call
      | _literal

call: VECTOR_FN1 _vector_operand                         -> vector_function
    | VECTOR_FN2 _vector_operand _vector_operand         -> vector_function
    | "lwith" _line_operand number                       -> lwith
    | PLANE_FN _plane_operand                            -> plane_function
    | "pwith" _pplane_operand number number              -> pwith
    | "line" _vector_operand _vector_operand             -> line_from_points
    | "plane" _vector_operand _vector_operand _vector_operand? -> plane_from_points
    | GENERIC_FN _element _element                       -> generic_function

_nested: "(" call ")"

_vector_operand: vector | _nested
_line_operand: line | _nested
_plane_operand: plane | pplane | _nested
_pplane_operand: pplane | _nested
_element: _literal | _nested
_literal: vector | line | plane | pplane

vector: _OPEN? number number number _CLOSE?

line: vector _link vector

pplane: vector _link vector _link vector

_link: "+"? _WORD? "*"?

plane: number ("*"? "x")? number ("*"? "y")? number ("*"? "z")? number ("=" "0")?

number: NUMBER

VECTOR_FN1: "length" | "normalize"
VECTOR_FN2: "dotp" | "cross" | "area" | "between"
PLANE_FN: "param" | "three-points" | "normal"
GENERIC_FN: "angle" | "parallel?" | "perpendicular?" | "distance" | "on?" | "intersection" | "projection" | "skewed?"

NUMBER: /(?:[+-][ \t]*)?[0-9]+(?:[.\/][0-9]+)?/
_WORD: /[a-z]+/
_OPEN: "(" | "[" | "<"
_CLOSE: ")" | "]" | ">"

%ignore /[ \t,]+/
"""

"""Truth table helpers that turn a function vector into a LaTeX SOP formula."""

from __future__ import annotations

import itertools
import logging
from typing import List, Sequence, Tuple

from sympy import And, Not, Or, Symbol, symbols

from tex_nodes import Array, Document, File, Header, Math, Node, Overline, Text, WithIndex

log = logging.getLogger(__name__)

N_INPUTS = 6

# A formula row is flushed once its counter goes past this, i.e. after 5 implicants.
ROW_LIMIT = 4

# f(x1..x6) transcribed from the Karnaugh map, see kmap_engine.MIRRORED_GRAY
DEFAULT_FUNCTION: Tuple[bool, ...] = tuple(
    bool(v)
    for v in (
        0, 0, 0, 1, 0, 0, 1, 0, 0, 1,  # 00-09
        0, 1, 0, 1, 1, 1, 1, 0, 1, 1,  # 10-19
        1, 0, 0, 0, 0, 0, 0, 1, 0, 0,  # 20-29
        1, 1, 0, 1, 1, 1, 0, 0, 1, 0,  # 30-39
        0, 1, 0, 1, 1, 1, 0, 1, 1, 0,  # 40-49
        1, 1, 1, 0, 1, 1, 0, 1, 0, 0,  # 50-59
        0, 1, 0, 1,                    # 60-63
    )
)

Row = Tuple[bool, ...]


def validate_function_vector(values: Sequence[bool], n_inputs: int) -> None:
    """Ensure the vector holds exactly one value per input combination."""
    if n_inputs < 1:
        raise ValueError("Number of inputs must be positive.")
    expected = 1 << n_inputs
    if len(values) != expected:
        raise ValueError(
            f"Function vector for {n_inputs} inputs needs {expected} values, got {len(values)}"
        )


def make_table(values: Sequence[bool], n_inputs: int = N_INPUTS) -> List[Row]:
    """Expand a function vector into rows of input bits (MSB first) plus the output."""
    validate_function_vector(values, n_inputs)
    table = []
    for i, out in enumerate(values):
        bits = tuple(bool(i & (1 << (n_inputs - 1 - j))) for j in range(n_inputs))
        table.append(bits + (bool(out),))
    return table


def row_to_index(row: Sequence[bool]) -> int:
    """Decode the input cells of a row back into its table index."""
    idx = 0
    for bit in row[:-1]:
        idx = (idx << 1) | int(bit)
    return idx


def get_implicant(row: Sequence[bool]) -> Text:
    """Format the inputs of one row as a conjunction, e.g. ``x_{1}\\overline{x_{2}}``."""
    implicant = ""
    for i, bit in enumerate(row[:-1]):
        xi = WithIndex("x", str(i + 1)).render()
        if not bit:
            xi = Overline(xi).render()
        implicant += xi
    return Text(implicant)


def get_implicants(table: Sequence[Sequence[bool]]) -> List[Text]:
    """Return one implicant per row where the function is true."""
    implicants = [get_implicant(row) for row in table if row[-1]]
    log.debug("%d of %d rows are true", len(implicants), len(table))
    return implicants


def formula_label(n_inputs: int = N_INPUTS) -> str:
    args = ", ".join(f"x_{i}" for i in range(n_inputs))
    return f"f({args}) ="


def make_latex_formula(implicants: Sequence[Node], n_inputs: int = N_INPUTS) -> Array:
    """Lay the implicants out in a two-column array, a few per row."""
    array = Array()
    array.append(Text(formula_label(n_inputs)))

    sub_size = 0
    row = ""
    for i, implicant in enumerate(implicants):
        # carry the "+" over from the previous row
        if not row and i != 0:
            row += "+"
        row += implicant.render()
        if i != len(implicants) - 1:
            row += "+"
        sub_size += 1
        if sub_size > ROW_LIMIT:
            array.append(Text(row))
            row = ""
            sub_size = 0
    if sub_size != 0:
        array.append(Text(row))

    return array


def build_document(values: Sequence[bool] = DEFAULT_FUNCTION, n_inputs: int = N_INPUTS) -> File:
    """Assemble the whole ``.tex`` file for the given function vector."""
    implicants = get_implicants(make_table(values, n_inputs))

    math = Math()
    math.append(make_latex_formula(implicants, n_inputs))

    doc = Document()
    doc.append(math)

    tex_file = File()
    tex_file.append(Header("documentclass", "article"))
    tex_file.append(Header("usepackage", "amsmath"))
    tex_file.append(Header("usepackage", "utf8", "inputenc"))
    tex_file.append(doc)
    return tex_file


def render_document(values: Sequence[bool] = DEFAULT_FUNCTION, n_inputs: int = N_INPUTS) -> str:
    return build_document(values, n_inputs).render()


def get_variables(n: int):
    """Return SymPy symbols (x1, x2, ...) matching the implicant indices."""
    if n < 1:
        raise ValueError("Number of variables must be positive.")
    return symbols(" ".join(f"x{i + 1}" for i in range(n)), seq=True)


def table_to_expression(table: Sequence[Sequence[bool]], vars_tuple):
    """Build the un-minimized SymPy SOP expression for the true rows."""
    clauses = []
    for row in table:
        if not row[-1]:
            continue
        literals = [var if bit else Not(var) for var, bit in zip(vars_tuple, row[:-1])]
        clauses.append(And(*literals))
    if not clauses:
        return False
    return Or(*clauses)


def truth_minterms(expr, vars_tuple: Sequence[Symbol]) -> List[int]:
    """Return indices whose assignments make the expression evaluate to True."""
    if expr is False:
        return []
    mins = []
    for idx, bits in enumerate(itertools.product([0, 1], repeat=len(vars_tuple))):
        subs = {var: bool(bit) for var, bit in zip(vars_tuple, bits)}
        if bool(expr.xreplace(subs)):
            mins.append(idx)
    return mins


__all__ = [
    "DEFAULT_FUNCTION",
    "N_INPUTS",
    "ROW_LIMIT",
    "build_document",
    "formula_label",
    "get_implicant",
    "get_implicants",
    "get_variables",
    "make_latex_formula",
    "make_table",
    "render_document",
    "row_to_index",
    "table_to_expression",
    "truth_minterms",
    "validate_function_vector",
]

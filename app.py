import sys, os
sys.path.append(os.path.dirname(__file__))

import streamlit as st
import matplotlib.pyplot as plt
import numpy as np

from kmap_engine import gray_code, index_grid, map_dimensions, values_to_grid
from logic import (
    DEFAULT_FUNCTION,
    N_INPUTS,
    build_document,
    get_implicants,
    get_variables,
    make_latex_formula,
    make_table,
    table_to_expression,
    truth_minterms,
)

# ------------------------------- page setup -------------------------------

st.set_page_config(page_title="SDNF to LaTeX", layout="wide")
st.title("🧮 Truth table → LaTeX SOP")
st.markdown("---")

n = N_INPUTS
table = make_table(DEFAULT_FUNCTION, n)
implicants = get_implicants(table)
mins = [i for i, v in enumerate(DEFAULT_FUNCTION) if v]

st.text_area(
    "Function:",
    (
        f"• inputs: {n}\n"
        f"• true rows: {len(mins)} of {len(table)}\n"
        f"• minterms = {mins}"
    ),
    height=110,
)

# ------------------------------- Karnaugh map -------------------------------

with st.container():
    st.markdown("### 🗺️ Karnaugh map")
    st.caption("Rows: x1x2x3, columns: x4x5x6, both in mirrored Gray order")

    nrows, ncols = map_dimensions(n)
    grid = values_to_grid(DEFAULT_FUNCTION, n)
    indices = index_grid(n)

    fig, ax = plt.subplots(figsize=(6.4, 6.4))
    ax.set_xlim(-0.9, ncols)
    ax.set_ylim(-0.6, nrows)
    ax.set_xticks(np.arange(0, ncols + 1))
    ax.set_yticks(np.arange(0, nrows + 1))
    ax.set_xticklabels([])
    ax.set_yticklabels([])
    ax.grid(True, color="#888", linewidth=1)
    ax.invert_yaxis()
    ax.set_facecolor("#fafafa")
    # the hand-drawn map splits into 4x4 quadrants
    ax.axhline(nrows / 2, color="#333", linewidth=2.5)
    ax.axvline(ncols / 2, color="#333", linewidth=2.5)

    row_bits = n // 2
    col_bits = n - row_bits
    for j, code in enumerate(gray_code(col_bits, mirrored=True)):
        ax.text(j + 0.5, -0.25, format(code, f"0{col_bits}b"),
                ha="center", va="center", fontsize=9, color="#333")
    for i, code in enumerate(gray_code(row_bits, mirrored=True)):
        ax.text(-0.15, i + 0.5, format(code, f"0{row_bits}b"),
                ha="right", va="center", fontsize=9, color="#333")

    for (r, c), val in np.ndenumerate(grid):
        color = "#1f3c88" if val else "#9aa7b7"
        ax.text(c + 0.5, r + 0.5, str(val), color=color,
                fontsize=13, ha="center", va="center", weight="bold")
        ax.text(c + 0.05, r + 0.9, str(indices[r, c]),
                color="#777", fontsize=7, alpha=0.7)

    st.pyplot(fig)

# ------------------------------- formula -------------------------------

vars_tuple = get_variables(n)
expr = table_to_expression(table, vars_tuple)
if truth_minterms(expr, vars_tuple) == mins:
    st.success(f"**{len(implicants)} implicants**, one per true row")
else:
    st.error("Implicants do not reproduce the truth table")

formula = make_latex_formula(implicants, n)
st.latex(formula.render())

source = build_document(DEFAULT_FUNCTION, n).render()
st.code(source, language="latex")
st.download_button("Download .tex", source, file_name="text.tex", mime="application/x-tex")

from __future__ import annotations

# Symbol prefix of the free parameters in a parameterized solution (t1, t2, ...)
PARAMETER_PREFIX = "t"
# Prefix of the unknowns (x1, x2, ...)
VARIABLE_PREFIX = "x"

# Matrix text ingestion: rows split on newlines or ';', cells on blanks or ','
ROW_SEPARATORS = r"[;\n]+"
CELL_SEPARATORS = r"[\s,]+"

# Glyphs used in step descriptions
ARROW = "←"
MINUS = "−"
TIMES = "×"


"""Small file-based command-line tools.

The runnable tools live in ``filetasks.json_to_csv``,
``filetasks.log_counter`` and ``filetasks.funko_cli``; they are not imported
here so ``python -m`` runs them without re-import warnings.
"""

from .collection import FunkoCollection
from .funko import Funko, FunkoGenre, FunkoType
from .tabulator import EmptyInputError, Table, derive_header, render, tabulate

# Re-export public symbols for importers.
__all__ = [
    "EmptyInputError",
    "Funko",
    "FunkoCollection",
    "FunkoGenre",
    "FunkoType",
    "Table",
    "derive_header",
    "render",
    "tabulate",
]

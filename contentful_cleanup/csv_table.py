"""
In-memory CSV table

Columns carry a cardinal order; rows are lists of (column, value) cells.
The only escaping done is removing commas from string values, so values
containing newlines or quotes are written as-is.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .errors import InvalidArgument

CellValue = Union[str, int, float, bool]

DEFAULT_COLUMN_NAME = "column"
DELIMITER = ","


def sanitize_value(value) -> CellValue:
    """Strip commas from strings; pass other scalars through"""
    if value is None:
        return ""
    if isinstance(value, str):
        return value.replace(DELIMITER, "")
    if isinstance(value, (bool, int, float)):
        return value
    raise InvalidArgument(f"CSV cells must be a string, number or boolean, got {type(value).__name__}")


def format_value(value: CellValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass
class Column:
    name: str
    order: int = 0


@dataclass
class Row:
    number: int
    cells: Dict[str, CellValue] = field(default_factory=dict)


class CsvTable:
    """Ordered columns plus ordered rows, rendered as comma-delimited text"""

    def __init__(self):
        self.columns: List[Column] = []
        self.rows: List[Row] = []

    def add_column(self, name: str = DEFAULT_COLUMN_NAME, order: int = 0) -> Column:
        """Add a column at `order`, moving any column at or after it up by one"""
        order = order or 0

        if any(c.order == order for c in self.columns):
            for c in self.columns:
                if c.order >= order:
                    c.order += 1

        column = Column(name=name or DEFAULT_COLUMN_NAME, order=order)
        self.columns.append(column)
        return column

    def add_row(self, cells: Iterable[Tuple[str, CellValue]]) -> Optional[Row]:
        """Add a row from (column name, value) pairs.

        Cells for unknown columns are dropped and only the first cell per
        column is kept. A row left with no cells is not added and None is
        returned. Rows are numbered from 1 by their position among kept rows.
        """
        column_names = {c.name for c in self.columns}
        kept: Dict[str, CellValue] = {}

        for column, value in cells:
            if column not in column_names or column in kept:
                continue
            kept[column] = sanitize_value(value)

        if not kept:
            return None

        row = Row(number=len(self.rows) + 1, cells=kept)
        self.rows.append(row)
        return row

    def ordered_columns(self) -> List[Column]:
        return sorted(self.columns, key=lambda c: c.order)

    def render(self) -> str:
        columns = self.ordered_columns()
        self.columns = columns

        lines = [DELIMITER.join(c.name for c in columns)]
        for row in self.rows:
            lines.append(DELIMITER.join(format_value(row.cells.get(c.name, "")) for c in columns))

        return "".join(f"{line}\n" for line in lines)

"""Column grid with per-row occupancy tracking for diagram layout."""

from typing import Iterable, List, Optional, Sequence, Tuple


Cell = Optional[str]


class OccupancyGrid:
    """Tracks the rendered columns of a circuit diagram.

    Rows are bit lines in a single index space: quantum bits occupy
    ``[0, nr_qbits)`` and classical bit ``c`` lives on row ``nr_qbits + c``.
    Columns are only ever appended; content can only be written into the
    newest column. The occupancy vector describes that newest column alone and
    is cleared whenever a new column is opened.

    The reservation methods decide, before anything is written, whether the
    newest column can take the next operation or whether a fresh column has to
    be opened first. Placement is greedy: earlier columns are never revisited.
    """

    def __init__(self, nr_qbits: int, nr_cbits: int = 0):
        self.nr_qbits = nr_qbits
        self.nr_cbits = nr_cbits
        self._columns: List[List[Cell]] = []
        # Everything starts occupied, so the first write opens column 0
        self._in_use: List[bool] = [True] * self.total_nr_bits

    @property
    def total_nr_bits(self) -> int:
        """The number of rows, quantum and classical."""
        return self.nr_qbits + self.nr_cbits

    @property
    def column_count(self) -> int:
        return len(self._columns)

    @property
    def last_column_index(self) -> int:
        """Index of the newest column, -1 when no column exists yet."""
        return len(self._columns) - 1

    @property
    def columns(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Snapshot of all columns; the grid's own lists are not exposed."""
        return tuple(tuple(column) for column in self._columns)

    @property
    def occupancy(self) -> Tuple[bool, ...]:
        """Snapshot of the occupancy flags of the newest column."""
        return tuple(self._in_use)

    def is_occupied(self, bit: int) -> bool:
        return self._in_use[bit]

    def last_column_busy(self) -> bool:
        """Whether any row of the newest column holds content or a claim."""
        return any(self._in_use)

    def cell(self, column: int, bit: int) -> Cell:
        return self._columns[column][bit]

    def is_quantum_row(self, bit: int) -> bool:
        return bit < self.nr_qbits

    def merge_bits(
        self, qbits: Iterable[int], cbits: Optional[Iterable[int]] = None
    ) -> List[int]:
        """Map quantum and classical bit numbers onto row indices."""
        bits = list(qbits)
        if cbits is not None:
            bits.extend(self.nr_qbits + bit for bit in cbits)
        return bits

    def append_column(self) -> None:
        """Open a new, empty column and clear the occupancy flags."""
        self._columns.append([None] * self.total_nr_bits)
        self._in_use = [False] * self.total_nr_bits

    def write_cell(self, bit: int, content: str) -> None:
        """Set the content of row ``bit`` in the newest column.

        Callers are expected to reserve space first. When nothing has been
        reserved yet and no column exists, one is opened so the write has
        somewhere to go.
        """
        if not self._columns:
            self.append_column()

        self._columns[-1][bit] = content
        self._in_use[bit] = True

    def reserve(
        self, qbits: Sequence[int], cbits: Optional[Sequence[int]] = None
    ) -> None:
        """Ensure the rows of the given bits are free in the newest column.

        Opens a new column if any of them is occupied.
        """
        bits = self.merge_bits(qbits, cbits)
        if any(self._in_use[bit] for bit in bits):
            self.append_column()

    def reserve_range(
        self, qbits: Sequence[int], cbits: Optional[Sequence[int]] = None
    ) -> None:
        """Ensure every row between the lowest and highest bit is free.

        Used for operations that draw a connecting line across the rows in
        between. An empty set of bits reserves nothing.
        """
        bits = self.merge_bits(qbits, cbits)
        if not bits:
            return

        first, last = min(bits), max(bits)
        if any(self._in_use[first : last + 1]):
            self.append_column()

    def reserve_all(self) -> None:
        """Ensure the newest column is completely empty."""
        if self.last_column_busy():
            self.append_column()

    def claim_range(
        self, qbits: Sequence[int], cbits: Optional[Sequence[int]] = None
    ) -> None:
        """Mark all rows between the lowest and highest bit as occupied.

        Nothing is written; the claim keeps later operations from being drawn
        on top of a control or connector line. An empty set of bits claims
        nothing.
        """
        bits = self.merge_bits(qbits, cbits)
        if not bits:
            return

        first, last = min(bits), max(bits)
        for bit in range(first, last + 1):
            self._in_use[bit] = True

_MISSING = object()


class ExpandingTape:
    """
    Unbounded tape addressed by signed integer index.

    Cells are kept in a contiguous list. `first_index` is the logical index
    of list position 0, so logical index i lives at position i - first_index.
    Reading or writing outside the materialized range grows the list in
    that direction, filling new cells with the default (blank) symbol.
    """

    def __init__(self, cells=None, default=_MISSING, first_index=0):
        if default is _MISSING:
            raise ValueError("ExpandingTape requires a default symbol.")
        self._cells = list(cells) if cells is not None else []
        self._first_index = first_index
        self.default = default

    def _to_internal_index(self, index):
        return index - self._first_index

    def first_index(self):
        return self._first_index

    def last_index(self):
        return self._first_index + len(self._cells) - 1

    def ensure_available(self, index):
        """Grow the tape so that `index` is materialized. No-op when already in range."""
        if index < self._first_index:
            missing = self._first_index - index
            self._cells[0:0] = [self.default] * missing
            self._first_index = index
        elif index > self.last_index():
            missing = index - self.last_index()
            self._cells.extend([self.default] * missing)

    def get(self, index):
        self.ensure_available(index)
        return self._cells[self._to_internal_index(index)]

    read = get

    def write(self, index, symbol):
        self.ensure_available(index)
        self._cells[self._to_internal_index(index)] = symbol

    def __getitem__(self, index):
        return self.get(index)

    def __setitem__(self, index, symbol):
        self.write(index, symbol)

    def iterate(self):
        # iterate over a snapshot so the traversal never observes growth
        return iter(tuple(self._cells))

    def __iter__(self):
        return self.iterate()

    def __len__(self):
        return len(self._cells)

    def render(self):
        return "".join(str(symbol) for symbol in self._cells)

    def __repr__(self):
        return (f"ExpandingTape(first_index={self._first_index}, "
                f"last_index={self.last_index()}, cells={self.render()!r})")

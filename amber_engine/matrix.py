"""Dense matrices stored column by column."""

from numbers import Number

from .vector import Vector


class Matrix:
    """A mutable ``rows`` x ``columns`` matrix.

    Components are stored column-major: element ``(i, j)`` lives at
    ``i + j * rows``. ``values`` may be a single number that fills the
    matrix or an iterable of components in column-major order; a short
    iterable is padded with zeros and a long one is truncated.
    """

    def __init__(self, rows, columns, values=0):
        if rows <= 0 or columns <= 0:
            raise ValueError(f"matrix shape must be positive, got {rows}x{columns}")
        self.rows = rows
        self.columns = columns
        size = rows * columns
        if isinstance(values, Number):
            self._data = [values] * size
        else:
            items = list(values)[:size]
            items.extend([0] * (size - len(items)))
            self._data = items

    @classmethod
    def from_columns(cls, columns):
        """Build a matrix whose columns are the given vectors."""
        cols = [list(c) for c in columns]
        if not cols:
            raise ValueError("at least one column is needed")
        height = len(cols[0])
        if any(len(c) != height for c in cols):
            raise ValueError("all columns must have the same size")
        return cls(height, len(cols), [value for col in cols for value in col])

    def _offset(self, i, j):
        if not (0 <= i < self.rows and 0 <= j < self.columns):
            raise IndexError(f"element ({i}, {j}) out of range for {self.rows}x{self.columns} matrix")
        return i + j * self.rows

    def _check_column(self, index):
        if not 0 <= index < self.columns:
            raise IndexError(f"column {index} out of range for {self.columns} columns")

    def __getitem__(self, key):
        """``m[i, j]`` gives an element, ``m[j]`` a copy of column ``j``."""
        if isinstance(key, tuple):
            i, j = key
            return self._data[self._offset(i, j)]
        return self.column(key)

    def __setitem__(self, key, value):
        if isinstance(key, tuple):
            i, j = key
            self._data[self._offset(i, j)] = value
            return
        self._check_column(key)
        items = list(value)
        if len(items) != self.rows:
            raise ValueError(f"column needs {self.rows} components, got {len(items)}")
        start = key * self.rows
        self._data[start:start + self.rows] = items

    def __iter__(self):
        return iter(self._data)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.rows, self.columns, self._data) == (other.rows, other.columns, other._data)

    __hash__ = None

    def _apply(self, other, op):
        if isinstance(other, Matrix):
            if (other.rows, other.columns) != (self.rows, self.columns):
                raise ValueError(
                    f"matrix shapes differ: {self.rows}x{self.columns} and {other.rows}x{other.columns}"
                )
            self._data = [op(a, b) for a, b in zip(self._data, other._data)]
            return self
        if isinstance(other, Number):
            self._data = [op(a, other) for a in self._data]
            return self
        return NotImplemented

    def __iadd__(self, other):
        return self._apply(other, lambda a, b: a + b)

    def __isub__(self, other):
        return self._apply(other, lambda a, b: a - b)

    def __imul__(self, other):
        """Scale by a number, or multiply element by element (not a matrix product)."""
        return self._apply(other, lambda a, b: a * b)

    def __itruediv__(self, other):
        return self._apply(other, lambda a, b: a / b)

    def __repr__(self):
        return f"Matrix({self.rows}, {self.columns}, {self._data!r})"

    def column(self, index):
        """Copy of column ``index`` as a vector."""
        self._check_column(index)
        start = index * self.rows
        return Vector(self._data[start:start + self.rows])

    def copy_from(self, values):
        """Overwrite every component from a column-major sequence."""
        items = list(values)
        size = self.rows * self.columns
        if len(items) < size:
            raise ValueError(f"need {size} values, got {len(items)}")
        self._data = items[:size]
# bf_memory.py - fixed-size tape of signed cells plus the data pointer

from bf_errors import BoundaryError

DEFAULT_DATA_SIZE = 4096
DEFAULT_CELL_BITS = 32
CELL_WIDTHS = (8, 16, 32, 64)


def wrap(value, bits=DEFAULT_CELL_BITS):
    """Fold an int into the signed range of a bits-wide cell."""
    span = 1 << bits
    value &= span - 1
    if value >= span >> 1:
        value -= span
    return value


class Memory:
    def __init__(self, size=DEFAULT_DATA_SIZE, cell_bits=DEFAULT_CELL_BITS):
        if cell_bits not in CELL_WIDTHS:
            raise ValueError(f"unsupported cell width: {cell_bits}")
        if not size or size <= 0:
            size = DEFAULT_DATA_SIZE
        self.cell_bits = cell_bits
        self.cells = [0] * size
        self.ptr = 0

    def __len__(self):
        return len(self.cells)

    def reset(self):
        self.ptr = 0

    def wrap(self, value):
        return wrap(value, self.cell_bits)

    # ====== Pointer ======
    def move_right(self):
        if self.ptr >= len(self.cells) - 1:
            raise BoundaryError("shift+ moves out of boundary")
        self.ptr += 1

    def move_left(self):
        if self.ptr <= 0:
            raise BoundaryError("shift- moves out of boundary")
        self.ptr -= 1

    # ====== Cell under the pointer ======
    def get(self):
        return self.cells[self.ptr]

    def set(self, value):
        self.cells[self.ptr] = self.wrap(value)

    def increment(self):
        self.set(self.cells[self.ptr] + 1)

    def decrement(self):
        self.set(self.cells[self.ptr] - 1)

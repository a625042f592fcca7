# loop_stack.py - LIFO stack of open loop start positions


class LoopStack:
    """Last-in-first-out stack. Seed values are given top first:
    LoopStack(3, 1) pops 3, then 1."""

    def __init__(self, *values):
        self._items = list(reversed(values))

    def push(self, v):
        self._items.append(v)

    def pop(self):
        if not self._items: return None
        return self._items.pop()

    def get(self):
        """Peek at the top value, None if the stack is empty."""
        if not self._items: return None
        return self._items[-1]

    peek = get

    def __len__(self):
        return len(self._items)

    def equals(self, other, cmp=None):
        if len(self) != len(other):
            return False
        if cmp is None:
            cmp = lambda a, b: a == b
        return all(cmp(a, b) for a, b in zip(self._items, other._items))

    def __eq__(self, other):
        if not isinstance(other, LoopStack):
            return NotImplemented
        return self.equals(other)

    def __repr__(self):
        return f"LoopStack{tuple(reversed(self._items))!r}"

# Brainfuck extensions

import sys

# ==================== Commands ====================

def do_square(bf):
    v = bf.memory.get()
    bf.memory.set(v * v)

def do_invert(bf):
    bf.memory.set(~bf.memory.get())

def do_zero(bf):
    bf.memory.set(0)

def do_dump(bf, window=4):
    """Print the data pointer and the cells around it, current cell bracketed."""
    m = bf.memory
    lo = max(0, m.ptr - window); hi = min(len(m), m.ptr + window + 1)
    cells = " ".join(f"[{m.cells[i]}]" if i == m.ptr else str(m.cells[i]) for i in range(lo, hi))
    sys.stdout.write(f"#{bf.cmd_ptr} ptr={m.ptr}: {cells}\n")

# ==================== Install ====================

def install_extn(bf):
    bf.add_cmd("*", do_square)
    bf.add_cmd("~", do_invert)
    bf.add_cmd("0", do_zero)
    bf.add_cmd("#", do_dump)
    return bf

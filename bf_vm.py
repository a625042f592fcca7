#!/usr/bin/env python3
# bf_vm.py - Streaming brainfuck VM
# Commands are pulled one at a time from a forward-only stream and are never
# re-read. Loop bodies are replayed from a position-indexed command cache that
# exists only while at least one loop is open. Loop ends are learned at run
# time; the program is never scanned ahead.

import io
import logging

from bf_errors import (BfError, StackUnderflowError, InputOutputError,
                       SourceReadError, CommandError, StepLimitError)
from bf_memory import Memory, DEFAULT_DATA_SIZE, DEFAULT_CELL_BITS
from loop_stack import LoopStack

logger = logging.getLogger(__name__)

CMD_SHIFT_RIGHT = '>'
CMD_SHIFT_LEFT  = '<'
CMD_PLUS        = '+'
CMD_MINUS       = '-'
CMD_OUT         = '.'
CMD_IN          = ','
CMD_START_LOOP  = '['
CMD_END_LOOP    = ']'

LOOP_CMDS = (CMD_START_LOOP, CMD_END_LOOP)


def as_cmd(cmd):
    """Normalize a command key (1-char str, int byte or 1-byte bytes) to a 1-char str."""
    if isinstance(cmd, str) and len(cmd) == 1:
        return cmd
    if isinstance(cmd, int) and 0 <= cmd <= 0xFF:
        return chr(cmd)
    if isinstance(cmd, (bytes, bytearray)) and len(cmd) == 1:
        return chr(cmd[0])
    raise ValueError(f"bad command {cmd!r}")


class CommandCache:
    """Replay buffer: command position -> command.
    A position keeps the first command written to it for the cache's lifetime."""

    def __init__(self):
        self._cmds = {}

    def get(self, pos):
        return self._cmds.get(pos)

    def put(self, pos, cmd):
        self._cmds.setdefault(pos, cmd)

    def __contains__(self, pos):
        return pos in self._cmds

    def __len__(self):
        return len(self._cmds)


class BfInterpreter:
    def __init__(self, data_size=DEFAULT_DATA_SIZE, input=None, output=None,
                 cell_bits=DEFAULT_CELL_BITS):
        self.memory = Memory(data_size, cell_bits)
        self.input = input      # read(hint) -> int
        self.output = output    # write(int)

        self.cmd_ptr = 0
        self.loop_stack = LoopStack()
        self.cmd_cache = None
        # position of the last ']' executed; '[' jumps here to leave its loop
        self.current_loop_end = 0
        # >0 while consuming the body of a loop that is entered with a zero guard
        self._skip_depth = 0

        self.ops = {}
        self._install_kernel()

    # ====== Shortcuts ======
    @property
    def data(self):
        return self.memory.cells

    @property
    def data_ptr(self):
        return self.memory.ptr

    @data_ptr.setter
    def data_ptr(self, value):
        self.memory.ptr = value

    @property
    def skipping(self):
        return self._skip_depth > 0

    # ====== Operator table ======
    def add_cmd(self, cmd, fn):
        """Add or overload a command handler. fn(bf) gets the interpreter.
        '[' and ']' drive the loop stack and the command cache and can't be
        overloaded; such calls leave the table unchanged."""
        cmd = as_cmd(cmd)
        if cmd in LOOP_CMDS:
            logger.debug("ignoring overload of loop command %r", cmd)
            return self
        self.ops[cmd] = fn
        return self

    def _install_kernel(self):
        self.ops[CMD_SHIFT_RIGHT] = op_shift_right
        self.ops[CMD_SHIFT_LEFT]  = op_shift_left
        self.ops[CMD_PLUS]        = op_plus
        self.ops[CMD_MINUS]       = op_minus
        self.ops[CMD_OUT]         = op_out
        self.ops[CMD_IN]          = op_in
        self.ops[CMD_START_LOOP]  = op_start_loop
        self.ops[CMD_END_LOOP]    = op_end_loop

    # ====== Execution engine ======
    def run(self, commands, cancel=None, max_steps=None):
        """Run commands until the stream is exhausted and return the memory cells.

        commands is anything with read(n) (binary or text), or a str/bytes program.
        cancel is checked before every step (threading.Event or anything with
        is_set()); a cancelled run returns None.
        """
        if isinstance(commands, str):
            commands = io.StringIO(commands)
        elif isinstance(commands, (bytes, bytearray)):
            commands = io.BytesIO(commands)

        self.cmd_ptr = 0
        self.memory.reset()
        self.loop_stack = LoopStack()
        self.cmd_cache = None
        self.current_loop_end = 0
        self._skip_depth = 0

        steps = 0
        while True:
            if cancel is not None and cancel.is_set():
                logger.debug("run cancelled [#cmd: %d]", self.cmd_ptr)
                return None
            if max_steps is not None and steps >= max_steps:
                raise StepLimitError(f"step limit of {max_steps} exceeded", self.cmd_ptr)
            steps += 1

            cmd = self._fetch(commands)
            if cmd is None:
                logger.debug("end of commands after %d steps", steps - 1)
                return self.memory.cells

            # caching starts with the first '[' and covers every command until
            # the outermost loop is done, comments included
            if cmd == CMD_START_LOOP and self.cmd_cache is None and not self._skip_depth:
                logger.debug("command cache created [#cmd: %d]", self.cmd_ptr)
                self.cmd_cache = CommandCache()
            if self.cmd_cache is not None:
                self.cmd_cache.put(self.cmd_ptr, cmd)

            if self._skip_depth:
                self._skip(cmd)
            else:
                op = self.ops.get(cmd)
                if op is not None:
                    self._call(op)

            if self.cmd_cache is not None and not self.loop_stack:
                logger.debug("command cache dropped [#cmd: %d]", self.cmd_ptr)
                self.cmd_cache = None

            self.cmd_ptr += 1

    def _fetch(self, commands):
        """Next command from the cache or the stream, None at end of stream."""
        if self.cmd_cache is not None:
            cmd = self.cmd_cache.get(self.cmd_ptr)
            if cmd is not None:
                return cmd
        try:
            chunk = commands.read(1)
        except Exception as e:
            raise SourceReadError(f"failed to read command: {e}", self.cmd_ptr) from e
        if not chunk:
            return None
        if isinstance(chunk, str):
            return chunk
        return chr(chunk[0])

    def _call(self, op):
        try:
            op(self)
        except BfError as e:
            if e.cmd_ptr is None:
                e.cmd_ptr = self.cmd_ptr
            raise
        except Exception as e:
            raise CommandError(f"failed to process: {e}", self.cmd_ptr) from e

    def _skip(self, cmd):
        if cmd == CMD_START_LOOP:
            self._skip_depth += 1
        elif cmd == CMD_END_LOOP:
            self._skip_depth -= 1
            if not self._skip_depth:
                self.current_loop_end = self.cmd_ptr


# ====== Kernel commands ======

def op_shift_right(bf):
    bf.memory.move_right()

def op_shift_left(bf):
    bf.memory.move_left()

def op_plus(bf):
    bf.memory.increment()

def op_minus(bf):
    bf.memory.decrement()

def op_out(bf):
    try:
        bf.output.write(bf.memory.get())
    except Exception as e:
        raise InputOutputError(f"failed to write value: {e}") from e

def op_in(bf):
    try:
        v = int(bf.input.read(f"enter value [#cmd: {bf.cmd_ptr}]"))
    except Exception as e:
        raise InputOutputError(f"failed to read value: {e}") from e
    bf.memory.set(v)

def op_start_loop(bf):
    # a loop is new unless we came back here from its own ']'
    loop = bf.loop_stack.get()
    is_new = loop is None or loop != bf.cmd_ptr
    if is_new:
        bf.loop_stack.push(bf.cmd_ptr)

    # stay in loop?
    if bf.memory.get() != 0:
        return

    bf.loop_stack.pop()
    if is_new:
        # its ']' hasn't been seen yet: consume the body without running it
        logger.debug("skipping loop body [#cmd: %d]", bf.cmd_ptr)
        bf._skip_depth = 1
        return
    bf.cmd_ptr = bf.current_loop_end  # cmd_ptr will be incremented

def op_end_loop(bf):
    loop = bf.loop_stack.get()
    if loop is None:
        raise StackUnderflowError("stack is empty on closing loop", bf.cmd_ptr)

    bf.current_loop_end = bf.cmd_ptr
    bf.cmd_ptr = loop - 1  # cmd_ptr will be incremented

# bf_errors.py - run-fatal errors, each tied to the instruction that failed


class BfError(Exception):
    def __init__(self, message, cmd_ptr=None):
        super().__init__(message)
        self.message = message
        self.cmd_ptr = cmd_ptr

    def __str__(self):
        if self.cmd_ptr is None:
            return self.message
        return f"{self.message} [#cmd: {self.cmd_ptr}]"


class BoundaryError(BfError):
    """Data pointer moved past either edge of the tape."""


class StackUnderflowError(BfError):
    """']' with no open loop."""


class InputOutputError(BfError):
    """Input or output provider failed."""


class SourceReadError(BfError):
    """Instruction stream failed with something other than end-of-input."""


class CommandError(BfError):
    """A custom handler raised a non-BfError exception."""


class StepLimitError(BfError):
    pass

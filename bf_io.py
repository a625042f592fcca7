# bf_io.py - input/output providers for the ',' and '.' commands
#
# Input providers:  read(hint) -> int, close()
# Output providers: write(value), close()

import sys


class _Closing:
    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


# ==================== Readers ====================

class FileReader(_Closing):
    """Reads the file byte per byte. EOFError when the file is exhausted."""

    def __init__(self, file_name):
        self.f = open(file_name, "rb")

    def read(self, hint=""):
        b = self.f.read(1)
        if not b:
            raise EOFError(f"no more input in {self.f.name}")
        return b[0]

    def close(self):
        self.f.close()


class StdInReader(_Closing):
    """Prompts with the hint and reads one value per line.
    A number is taken as is; a single character gives its code point."""

    def __init__(self, stream=None, prompt=None):
        self.stream = stream if stream is not None else sys.stdin
        self.prompt = prompt if prompt is not None else sys.stderr

    def read(self, hint=""):
        self.prompt.write(hint + ": ")
        self.prompt.flush()
        line = self.stream.readline()
        if not line:
            raise EOFError("stdin closed")
        line = line.rstrip("\r\n")
        try:
            return int(line)
        except ValueError:
            pass
        if len(line) == 1:
            return ord(line)
        raise ValueError(f"expected a number or a single character, got {line!r}")

    def close(self):
        pass


# ==================== Writers ====================

class StdOutWriter(_Closing):
    """One decimal value per line."""

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout

    def write(self, v):
        self.stream.write(f"{v}\n")

    def close(self):
        self.stream.flush()


class FileWriter(_Closing):
    """Space separated decimal values."""

    def __init__(self, file_name):
        self.f = open(file_name, "w")

    def write(self, v):
        self.f.write(f"{v} ")

    def close(self):
        self.f.close()

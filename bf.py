#!/usr/bin/python3

# bf.py
# Runner for the streaming brainfuck VM: program from a file or stdin,
# ',' reads from stdin, '.' prints to stdout.

import sys

from bf_vm import BfInterpreter
from bf_errors import BfError
from bf_extn import install_extn
from bf_io import StdInReader, StdOutWriter


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    with StdInReader() as reader, StdOutWriter() as writer:
        bf = BfInterpreter(input=reader, output=writer)
        install_extn(bf)

        try:
            if argv:
                with open(argv[0], "rb") as commands:
                    bf.run(commands)
            else:
                bf.run(sys.stdin.buffer)
        except (BfError, OSError) as e:
            print("ERR:", e)
            return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())

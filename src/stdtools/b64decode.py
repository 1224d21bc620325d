#!/usr/bin/env python3

from .cli import run
from .utils import b64dec

def main():
    run("b64decode", "Decode base64 from standard input to standard output", b64dec)


if __name__ == '__main__':
    main()

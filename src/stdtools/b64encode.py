#!/usr/bin/env python3

from .cli import run
from .utils import b64enc_bytes

def main():
    run("b64encode", "Base64-encode standard input to standard output", b64enc_bytes)


if __name__ == '__main__':
    main()

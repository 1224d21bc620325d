#!/usr/bin/env python3

from .cli import run
from .utils import sha256_hex

def checksum(data: bytes) -> bytes:
    "Hex SHA-256 digest of the whole input, without a trailing newline"
    return sha256_hex(data).encode('ascii')


def main():
    run("sha256sum", "Print the SHA-256 digest of standard input", checksum)


if __name__ == '__main__':
    main()

import base64
import binascii
import hashlib

def b64enc_bytes(data: bytes) -> bytes:
    return base64.b64encode(data)


def b64enc(data: bytes) -> str:
    return b64enc_bytes(data).decode('ascii')


def b64dec(data: bytes | str) -> bytes:
    "Decode standard base64, ignoring line breaks. Raises binascii.Error on malformed input."

    if isinstance(data, str):
        data = data.encode('ascii')

    data = data.replace(b'\r', b'').replace(b'\n', b'')

    # b64decode tolerates surplus '=' after a complete group
    if len(data) % 4 != 0:
        raise binascii.Error('Incorrect padding')

    return base64.b64decode(data, validate=True)


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def sha256_hex(data: bytes) -> str:
    return sha256(data).hex()

"""
fpetool FF1 模組

NIST SP 800-38G FF1：10 輪 Feistel 網絡，輪函數為 AES CBC-MAC (PRF)。
左半長度 u = floor(n/2)，每輪以 PRF 輸出對 radix^m 做模加。
"""

import logging
import struct

from fpetool.primitives import BLOCK_SIZE, encrypt_block, prf
from fpetool.radix import num_to_str, str_to_num

NUM_ROUNDS = 10
MAX_TWEAK_LEN = 2**32 - 1

logger = logging.getLogger(__name__)


def _byte_length(radix: int, v: int) -> int:
    """b = ceil(ceil(v * log2(radix)) / 8)，以整數運算避免浮點誤差"""
    return ((radix**v - 1).bit_length() + 7) // 8


def _initial_block(radix: int, u: int, n: int, t: int) -> bytes:
    """P = [1] [2] [1] [radix]^3 [10] [u mod 256] [n]^4 [t]^4"""
    return (
        struct.pack(">BBB", 1, 2, 1)
        + radix.to_bytes(3, "big")
        + struct.pack(">BBII", NUM_ROUNDS, u % 256, n, t)
    )


def _round_value(
    key: bytes, tweak: bytes, p: bytes, round_num: int, numeral: str, radix: int, b: int, d: int
) -> int:
    """FF1 輪函數：回傳 y = NUM(S)"""
    q = (
        tweak
        + bytes((-len(tweak) - b - 1) % BLOCK_SIZE)
        + bytes([round_num])
        + str_to_num(numeral, radix).to_bytes(b, "big")
    )
    r = prf(key, p + q)

    s = r
    for j in range(1, (d + BLOCK_SIZE - 1) // BLOCK_SIZE):
        counter = j.to_bytes(BLOCK_SIZE, "big")
        s += encrypt_block(key, bytes(x ^ y for x, y in zip(r, counter)))

    return int.from_bytes(s[:d], "big")


def _parameters(n: int, radix: int, tweak: bytes):
    u = n // 2
    v = n - u
    b = _byte_length(radix, v)
    d = 4 * ((b + 3) // 4) + 4
    p = _initial_block(radix, u, n, len(tweak))
    return u, v, b, d, p


def encrypt(key: bytes, tweak: bytes, plaintext: str, radix: int) -> str:
    """
    FF1 加密

    Args:
        key: AES 金鑰（16、24 或 32 bytes）
        tweak: 任意長度 tweak，可為空
        plaintext: 長度 >= 2 的數字字串
        radix: 基數 2~62

    Returns:
        與明文等長、同基數的密文
    """
    n = len(plaintext)
    u, v, b, d, p = _parameters(n, radix, tweak)
    logger.debug("FF1 encrypt: radix=%d n=%d t=%d b=%d d=%d", radix, n, len(tweak), b, d)

    A, B = plaintext[:u], plaintext[u:]
    for i in range(NUM_ROUNDS):
        m = u if i % 2 == 0 else v
        y = _round_value(key, tweak, p, i, B, radix, b, d)
        c = (str_to_num(A, radix) + y) % radix**m
        A, B = B, num_to_str(c, radix, m)

    return A + B


def decrypt(key: bytes, tweak: bytes, ciphertext: str, radix: int) -> str:
    """
    FF1 解密：輪次由 9 倒數到 0，以模減還原

    Returns:
        原始明文
    """
    n = len(ciphertext)
    u, v, b, d, p = _parameters(n, radix, tweak)
    logger.debug("FF1 decrypt: radix=%d n=%d t=%d b=%d d=%d", radix, n, len(tweak), b, d)

    A, B = ciphertext[:u], ciphertext[u:]
    for i in range(NUM_ROUNDS - 1, -1, -1):
        m = u if i % 2 == 0 else v
        y = _round_value(key, tweak, p, i, A, radix, b, d)
        c = (str_to_num(B, radix) - y) % radix**m
        A, B = num_to_str(c, radix, m), A

    return A + B

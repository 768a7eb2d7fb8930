"""
fpetool FF3 模組

8 輪 Feistel 網絡，tweak 固定 8 bytes 分為 TL / TR 兩半。
金鑰、輪函數輸入與輸出皆做位元組反轉，數字字串在轉整數前先字元反轉。
FF3 與 FF3-1 兩個標籤共用此實作（64-bit tweak）。
"""

import logging

from fpetool.errors import InvalidTweakLengthError
from fpetool.primitives import BLOCK_SIZE, encrypt_block
from fpetool.radix import num_to_str, str_to_num

NUM_ROUNDS = 8
TWEAK_LEN = 8
HALF_TWEAK_LEN = TWEAK_LEN // 2
NUMERAL_BYTES = BLOCK_SIZE - HALF_TWEAK_LEN  # 96 bits

logger = logging.getLogger(__name__)


def max_length(radix: int) -> int:
    """
    可加密的最大長度：2 * floor(log_radix(2^96))

    每半邊的數值必須放得進 P 的 12 bytes。
    """
    limit = 2 ** (8 * NUMERAL_BYTES)
    half = 0
    while radix ** (half + 1) <= limit:
        half += 1
    return 2 * half


def _round_value(rev_key: bytes, w: bytes, round_num: int, numeral: str, radix: int) -> int:
    """FF3 輪函數：S = REV(CIPH(REV(K), REV(P)))，回傳 y = NUM(S)"""
    head = bytes(x ^ y for x, y in zip(w, round_num.to_bytes(HALF_TWEAK_LEN, "big")))
    p = head + str_to_num(numeral[::-1], radix).to_bytes(NUMERAL_BYTES, "big")
    s = encrypt_block(rev_key, p[::-1])[::-1]
    return int.from_bytes(s, "big")


def _split(tweak: bytes):
    if len(tweak) != TWEAK_LEN:
        raise InvalidTweakLengthError(f"FF3 tweak 必須為 {TWEAK_LEN} bytes: {len(tweak)}")
    return tweak[:HALF_TWEAK_LEN], tweak[HALF_TWEAK_LEN:]


def encrypt(key: bytes, tweak: bytes, plaintext: str, radix: int) -> str:
    """
    FF3 加密

    Args:
        key: AES 金鑰（16、24 或 32 bytes），使用前反轉
        tweak: 8 bytes tweak
        plaintext: 數字字串，長度 2 ~ max_length(radix)
        radix: 基數 2~62

    Returns:
        與明文等長、同基數的密文
    """
    n = len(plaintext)
    u = (n + 1) // 2
    v = n - u
    tl, tr = _split(tweak)
    rev_key = key[::-1]
    logger.debug("FF3 encrypt: radix=%d n=%d", radix, n)

    A, B = plaintext[:u], plaintext[u:]
    for i in range(NUM_ROUNDS):
        if i % 2 == 0:
            m, w = u, tr
        else:
            m, w = v, tl
        y = _round_value(rev_key, w, i, B, radix)
        c = (str_to_num(A[::-1], radix) + y) % radix**m
        A, B = B, num_to_str(c, radix, m)[::-1]

    return A + B


def decrypt(key: bytes, tweak: bytes, ciphertext: str, radix: int) -> str:
    """FF3 解密：輪次由 7 倒數到 0"""
    n = len(ciphertext)
    u = (n + 1) // 2
    v = n - u
    tl, tr = _split(tweak)
    rev_key = key[::-1]
    logger.debug("FF3 decrypt: radix=%d n=%d", radix, n)

    A, B = ciphertext[:u], ciphertext[u:]
    for i in range(NUM_ROUNDS - 1, -1, -1):
        if i % 2 == 0:
            m, w = u, tr
        else:
            m, w = v, tl
        y = _round_value(rev_key, w, i, A, radix)
        c = (str_to_num(B[::-1], radix) - y) % radix**m
        A, B = num_to_str(c, radix, m)[::-1], A

    return A + B

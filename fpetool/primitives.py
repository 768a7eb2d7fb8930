"""
fpetool 區塊加密基礎

整個 FPE 引擎只依賴單一區塊的 AES-ECB 加密：
FF1 用它組成 CBC-MAC 形式的 PRF，FF3 直接用它當輪函數。
"""

from Crypto.Cipher import AES

BLOCK_SIZE = 16  # 128 bits


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def encrypt_block(key: bytes, block: bytes) -> bytes:
    """以 AES-ECB 加密恰好一個 16 bytes 區塊，不補位"""
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"區塊長度必須為 {BLOCK_SIZE} bytes: {len(block)}")
    return AES.new(key, AES.MODE_ECB).encrypt(block)


def prf(key: bytes, data: bytes) -> bytes:
    """
    FF1 的 PRF：補零至 16 的倍數後做 CBC-MAC

    只用於 FF1 內部格式固定的 P || Q 輸入。

    Returns:
        最後一個 16 bytes 狀態
    """
    remainder = len(data) % BLOCK_SIZE
    if remainder:
        data = data + bytes(BLOCK_SIZE - remainder)

    aes = AES.new(key, AES.MODE_ECB)
    state = bytes(BLOCK_SIZE)
    for offset in range(0, len(data), BLOCK_SIZE):
        state = aes.encrypt(_xor(state, data[offset:offset + BLOCK_SIZE]))

    return state

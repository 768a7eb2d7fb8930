"""
fpetool FPE 對外介面

負責輸入驗證、十六進位解碼、tweak 正規化，再分派給 FF1 或 FF3。
驗證依序進行，第一個錯誤即拋出，任何 Feistel 輪次都不會在驗證通過前執行。
"""

import logging
import re

from fpetool import ff1, ff3
from fpetool.errors import (
    InvalidKeyLengthError,
    InvalidTweakLengthError,
    MalformedHexError,
    MessageTooLongError,
    MessageTooShortError,
    UnsupportedAlgorithmError,
)
from fpetool.radix import check_radix, str_to_num

ALGORITHMS = ("FF1", "FF3", "FF3-1")
FF3_FAMILY = ("FF3", "FF3-1")
KEY_LENGTHS = {"AES-128": 16, "AES-192": 24, "AES-256": 32}
RADIX_OPTIONS = (2, 8, 10, 16, 26, 36, 62)
MIN_MESSAGE_LEN = 2

_HEX_PATTERN = re.compile(r"^[0-9A-Fa-f]*$")
_WHITESPACE = re.compile(r"\s+")

logger = logging.getLogger(__name__)


def clean_hex(text: str) -> str:
    """移除空白與換行並轉為大寫"""
    return _WHITESPACE.sub("", text).upper()


def parse_hex(text: str, field: str) -> bytes:
    """
    解碼十六進位字串

    Raises:
        MalformedHexError: 長度為奇數或含非十六進位字元
    """
    cleaned = clean_hex(text)
    if not _HEX_PATTERN.match(cleaned) or len(cleaned) % 2 != 0:
        raise MalformedHexError(f"{field} 必須為有效的十六進位字串", field=field)
    return bytes.fromhex(cleaned)


def _check_algorithm(algorithm: str) -> None:
    if algorithm not in ALGORITHMS:
        raise UnsupportedAlgorithmError(f"不支援的演算法: {algorithm}")


def _check_key(key: bytes, key_length: str = None) -> None:
    if key_length is None:
        if len(key) not in KEY_LENGTHS.values():
            raise InvalidKeyLengthError(f"金鑰長度必須為 16、24 或 32 bytes: {len(key)}")
        return

    expected = KEY_LENGTHS[key_length]
    if len(key) != expected:
        raise InvalidKeyLengthError(
            f"{key_length} 金鑰長度必須為 {expected} bytes: {len(key)}"
        )


def _check_data(data: str, radix: int, algorithm: str) -> None:
    if len(data) < MIN_MESSAGE_LEN:
        raise MessageTooShortError(f"資料長度至少需 {MIN_MESSAGE_LEN} 個字元")

    check_radix(radix)
    str_to_num(data, radix)

    if algorithm in FF3_FAMILY:
        limit = ff3.max_length(radix)
        if len(data) > limit:
            raise MessageTooLongError(f"{algorithm} 在基數 {radix} 下資料長度不可超過 {limit}")


def _check_tweak(tweak: bytes, algorithm: str) -> None:
    if algorithm in FF3_FAMILY and len(tweak) != ff3.TWEAK_LEN:
        raise InvalidTweakLengthError(
            f"{algorithm} tweak 長度必須為 {ff3.TWEAK_LEN} bytes: {len(tweak)}"
        )
    if len(tweak) > ff1.MAX_TWEAK_LEN:
        raise InvalidTweakLengthError(f"tweak 過長: {len(tweak)}")


def _default_tweak(algorithm: str) -> bytes:
    """未啟用 tweak 時：FF1 使用空 tweak，FF3 使用 8 個零位元組"""
    return bytes(ff3.TWEAK_LEN) if algorithm in FF3_FAMILY else b""


def _run(operation: str, key: bytes, tweak: bytes, data: str, radix: int, algorithm: str) -> str:
    logger.debug(
        "%s %s: radix=%d n=%d tweak_len=%d", algorithm, operation, radix, len(data), len(tweak)
    )
    module = ff1 if algorithm == "FF1" else ff3
    return getattr(module, operation)(key, tweak, data, radix)


def _validate(key: bytes, tweak: bytes, data: str, radix: int, algorithm: str, key_length: str = None):
    try:
        _check_algorithm(algorithm)
        _check_key(key, key_length)
        _check_data(data, radix, algorithm)
        _check_tweak(tweak, algorithm)
    except ValueError as e:
        logger.debug("rejected (%s): %s", getattr(e, "field", None), e)
        raise


def encrypt(key: bytes, tweak: bytes, plaintext: str, radix: int, algorithm: str = "FF1") -> str:
    """
    以 FF1 / FF3 / FF3-1 加密數字字串

    Args:
        key: AES 金鑰（16、24 或 32 bytes）
        tweak: FF1 任意長度；FF3 / FF3-1 必須為 8 bytes
        plaintext: 數字字串
        radix: 基數 2~62
        algorithm: "FF1"、"FF3" 或 "FF3-1"

    Returns:
        與明文等長、同基數的密文
    """
    _validate(key, tweak, plaintext, radix, algorithm)
    return _run("encrypt", key, tweak, plaintext, radix, algorithm)


def decrypt(key: bytes, tweak: bytes, ciphertext: str, radix: int, algorithm: str = "FF1") -> str:
    """以 FF1 / FF3 / FF3-1 解密，參數同 encrypt()"""
    _validate(key, tweak, ciphertext, radix, algorithm)
    return _run("decrypt", key, tweak, ciphertext, radix, algorithm)


def _prepare_hex(key_hex: str, data: str, radix: int, algorithm: str, key_length: str, tweak_hex):
    _check_algorithm(algorithm)
    if key_length not in KEY_LENGTHS:
        raise UnsupportedAlgorithmError(f"不支援的金鑰長度: {key_length}")

    key = parse_hex(key_hex, "key")
    _check_key(key, key_length)
    _check_data(data, radix, algorithm)

    if tweak_hex is None:
        tweak = _default_tweak(algorithm)
    else:
        tweak = parse_hex(tweak_hex, "tweak")
    _check_tweak(tweak, algorithm)

    return key, tweak


def encrypt_hex(
    key_hex: str,
    data: str,
    radix: int,
    algorithm: str = "FF1",
    key_length: str = "AES-128",
    tweak_hex: str = None,
) -> str:
    """
    以十六進位金鑰 / tweak 加密

    Args:
        key_hex: 金鑰十六進位字串，允許空白
        data: 明文數字字串
        radix: 基數
        algorithm: "FF1"、"FF3" 或 "FF3-1"
        key_length: "AES-128"、"AES-192" 或 "AES-256"
        tweak_hex: tweak 十六進位字串；None 表示不使用 tweak

    Returns:
        密文數字字串
    """
    try:
        key, tweak = _prepare_hex(key_hex, data, radix, algorithm, key_length, tweak_hex)
    except ValueError as e:
        logger.debug("rejected (%s): %s", getattr(e, "field", None), e)
        raise
    return _run("encrypt", key, tweak, data, radix, algorithm)


def decrypt_hex(
    key_hex: str,
    data: str,
    radix: int,
    algorithm: str = "FF1",
    key_length: str = "AES-128",
    tweak_hex: str = None,
) -> str:
    """以十六進位金鑰 / tweak 解密，參數同 encrypt_hex()"""
    try:
        key, tweak = _prepare_hex(key_hex, data, radix, algorithm, key_length, tweak_hex)
    except ValueError as e:
        logger.debug("rejected (%s): %s", getattr(e, "field", None), e)
        raise
    return _run("decrypt", key, tweak, data, radix, algorithm)

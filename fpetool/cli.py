"""
fpetool 命令列介面

用法:
  fpetool encrypt DATA --key HEX [--key-length AES-128] [--algorithm FF1] [--radix 10] [--tweak HEX]
  fpetool decrypt DATA --key HEX ...

未指定 --tweak 時不使用 tweak（FF1 空 tweak，FF3 / FF3-1 為 8 個零位元組）。
結束碼: 0=成功, 2=參數或驗證錯誤
"""

import argparse
import logging
import sys

from fpetool.errors import FpeError
from fpetool.fpe import ALGORITHMS, KEY_LENGTHS, RADIX_OPTIONS, decrypt_hex, encrypt_hex


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="fpetool",
        description="Format-Preserving Encryption (NIST SP 800-38G FF1 / FF3)",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="顯示除錯訊息")

    sub = ap.add_subparsers(dest="cmd", required=True)
    for name, help_text in (("encrypt", "加密"), ("decrypt", "解密")):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("data", help="數字字串")
        p.add_argument("--key", required=True, help="AES 金鑰（十六進位）")
        p.add_argument("--key-length", choices=tuple(KEY_LENGTHS), default="AES-128")
        p.add_argument("--algorithm", choices=ALGORITHMS, default="FF1")
        p.add_argument("--radix", type=int, choices=RADIX_OPTIONS, default=10)
        p.add_argument("--tweak", default=None, help="tweak（十六進位），省略則不使用")

    return ap


def main(argv: list = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    transform = encrypt_hex if args.cmd == "encrypt" else decrypt_hex
    try:
        result = transform(
            args.key,
            args.data,
            args.radix,
            algorithm=args.algorithm,
            key_length=args.key_length,
            tweak_hex=args.tweak,
        )
    except FpeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

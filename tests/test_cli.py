"""命令列介面測試"""

import pytest
from fpetool.cli import main

KEY_HEX = "2B7E151628AED2A6ABF7158809CF4F3C"


class TestCli:
    """encrypt / decrypt 子命令"""

    def test_encrypt(self, capsys):
        assert main(["encrypt", "0123456789", "--key", KEY_HEX]) == 0
        assert capsys.readouterr().out.strip() == "2433477484"

    def test_decrypt(self, capsys):
        assert main(["decrypt", "2433477484", "--key", KEY_HEX]) == 0
        assert capsys.readouterr().out.strip() == "0123456789"

    def test_ff3_with_tweak(self, capsys):
        args = [
            "encrypt", "890121234567890000",
            "--key", "EF4359D8D580AA4F7F036D6F04FC6A94",
            "--algorithm", "FF3",
            "--tweak", "D8E7920AFA330A73",
        ]
        assert main(args) == 0
        assert capsys.readouterr().out.strip() == "750918814058654607"

    def test_validation_error_exit_code(self, capsys):
        assert main(["encrypt", "9", "--key", KEY_HEX]) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("error:")

    def test_radix_outside_options(self):
        with pytest.raises(SystemExit) as exc:
            main(["encrypt", "0123", "--key", KEY_HEX, "--radix", "5"])
        assert exc.value.code == 2

from decimal import Decimal
from pathlib import Path
import pytest

from atm.domain.money import Money
from atm.repositories.text_balance_repository import TextBalanceRepository


def _repo(tmp_path) -> TextBalanceRepository:
    return TextBalanceRepository(balance_path=tmp_path / "balance.txt")


def test_missing_file_is_zero(tmp_path):
    assert _repo(tmp_path).load() == Money.zero()


def test_blank_file_is_zero(tmp_path):
    (tmp_path / "balance.txt").write_text("  \n", encoding="utf-8")
    assert _repo(tmp_path).load() == Money.zero()


def test_save_writes_two_decimals_and_overwrites(tmp_path):
    repo = _repo(tmp_path)
    repo.save(Money.from_str("100"))
    repo.save(Money.from_str("70.5"))

    assert (tmp_path / "balance.txt").read_text(encoding="utf-8") == "70.50"
    assert repo.load().amount == Decimal("70.50")
    assert not (tmp_path / "balance.txt.tmp").exists()


def test_garbage_raises_value_error(tmp_path):
    (tmp_path / "balance.txt").write_text("lots of money", encoding="utf-8")
    with pytest.raises(ValueError):
        _repo(tmp_path).load()


def test_negative_balance_raises_value_error(tmp_path):
    (tmp_path / "balance.txt").write_text("-5.00", encoding="utf-8")
    with pytest.raises(ValueError):
        _repo(tmp_path).load()


def test_failed_save_leaves_no_tmp_file(tmp_path, monkeypatch):
    repo = _repo(tmp_path)
    repo.save(Money.from_str("10"))

    def broken_replace(self, target):
        raise OSError("rename refused")

    monkeypatch.setattr(Path, "replace", broken_replace)
    with pytest.raises(OSError):
        repo.save(Money.from_str("20"))

    assert not (tmp_path / "balance.txt.tmp").exists()
    assert (tmp_path / "balance.txt").read_text(encoding="utf-8") == "10.00"

import pytest

from atm.settings import get_settings


def test_settings_from_env(tmp_path, monkeypatch):
    data_dir = tmp_path / "atm-data"
    monkeypatch.setenv("ATM_DATA_DIR", str(data_dir))
    monkeypatch.setenv("ATM_HISTORY_LIMIT", "5")
    monkeypatch.setenv("ATM_LOG_LEVEL", "debug")

    s = get_settings()

    assert s.data_dir == data_dir
    assert data_dir.is_dir()
    assert s.balance_path == data_dir / "balance.txt"
    assert s.transactions_path == data_dir / "transactions.txt"
    assert s.history_limit == 5
    assert s.log_level == "DEBUG"


def test_settings_defaults_to_cwd(tmp_path, monkeypatch):
    monkeypatch.delenv("ATM_DATA_DIR", raising=False)
    monkeypatch.delenv("ATM_HISTORY_LIMIT", raising=False)
    monkeypatch.delenv("ATM_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)

    s = get_settings()
    assert s.data_dir.resolve() == tmp_path.resolve()
    assert s.history_limit == 10
    assert s.log_level == "WARNING"


@pytest.mark.parametrize("raw", ["zero", "0", "-3"])
def test_bad_history_limit(raw, monkeypatch, tmp_path):
    monkeypatch.setenv("ATM_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("ATM_HISTORY_LIMIT", raw)
    with pytest.raises(ValueError):
        get_settings()

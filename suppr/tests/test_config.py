import pytest

from suppr.config import Config, env_flag
from suppr.errors import SupprError


@pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "on"])
def test_env_flag_true(monkeypatch, value):
    monkeypatch.setenv("SUPPR_TEST_FLAG", value)
    assert env_flag("SUPPR_TEST_FLAG", False) is True

@pytest.mark.parametrize("value", ["0", "false", "no", "off"])
def test_env_flag_false(monkeypatch, value):
    monkeypatch.setenv("SUPPR_TEST_FLAG", value)
    assert env_flag("SUPPR_TEST_FLAG", True) is False

def test_env_flag_default(monkeypatch):
    monkeypatch.delenv("SUPPR_TEST_FLAG", raising=False)
    assert env_flag("SUPPR_TEST_FLAG", True) is True
    monkeypatch.setenv("SUPPR_TEST_FLAG", "  ")
    assert env_flag("SUPPR_TEST_FLAG", False) is False

def test_validate_rejects_unknown_level(monkeypatch):
    monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError):
        Config.validate()

def test_validate_accepts_known_level(monkeypatch):
    monkeypatch.setattr(Config, "LOG_LEVEL", "DEBUG")
    Config.validate()

def test_validate_raises_suppr_error(monkeypatch):
    monkeypatch.setattr(Config, "KUBECTL", "")
    with pytest.raises(SupprError, match="SUPPR_KUBECTL"):
        Config.validate()

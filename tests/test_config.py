import pytest

from aiask.config import REQUIRED, load_settings
from aiask.errors import ConfigError

FULL = {"AI_ASK_BASE_URL": "http://x/v1", "AI_ASK_API_KEY": "k", "AI_ASK_MODEL": "m"}


def test_load_settings_defaults():
    s = load_settings(FULL)
    assert (s.base_url, s.api_key, s.model) == ("http://x/v1", "k", "m")
    assert s.shell == "sh"
    assert s.log_level == "WARNING"


def test_load_settings_optional_values():
    s = load_settings({**FULL, "SHELL": "/usr/bin/fish", "AI_ASK_LOG_LEVEL": "debug"})
    assert s.shell == "/usr/bin/fish"
    assert s.log_level == "debug"


@pytest.mark.parametrize("missing", REQUIRED)
def test_missing_variable_is_named(missing):
    env = {k: v for k, v in FULL.items() if k != missing}
    with pytest.raises(ConfigError, match=missing):
        load_settings(env)


def test_empty_variable_counts_as_missing():
    with pytest.raises(ConfigError, match="AI_ASK_MODEL is not set"):
        load_settings({**FULL, "AI_ASK_MODEL": ""})


def test_first_missing_is_reported():
    with pytest.raises(ConfigError, match="AI_ASK_BASE_URL"):
        load_settings({})


def test_repr_hides_api_key():
    assert "secret" not in repr(load_settings({**FULL, "AI_ASK_API_KEY": "secret"}))

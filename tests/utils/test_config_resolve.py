import importlib

import pytest

from catalogsearch.utils import config as cfg


@pytest.fixture()
def reload_config(tmp_path, monkeypatch):
    """Reload utils.config after patching HOME/XDG directories.

    Ensures CONFIG_DIR/FILE constants are recalculated for a temporary home dir
    so tests do not interfere with the real user config.
    """
    fake_home = tmp_path / "home"
    fake_home.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("HOME", str(fake_home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    # Reload module so that Path.home() & env vars are re-evaluated
    importlib.reload(cfg)
    return fake_home


def test_config_dir_under_home(reload_config):
    assert cfg.CONFIG_FILE == reload_config / ".config" / "catalogsearch" / "config.toml"


def test_config_dir_respects_xdg(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    importlib.reload(cfg)
    assert cfg.CONFIG_DIR == tmp_path / "xdg" / "catalogsearch"


def test_resolve_setting_cli_over_env_over_config(reload_config, monkeypatch):
    # Prepare env var and config, then ensure cli_value wins
    monkeypatch.setenv("CATALOGSEARCH_QUERY_SITE", "from-env")
    cfg.CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    cfg.CONFIG_FILE.write_text('[query]\nsite = "from-config"\n')

    result = cfg.resolve_setting("query.site", default="default", cli_value="from-cli")
    assert result == "from-cli"


def test_resolve_setting_env_over_config(reload_config, monkeypatch):
    # Env var should override config file when cli_value is None
    monkeypatch.setenv("CATALOGSEARCH_QUERY_SITE", "from-env")
    cfg.CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    cfg.CONFIG_FILE.write_text('[query]\nsite = "from-config"\n')

    assert cfg.resolve_setting("query.site", default="default") == "from-env"


def test_resolve_setting_config_when_no_env(reload_config, monkeypatch):
    monkeypatch.delenv("CATALOGSEARCH_BASE_URL", raising=False)
    cfg.CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    cfg.CONFIG_FILE.write_text('base_url = "https://from-config/"\n')

    assert cfg.resolve_setting("base_url", default="") == "https://from-config/"


def test_resolve_setting_default_when_missing(reload_config):
    # Should fall back to default when no other sources
    result = cfg.resolve_setting("missing", default="default-value")
    assert result == "default-value"


def test_resolve_setting_coerces_to_default_type(reload_config, monkeypatch):
    monkeypatch.setenv("CATALOGSEARCH_QUERY_PAGE_SIZE", "25")
    monkeypatch.setenv("CATALOGSEARCH_VERBOSE", "yes")
    monkeypatch.setenv("CATALOGSEARCH_TIMEOUT", "not-a-number")

    assert cfg.resolve_setting("query.page_size", default=10) == 25
    assert cfg.resolve_setting("verbose", default=False) is True
    assert cfg.resolve_setting("timeout", default=1.5) == 1.5


def test_set_setting_creates_tables(reload_config):
    cfg.set_setting("query.site", "cmore.se")
    cfg.set_setting("query.lang", "sv")
    cfg.set_setting("base_url", "https://search.example.com/")

    assert cfg.resolve_setting("query.site", default="") == "cmore.se"
    assert cfg.resolve_setting("query.lang", default="") == "sv"
    assert "[query]" in cfg.CONFIG_FILE.read_text()


def test_set_setting_rejects_non_table_parent(reload_config):
    cfg.set_setting("query", "flat")
    with pytest.raises(ValueError, match="not a table"):
        cfg.set_setting("query.site", "cmore.se")

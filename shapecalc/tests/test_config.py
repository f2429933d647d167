import logging

import pytest
from .. import Square, config

pytestmark = pytest.mark.group_config


@pytest.mark.parametrize("name, level", [("debug", logging.DEBUG), ("INFO", logging.INFO), (" error ", logging.ERROR)])
def test_log_level_names(name, level):
    assert config.log_level(name) == level


def test_unknown_log_level_falls_back_to_warning():
    assert config.log_level("chatty") == logging.WARNING


def test_log_level_from_environment_setting(monkeypatch):
    monkeypatch.setattr(config, "LOG_LEVEL", "info")
    assert config.log_level() == logging.INFO


def test_construction_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="shapecalc")
    Square(5)
    assert "Built Square(side=5.0)" in caplog.text

import logging

import pytest

# 激活自定义插件
pytest_plugins = [
    "common.plugins.example_plugin",
]


def pytest_addoption(parser):
    parser.addoption("--env", action="store", default="dev", help="运行环境")


@pytest.fixture(scope="function")
def set_currency(monkeypatch):
    monkeypatch.setenv("STRUCTPATTERNS_CURRENCY", "€")
    yield
    monkeypatch.delenv("STRUCTPATTERNS_CURRENCY", raising=False)


@pytest.fixture(scope="function")
def default_currency(monkeypatch):
    monkeypatch.delenv("STRUCTPATTERNS_CURRENCY", raising=False)


@pytest.fixture(scope="function")
def log_capture(caplog):
    logger = logging.getLogger("structpatterns.pricing")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    return caplog


def pytest_generate_tests(metafunc):
    if "depth" in metafunc.fixturenames:
        metafunc.parametrize("depth", [0, 1, 4, 50], ids=["bare", "single", "reference", "long"])

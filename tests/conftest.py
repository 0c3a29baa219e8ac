"""Shared fixtures for the wordrank tests."""

from configparser import ConfigParser

import pytest

import utils
from utils.config import Config


@pytest.fixture(autouse=True, scope="session")
def log_directory(tmp_path_factory):
    """Keep per-logger .log files out of the working tree."""
    directory = tmp_path_factory.mktemp("logs")
    utils.set_log_options(str(directory), "INFO")
    return directory


def make_config(**sections):
    """
    Build a Config from keyword sections, e.g.
    make_config(TOKENIZER={"VARIANT": "extended"}).
    """
    cparser = ConfigParser()
    for section, values in sections.items():
        cparser.add_section(section)
        for key, value in values.items():
            cparser.set(section, key, value)
    return Config(cparser)


@pytest.fixture
def config():
    return make_config()


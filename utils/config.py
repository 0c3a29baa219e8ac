"""
utils/config.py - Run Configuration

Wraps a ConfigParser loaded from config.ini. Missing sections or keys
fall back to the defaults below so an empty parser is a valid config.
"""

import codecs
import logging

DEFAULTS = {
    "TOKENIZER": {"VARIANT": "simple"},
    "INPUT": {"FORMAT": "text", "ENCODING": "utf-8"},
    "OUTPUT": {"DIAGNOSTICS": "false", "REPORT": ""},
    "LOGGING": {"LEVEL": "INFO", "DIRECTORY": "Logs"},
}


class Config(object):
    """
    Settings for one word ranking run. Variant and input format names are
    checked by wordrank.check_config, which owns the lists of valid names.

    Raises:
        ValueError: If the encoding or log level is not recognised
    """

    def __init__(self, config):
        for section, values in DEFAULTS.items():
            if not config.has_section(section):
                config.add_section(section)
            for key, value in values.items():
                if not config.has_option(section, key):
                    config.set(section, key, value)

        self.variant = config["TOKENIZER"]["VARIANT"].strip().lower()
        self.input_format = config["INPUT"]["FORMAT"].strip().lower()
        self.encoding = config["INPUT"]["ENCODING"].strip()
        self.diagnostics = config.getboolean("OUTPUT", "DIAGNOSTICS")
        self.report_file = config["OUTPUT"]["REPORT"].strip() or None
        self.log_level = config["LOGGING"]["LEVEL"].strip().upper()
        self.log_directory = config["LOGGING"]["DIRECTORY"].strip()

        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown input encoding {self.encoding!r}") from None
        # getLevelName maps unknown names to the string "Level <name>"
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level {self.log_level!r}")

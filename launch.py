"""
launch.py - Word Ranking Entry Point

Reads text, counts words, and prints them most frequent first,
alphabetically within equal counts.

Usage:
    python launch.py < book.txt               # Read stdin
    python launch.py --input book.txt         # Read a file
    python launch.py --input page.html --format html
    python launch.py --variant extended --debug
    python launch.py --config_file path       # Use custom config file
"""

import sys
from configparser import ConfigParser
from argparse import ArgumentParser

from utils import get_logger, set_log_options
from utils.config import Config
from wordrank import WordRank, RankingConsistencyError, check_config
from wordrank.source import open_source


def load_config(config_file, variant=None, input_format=None, debug=False, report=None):
    """
    Build the Config from the file, with command line values taking precedence.

    Raises:
        ValueError: If a variant, format, encoding or log level is unknown
    """
    cparser = ConfigParser()
    cparser.read(config_file)
    overrides = {
        ("TOKENIZER", "VARIANT"): variant,
        ("INPUT", "FORMAT"): input_format,
        ("OUTPUT", "DIAGNOSTICS"): "true" if debug else None,
        ("OUTPUT", "REPORT"): report,
    }
    for (section, key), value in overrides.items():
        if value is None:
            continue
        if not cparser.has_section(section):
            cparser.add_section(section)
        cparser.set(section, key, value)
    return check_config(Config(cparser))


def main(config_file, input_path=None, variant=None, input_format=None,
         debug=False, report=None, stdout=None, stderr=None):
    """
    Run the pipeline and return the process exit status.

    Exit status:
        0 on success, 1 on input errors, 2 on bad configuration,
        3 if ranking detected an internal inconsistency
    """
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    try:
        config = load_config(config_file, variant, input_format, debug, report)
    except ValueError as e:
        stderr.write(f"Error: {e}\n")
        return 2

    set_log_options(config.log_directory, config.log_level)
    logger = get_logger("LAUNCH")

    try:
        with open_source(input_path, config.input_format, config.encoding) as stream:
            WordRank(config).run(stream, stdout, stderr)
    except FileNotFoundError:
        stderr.write(f"Error: file not found: {input_path}\n")
        return 1
    except PermissionError:
        stderr.write(f"Error: permission denied: {input_path}\n")
        return 1
    except OSError as e:
        stderr.write(f"Error: {e}\n")
        return 1
    except RankingConsistencyError as e:
        logger.error(f"Ranking failed: {e}")
        stderr.write(f"Error: ranking failed: {e}\n")
        return 3
    return 0


if __name__ == "__main__":
    parser = ArgumentParser()
    parser.add_argument("--input", type=str, default=None,
                        help="Text file to read (default: stdin)")
    parser.add_argument("--format", type=str, default=None, dest="input_format",
                        choices=["text", "html"],
                        help="Input format (overrides config)")
    parser.add_argument("--variant", type=str, default=None,
                        choices=["simple", "extended"],
                        help="Word acceptance rule (overrides config)")
    parser.add_argument("--debug", action="store_true", default=False,
                        help="Write diagnostics to stderr")
    parser.add_argument("--report", type=str, default=None,
                        help="Also write a JSON report to this path")
    parser.add_argument("--config_file", type=str, default="config.ini",
                        help="Path to configuration file")
    args = parser.parse_args()
    sys.exit(main(args.config_file, args.input, args.variant, args.input_format,
                  args.debug, args.report))

# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Configuration module for the word square enumerator.

Handles loading configuration from YAML files and command-line arguments,
with proper merging and validation.
"""

import argparse
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from wordsquares.exceptions import WordSquareError
from wordsquares.models import (
    DEFAULT_WORD_LENGTH, FILLER, MAX_SEED_WORDS, MIN_SEED_WORDS, WILDCARD
)
from wordsquares.normalizer import DEFAULT_MIN_PADDED_LENGTH

# Valid configuration values
VALID_OUTPUT_FORMATS = ["text", "yaml"]
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigValidationError(WordSquareError):
    """Raised when configuration validation fails."""
    pass


@dataclass
class InputsConfig:
    """Input files of a run."""
    wordlist: Optional[str] = None
    seed_file: Optional[str] = None


@dataclass
class IndexConfig:
    """Configuration for the preprocessed index."""
    word_length: int = DEFAULT_WORD_LENGTH
    filler: str = FILLER
    wildcard: str = WILDCARD
    pad_short_words: bool = True
    min_padded_length: int = DEFAULT_MIN_PADDED_LENGTH
    dictionary_path: str = "./index/dictionary.txt"
    patterns_path: str = "./index/patterns.txt"
    matches_path: str = "./index/matches.txt"


@dataclass
class SearchConfig:
    """Configuration for the word square search."""
    min_seed_words: int = MIN_SEED_WORDS
    max_seed_words: int = MAX_SEED_WORDS
    anchor_first_seed: bool = True


@dataclass
class OutputConfig:
    """Configuration for output."""
    solutions_path: str = "./output/wordsquares.txt"
    formats: List[str] = field(default_factory=lambda: ["text"])

    def path_for(self, fmt: str) -> str:
        """Return the output file for a format; YAML sits next to the text file."""
        if fmt == "yaml":
            return str(Path(self.solutions_path).with_suffix(".yaml"))
        return self.solutions_path


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    directory: str = "./logs"
    file_prefix: str = "wordsquares"
    to_file: bool = True
    console: bool = True


SECTIONS = {
    "inputs": InputsConfig,
    "index": IndexConfig,
    "search": SearchConfig,
    "output": OutputConfig,
    "logging": LoggingConfig,
}


def _section_from_dict(name: str, data: Any):
    """Create a section dataclass from a YAML mapping, rejecting unknown keys."""
    section_cls = SECTIONS[name]
    if data is None:
        return section_cls()
    if not isinstance(data, dict):
        raise ConfigValidationError(
            f"Section '{name}' must be a mapping, got {type(data).__name__}"
        )
    known = {f.name for f in fields(section_cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigValidationError(
            f"Unknown keys in section '{name}': {', '.join(unknown)}"
        )
    defaults = section_cls()
    for key, value in data.items():
        default = getattr(defaults, key)
        # Optional paths default to None and accept a string
        if default is None:
            if value is None:
                continue
            expected = str
        else:
            expected = type(default)
        if not _matches_type(value, expected):
            raise ConfigValidationError(
                f"'{name}.{key}' must be of type {expected.__name__}, "
                f"got {type(value).__name__} ({value!r})"
            )
    return section_cls(**data)


def _matches_type(value: Any, expected: type) -> bool:
    """Check a YAML value against a default's type; bool is not an int."""
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if expected is list:
        return isinstance(value, list) and all(isinstance(v, str) for v in value)
    return isinstance(value, expected)


@dataclass
class WordSquareConfig:
    """Complete configuration for preprocessing and solving."""
    inputs: InputsConfig = field(default_factory=InputsConfig)
    index: IndexConfig = field(default_factory=IndexConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        """Convert dicts to dataclass instances if needed."""
        for name in SECTIONS:
            value = getattr(self, name)
            if isinstance(value, dict):
                setattr(self, name, _section_from_dict(name, value))

    @classmethod
    def from_yaml(cls, path: str) -> 'WordSquareConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            WordSquareConfig instance

        Raises:
            ConfigValidationError: If file doesn't exist or is invalid
        """
        path = Path(path)
        if not path.exists():
            raise ConfigValidationError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in {path}: {e}")

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"Configuration file must contain a YAML mapping, got {type(data)}"
            )

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> 'WordSquareConfig':
        """Create WordSquareConfig from dictionary."""
        unknown = sorted(set(data) - set(SECTIONS))
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration sections: {', '.join(unknown)}"
            )
        return cls(**{
            name: _section_from_dict(name, data.get(name))
            for name in SECTIONS
        })

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'WordSquareConfig':
        """
        Create configuration from command-line arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            WordSquareConfig instance
        """
        config = cls()

        # Map CLI arguments to config
        if getattr(args, 'wordlist', None):
            config.inputs.wordlist = args.wordlist
        if getattr(args, 'seeds', None):
            config.inputs.seed_file = args.seeds
        if getattr(args, 'word_length', None):
            config.index.word_length = args.word_length
        if getattr(args, 'no_padding', False):
            config.index.pad_short_words = False
        if getattr(args, 'dict', None):
            config.index.dictionary_path = args.dict
        if getattr(args, 'patterns', None):
            config.index.patterns_path = args.patterns
        if getattr(args, 'matches', None):
            config.index.matches_path = args.matches
        if getattr(args, 'min_seeds', None) is not None:
            config.search.min_seed_words = args.min_seeds
        if getattr(args, 'max_seeds', None) is not None:
            config.search.max_seed_words = args.max_seeds
        if getattr(args, 'output', None):
            config.output.solutions_path = args.output
        if getattr(args, 'format', None):
            config.output.formats = [
                fmt.strip() for fmt in args.format.split(',') if fmt.strip()
            ]
        if getattr(args, 'log_level', None):
            config.logging.level = args.log_level.upper()
        if getattr(args, 'verbose', False):
            config.logging.level = "DEBUG"
        if getattr(args, 'log_dir', None):
            config.logging.directory = args.log_dir
        if getattr(args, 'no_log_file', False):
            config.logging.to_file = False

        return config

    @classmethod
    def merge(
        cls,
        yaml_config: 'WordSquareConfig',
        cli_config: 'WordSquareConfig'
    ) -> 'WordSquareConfig':
        """
        Merge configurations with CLI taking precedence over YAML.

        A CLI value wins only when it differs from the default, so options
        that were not given on the command line keep their YAML value.

        Args:
            yaml_config: Configuration loaded from YAML file
            cli_config: Configuration from command-line arguments

        Returns:
            Merged WordSquareConfig instance
        """
        default = cls()
        merged = cls._from_dict(yaml_config.to_dict())

        for name in SECTIONS:
            merged_section = getattr(merged, name)
            cli_section = getattr(cli_config, name)
            default_section = getattr(default, name)
            for f in fields(merged_section):
                cli_value = getattr(cli_section, f.name)
                if cli_value != getattr(default_section, f.name):
                    setattr(merged_section, f.name, cli_value)

        return merged

    def validate(self, command: Optional[str] = None) -> List[str]:
        """
        Validate configuration values.

        Args:
            command: 'preprocess' or 'solve' to also check the inputs
                that command needs

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []
        index = self.index

        # Validate word length
        if index.word_length < 2:
            errors.append(f"word_length must be at least 2, got {index.word_length}")

        # Validate special characters
        for name in ("filler", "wildcard"):
            value = getattr(index, name)
            if len(value) != 1 or value.isalpha() or value.isspace():
                errors.append(
                    f"{name} must be a single non-letter, non-space character, got {value!r}"
                )
        if index.filler == index.wildcard:
            errors.append("filler and wildcard must be different characters")

        if index.min_padded_length < 1:
            errors.append("min_padded_length must be at least 1")

        # Validate seed bounds
        search = self.search
        if search.min_seed_words < 1:
            errors.append("min_seed_words must be at least 1")
        if search.max_seed_words < search.min_seed_words:
            errors.append(
                f"max_seed_words ({search.max_seed_words}) must not be less than "
                f"min_seed_words ({search.min_seed_words})"
            )

        # Validate output formats
        if not self.output.formats:
            errors.append("At least one output format is required")
        for fmt in self.output.formats:
            if fmt not in VALID_OUTPUT_FORMATS:
                errors.append(
                    f"Invalid output format '{fmt}'. "
                    f"Must be one of: {VALID_OUTPUT_FORMATS}"
                )

        # Validate log level
        if self.logging.level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid log level '{self.logging.level}'. "
                f"Must be one of: {VALID_LOG_LEVELS}"
            )

        # Validate command inputs
        if command == "preprocess" and not self.inputs.wordlist:
            errors.append("A wordlist is required for preprocessing")
        if command == "solve" and not self.inputs.seed_file:
            errors.append("A seed file is required for solving")

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {name: asdict(getattr(self, name)) for name in SECTIONS}


def _add_common_arguments(parser: argparse.ArgumentParser):
    """Options shared by every subcommand."""
    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="YAML configuration file"
    )
    parser.add_argument(
        "--word-length", "-n",
        type=int,
        metavar="INT",
        help=f"Grid width N (default: {DEFAULT_WORD_LENGTH})"
    )
    parser.add_argument(
        "--dict",
        metavar="PATH",
        help="Dictionary index file"
    )
    parser.add_argument(
        "--patterns",
        metavar="PATH",
        help="Pattern index file"
    )
    parser.add_argument(
        "--matches",
        metavar="PATH",
        help="Match index file"
    )
    parser.add_argument(
        "--log-level",
        choices=VALID_LOG_LEVELS,
        type=str.upper,
        help="Console logging level (default: INFO)"
    )
    parser.add_argument(
        "--log-dir",
        metavar="PATH",
        help="Directory for log files"
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Log to the console only"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="wordsquares",
        description="Enumerate every word square containing a set of seed words",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Build the index files from a wordlist
  wordsquares preprocess --wordlist words.txt

  # Find all 5x5 squares containing the seed words
  wordsquares solve --seeds seeds.txt --output squares.txt

  # Using YAML configuration, CLI arguments override it
  wordsquares solve --config wordsquares.yaml --seeds other_seeds.txt
"""
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    preprocess = subparsers.add_parser(
        "preprocess",
        help="Build dictionary, pattern and match index files from a wordlist"
    )
    _add_common_arguments(preprocess)
    preprocess.add_argument(
        "--wordlist", "-w",
        metavar="PATH",
        help="Raw wordlist, one word per line"
    )
    preprocess.add_argument(
        "--no-padding",
        action="store_true",
        help="Do not pad words shorter than the grid width"
    )

    solve = subparsers.add_parser(
        "solve",
        help="Enumerate word squares from the index files and seed words"
    )
    _add_common_arguments(solve)
    solve.add_argument(
        "--seeds", "-s",
        metavar="PATH",
        help="Seed file, one word per line"
    )
    solve.add_argument(
        "--output", "-o",
        metavar="PATH",
        help="Solutions output file"
    )
    solve.add_argument(
        "--format",
        metavar="FORMATS",
        help=f"Comma-separated output formats: {', '.join(VALID_OUTPUT_FORMATS)}"
    )
    solve.add_argument(
        "--min-seeds",
        type=int,
        metavar="INT",
        help=f"Fewest seed words accepted (default: {MIN_SEED_WORDS})"
    )
    solve.add_argument(
        "--max-seeds",
        type=int,
        metavar="INT",
        help=f"Most seed words accepted (default: {MAX_SEED_WORDS})"
    )

    return parser


def load_config(args: Optional[argparse.Namespace] = None) -> WordSquareConfig:
    """
    Load configuration from command-line and/or YAML file.

    Args:
        args: Parsed command-line arguments (if None, parses sys.argv)

    Returns:
        Fully resolved WordSquareConfig

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if args is None:
        parser = create_argument_parser()
        args = parser.parse_args()

    # Load from YAML if specified
    yaml_config = None
    if getattr(args, 'config', None):
        yaml_config = WordSquareConfig.from_yaml(args.config)

    # Load from CLI
    cli_config = WordSquareConfig.from_args(args)

    # Merge configurations
    if yaml_config:
        config = WordSquareConfig.merge(yaml_config, cli_config)
    else:
        config = cli_config

    # Validate
    errors = config.validate(getattr(args, 'command', None))
    if errors:
        raise ConfigValidationError(
            "Configuration validation failed:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )

    return config

import logging
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, Union

from ruamel.yaml import YAML, constructor, scanner

from interpcompiler.core.compiled_interpolation import CompiledInterpolation
from interpcompiler.core.interpolation_compiler import InterpolationCompiler
from interpcompiler.data import ProcessingConstants
from interpcompiler.parsing.config.yaml_keys import (
    NAME_KEY, POINTS_KEY, DOMAIN_KEY, RANGE_KEY, ALGORITHM_KEY, DOMAIN_EDGE_KEY, SANITIZE_KEY
)

logger = logging.getLogger(__name__)


class BaseFileParser:
    """Base class for parsing configuration files."""

    def __init__(self, config_path: Union[str, Path]) -> None:
        self.config_path = Path(config_path)
        self.config = self._load_config()
        logger.info("Successfully loaded configuration from: %s", self.config_path)

    def _load_config(self) -> Dict[str, Any]:
        raise NotImplementedError("Subclasses must implement _load_config method")


class YAMLFileParser(BaseFileParser):
    """Parser for YAML configuration files."""

    def _load_config(self) -> Dict[str, Any]:
        yaml = YAML(typ='safe')
        yaml.allow_duplicate_keys = False
        try:
            logger.debug("Loading YAML file: %s", self.config_path)
            with open(self.config_path, 'r') as f:
                config = yaml.load(f)
            logger.debug("YAML file loaded successfully, found %d top-level keys", len(config) if config else 0)
            return config
        except FileNotFoundError as e:
            logger.error("YAML file not found: %s", self.config_path)
            raise FileNotFoundError(f"YAML file not found: {self.config_path}") from e
        except constructor.DuplicateKeyError as e:
            logger.error("Duplicate key found in YAML file %s: %s", self.config_path, e)
            raise ValueError(f"Duplicate key in {self.config_path}: {str(e)}") from e
        except scanner.ScannerError as e:
            logger.error("YAML syntax error in file %s: %s", self.config_path, e)
            raise ValueError(f"YAML syntax error in {self.config_path}: {str(e)}") from e
        except Exception as e:
            logger.error("Unexpected error parsing YAML file %s: %s", self.config_path, e, exc_info=True)
            raise ValueError(f"Error parsing {self.config_path}: {str(e)}") from e


class CurveYAMLParser(YAMLFileParser):
    """Parser for interpolation curve definitions in YAML format."""

    VALID_YAML_KEYS = {
        NAME_KEY,
        POINTS_KEY,
        DOMAIN_KEY,
        RANGE_KEY,
        ALGORITHM_KEY,
        DOMAIN_EDGE_KEY,
        SANITIZE_KEY,
    }

    # --- Constructor ---
    def __init__(self, yaml_path: Union[str, Path]) -> None:
        super().__init__(yaml_path)
        logger.info("Initializing CurveYAMLParser for: %s", yaml_path)
        self._validate_config()

    # --- Public API ---
    @property
    def name(self) -> str:
        return self.config.get(NAME_KEY, self.config_path.stem)

    def create_compiler(self) -> InterpolationCompiler:
        """Create an InterpolationCompiler from the parsed configuration."""
        logger.info("Creating compiler for curve '%s' from: %s", self.name, self.config_path)
        return InterpolationCompiler(
            domain=self.config.get(DOMAIN_KEY),
            range_=self.config.get(RANGE_KEY),
            points=self.config.get(POINTS_KEY),
            algorithm=self.config.get(ALGORITHM_KEY, ProcessingConstants.DEFAULT_ALGORITHM),
            domain_edge=self.config.get(DOMAIN_EDGE_KEY, ProcessingConstants.DEFAULT_DOMAIN_EDGE),
            sanitize=self.config.get(SANITIZE_KEY, ProcessingConstants.DEFAULT_SANITIZE),
        )

    def create_interpolation(self) -> CompiledInterpolation:
        """Compile the curve defined by the parsed configuration."""
        return self.create_compiler().compile()

    # --- Validation Methods ---
    def _validate_config(self) -> None:
        if not isinstance(self.config, dict):
            raise ValueError(f"Root of {self.config_path} must be a mapping, "
                             f"got {type(self.config).__name__}")
        unknown = set(self.config) - self.VALID_YAML_KEYS
        if unknown:
            messages = []
            for key in sorted(unknown):
                suggestion = get_close_matches(key, self.VALID_YAML_KEYS, n=1, cutoff=0.6)
                hint = f" (did you mean '{suggestion[0]}'?)" if suggestion else ""
                messages.append(f"'{key}'{hint}")
            logger.error("Unknown keys in %s: %s", self.config_path, ", ".join(messages))
            raise ValueError(f"Unknown keys in {self.config_path}: {', '.join(messages)}\n"
                             f"Valid keys are: {', '.join(sorted(self.VALID_YAML_KEYS))}")
        has_points = POINTS_KEY in self.config
        has_arrays = DOMAIN_KEY in self.config or RANGE_KEY in self.config
        if has_points and has_arrays:
            raise ValueError(f"Use either '{POINTS_KEY}' or '{DOMAIN_KEY}'/'{RANGE_KEY}' in {self.config_path}, not both")
        if not has_points and not (DOMAIN_KEY in self.config and RANGE_KEY in self.config):
            raise ValueError(f"{self.config_path} must define '{POINTS_KEY}' or both '{DOMAIN_KEY}' and '{RANGE_KEY}'")
        sanitize = self.config.get(SANITIZE_KEY, ProcessingConstants.DEFAULT_SANITIZE)
        if not isinstance(sanitize, bool):
            raise ValueError(f"'{SANITIZE_KEY}' must be true or false, got {sanitize!r}")
        logger.debug("Configuration of %s is structurally valid", self.config_path)

"""
YAML Fixture Seeding

Lets mock data live in YAML files shaped as sections of keyed entries:

    users:
      "123":
        name: Alice
      "456": ~
    products:
      p1:
        price: 10

FixtureMock applies every entry through the same entry convention as a
hand-written ``with_*`` method, so file data and chained calls compose.
"""

import logging
import os
from typing import Any, Dict, Optional, TypeVar

import yaml

from mockli.builder import MockBuilder
from mockli.config_factory import get_config_or_default
from mockli.core.errors import FixtureValidationError

logger = logging.getLogger(__name__)

FixtureT = TypeVar('FixtureT', bound='FixtureMock')


def resolve_fixture_path(path: str) -> str:
    """Resolve a relative fixture path against the configured fixtures_dir."""
    fixtures_dir = get_config_or_default().fixtures_dir
    if fixtures_dir and not os.path.isabs(path):
        return os.path.join(fixtures_dir, path)
    return path


def validate_fixture_structure(data: Any) -> None:
    """
    Validate the structure of loaded fixture data.

    Args:
        data: Parsed YAML data to validate

    Raises:
        FixtureValidationError: If structure is invalid
    """
    if not isinstance(data, dict):
        raise FixtureValidationError("Fixture root must be a dictionary")

    for section, entries in data.items():
        if not isinstance(section, str):
            raise FixtureValidationError(
                f"Section name {section!r} must be a string",
                {'section': section}
            )
        if not isinstance(entries, dict):
            raise FixtureValidationError(
                f"Section '{section}' must be a dictionary of entries",
                {'section': section}
            )
        for key, entry in entries.items():
            if entry is not None and not isinstance(entry, dict):
                raise FixtureValidationError(
                    f"Entry {key!r} in section '{section}' must be a dictionary or null",
                    {'section': section, 'key': key}
                )


def load_fixture(path: str) -> Dict[str, Dict[Any, Optional[Dict[str, Any]]]]:
    """
    Load and validate a fixture file.

    Args:
        path: Path to the YAML file, relative paths resolve against fixtures_dir

    Returns:
        Mapping of section name to keyed entries

    Raises:
        FileNotFoundError: If YAML file doesn't exist
        FixtureValidationError: If YAML structure is invalid
        yaml.YAMLError: If YAML parsing fails
    """
    resolved = resolve_fixture_path(path)
    try:
        with open(resolved, 'r', encoding='utf-8') as file:
            data = yaml.safe_load(file)

        validate_fixture_structure(data)
        logger.info(f"Loaded {len(data)} fixture sections from {resolved}")
        return data

    except FileNotFoundError:
        logger.error(f"Fixture file not found: {resolved}")
        raise
    except yaml.YAMLError as e:
        logger.error(f"YAML parsing error in {resolved}: {e}")
        raise
    except FixtureValidationError as e:
        logger.error(f"Fixture validation error in {resolved}: {e}")
        raise


class FixtureMock(MockBuilder):
    """Domain extension seeding mock data from YAML files or plain mappings."""

    def with_fixture(self: FixtureT, path: str, key_field: Optional[str] = None) -> FixtureT:
        """Apply every entry of a YAML fixture file"""
        return self.with_sections(load_fixture(path), key_field=key_field)

    def with_sections(self: FixtureT, sections: Dict[str, Dict[Any, Any]],
                      key_field: Optional[str] = None) -> FixtureT:
        """Apply every entry of an in-memory section mapping"""
        validate_fixture_structure(sections)
        for section, entries in sections.items():
            for key, entry in entries.items():
                self._put_entry(section, key, entry, key_field=key_field)
        return self

"""
Mock Builder

Accumulator base for composable mock data. Domain extensions subclass
MockBuilder and add chained ``with_*`` methods that write into the shared
mapping; ``build()`` hands the mapping back as fixture data.

    class UserMock(MockBuilder):
        with_user = entity('users')

    UserMock().with_user('123').build()
    # {'users': {'123': {'id': '123'}}}
"""

import logging
from typing import Any, Callable, Dict, Generic, Mapping, Optional, TypeVar, cast

from mockli.config_factory import get_config_or_default
from mockli.utils.logging_utils import log_builder_action

logger = logging.getLogger(__name__)

DataT = TypeVar('DataT', bound=Dict[str, Any])
BuilderT = TypeVar('BuilderT', bound='MockBuilder')

DefaultsFactory = Callable[[Any], Mapping[str, Any]]


class MockBuilder(Generic[DataT]):
    """Accumulator holding one mutable mapping of mock data."""

    def __init__(self):
        self._data: DataT = cast(DataT, {})

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # entity() cannot know the attribute name its method is assigned to
        for name, member in vars(cls).items():
            if getattr(member, '_entity_section', None) is not None and member.__name__ == 'with_entity':
                member.__name__ = name
                member.__qualname__ = f"{cls.__qualname__}.{name}"
                member.__code__ = member.__code__.replace(co_name=name)

    def build(self) -> DataT:
        """Return the accumulated mapping (the same object on every call)"""
        return self._data

    finalize = build

    def _put_entry(self: BuilderT, section: str, key: Any,
                   partial: Optional[Mapping[str, Any]] = None,
                   key_field: Optional[str] = None) -> BuilderT:
        """
        Write ``{key_field: key, **partial}`` under ``data[section][key]``.

        Other keys in the section are kept; an existing entry for the same key
        is replaced as a whole, not merged.

        Args:
            section: Name of the section in the mapping, e.g. 'users'
            key: Entry key inside the section
            partial: Optional fields for the entry
            key_field: Field holding the key inside the entry. Defaults to
                the configured default_key_field.

        Returns:
            Self for method chaining
        """
        if key_field is None:
            key_field = get_config_or_default().default_key_field

        current = self._data.get(section) or {}
        if key in current:
            log_builder_action(logger, type(self).__name__, f"Replacing entry {key!r} in '{section}'")

        entry = {key_field: key}
        if partial:
            entry.update(partial)

        self._data[section] = {**current, key: entry}
        return self

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(sections={list(self._data.keys())})"


def entity(section: str, key_field: Optional[str] = None,
           defaults: Optional[DefaultsFactory] = None) -> Callable[..., Any]:
    """
    Create a chained ``with_*`` method that adds entries to one section.

    Args:
        section: Section of the mapping the method writes to
        key_field: Field holding the key inside each entry
        defaults: Optional callable returning default fields for a key

    Returns:
        A function to assign in a MockBuilder subclass body
    """
    def with_entity(self: BuilderT, key: Any, partial: Optional[Mapping[str, Any]] = None,
                    **fields: Any) -> BuilderT:
        values: Dict[str, Any] = {}
        if defaults is not None:
            values.update(defaults(key))
        if partial:
            values.update(partial)
        values.update(fields)
        return self._put_entry(section, key, values, key_field=key_field)

    with_entity.__doc__ = f"Add or replace an entry in the '{section}' section"
    with_entity._entity_section = section
    return with_entity

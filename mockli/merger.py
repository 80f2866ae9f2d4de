"""
Builder Merger

Folds an ordered sequence of blueprints (builder classes, builder instances,
mappings or plain objects) into one MergedMockBuilder. Every merged function is
bound to the merged instance, so methods that came from different blueprints
still write into the same mapping and keep returning the merged builder.

The merged instance's class is created per merge and inherits from every class
blueprint, later blueprints first. Merged methods can therefore call their own
private helpers, read class properties and use zero-argument ``super()``.
Blueprint constructors are not run; the merged builder always starts empty.

Name collisions resolve last-write-wins: a later blueprint's member replaces
an earlier one without any error. Pass ``strict=True`` (or set strict_merge in
the configuration) to raise MergeCollisionError instead.
"""

import logging
import types
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Type

from mockli.builder import MockBuilder
from mockli.config_factory import get_config_or_default
from mockli.core.errors import MergeCollisionError

logger = logging.getLogger(__name__)

# Attributes owned by the merged builder itself
RESERVED_NAMES = frozenset(('_data', '_members', '_origins'))


class MergedMockBuilder(MockBuilder):
    """Builder exposing the union of members copied from several blueprints."""

    def __init__(self):
        super().__init__()
        self._members: Dict[str, Any] = {}
        self._origins: Dict[str, str] = {}

    @property
    def operations(self) -> List[str]:
        """Names of all merged public members"""
        return sorted(name for name in self._members if not name.startswith('_'))

    @property
    def origins(self) -> Dict[str, str]:
        """Blueprint description for each merged member"""
        return dict(self._origins)

    def _install(self, name: str, member: Any, origin: str) -> None:
        self._members[name] = member
        self._origins[name] = origin
        # Instance attributes shadow methods defined on the class
        self.__dict__[name] = _bind(member, self)

    def __repr__(self) -> str:
        return f"MergedMockBuilder(operations={self.operations}, sections={list(self._data.keys())})"


_BASE_CLASSES = frozenset(MergedMockBuilder.__mro__)


def merge_all(blueprints: Iterable[Any], strict: Optional[bool] = None) -> MergedMockBuilder:
    """
    Combine blueprints into one builder sharing a single mapping.

    Args:
        blueprints: Ordered blueprints; later entries win on name collisions
        strict: Raise on collisions instead of overwriting. Defaults to the
            configured strict_merge.

    Returns:
        A new, empty MergedMockBuilder

    Raises:
        MergeCollisionError: In strict mode, when two blueprints share a name
    """
    if strict is None:
        strict = get_config_or_default().strict_merge

    blueprints = list(blueprints)
    merged = _merged_class(blueprints)()
    for blueprint in blueprints:
        origin = _describe(blueprint)
        earlier = dict(merged._origins)
        for name, member in _blueprint_members(blueprint):
            if name in earlier:
                if strict:
                    raise MergeCollisionError(name, earlier[name], origin)
                logger.debug(f"Member '{name}' from {origin} replaces definition from {earlier[name]}")
            merged._install(name, member, origin)

    logger.debug(f"Merged builder created with operations: {merged.operations}")
    return merged


def _merged_class(blueprints: Sequence[Any]) -> Type[MergedMockBuilder]:
    """Create the class of a merged builder, inheriting from the class blueprints."""
    classes: List[type] = []
    for blueprint in reversed(blueprints):
        if isinstance(blueprint, type):
            klass = blueprint
        elif isinstance(blueprint, MockBuilder):
            klass = type(blueprint)
        else:
            continue
        if klass not in _BASE_CLASSES and klass not in classes:
            classes.append(klass)

    # Parents already reachable through a listed subclass would break the MRO
    bases = tuple(
        klass for klass in classes
        if not any(other is not klass and issubclass(other, klass) for other in classes)
    )
    if not bases:
        return MergedMockBuilder

    namespace = {'__init__': MergedMockBuilder.__init__, '__module__': __name__}
    try:
        return types.new_class('MergedMockBuilder', bases + (MergedMockBuilder,),
                               exec_body=lambda ns: ns.update(namespace))
    except TypeError as e:
        logger.warning(f"Cannot combine blueprint classes {[_describe(b) for b in bases]}: {e}. "
                       f"Merged methods will not see private helpers or super().")
        return MergedMockBuilder


def _blueprint_members(blueprint: Any) -> Iterator[Tuple[str, Any]]:
    """Yield (name, raw member) pairs a blueprint contributes to a merge."""
    if isinstance(blueprint, MergedMockBuilder):
        yield from list(blueprint._members.items())
    elif isinstance(blueprint, type):
        yield from _class_members(blueprint)
    elif isinstance(blueprint, MockBuilder):
        yield from _class_members(type(blueprint))
        yield from _instance_members(blueprint)
    elif isinstance(blueprint, Mapping):
        for name, member in blueprint.items():
            if isinstance(name, str) and not name.startswith('_'):
                yield name, member
    else:
        yield from _instance_members(blueprint)


def _class_members(klass: type) -> Iterator[Tuple[str, Any]]:
    # Base first, so definitions in subclasses override their parents.
    # Private members and properties are inherited through the merged class.
    for owner in reversed(klass.__mro__):
        if owner in _BASE_CLASSES:
            continue
        for name, member in vars(owner).items():
            if name.startswith('_') or isinstance(member, property):
                continue
            if isinstance(member, classmethod):
                member = getattr(klass, name)
            yield name, member


def _instance_members(obj: Any) -> Iterator[Tuple[str, Any]]:
    try:
        namespace = vars(obj)
    except TypeError:
        return
    for name, member in list(namespace.items()):
        if name in RESERVED_NAMES or (name.startswith('__') and name.endswith('__')):
            continue
        yield name, member


def _bind(member: Any, target: MergedMockBuilder) -> Any:
    if isinstance(member, staticmethod):
        return member.__func__
    if isinstance(member, types.FunctionType):
        return types.MethodType(member, target)
    return member


def _describe(blueprint: Any) -> str:
    if isinstance(blueprint, type):
        return f"{blueprint.__module__}.{blueprint.__qualname__}"
    return f"{type(blueprint).__qualname__} instance at {id(blueprint):#x}"

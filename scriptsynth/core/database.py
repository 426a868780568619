"""
In-memory type database that the synthesis pass reads from and writes into.
"""
from typing import Dict, List, Optional, Any, Iterator, Tuple, Type
import logging
from collections import defaultdict

from .entities import (
    AuxiliaryLink,
    Namespace,
    NamespaceDeclaration,
    Symbol,
    TypeEntity,
)


PRIMITIVE_TYPES = ("void", "bool", "int", "int64", "uint8", "float", "float64", "double", "FString", "FName", "FText")


class InheritanceChain:
    """
    The resolved ancestry of a type, starting with the type itself.

    Membership tests against ancestor names are the only way generators decide
    whether they apply, so the chain is an immutable value.
    """

    __slots__ = ("_names",)

    def __init__(self, names: Tuple[str, ...]):
        self._names = tuple(names)

    def inherits_from(self, name: Optional[str]) -> bool:
        if not name:
            return False
        return name in self._names

    @property
    def names(self) -> Tuple[str, ...]:
        return self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"InheritanceChain({' -> '.join(self._names)})"


class TypeDatabase:
    """
    Registry of all known types and namespaces.
    Handles type lookup, inheritance resolution and companion namespace bookkeeping.
    """

    def __init__(self):
        self.types: Dict[str, TypeEntity] = {}
        self.namespaces: Dict[str, Namespace] = {"": Namespace(name="")}
        self.companion_namespaces: Dict[str, Namespace] = {}

        self.logger = logging.getLogger(__name__)

    def register_primitive_types(self) -> None:
        """Add the builtin value types so property types like `bool` resolve."""
        for name in PRIMITIVE_TYPES:
            if name not in self.types:
                self.types[name] = TypeEntity(name=name, is_struct=True)

    def add_type(self, entity: TypeEntity) -> str:
        """
        Add a type to the database.

        Args:
            entity: The type to add

        Returns:
            The qualified name of the added type
        """
        if not entity.name:
            raise ValueError("Cannot register a type without a name")

        qualified_name = entity.qualified_name
        if qualified_name in self.types:
            self.logger.warning(f"Type {qualified_name} already exists. Updating.")

        self.types[qualified_name] = entity
        if entity.namespace:
            self.get_namespace(entity.namespace)
        return qualified_name

    def get_type(self, qualified_name: str) -> Optional[TypeEntity]:
        return self.types.get(qualified_name)

    def lookup_type(self, namespace: Optional[str], typename: Optional[str]) -> Optional[TypeEntity]:
        """
        Resolve a type name as seen from within a namespace scope.

        Args:
            namespace: Qualified name of the scope the name is used in
            typename: The (possibly qualified) type name

        Returns:
            The type if found in the scope or any enclosing scope, None otherwise
        """
        if not typename:
            return None

        scope = namespace or ""
        while True:
            candidate = f"{scope}::{typename}" if scope else typename
            if candidate in self.types:
                return self.types[candidate]
            if not scope:
                return None
            scope = scope.rpartition("::")[0]

    def get_ancestors(self, entity: TypeEntity) -> List[TypeEntity]:
        """Resolve the supertypes of a type, nearest first, stopping at unknown or cyclic ones."""
        ancestors: List[TypeEntity] = []
        seen = {entity.qualified_name}
        current = entity
        while current.supertype:
            parent = self.lookup_type(current.namespace, current.supertype)
            if parent is None:
                self.logger.debug(f"Unresolved supertype {current.supertype} of {current.qualified_name}")
                break
            if parent.qualified_name in seen:
                self.logger.warning(f"Inheritance cycle detected at {parent.qualified_name}")
                break
            seen.add(parent.qualified_name)
            ancestors.append(parent)
            current = parent
        return ancestors

    def get_inheritance_chain(self, entity: TypeEntity) -> InheritanceChain:
        """Resolve the ordered ancestry of a type, the type itself first."""
        names = [entity.name] + [parent.name for parent in self.get_ancestors(entity)]
        return InheritanceChain(tuple(names))

    def walk_symbols(self, entity: TypeEntity, kind: Optional[Type[Symbol]] = None,
                     include_parent: bool = True) -> Iterator[Tuple[TypeEntity, Any]]:
        """
        Iterate over the symbols of a type, followed by those of its supertypes.

        Args:
            entity: The type to start from
            kind: Only yield symbols of this class
            include_parent: Whether to continue into the supertypes

        Yields:
            (declaring type, symbol) pairs, own symbols first
        """
        owners = [entity]
        if include_parent:
            owners.extend(self.get_ancestors(entity))
        for owner in owners:
            for symbol in owner.iter_symbols(kind):
                yield owner, symbol

    def inherits_from(self, entity: TypeEntity, name: str) -> bool:
        return self.get_inheritance_chain(entity).inherits_from(name)

    def get_namespace(self, qualified_name: str) -> Namespace:
        """Get a regular namespace by qualified name, creating it if needed."""
        namespace = self.namespaces.get(qualified_name)
        if namespace is None:
            parent, _, name = qualified_name.rpartition("::")
            namespace = Namespace(name=name, parent=parent or None)
            self.namespaces[qualified_name] = namespace
        return namespace

    def declare_namespace(self, parent: str, name: str, declaration: NamespaceDeclaration,
                          owner: str) -> Namespace:
        """
        Declare a fresh companion namespace for `owner`.

        Any companion namespace from an earlier pass for the same owner is replaced,
        never appended to.
        """
        if not owner:
            raise ValueError(f"Companion namespace {name} must have an owner")

        namespace = Namespace(name=name, parent=parent or None, declaration=declaration, owner=owner)
        self.companion_namespaces[owner] = namespace
        return namespace

    def get_companion_namespace(self, owner: str) -> Optional[Namespace]:
        return self.companion_namespaces.get(owner)

    def remove_generated(self, owner: str) -> None:
        """Drop the companion namespace of `owner` and any free functions it generated elsewhere."""
        self.companion_namespaces.pop(owner, None)
        for namespace in self.namespaces.values():
            namespace.remove_generated(owner)

    def resolve_auxiliary(self, link: AuxiliaryLink) -> List[Symbol]:
        """
        Find the peer symbols an auxiliary link points at.

        Args:
            link: The link to follow

        Returns:
            All symbols with the linked name in the linked container
        """
        result: List[Symbol] = []
        entity = self.types.get(link.container_type)
        if entity is not None:
            result.extend(entity.find_symbols(link.symbol_name))

        for namespace in self.companion_namespaces.values():
            if namespace.qualified_namespace == link.container_type:
                result.extend(namespace.find_symbols(link.symbol_name))

        namespace = self.namespaces.get(link.container_type)
        if namespace is not None:
            result.extend(namespace.find_symbols(link.symbol_name))
        return result

    def get_statistics(self) -> Dict[str, Any]:
        """Get statistics about the database."""
        symbol_counts = defaultdict(int)
        generated = 0
        for entity in self.types.values():
            for symbol in entity.symbols:
                symbol_counts[symbol.__class__.__name__] += 1
                if symbol.is_auto_generated:
                    generated += 1

        free_functions = sum(len(ns.symbols) for ns in self.companion_namespaces.values())
        free_functions += sum(len(ns.symbols) for ns in self.namespaces.values())

        return {
            "total_types": len(self.types),
            "total_namespaces": len(self.namespaces) + len(self.companion_namespaces),
            "symbol_counts": dict(symbol_counts),
            "generated_members": generated,
            "free_functions": free_functions,
        }

"""
Core entities for the script type database and synthesized symbols.
"""
from typing import Annotated, Dict, Iterator, List, Literal, Optional, Set, Type, Union, Any

from pydantic import BaseModel, Field


class Argument(BaseModel):
    """A single argument of a method or a delegate signature."""

    typename: str
    name: str
    default_value: Optional[str] = None

    def format(self) -> str:
        text = f"{self.typename} {self.name}"
        if self.default_value is not None:
            text += f" = {self.default_value}"
        return text


class AuxiliaryLink(BaseModel):
    """Non-owning reference to a peer symbol in another container."""

    symbol_name: str
    container_type: str  # qualified name of the type or namespace holding the peer

    def __str__(self) -> str:
        return f"{self.container_type}::{self.symbol_name}"


class Symbol(BaseModel):
    """Base class for all members of a type or namespace."""

    name: str
    documentation: Optional[str] = None
    declared_module: Optional[str] = None
    module_offset: int = 0
    namespace: Optional[str] = None
    is_auto_generated: bool = False
    generated_by: Optional[str] = None
    auxiliary_symbols: List[AuxiliaryLink] = Field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"

    def link_to(self, other: "Symbol", container: str) -> None:
        """Record that this symbol relates to `other`, which lives in `container`."""
        self.auxiliary_symbols.append(AuxiliaryLink(symbol_name=other.name, container_type=container))


class MethodSymbol(Symbol):
    """A method on a type, or a free function in a namespace."""

    kind: Literal["method"] = "method"
    return_type: Optional[str] = None
    args: List[Argument] = Field(default_factory=list)
    is_const: bool = False
    is_property: bool = False
    is_constructor: bool = False
    is_ufunction: bool = False
    is_blueprint_event: bool = False
    is_blueprint_override: bool = False
    is_delegate_bind_function: bool = False
    delegate_bind_type: Optional[str] = None
    delegate_object_param: int = -1
    delegate_function_param: int = -1

    def format_signature(self) -> str:
        args = ", ".join(arg.format() for arg in self.args)
        signature = f"{self.return_type or 'void'} {self.name}({args})"
        if self.is_const:
            signature += " const"
        return signature


class PropertySymbol(Symbol):
    """A property (field) declared on a type."""

    kind: Literal["property"] = "property"
    typename: str = ""
    is_uproperty: bool = False

    def format_signature(self) -> str:
        return f"{self.typename} {self.name}"


AnySymbol = Annotated[Union[MethodSymbol, PropertySymbol], Field(discriminator="kind")]


class NamespaceDeclaration(BaseModel):
    """Where a namespace was declared, copied from the declaring class."""

    declared_module: Optional[str] = None
    declared_offset: int = 0
    declared_offset_end: int = 0
    scope_offset_start: int = 0
    scope_offset_end: int = 0


class Namespace(BaseModel):
    """
    A container of free functions.

    Namespaces with an owner are companion namespaces: they belong to exactly one
    class and are rebuilt on every synthesis pass of that class.
    """

    name: str = ""
    parent: Optional[str] = None
    declaration: Optional[NamespaceDeclaration] = None
    owner: Optional[str] = None
    symbols: List[AnySymbol] = Field(default_factory=list)

    @property
    def qualified_namespace(self) -> str:
        if self.parent:
            return f"{self.parent}::{self.name}"
        return self.name

    def add_symbol(self, symbol: Symbol) -> None:
        self.symbols.append(symbol)

    def find_symbols(self, name: str) -> List[Symbol]:
        return [sym for sym in self.symbols if sym.name == name]

    def remove_generated(self, owner: str) -> None:
        self.symbols = [sym for sym in self.symbols if sym.generated_by != owner]


class TypeEntity(BaseModel):
    """Represents a class, struct, enum or delegate known to the type database."""

    name: str
    namespace: str = ""
    supertype: Optional[str] = None
    documentation: Optional[str] = None

    is_struct: bool = False
    is_enum: bool = False
    is_event: bool = False
    is_delegate: bool = False
    delegate_return: str = "void"
    delegate_args: List[Argument] = Field(default_factory=list)

    declared_module: Optional[str] = None
    module_offset: int = 0
    module_offset_end: int = 0
    module_scope_start: int = 0
    module_scope_end: int = 0

    macro_specifiers: Set[str] = Field(default_factory=set)
    macro_meta: Dict[str, str] = Field(default_factory=dict)

    symbols: List[AnySymbol] = Field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name}, qualified_name={self.qualified_name})"

    @property
    def qualified_name(self) -> str:
        if self.namespace:
            return f"{self.namespace}::{self.name}"
        return self.name

    @property
    def display_name(self) -> str:
        return self.name

    def add_symbol(self, symbol: Symbol) -> None:
        self.symbols.append(symbol)

    def iter_symbols(self, kind: Optional[Type[Symbol]] = None) -> Iterator[Any]:
        """
        Iterate over the type's own symbols, optionally filtered by kind.

        Iteration runs over a snapshot, so symbols appended while iterating are
        not visited.
        """
        for symbol in tuple(self.symbols):
            if kind is None or isinstance(symbol, kind):
                yield symbol

    def find_symbols(self, name: str) -> List[Symbol]:
        return [sym for sym in self.symbols if sym.name == name]

    def generated_symbols(self) -> List[Symbol]:
        return [sym for sym in self.symbols if sym.is_auto_generated]

    def remove_generated_symbols(self) -> None:
        """Drop all synthesized members and the links this type's synthesis left on hand-written ones."""
        self.symbols = [sym for sym in self.symbols if not sym.is_auto_generated]
        self.remove_links_into(self.qualified_name)

    def remove_links_into(self, container: str) -> None:
        """Drop auxiliary links from this type's symbols that point into `container`."""
        for symbol in self.symbols:
            symbol.auxiliary_symbols = [
                link for link in symbol.auxiliary_symbols if link.container_type != container
            ]


class ScriptModule(BaseModel):
    """A parsed script module and the symbols it contributes to global lookup."""

    module_name: str
    types: List[str] = Field(default_factory=list)  # qualified names, in declaration order
    namespaces: List[Namespace] = Field(default_factory=list)
    global_symbols: List[AnySymbol] = Field(default_factory=list)

    def merge_namespace(self, namespace: Namespace) -> None:
        if namespace.owner is not None:
            self.namespaces = [ns for ns in self.namespaces if ns.owner != namespace.owner]
        self.namespaces.append(namespace)

    def remove_generated(self, owner: str) -> None:
        """Forget everything a previous synthesis pass of `owner` contributed."""
        self.namespaces = [ns for ns in self.namespaces if ns.owner != owner]
        self.global_symbols = [sym for sym in self.global_symbols if sym.generated_by != owner]

    def get_namespace(self, qualified_name: str) -> Optional[Namespace]:
        for namespace in self.namespaces:
            if namespace.qualified_namespace == qualified_name:
                return namespace
        return None

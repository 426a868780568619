"""
Base generator class for synthesizing host-framework symbols.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

from scriptsynth.core import (
    InheritanceChain,
    Namespace,
    NamespaceDeclaration,
    ScriptModule,
    SynthesisSettings,
    TypeDatabase,
    TypeEntity,
)

from .factory import SymbolFactory


class SynthesisContext:
    """
    Everything a generator may read or write while synthesizing one class.
    A context lives for exactly one synthesis pass of one class.
    """

    def __init__(self, dbtype: TypeEntity, chain: InheritanceChain, module: ScriptModule,
                 database: TypeDatabase, settings: SynthesisSettings):
        self.dbtype = dbtype
        self.chain = chain
        self.module = module
        self.database = database
        self.settings = settings
        self.factory = SymbolFactory(module, dbtype)

        self._namespace: Optional[Namespace] = None

    def inherits_from(self, name: Optional[str]) -> bool:
        return self.chain.inherits_from(name)

    @property
    def has_namespace(self) -> bool:
        return self._namespace is not None

    def declare_namespace(self) -> Namespace:
        """Declare the companion namespace of the class unless this pass already did."""
        if self._namespace is None:
            decl = NamespaceDeclaration(
                declared_module=self.dbtype.declared_module,
                declared_offset=self.dbtype.module_offset,
                declared_offset_end=self.dbtype.module_offset_end,
                scope_offset_start=self.dbtype.module_scope_start,
                scope_offset_end=self.dbtype.module_scope_end,
            )
            self._namespace = self.database.declare_namespace(
                self.dbtype.namespace, self.dbtype.name, decl, owner=self.dbtype.qualified_name
            )
        return self._namespace

    @property
    def namespace(self) -> Namespace:
        """The companion namespace of the class, declared on first use."""
        return self.declare_namespace()


class BaseGenerator(ABC):
    """
    Base class for built-in generators.
    Each generator decides whether it applies to a class and then emits a fixed
    set of symbols for it.
    """

    name = "generator"

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.name}")

    @abstractmethod
    def applies(self, context: SynthesisContext) -> bool:
        """Whether this generator should run for the class in `context`."""
        pass

    @abstractmethod
    def generate(self, context: SynthesisContext) -> None:
        """Emit this generator's symbols for the class in `context`."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

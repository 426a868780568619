"""
Factory for synthesized symbols.
"""
import logging
from typing import Optional

from scriptsynth.core import MethodSymbol, Namespace, PropertySymbol, ScriptModule, Symbol, TypeEntity


class SymbolFactory:
    """
    Creates symbols on behalf of one class and registers them where they belong.

    Every symbol is stamped as auto-generated and carries the class's declaration
    site as provenance. Registration order is presentation order, so callers add
    symbols in the order they should appear in completion lists.
    """

    def __init__(self, module: ScriptModule, dbtype: TypeEntity):
        self.module = module
        self.dbtype = dbtype
        self.logger = logging.getLogger(__name__)

    def _stamp(self, symbol: Symbol, namespace: Optional[str]) -> None:
        symbol.declared_module = self.dbtype.declared_module
        symbol.module_offset = self.dbtype.module_offset
        symbol.namespace = namespace
        symbol.is_auto_generated = True
        symbol.generated_by = self.dbtype.qualified_name

    def add_global_function(self, namespace: Namespace, name: str) -> MethodSymbol:
        """
        Add a free function to a namespace and to the module's global symbols.

        Args:
            namespace: Namespace that will contain the function
            name: Name of the function

        Returns:
            The new function
        """
        method = MethodSymbol(name=name)
        self._stamp(method, namespace.qualified_namespace)

        namespace.add_symbol(method)
        self.module.global_symbols.append(method)
        self.logger.debug(f"Generated {namespace.qualified_namespace}::{name} for {self.dbtype.qualified_name}")
        return method

    def add_method(self, name: str) -> MethodSymbol:
        """Add a method directly onto the class."""
        method = MethodSymbol(name=name)
        self._stamp(method, self.dbtype.namespace)

        self.dbtype.add_symbol(method)
        self.logger.debug(f"Generated method {self.dbtype.qualified_name}.{name}")
        return method

    def add_property(self, name: str) -> PropertySymbol:
        """Add a property directly onto the class."""
        prop = PropertySymbol(name=name)
        self._stamp(prop, self.dbtype.namespace)

        self.dbtype.add_symbol(prop)
        self.logger.debug(f"Generated property {self.dbtype.qualified_name}.{name}")
        return prop

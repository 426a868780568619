"""
Core module for the type database, entities and configuration.
"""

from .database import TypeDatabase, InheritanceChain
from .entities import (
    Argument,
    AuxiliaryLink,
    Symbol,
    MethodSymbol,
    PropertySymbol,
    NamespaceDeclaration,
    Namespace,
    TypeEntity,
    ScriptModule
)
from .settings import (
    ScriptSettings,
    GeneratorArgument,
    StaticFunctionTemplate,
    MemberFunctionTemplate,
    StaticAccessorTemplate,
    MemberAccessorTemplate,
    GeneratorRule,
    ProjectCodeGenerationSettings,
    SynthesisSettings,
    load_settings
)
from .loader import ModuleDescription, register_module, load_module_description

__all__ = [
    "TypeDatabase",
    "InheritanceChain",
    "Argument",
    "AuxiliaryLink",
    "Symbol",
    "MethodSymbol",
    "PropertySymbol",
    "NamespaceDeclaration",
    "Namespace",
    "TypeEntity",
    "ScriptModule",
    "ScriptSettings",
    "GeneratorArgument",
    "StaticFunctionTemplate",
    "MemberFunctionTemplate",
    "StaticAccessorTemplate",
    "MemberAccessorTemplate",
    "GeneratorRule",
    "ProjectCodeGenerationSettings",
    "SynthesisSettings",
    "load_settings",
    "ModuleDescription",
    "register_module",
    "load_module_description"
]

"""
Built-in generators for host-framework conventions.
"""

from .factory import SymbolFactory
from .base_generator import BaseGenerator, SynthesisContext
from .delegate import DelegateGenerator
from .object_generators import (
    SingletonHandleGenerator,
    GenericObjectGenerator,
    ComponentGenerator,
    SpawnableActorGenerator,
    SubsystemGenerator
)
from .extended import (
    ComposableSettingsGenerator,
    EffectEventHandlerGenerator,
    ExtendedConventionGenerator
)

__all__ = [
    "SymbolFactory",
    "BaseGenerator",
    "SynthesisContext",
    "DelegateGenerator",
    "SingletonHandleGenerator",
    "GenericObjectGenerator",
    "ComponentGenerator",
    "SpawnableActorGenerator",
    "SubsystemGenerator",
    "ComposableSettingsGenerator",
    "EffectEventHandlerGenerator",
    "ExtendedConventionGenerator"
]

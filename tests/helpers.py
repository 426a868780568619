"""
Shared fixtures for the test suite.
"""
from scriptsynth.core import (
    Argument,
    MethodSymbol,
    PropertySymbol,
    ScriptModule,
    TypeDatabase,
    TypeEntity,
)

MODULE_NAME = "Gameplay.Doors"

HOST_TYPES = [
    ("UObject", None),
    ("AActor", "UObject"),
    ("UActorComponent", "UObject"),
    ("USubsystem", "UObject"),
    ("ULocalPlayerSubsystem", "USubsystem"),
    ("UWorldSubsystem", "USubsystem"),
    ("UHazeComposableSettings", "UObject"),
    ("UHazeEffectEventHandler", "UObject"),
    ("UInteractionComponent", "UActorComponent"),
    ("UStaticMeshComponent", "UActorComponent"),
]


def make_database() -> TypeDatabase:
    """A database with primitives and the host framework's base classes."""
    database = TypeDatabase()
    database.register_primitive_types()
    for name, supertype in HOST_TYPES:
        database.add_type(TypeEntity(name=name, supertype=supertype))
    return database


def make_module() -> ScriptModule:
    return ScriptModule(module_name=MODULE_NAME)


def declare(database: TypeDatabase, module: ScriptModule, **fields) -> TypeEntity:
    """Declare a script type in `module` and register it in `database`."""
    fields.setdefault("declared_module", module.module_name)
    entity = TypeEntity(**fields)
    module.types.append(database.add_type(entity))
    return entity


def prop(name: str, typename: str, **fields) -> PropertySymbol:
    fields.setdefault("declared_module", MODULE_NAME)
    return PropertySymbol(name=name, typename=typename, **fields)


def method(name: str, return_type: str = "void", args=(), **fields) -> MethodSymbol:
    fields.setdefault("declared_module", MODULE_NAME)
    return MethodSymbol(
        name=name,
        return_type=return_type,
        args=[Argument(typename=typename, name=arg_name) for typename, arg_name in args],
        **fields
    )


def names(symbols) -> list:
    return [symbol.name for symbol in symbols]

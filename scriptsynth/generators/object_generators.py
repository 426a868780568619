"""
Generated statics for object classes: class descriptors, components, actors and subsystems.
"""
from scriptsynth.core import Argument

from .base_generator import BaseGenerator, SynthesisContext


SINGLETON_HANDLE_SPECIFIER = "NutClass"

ACTOR_COMPONENT_CLASS = "UActorComponent"
ACTOR_CLASS = "AActor"
SUBSYSTEM_CLASS = "USubsystem"
LOCAL_PLAYER_SUBSYSTEM_CLASS = "ULocalPlayerSubsystem"


class SingletonHandleGenerator(BaseGenerator):
    """Handle accessor for classes tagged with the singleton-handle specifier."""

    name = "singleton_handle"

    def applies(self, context: SynthesisContext) -> bool:
        return SINGLETON_HANDLE_SPECIFIER in context.dbtype.macro_specifiers

    def generate(self, context: SynthesisContext) -> None:
        method = context.factory.add_global_function(context.namespace, "StaticNutClass")
        method.return_type = "FNutClassHandle"
        method.documentation = "Gets the NutClass descriptor for the class generated for the specified type."


class GenericObjectGenerator(BaseGenerator):
    """The class descriptor accessor every object class has."""

    name = "object"

    def applies(self, context: SynthesisContext) -> bool:
        script = context.settings.script
        return not script.deprecate_static_class and not script.disallow_static_class

    def generate(self, context: SynthesisContext) -> None:
        method = context.factory.add_global_function(context.namespace, "StaticClass")
        method.return_type = "UClass"
        method.documentation = "Gets the descriptor for the class generated for the specified type."


class ComponentGenerator(BaseGenerator):
    """Get, GetOrCreate and Create statics for actor components."""

    name = "component"

    def applies(self, context: SynthesisContext) -> bool:
        return context.inherits_from(ACTOR_COMPONENT_CLASS)

    def generate(self, context: SynthesisContext) -> None:
        functions = [
            ("Get", "Get the component of this type from an actor. Specified name is optional."),
            ("GetOrCreate", "Get a component of a particular type on an actor, create it if it doesn't exist. Specified name is optional."),
            ("Create", "Always create a new component of this type on an actor."),
        ]
        for name, documentation in functions:
            method = context.factory.add_global_function(context.namespace, name)
            method.return_type = context.dbtype.name
            method.documentation = documentation
            method.args = [
                Argument(typename="AActor", name="Actor"),
                Argument(typename="FName", name="WithName", default_value="NAME_None"),
            ]


class SpawnableActorGenerator(BaseGenerator):
    """Spawn static for actor classes."""

    name = "actor"

    def applies(self, context: SynthesisContext) -> bool:
        return context.inherits_from(ACTOR_CLASS)

    def generate(self, context: SynthesisContext) -> None:
        method = context.factory.add_global_function(context.namespace, "Spawn")
        method.return_type = context.dbtype.name
        method.documentation = "Spawn a new actor of this type into the world."
        method.args = [
            Argument(typename="FVector", name="Location", default_value="FVector::ZeroVector"),
            Argument(typename="FRotator", name="Rotation", default_value="FRotator::ZeroRotator"),
            Argument(typename="FName", name="Name", default_value="NAME_None"),
            Argument(typename="bool", name="bDeferredSpawn", default_value="false"),
            Argument(typename="ULevel", name="Level", default_value="nullptr"),
        ]


class SubsystemGenerator(BaseGenerator):
    """Get statics for subsystems; local player subsystems are keyed by player."""

    name = "subsystem"

    def applies(self, context: SynthesisContext) -> bool:
        return context.inherits_from(SUBSYSTEM_CLASS)

    def generate(self, context: SynthesisContext) -> None:
        dbtype = context.dbtype
        factory = context.factory

        if context.inherits_from(LOCAL_PLAYER_SUBSYSTEM_CLASS):
            method = factory.add_global_function(context.namespace, "Get")
            method.return_type = dbtype.name
            method.documentation = f"Get the {dbtype.display_name} subsystem for this local player."
            method.args = [Argument(typename="ULocalPlayer", name="LocalPlayer")]

            method = factory.add_global_function(context.namespace, "Get")
            method.return_type = dbtype.name
            method.documentation = f"Get the {dbtype.display_name} subsystem for this player controller."
            method.args = [Argument(typename="APlayerController", name="PlayerController")]
        else:
            method = factory.add_global_function(context.namespace, "Get")
            method.return_type = dbtype.name
            method.documentation = f"Get the relevant {dbtype.display_name} subsystem."

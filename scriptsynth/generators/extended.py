"""
Generated code for the extended (Haze) script conventions.

Only active when the `useExtendedConventions` script setting is on.
"""
from scriptsynth.core import Argument, AuxiliaryLink, MethodSymbol, PropertySymbol, TypeEntity

from .base_generator import BaseGenerator, SynthesisContext


COMPOSABLE_SETTINGS_CLASS = "UHazeComposableSettings"
EFFECT_EVENT_HANDLER_CLASS = "UHazeEffectEventHandler"

SETTINGS_ACTOR_TYPE = "AHazeActor"
DEFAULT_PRIORITY = "EHazeSettingsPriority::Script"
REQUIRE_ACTOR_TYPE_META = "requireactortype"


def setter_name(property_name: str) -> str:
    """Strip the boolean `b` prefix from names like `bEnabled`."""
    if len(property_name) >= 2 and property_name[0] == "b" and property_name[1].isupper():
        return property_name[1:]
    return property_name


def _priority_argument() -> Argument:
    return Argument(typename="EHazeSettingsPriority", name="Priority", default_value=DEFAULT_PRIORITY)


class ComposableSettingsGenerator(BaseGenerator):
    """Settings accessors plus a Set/Clear override pair for every exposed property."""

    name = "composable_settings"

    def applies(self, context: SynthesisContext) -> bool:
        return context.inherits_from(COMPOSABLE_SETTINGS_CLASS)

    def generate(self, context: SynthesisContext) -> None:
        dbtype = context.dbtype
        factory = context.factory
        namespace = context.namespace

        method = factory.add_global_function(namespace, "GetSettings")
        method.return_type = dbtype.name
        method.documentation = "Get the result settings asset for a specific actor."
        method.args = [Argument(typename=SETTINGS_ACTOR_TYPE, name="Actor")]

        method = factory.add_global_function(namespace, "TakeTransientSettings")
        method.return_type = dbtype.name
        method.documentation = (
            "Grab a transient settings asset that can be used to temporarily overried values. "
            "Must be returned with Actor.ReturnTransientSettings to apply new values."
        )
        method.args = [
            Argument(typename=SETTINGS_ACTOR_TYPE, name="Actor"),
            Argument(typename="FInstigator", name="Instigator"),
            _priority_argument(),
        ]

        # Inherited properties get overrides too
        for owner, prop in context.database.walk_symbols(dbtype, PropertySymbol):
            if not prop.is_uproperty:
                continue
            self._generate_override(context, owner, prop)

    def _generate_override(self, context: SynthesisContext, owner: TypeEntity, prop: PropertySymbol) -> None:
        factory = context.factory
        namespace = context.namespace
        container = namespace.qualified_namespace

        override = factory.add_property(f"bOverride_{prop.name}")
        override.module_offset = prop.module_offset
        override.typename = "bool"

        name = setter_name(prop.name)
        set_name = f"Set{name}"
        clear_name = f"Clear{name}"

        method = factory.add_global_function(namespace, set_name)
        method.return_type = "void"
        method.documentation = "Apply a transient override for this composable settings property."
        method.module_offset = prop.module_offset
        method.args = [
            Argument(typename=SETTINGS_ACTOR_TYPE, name="Actor"),
            Argument(typename=prop.typename, name="NewValue"),
            Argument(typename="FInstigator", name="Instigator"),
            _priority_argument(),
        ]
        method.auxiliary_symbols = [
            AuxiliaryLink(symbol_name=prop.name, container_type=owner.qualified_name),
            AuxiliaryLink(symbol_name=clear_name, container_type=container),
        ]
        prop.link_to(method, container)

        method = factory.add_global_function(namespace, clear_name)
        method.return_type = "void"
        method.documentation = "Clear a previously applied transient override."
        method.module_offset = prop.module_offset
        method.args = [
            Argument(typename=SETTINGS_ACTOR_TYPE, name="Actor"),
            Argument(typename="FInstigator", name="Instigator"),
            _priority_argument(),
        ]
        method.auxiliary_symbols = [
            AuxiliaryLink(symbol_name=prop.name, container_type=owner.qualified_name),
            AuxiliaryLink(symbol_name=set_name, container_type=container),
        ]
        prop.link_to(method, container)


class EffectEventHandlerGenerator(BaseGenerator):
    """A Trigger_ free function for every overridable effect event on the handler."""

    name = "effect_event_handler"

    def applies(self, context: SynthesisContext) -> bool:
        return context.inherits_from(EFFECT_EVENT_HANDLER_CLASS)

    @staticmethod
    def is_triggerable(method: MethodSymbol) -> bool:
        if not method.is_ufunction or not method.is_blueprint_event:
            return False
        if method.is_blueprint_override or method.is_auto_generated:
            return False
        if len(method.args) > 1:
            return False
        return not method.return_type or method.return_type == "void"

    def generate(self, context: SynthesisContext) -> None:
        dbtype = context.dbtype
        namespace = context.namespace
        actor_type = dbtype.macro_meta.get(REQUIRE_ACTOR_TYPE_META, SETTINGS_ACTOR_TYPE)

        for owner, event in context.database.walk_symbols(dbtype, MethodSymbol):
            if not self.is_triggerable(event):
                continue

            method = context.factory.add_global_function(namespace, f"Trigger_{event.name}")
            method.return_type = "void"
            if event.documentation:
                method.documentation = event.documentation
            else:
                method.documentation = f"Trigger the effect event {event.name} on all handlers for {dbtype.display_name}"
            method.module_offset = event.module_offset

            method.args = [Argument(typename=actor_type, name="Actor")]
            if len(event.args) == 1:
                method.args.append(Argument(typename=event.args[0].typename, name=event.args[0].name))

            method.auxiliary_symbols = [AuxiliaryLink(symbol_name=event.name, container_type=owner.qualified_name)]
            event.link_to(method, namespace.qualified_namespace)


class ExtendedConventionGenerator(BaseGenerator):
    """Runs the composable-settings generator, or else the effect-event-handler one."""

    name = "extended"

    def __init__(self):
        super().__init__()
        self.variants = [ComposableSettingsGenerator(), EffectEventHandlerGenerator()]

    def applies(self, context: SynthesisContext) -> bool:
        return context.settings.script.use_extended_conventions

    def generate(self, context: SynthesisContext) -> None:
        for variant in self.variants:
            if variant.applies(context):
                variant.generate(context)
                return

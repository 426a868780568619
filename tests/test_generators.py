"""
Tests for the built-in category generators.
"""
import unittest

from scriptsynth.core import Argument, ScriptSettings, SynthesisSettings
from scriptsynth.synthesis import Synthesizer

from tests.helpers import declare, make_database, make_module, names


class TestDelegateGenerator(unittest.TestCase):
    """Test cases for delegate and event members."""

    def setUp(self):
        self.database = make_database()
        self.module = make_module()
        self.synthesizer = Synthesizer(self.database)

    def test_event_members(self):
        """Test the members generated for a multicast event."""
        event = declare(
            self.database, self.module, name="FOnDoorOpened", is_event=True,
            delegate_args=[Argument(typename="int", name="Count"), Argument(typename="FString", name="Reason")]
        )

        namespace = self.synthesizer.synthesize(event, self.module)

        self.assertIsNone(namespace)
        self.assertEqual(
            names(event.symbols),
            ["IsBound", "Clear", "Broadcast", "AddUFunction", "Unbind", "UnbindObject"]
        )
        self.assertEqual(self.module.global_symbols, [])
        self.assertEqual(self.module.namespaces, [])

        broadcast = event.find_symbols("Broadcast")[0]
        self.assertEqual(broadcast.return_type, "void")
        self.assertEqual([(a.typename, a.name) for a in broadcast.args], [("int", "Count"), ("FString", "Reason")])

        add = event.find_symbols("AddUFunction")[0]
        self.assertTrue(add.is_delegate_bind_function)
        self.assertEqual(add.delegate_bind_type, "FOnDoorOpened")
        self.assertEqual((add.delegate_object_param, add.delegate_function_param), (0, 1))
        self.assertEqual([(a.typename, a.name) for a in add.args], [("UObject", "Object"), ("FName", "FunctionName")])

        unbind = event.find_symbols("Unbind")[0]
        self.assertTrue(unbind.is_delegate_bind_function)
        self.assertEqual(unbind.args, add.args)

        unbind_object = event.find_symbols("UnbindObject")[0]
        self.assertFalse(unbind_object.is_delegate_bind_function)
        self.assertEqual([a.name for a in unbind_object.args], ["Object"])

    def test_broadcast_args_are_copies(self):
        """Test that broadcast arguments are copies of the signature arguments."""
        event = declare(self.database, self.module, name="FOnDoorOpened", is_event=True,
                        delegate_args=[Argument(typename="int", name="Count", default_value="0")])

        self.synthesizer.synthesize(event, self.module)

        broadcast = event.find_symbols("Broadcast")[0]
        self.assertIsNot(broadcast.args[0], event.delegate_args[0])
        self.assertIsNone(broadcast.args[0].default_value)

    def test_single_cast_delegate_members(self):
        """Test the members generated for a single cast delegate."""
        delegate = declare(self.database, self.module, name="FDoorFilter", is_delegate=True,
                           delegate_return="bool", documentation="Filters doors.")

        self.synthesizer.synthesize(delegate, self.module)

        self.assertEqual(
            names(delegate.symbols),
            ["IsBound", "Clear", "Execute", "ExecuteIfBound", "BindUFunction", "GetUObject", "GetFunctionName"]
        )
        for name in ("Execute", "ExecuteIfBound"):
            member = delegate.find_symbols(name)[0]
            self.assertEqual(member.return_type, "bool")
            self.assertEqual(member.args, [])

        self.assertTrue(delegate.find_symbols("BindUFunction")[0].is_delegate_bind_function)
        self.assertTrue(delegate.find_symbols("GetUObject")[0].is_property)
        self.assertEqual(delegate.find_symbols("GetUObject")[0].return_type, "UObject")
        self.assertTrue(delegate.find_symbols("GetFunctionName")[0].is_property)
        self.assertEqual(delegate.find_symbols("GetFunctionName")[0].return_type, "FName")

        for absent in ("Broadcast", "AddUFunction", "Unbind", "UnbindObject"):
            self.assertEqual(delegate.find_symbols(absent), [])

    def test_single_cast_delegate_constructor(self):
        """Test the constructor function generated for a single cast delegate."""
        delegate = declare(self.database, self.module, name="FDoorFilter", is_delegate=True,
                           delegate_return="bool", documentation="Filters doors.")

        self.synthesizer.synthesize(delegate, self.module)

        constructors = self.database.get_namespace("").find_symbols("FDoorFilter")
        self.assertEqual(len(constructors), 1)
        constructor = constructors[0]
        self.assertTrue(constructor.is_constructor)
        self.assertTrue(constructor.is_auto_generated)
        self.assertEqual(constructor.return_type, "FDoorFilter")
        self.assertEqual(constructor.documentation, "Filters doors.")
        self.assertEqual(
            [(a.typename, a.name, a.default_value) for a in constructor.args],
            [("UObject", "Object", "nullptr"), ("FName", "FunctionName", "NAME_None")]
        )
        self.assertEqual(self.module.global_symbols, [constructor])
        self.assertIsNone(self.database.get_companion_namespace("FDoorFilter"))

    def test_delegates_get_no_object_statics(self):
        """Test that delegates do not get object statics."""
        delegate = declare(self.database, self.module, name="FDoorFilter", is_delegate=True, supertype="UObject")

        self.synthesizer.synthesize(delegate, self.module)

        self.assertEqual(names(self.module.global_symbols), ["FDoorFilter"])
        self.assertNotIn("StaticClass", names(delegate.symbols))

    def test_members_are_stamped(self):
        """Test that generated members carry their origin."""
        event = declare(self.database, self.module, name="FOnDoorOpened", is_event=True, module_offset=42)

        self.synthesizer.synthesize(event, self.module)

        for symbol in event.symbols:
            self.assertTrue(symbol.is_auto_generated)
            self.assertEqual(symbol.generated_by, "FOnDoorOpened")
            self.assertEqual(symbol.declared_module, self.module.module_name)
            self.assertEqual(symbol.module_offset, 42)


class TestObjectGenerators(unittest.TestCase):
    """Test cases for the object, component, actor and subsystem statics."""

    def setUp(self):
        self.database = make_database()
        self.module = make_module()

    def synthesize(self, entity, **script):
        settings = SynthesisSettings(script=ScriptSettings(**script))
        return Synthesizer(self.database, settings).synthesize(entity, self.module)

    def test_plain_object_gets_static_class(self):
        """Test that a plain object class gets StaticClass."""
        entity = declare(self.database, self.module, name="UDoorData", supertype="UObject")

        namespace = self.synthesize(entity)

        self.assertEqual(names(namespace.symbols), ["StaticClass"])
        static_class = namespace.symbols[0]
        self.assertEqual(static_class.return_type, "UClass")
        self.assertEqual(static_class.args, [])
        self.assertEqual(entity.symbols, [])

    def test_static_class_can_be_deprecated_or_disallowed(self):
        """Test the StaticClass deprecation and disallow settings."""
        entity = declare(self.database, self.module, name="UDoorData", supertype="UObject")

        self.assertEqual(self.synthesize(entity, deprecate_static_class=True).symbols, [])
        self.assertEqual(self.synthesize(entity, disallow_static_class=True).symbols, [])

    def test_component_statics(self):
        """Test the static functions generated for components."""
        entity = declare(self.database, self.module, name="UDoorLockComponent", supertype="UActorComponent")

        namespace = self.synthesize(entity, disallow_static_class=True)

        self.assertEqual(names(namespace.symbols), ["Get", "GetOrCreate", "Create"])
        for function in namespace.symbols:
            self.assertEqual(function.return_type, "UDoorLockComponent")
            self.assertEqual(
                [(a.typename, a.name, a.default_value) for a in function.args],
                [("AActor", "Actor", None), ("FName", "WithName", "NAME_None")]
            )

    def test_component_statics_follow_static_class(self):
        """Test that component statics follow the StaticClass settings."""
        entity = declare(self.database, self.module, name="UDoorLockComponent", supertype="UInteractionComponent")

        namespace = self.synthesize(entity)

        self.assertEqual(names(namespace.symbols), ["StaticClass", "Get", "GetOrCreate", "Create"])
        self.assertEqual(names(self.module.global_symbols), ["StaticClass", "Get", "GetOrCreate", "Create"])

    def test_actor_spawn(self):
        """Test the Spawn function generated for actors."""
        entity = declare(self.database, self.module, name="ADoor", supertype="AActor")

        namespace = self.synthesize(entity)

        self.assertEqual(names(namespace.symbols), ["StaticClass", "Spawn"])
        spawn = namespace.symbols[1]
        self.assertEqual(spawn.return_type, "ADoor")
        self.assertEqual(
            [(a.typename, a.name, a.default_value) for a in spawn.args],
            [
                ("FVector", "Location", "FVector::ZeroVector"),
                ("FRotator", "Rotation", "FRotator::ZeroRotator"),
                ("FName", "Name", "NAME_None"),
                ("bool", "bDeferredSpawn", "false"),
                ("ULevel", "Level", "nullptr"),
            ]
        )

    def test_subsystem_get(self):
        """Test the Get function generated for subsystems."""
        entity = declare(self.database, self.module, name="UDoorSubsystem", supertype="UWorldSubsystem")

        namespace = self.synthesize(entity, disallow_static_class=True)

        self.assertEqual(names(namespace.symbols), ["Get"])
        self.assertEqual(namespace.symbols[0].args, [])
        self.assertEqual(namespace.symbols[0].return_type, "UDoorSubsystem")
        self.assertEqual(namespace.symbols[0].documentation, "Get the relevant UDoorSubsystem subsystem.")

    def test_local_player_subsystem_get_overloads(self):
        """Test the Get overloads generated for local player subsystems."""
        entity = declare(self.database, self.module, name="UDoorHintSubsystem", supertype="ULocalPlayerSubsystem")

        namespace = self.synthesize(entity, disallow_static_class=True)

        self.assertEqual(names(namespace.symbols), ["Get", "Get"])
        self.assertEqual(
            [[(a.typename, a.name) for a in f.args] for f in namespace.symbols],
            [[("ULocalPlayer", "LocalPlayer")], [("APlayerController", "PlayerController")]]
        )

    def test_singleton_handle(self):
        """Test that a NutClass class gets a handle function."""
        entity = declare(self.database, self.module, name="UDoorRegistry", supertype="UObject",
                         macro_specifiers={"NutClass"})

        namespace = self.synthesize(entity)

        self.assertEqual(names(namespace.symbols), ["StaticNutClass", "StaticClass"])
        self.assertEqual(namespace.symbols[0].return_type, "FNutClassHandle")
        self.assertEqual(len(self.module.namespaces), 1)

    def test_free_functions_carry_declaration_site(self):
        """Test that free functions carry the declaration site of their class."""
        entity = declare(self.database, self.module, name="ADoor", supertype="AActor", namespace="Gameplay",
                         module_offset=120, module_offset_end=480, module_scope_start=130, module_scope_end=470)

        namespace = self.synthesize(entity)

        self.assertEqual(namespace.qualified_namespace, "Gameplay::ADoor")
        self.assertEqual(namespace.owner, "Gameplay::ADoor")
        self.assertEqual(namespace.declaration.declared_module, self.module.module_name)
        self.assertEqual(namespace.declaration.declared_offset, 120)
        self.assertEqual(namespace.declaration.declared_offset_end, 480)
        self.assertEqual(namespace.declaration.scope_offset_start, 130)
        self.assertEqual(namespace.declaration.scope_offset_end, 470)
        for function in namespace.symbols:
            self.assertTrue(function.is_auto_generated)
            self.assertEqual(function.module_offset, 120)
            self.assertEqual(function.namespace, "Gameplay::ADoor")


if __name__ == "__main__":
    unittest.main()

"""
Entry point of the symbol synthesis pass.
"""
import logging
from typing import List, Optional

from scriptsynth.core import Namespace, ScriptModule, SynthesisSettings, TypeDatabase, TypeEntity
from scriptsynth.generators import (
    BaseGenerator,
    ComponentGenerator,
    DelegateGenerator,
    ExtendedConventionGenerator,
    GenericObjectGenerator,
    SingletonHandleGenerator,
    SpawnableActorGenerator,
    SubsystemGenerator,
    SynthesisContext,
)

from .project_rules import ProjectRuleEngine


class Synthesizer:
    """
    Decides which generators apply to a class and runs them in a fixed order.

    Synthesis of a class is idempotent: everything an earlier pass generated for
    the class is removed before the generators run again.
    """

    def __init__(self, database: TypeDatabase, settings: Optional[SynthesisSettings] = None):
        """
        Initialize the synthesizer.

        Args:
            database: Type database holding the classes and namespaces
            settings: Script flags and project generator rules; defaults when omitted
        """
        self.database = database
        self.settings = settings if settings is not None else SynthesisSettings()
        self.logger = logging.getLogger(__name__)

        self.delegate_generator = DelegateGenerator()
        self.singleton_generator = SingletonHandleGenerator()

        # Evaluated in order; a class may match several of them
        self.object_generators: List[BaseGenerator] = [
            GenericObjectGenerator(),
            ComponentGenerator(),
            SpawnableActorGenerator(),
            SubsystemGenerator(),
            ExtendedConventionGenerator(),
        ]
        self.rule_engine = ProjectRuleEngine()

    def clear(self, dbtype: TypeEntity, module: ScriptModule) -> None:
        """Remove everything a previous synthesis pass produced for `dbtype`."""
        owner = dbtype.qualified_name
        dbtype.remove_generated_symbols()
        for parent in self.database.get_ancestors(dbtype):
            parent.remove_links_into(owner)
        module.remove_generated(owner)
        self.database.remove_generated(owner)

    def synthesize(self, dbtype: TypeEntity, module: ScriptModule) -> Optional[Namespace]:
        """
        Generate the implicit symbols of one class.

        Args:
            dbtype: The class; its hand-written symbols must already be registered
            module: The module declaring the class

        Returns:
            The companion namespace merged into the module, if any
        """
        self.clear(dbtype, module)

        chain = self.database.get_inheritance_chain(dbtype)
        context = SynthesisContext(dbtype, chain, module, self.database, self.settings)

        if self.delegate_generator.applies(context):
            self.delegate_generator.generate(context)
            self.logger.debug(f"Synthesized delegate members for {dbtype.qualified_name}")
            return None

        if self.singleton_generator.applies(context):
            self.singleton_generator.generate(context)

        if not dbtype.is_struct and not dbtype.is_enum:
            # Every object class gets a companion namespace, even if it stays empty
            context.declare_namespace()

            for generator in self.object_generators:
                if generator.applies(context):
                    generator.generate(context)

            project = self.settings.project
            if project.enable:
                for rule in project.generators:
                    if self.rule_engine.rule_matches(context, rule):
                        self.rule_engine.apply(context, rule)

        if not context.has_namespace or dbtype.is_struct or dbtype.is_enum:
            # Structs and enums keep any companion namespace out of the module
            return None

        namespace = context.namespace
        module.merge_namespace(namespace)
        self.logger.debug(
            f"Synthesized {len(dbtype.generated_symbols())} member(s) and "
            f"{len(namespace.symbols)} free function(s) for {dbtype.qualified_name}"
        )
        return namespace

    def synthesize_module(self, module: ScriptModule) -> None:
        """Synthesize every class declared by `module`, in declaration order."""
        count = 0
        for qualified_name in module.types:
            dbtype = self.database.get_type(qualified_name)
            if dbtype is None:
                self.logger.warning(f"Type {qualified_name} of module {module.module_name} is not in the database")
                continue
            self.synthesize(dbtype, module)
            count += 1

        self.logger.info(f"Synthesized {count} type(s) in module {module.module_name}")

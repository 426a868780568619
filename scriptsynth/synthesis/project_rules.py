"""
Apply project-declared generator rules to a class.
"""
import logging
from typing import List, Union

from scriptsynth.core import (
    Argument,
    GeneratorArgument,
    GeneratorRule,
    MemberFunctionTemplate,
    MethodSymbol,
    PropertySymbol,
    StaticAccessorTemplate,
    StaticFunctionTemplate,
)
from scriptsynth.generators import SynthesisContext

from .templates import Tokens, accessor_tokens, class_tokens, expand_template


class ProjectRuleEngine:
    """
    Expands the templates of a GeneratorRule into concrete symbols.
    Class-level templates run once; accessor templates run once per property.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def rule_matches(context: SynthesisContext, rule: GeneratorRule) -> bool:
        return context.inherits_from(rule.derived_from)

    def apply(self, context: SynthesisContext, rule: GeneratorRule) -> None:
        """
        Apply a rule to the class in `context`.

        Args:
            context: The synthesis context of the class
            rule: The rule to apply; its ancestor predicate must already match
        """
        dbtype = context.dbtype
        tokens = class_tokens(dbtype)

        for template in rule.static_functions:
            self._add_static(context, template, tokens)
        for template in rule.member_functions:
            self._add_member(context, template, tokens)

        if not rule.static_accessors and not rule.member_accessors:
            return

        for prop in dbtype.iter_symbols(PropertySymbol):
            if not prop.declared_module:
                continue

            prop_type = context.database.lookup_type(prop.namespace, prop.typename)
            if prop_type is None:
                self.logger.debug(f"Skipping accessors for {dbtype.name}.{prop.name}: unknown type {prop.typename}")
                continue

            prop_chain = context.database.get_inheritance_chain(prop_type)
            tokens = accessor_tokens(dbtype, prop_type, prop)

            for template in rule.static_accessors:
                if template.derived_from is not None and not prop_chain.inherits_from(template.derived_from):
                    continue
                self._add_static(context, template, tokens)

            for template in rule.member_accessors:
                if template.derived_from is not None and not prop_chain.inherits_from(template.derived_from):
                    continue
                self._add_member(context, template, tokens)

    @staticmethod
    def _expand_args(args: List[GeneratorArgument], tokens: Tokens) -> List[Argument]:
        return [
            Argument(typename=expand_template(arg.type, tokens), name=expand_template(arg.name, tokens))
            for arg in args
        ]

    def _add_static(self, context: SynthesisContext,
                    template: Union[StaticFunctionTemplate, StaticAccessorTemplate],
                    tokens: Tokens) -> MethodSymbol:
        method = context.factory.add_global_function(context.namespace, expand_template(template.name, tokens))
        method.return_type = expand_template(template.return_type, tokens)
        method.args = self._expand_args(template.args, tokens)
        return method

    def _add_member(self, context: SynthesisContext, template: MemberFunctionTemplate,
                    tokens: Tokens) -> MethodSymbol:
        method = context.factory.add_method(expand_template(template.name, tokens))
        method.return_type = expand_template(template.return_type, tokens)
        method.is_const = template.const
        method.is_property = template.property
        method.args = self._expand_args(template.args, tokens)
        return method

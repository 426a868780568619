"""
Generated members of delegate and event types.
"""
from typing import List

from scriptsynth.core import Argument, MethodSymbol, TypeEntity

from .base_generator import BaseGenerator, SynthesisContext


def _copy_delegate_args(dbtype: TypeEntity) -> List[Argument]:
    return [Argument(typename=arg.typename, name=arg.name) for arg in dbtype.delegate_args]


def _bind_arguments() -> List[Argument]:
    return [
        Argument(typename="UObject", name="Object"),
        Argument(typename="FName", name="FunctionName"),
    ]


def _mark_bind_function(method: MethodSymbol, dbtype: TypeEntity) -> None:
    method.is_delegate_bind_function = True
    method.delegate_bind_type = dbtype.name
    method.delegate_object_param = 0
    method.delegate_function_param = 1


class DelegateGenerator(BaseGenerator):
    """
    Members shared by all delegates, plus the multicast (event) or single-cast
    specific ones.
    """

    name = "delegate"

    def applies(self, context: SynthesisContext) -> bool:
        return context.dbtype.is_event or context.dbtype.is_delegate

    def generate(self, context: SynthesisContext) -> None:
        dbtype = context.dbtype
        factory = context.factory

        method = factory.add_method("IsBound")
        method.return_type = "bool"
        method.documentation = "Whether the anything is bound to the delegate."

        method = factory.add_method("Clear")
        method.return_type = "void"
        method.documentation = "Remove all bindings from the delegate."

        if dbtype.is_event:
            self._generate_event(context)
        else:
            self._generate_delegate(context)

    def _generate_event(self, context: SynthesisContext) -> None:
        dbtype = context.dbtype
        factory = context.factory

        method = factory.add_method("Broadcast")
        method.return_type = dbtype.delegate_return
        method.documentation = "Broadcast event to all existing bindings."
        method.args = _copy_delegate_args(dbtype)

        method = factory.add_method("AddUFunction")
        method.return_type = "void"
        method.documentation = "Add a new binding to this event. Make sure the function you're binding is a UFUNCTION()."
        _mark_bind_function(method, dbtype)
        method.args = _bind_arguments()

        method = factory.add_method("Unbind")
        method.return_type = "void"
        method.documentation = "Unbind a specific function that was previously added to this event."
        _mark_bind_function(method, dbtype)
        method.args = _bind_arguments()

        method = factory.add_method("UnbindObject")
        method.return_type = "void"
        method.documentation = "Unbind all previously added functions that are called on the specified object."
        method.args = [Argument(typename="UObject", name="Object")]

    def _generate_delegate(self, context: SynthesisContext) -> None:
        dbtype = context.dbtype
        factory = context.factory

        method = factory.add_method("Execute")
        method.return_type = dbtype.delegate_return
        method.documentation = (
            "Execute the function bound to the delegate. Will throw an error if nothing is bound, "
            "use ExecuteIfBound() if you do not want an error in that case."
        )
        method.args = _copy_delegate_args(dbtype)

        method = factory.add_method("ExecuteIfBound")
        method.return_type = dbtype.delegate_return
        method.documentation = "Execute the function if one is bound to the delegate, otherwise do nothing."
        method.args = _copy_delegate_args(dbtype)

        method = factory.add_method("BindUFunction")
        method.return_type = "void"
        method.documentation = "Set the function that is bound to this delegate. Make sure the function you're binding is a UFUNCTION()."
        _mark_bind_function(method, dbtype)
        method.args = _bind_arguments()

        method = factory.add_method("GetUObject")
        method.is_property = True
        method.return_type = "UObject"
        method.documentation = "Get the object that this delegate is bound to. Returns nullptr if unbound."

        method = factory.add_method("GetFunctionName")
        method.is_property = True
        method.return_type = "FName"
        method.documentation = "Get the function that this delegate is bound to. Returns NAME_None if unbound."

        # Constructor lives next to the delegate type, not in a companion namespace
        enclosing = context.database.get_namespace(dbtype.namespace)
        method = factory.add_global_function(enclosing, dbtype.name)
        method.return_type = dbtype.name
        method.documentation = dbtype.documentation
        method.is_constructor = True
        method.args = [
            Argument(typename="UObject", name="Object", default_value="nullptr"),
            Argument(typename="FName", name="FunctionName", default_value="NAME_None"),
        ]

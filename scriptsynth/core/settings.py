"""
Configuration models for symbol synthesis.

Settings arrive as already-parsed JSON (from a workspace settings file or from
the CLI) and are handed to the synthesizer as one immutable object.

Example settings file:

    {
        "script": {"useExtendedConventions": true},
        "project": {
            "enable": true,
            "generators": [
                {
                    "derivedFrom": "UInteractionComponent",
                    "staticFunctions": [
                        {"name": "GetAll{class}s", "returnType": "TArray<{class}>"}
                    ],
                    "memberAccessors": [
                        {"name": "Get{propName}", "returnType": "{propType}", "const": true}
                    ]
                }
            ]
        }
    }
"""
import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


def _lenient_list(value: Any, model: Type[BaseModel], what: str) -> List[Any]:
    """Validate list entries one by one, dropping the malformed ones."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        logger.warning(f"Ignoring {what}: expected a list, got {type(value).__name__}")
        return []

    result = []
    for index, item in enumerate(value):
        if isinstance(item, model):
            result.append(item)
            continue
        try:
            result.append(model.model_validate(item))
        except ValidationError as e:
            logger.warning(f"Ignoring malformed {what} entry {index}: {e.error_count()} validation error(s)")
    return result


class ScriptSettings(_FrozenModel):
    """Feature flags of the script dialect that affect built-in generators."""

    deprecate_static_class: bool = Field(default=False, alias="deprecateStaticClass")
    disallow_static_class: bool = Field(default=False, alias="disallowStaticClass")
    use_extended_conventions: bool = Field(default=False, alias="useExtendedConventions")


class GeneratorArgument(_FrozenModel):
    type: str
    name: str


class _FunctionTemplate(_FrozenModel):
    name: str
    return_type: str = Field(default="void", alias="returnType")
    args: List[GeneratorArgument] = Field(default_factory=list)

    @field_validator("args", mode="before")
    @classmethod
    def validate_args(cls, v: Any) -> List[Any]:
        return _lenient_list(v, GeneratorArgument, "template argument")


class StaticFunctionTemplate(_FunctionTemplate):
    """A free function added to the companion namespace of matching classes."""


class MemberFunctionTemplate(_FunctionTemplate):
    """A method added to matching classes."""

    const: bool = False
    property: bool = False


class StaticAccessorTemplate(_FunctionTemplate):
    """A free function added once per property of a matching class."""

    derived_from: Optional[str] = Field(default=None, alias="derivedFrom")


class MemberAccessorTemplate(MemberFunctionTemplate):
    """A method added once per property of a matching class."""

    derived_from: Optional[str] = Field(default=None, alias="derivedFrom")


class GeneratorRule(_FrozenModel):
    """A project-declared set of templates applied to classes derived from `derived_from`."""

    derived_from: str = Field(alias="derivedFrom")
    static_functions: List[StaticFunctionTemplate] = Field(default_factory=list, alias="staticFunctions")
    member_functions: List[MemberFunctionTemplate] = Field(default_factory=list, alias="memberFunctions")
    static_accessors: List[StaticAccessorTemplate] = Field(default_factory=list, alias="staticAccessors")
    member_accessors: List[MemberAccessorTemplate] = Field(default_factory=list, alias="memberAccessors")

    @field_validator("static_functions", mode="before")
    @classmethod
    def validate_static_functions(cls, v: Any) -> List[Any]:
        return _lenient_list(v, StaticFunctionTemplate, "staticFunctions")

    @field_validator("member_functions", mode="before")
    @classmethod
    def validate_member_functions(cls, v: Any) -> List[Any]:
        return _lenient_list(v, MemberFunctionTemplate, "memberFunctions")

    @field_validator("static_accessors", mode="before")
    @classmethod
    def validate_static_accessors(cls, v: Any) -> List[Any]:
        return _lenient_list(v, StaticAccessorTemplate, "staticAccessors")

    @field_validator("member_accessors", mode="before")
    @classmethod
    def validate_member_accessors(cls, v: Any) -> List[Any]:
        return _lenient_list(v, MemberAccessorTemplate, "memberAccessors")


class ProjectCodeGenerationSettings(_FrozenModel):
    """Project-specific generator rules."""

    enable: bool = False
    generators: List[GeneratorRule] = Field(default_factory=list)

    @field_validator("generators", mode="before")
    @classmethod
    def validate_generators(cls, v: Any) -> List[Any]:
        return _lenient_list(v, GeneratorRule, "generator rule")


class SynthesisSettings(_FrozenModel):
    """Everything the synthesizer needs to know about the workspace configuration."""

    script: ScriptSettings = Field(default_factory=ScriptSettings)
    project: ProjectCodeGenerationSettings = Field(default_factory=ProjectCodeGenerationSettings)


def load_settings(path: Union[str, Path]) -> SynthesisSettings:
    """
    Load synthesis settings from a JSON file.

    Args:
        path: Path to the settings file

    Returns:
        The parsed settings
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    settings = SynthesisSettings.model_validate(data)
    logger.info(f"Loaded settings from {path} with {len(settings.project.generators)} generator rule(s)")
    return settings

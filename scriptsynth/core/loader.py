"""
Load module descriptions (types declared by one script module) into the type database.
"""
import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, Field

from .database import TypeDatabase
from .entities import ScriptModule, TypeEntity

logger = logging.getLogger(__name__)


class ModuleDescription(BaseModel):
    """JSON layout of a module description file."""

    module: str
    host_types: List[TypeEntity] = Field(default_factory=list)
    types: List[TypeEntity] = Field(default_factory=list)


def register_module(description: ModuleDescription, database: TypeDatabase) -> ScriptModule:
    """
    Register the types of a module description into the database.

    Args:
        description: The parsed description
        database: Database to populate

    Returns:
        The script module declaring the described types
    """
    for host_type in description.host_types:
        database.add_type(host_type)

    module = ScriptModule(module_name=description.module)
    for entity in description.types:
        if entity.declared_module is None:
            entity.declared_module = description.module
        for symbol in entity.symbols:
            if symbol.declared_module is None:
                symbol.declared_module = entity.declared_module
            if symbol.namespace is None:
                symbol.namespace = entity.namespace
        module.types.append(database.add_type(entity))

    logger.info(f"Registered module {module.module_name} with {len(module.types)} type(s)")
    return module


def load_module_description(path: Union[str, Path], database: TypeDatabase) -> ScriptModule:
    """Read a JSON module description from disk and register it."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return register_module(ModuleDescription.model_validate(data), database)

"""
The synthesis pass: dispatching generators and applying project rules.
"""

from .templates import expand_template, class_tokens, accessor_tokens
from .project_rules import ProjectRuleEngine
from .dispatcher import Synthesizer

__all__ = [
    "expand_template",
    "class_tokens",
    "accessor_tokens",
    "ProjectRuleEngine",
    "Synthesizer"
]

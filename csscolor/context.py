"""
The context threaded through color parsing.

A context bundles the collaborators that color parsing consults but does not
own: the logger for reporting values that degrade to defaults and the resolver
for angles with units.
"""
import dataclasses
import logging
from typing import Callable, TypeAlias

from .angle import parse_angle
from .token import Token


AngleResolver: TypeAlias = Callable[['Context', Token], float]


@dataclasses.dataclass(frozen=True, slots=True)
class Context:
    """
    A color parsing context.

    Attributes:
        log: receives DEBUG messages whenever a value degrades to a default
        angle: resolves a hue token to radians
    """
    log: logging.Logger = dataclasses.field(
        default_factory=lambda: logging.getLogger('csscolor')
    )
    angle: AngleResolver = parse_angle


DEFAULT_CONTEXT = Context()

"""
Base generator class with shared utilities.

This module provides the BaseGenerator class that contains the indentation
and parameter-rendering helpers used by every specialized generator.
"""

from typing import Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext

from ..parser.abi_nodes import AbiParameter
from ..type_system import generate_input_type


class BaseGenerator:
    """
    Base class for all code generators.

    Provides shared utilities for:
    - Indentation management
    - Parameter naming and parameter list rendering
    """

    def __init__(self, ctx: 'CodeGenerationContext'):
        """
        Initialize the base generator.

        Args:
            ctx: The code generation context containing all state
        """
        self._ctx = ctx

    # =========================================================================
    # INDENTATION
    # =========================================================================

    def indent(self) -> str:
        """Return the current indentation string."""
        return self._ctx.indent()

    @property
    def indent_level(self) -> int:
        return self._ctx.indent_level

    @indent_level.setter
    def indent_level(self, value: int):
        self._ctx.indent_level = value

    # =========================================================================
    # PARAMETERS
    # =========================================================================

    @staticmethod
    def parameter_name(param: AbiParameter, index: int) -> str:
        """Declared name of a parameter, or arg<index> when it has none."""
        return param.name or f'arg{index}'

    def generate_input_params(self, inputs: Sequence[AbiParameter]) -> str:
        """Render a method parameter list from ABI inputs."""
        return ', '.join(
            f'{self.parameter_name(param, i)}: {generate_input_type(param.type)}'
            for i, param in enumerate(inputs)
        )

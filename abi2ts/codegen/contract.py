"""
Contract generation for web3 typings.

This module assembles the class declaration for one contract: constructor,
`methods`, `events` and `clone`.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext
    from .definition import DefinitionGenerator
    from .function import FunctionGenerator

from .base import BaseGenerator
from ..parser.abi_nodes import Contract, EventDeclaration


class ContractGenerator(BaseGenerator):
    """
    Generates the TypeScript class for a contract.

    Member order is fixed: constant functions, functions and constant
    accessors under `methods`; declared events then `allEvents` under
    `events`; then `clone`.
    """

    def __init__(
        self,
        ctx: 'CodeGenerationContext',
        func_generator: 'FunctionGenerator',
        def_generator: 'DefinitionGenerator',
    ):
        """
        Initialize the contract generator.

        Args:
            ctx: The code generation context
            func_generator: The function generator
            def_generator: The definition generator
        """
        super().__init__(ctx)
        self._func = func_generator
        self._def = def_generator

    def generate_class(self, contract: Contract) -> str:
        """Generate the class declaration for a contract."""
        lines = [f'export class {contract.name} extends Contract {{']
        self.indent_level += 1

        lines.append(
            f'{self.indent()}constructor(jsonInterface: any[], address?: string, options?: ContractOptions);'
        )

        lines.append(f'{self.indent()}methods: {{')
        self.indent_level += 1
        for fn in contract.constant_functions:
            lines.append(self._func.generate_function(fn))
        for fn in contract.functions:
            lines.append(self._func.generate_function(fn))
        for const in contract.constants:
            lines.append(self._func.generate_constant(const))
        self.indent_level -= 1
        lines.append(f'{self.indent()}}};')

        lines.append(f'{self.indent()}events: {{')
        self.indent_level += 1
        for event in contract.events:
            lines.append(self.generate_event(event))
        lines.append(self.generate_all_events())
        self.indent_level -= 1
        lines.append(f'{self.indent()}}};')

        lines.append(f'{self.indent()}clone(): {contract.name};')
        self.indent_level -= 1
        lines.append('}')
        return '\n'.join(lines)

    # =========================================================================
    # EVENTS
    # =========================================================================

    def generate_event(self, event: EventDeclaration) -> str:
        """Generate the subscription method for one event."""
        lines = [f'{self.indent()}{event.name}(']
        lines.extend(self._def.generate_subscription_params())
        lines.append(f'{self.indent()}): EventEmitter;')
        return '\n'.join(lines)

    def generate_all_events(self) -> str:
        """Generate the aggregate subscription over every event."""
        lines = [f'{self.indent()}allEvents: (']
        lines.extend(self._def.generate_subscription_params())
        lines.append(f'{self.indent()}) => EventEmitter;')
        return '\n'.join(lines)

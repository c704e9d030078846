"""
Function generation for web3 typings.

This module renders the entries of a contract's `methods` member: one
signature per function or constant function, and one zero-argument
accessor per public state variable.
"""

from typing import Sequence, Union

from .base import BaseGenerator
from ..parser.abi_nodes import (
    AbiParameter,
    FunctionDeclaration,
    ConstantFunctionDeclaration,
    ConstantDeclaration,
)
from ..type_system import VoidType, generate_output_type


class FunctionGenerator(BaseGenerator):
    """
    Generates method signatures.

    This class handles:
    - Function and constant function signatures
    - Constant (state variable) accessors
    - Return type generation for zero, one or many outputs
    """

    def generate_function(
        self,
        fn: Union[FunctionDeclaration, ConstantFunctionDeclaration],
    ) -> str:
        """Generate the signature of a function or constant function.

        Args:
            fn: The function declaration

        Returns:
            One indented line, e.g. `transfer(to: string, value: number | string): TransactionObject<boolean>;`
        """
        params = self.generate_input_params(fn.inputs)
        returns = self.generate_output_types(fn.outputs)
        return f'{self.indent()}{fn.name}({params}): TransactionObject<{returns}>;'

    def generate_constant(self, const: ConstantDeclaration) -> str:
        """Generate the zero-argument accessor for a public state variable."""
        returns = generate_output_type(const.output.type)
        return f'{self.indent()}{const.name}(): TransactionObject<{returns}>;'

    def generate_output_types(self, outputs: Sequence[AbiParameter]) -> str:
        """Generate the result type of a call.

        Zero outputs give void and a single output gives its mapped type.
        Several outputs give an object with the named outputs as fields
        followed by positional fields for every output.
        """
        if not outputs:
            return generate_output_type(VoidType())
        if len(outputs) == 1:
            return generate_output_type(outputs[0].type)

        mapped = [generate_output_type(output.type) for output in outputs]
        named = [
            f'{output.name}: {ts_type}'
            for output, ts_type in zip(outputs, mapped)
            if output.name
        ]
        positional = [f'{i}: {ts_type}' for i, ts_type in enumerate(mapped)]
        return f'{{ {", ".join(named + positional)} }}'

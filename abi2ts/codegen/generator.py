"""
Top-level web3 typings generator.

Wires the specialized generators together and renders one Contract into a
complete TypeScript declaration file.
"""

from .context import CodeGenerationContext
from .imports import ImportGenerator
from .definition import DefinitionGenerator
from .function import FunctionGenerator
from .contract import ContractGenerator
from ..parser.abi_nodes import Contract


HEADER = '/* Generated by abi2ts. Do not edit. */\n/* tslint:disable */\n'


class Web3CodeGenerator:
    """
    Generates web3.js v1 typings for a contract.

    Output layout: header, imports, preamble (Callback, TransactionObject),
    then the contract class. Rendering is all-or-nothing: an
    UnrecognizedTypeError from any parameter propagates and nothing is
    returned.
    """

    def __init__(self):
        self._ctx = CodeGenerationContext()
        self._imports = ImportGenerator()
        self._def = DefinitionGenerator(self._ctx)
        self._func = FunctionGenerator(self._ctx)
        self._contract = ContractGenerator(self._ctx, self._func, self._def)

    def generate(self, contract: Contract) -> str:
        """Generate the declaration file for a contract."""
        self._ctx.reset_for_contract()
        parts = [
            HEADER,
            self._imports.generate(),
            self._def.generate_preamble(),
            self._contract.generate_class(contract),
        ]
        return '\n'.join(parts) + '\n'


def codegen(contract: Contract) -> str:
    """Generate web3 typings for a contract with a fresh generator."""
    return Web3CodeGenerator().generate(contract)

"""
Parser implementation for contract ABI JSON.

The parser walks the entries of a raw ABI (as produced by solc, truffle or
hardhat) and sorts them into the declaration kinds the code generator
understands.
"""

import json
import re
from typing import Any, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..codegen.diagnostics import GeneratorDiagnostics

from ..type_system import parse_evm_type
from .abi_nodes import (
    AbiParameter,
    EventArgDeclaration,
    FunctionDeclaration,
    ConstantFunctionDeclaration,
    ConstantDeclaration,
    EventDeclaration,
    Contract,
)


# Entry kinds that exist in an ABI but are not reachable through `methods`
NON_CALLABLE_ENTRIES = ('constructor', 'fallback', 'receive')


def extract_abi(raw_json: str) -> List[Dict[str, Any]]:
    """
    Pull the ABI list out of a JSON document.

    Accepts either the ABI itself (a JSON list) or a build artifact
    holding it under an 'abi' key.

    Raises:
        ValueError: If the document is not JSON or holds no ABI
    """
    data = json.loads(raw_json)
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get('abi'), list):
        return data['abi']
    raise ValueError('Not a valid ABI: expected a list or an object with an "abi" list')


def normalize_name(raw_name: str) -> str:
    """Turn a file stem into a TypeScript class name."""
    name = raw_name.replace(' ', '_')
    name = re.sub(r'^\d+', '', name)
    name = re.sub(r'\W', '', name)
    if not name:
        raise ValueError(f'Cannot derive a contract name from "{raw_name}"')
    return name[0].upper() + name[1:]


class AbiParser:
    """
    Parser for a raw ABI list.

    Converts ABI entries into a Contract node, recording skipped entries
    on the diagnostics collector.
    """

    def __init__(self, diagnostics: Optional['GeneratorDiagnostics'] = None, file_path: str = ''):
        if diagnostics is None:
            # Import here to avoid circular imports
            from ..codegen.diagnostics import GeneratorDiagnostics
            diagnostics = GeneratorDiagnostics()
        self.diagnostics = diagnostics
        self.file_path = file_path

    def parse(self, abi: List[Dict[str, Any]], name: str) -> Contract:
        """Parse the ABI entries of one contract, keeping declared order."""
        functions = []
        constant_functions = []
        constants = []
        events = []

        for entry in abi:
            if not isinstance(entry, dict):
                raise ValueError(f'Not a valid ABI entry: {entry!r}')
            # Solidity ABI JSON treats a missing type as 'function'
            kind = entry.get('type', 'function')

            if kind == 'function':
                if not self.is_constant(entry):
                    functions.append(self.parse_function(entry))
                elif not entry.get('inputs') and len(entry.get('outputs') or []) == 1:
                    constants.append(self.parse_constant(entry))
                else:
                    constant_functions.append(self.parse_constant_function(entry))
            elif kind == 'event':
                events.append(self.parse_event(entry))
            elif kind in NON_CALLABLE_ENTRIES:
                self.diagnostics.info_entry_ignored(kind, self.file_path)
            else:
                self.diagnostics.warn_unsupported_entry(kind, entry.get('name', ''), self.file_path)

        return Contract(
            name=name,
            functions=tuple(functions),
            constant_functions=tuple(constant_functions),
            constants=tuple(constants),
            events=tuple(events),
        )

    # =========================================================================
    # ENTRY PARSING
    # =========================================================================

    @staticmethod
    def is_constant(entry: Dict[str, Any]) -> bool:
        """Check if a function entry is read-only (legacy 'constant' or view/pure)."""
        if entry.get('constant'):
            return True
        return entry.get('stateMutability') in ('view', 'pure')

    def parse_function(self, entry: Dict[str, Any]) -> FunctionDeclaration:
        payable = bool(entry.get('payable')) or entry.get('stateMutability') == 'payable'
        return FunctionDeclaration(
            name=entry['name'],
            inputs=self.parse_parameters(entry.get('inputs')),
            outputs=self.parse_parameters(entry.get('outputs')),
            payable=payable,
        )

    def parse_constant_function(self, entry: Dict[str, Any]) -> ConstantFunctionDeclaration:
        return ConstantFunctionDeclaration(
            name=entry['name'],
            inputs=self.parse_parameters(entry.get('inputs')),
            outputs=self.parse_parameters(entry.get('outputs')),
        )

    def parse_constant(self, entry: Dict[str, Any]) -> ConstantDeclaration:
        return ConstantDeclaration(
            name=entry['name'],
            output=self.parse_parameter(entry['outputs'][0]),
        )

    def parse_event(self, entry: Dict[str, Any]) -> EventDeclaration:
        inputs = tuple(
            EventArgDeclaration(
                name=raw.get('name') or None,
                type=parse_evm_type(raw['type'], raw.get('components')),
                is_indexed=bool(raw.get('indexed')),
            )
            for raw in entry.get('inputs') or []
        )
        return EventDeclaration(
            name=entry['name'],
            inputs=inputs,
            is_anonymous=bool(entry.get('anonymous')),
        )

    def parse_parameters(self, raw_params: Optional[List[Dict[str, Any]]]) -> tuple:
        return tuple(self.parse_parameter(raw) for raw in raw_params or [])

    def parse_parameter(self, raw: Dict[str, Any]) -> AbiParameter:
        """Parse one parameter; an empty name is stored as None."""
        if not isinstance(raw, dict):
            raise ValueError(f'Not a valid ABI parameter: {raw!r}')
        return AbiParameter(
            name=raw.get('name') or None,
            type=parse_evm_type(raw['type'], raw.get('components')),
        )


def parse_abi(
    abi: List[Dict[str, Any]],
    name: str,
    diagnostics: Optional['GeneratorDiagnostics'] = None,
    file_path: str = '',
) -> Contract:
    """Parse a raw ABI list into a Contract named `name`."""
    return AbiParser(diagnostics, file_path).parse(abi, name)

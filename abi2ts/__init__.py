"""
Contract ABI to TypeScript Generator

This package generates web3.js v1 typings from contract ABI JSON.

Module Structure:
- type_system/: EVM type nodes, type string parser, input/output type mappings
- parser/: ABI nodes and the ABI JSON parser
- codegen/: Typings generation (Web3CodeGenerator + specialized generators)
- abi2ts.py: File/directory driver and CLI

Usage:
    from abi2ts import parse_abi, extract_abi, codegen

    contract = parse_abi(extract_abi(raw_json), 'Token')
    typings = codegen(contract)
"""

# Re-export main classes for convenience
from .abi2ts import AbiToTypeScriptTranspiler
from .parser import parse_abi, extract_abi, normalize_name, Contract
from .codegen import Web3CodeGenerator, codegen
from .type_system import UnrecognizedTypeError

__all__ = [
    'AbiToTypeScriptTranspiler',
    'Web3CodeGenerator',
    'codegen',
    'parse_abi',
    'extract_abi',
    'normalize_name',
    'Contract',
    'UnrecognizedTypeError',
]

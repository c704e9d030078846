"""
Parser module for the ABI to TypeScript generator.

This module provides the ABI node definitions and the ABI JSON parser.
"""

from .abi_nodes import (
    # Parameters
    AbiParameter,
    EventArgDeclaration,
    # Declarations
    FunctionDeclaration,
    ConstantFunctionDeclaration,
    ConstantDeclaration,
    EventDeclaration,
    # Root
    Contract,
)
from .abi_parser import AbiParser, parse_abi, extract_abi, normalize_name

__all__ = [
    # Parameters
    'AbiParameter',
    'EventArgDeclaration',
    # Declarations
    'FunctionDeclaration',
    'ConstantFunctionDeclaration',
    'ConstantDeclaration',
    'EventDeclaration',
    # Root
    'Contract',
    # Parser
    'AbiParser',
    'parse_abi',
    'extract_abi',
    'normalize_name',
]

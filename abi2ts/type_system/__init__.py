"""
Type system for the ABI to TypeScript generator.

This module provides the EVM type nodes, the raw type string parser, and
the direction-specific TypeScript type mappings.
"""

from .evm_types import (
    EvmType,
    IntegerType,
    UnsignedIntegerType,
    AddressType,
    VoidType,
    BytesType,
    BooleanType,
    StringType,
    ArrayType,
    TupleComponent,
    TupleType,
    UnrecognizedTypeError,
)
from .type_parser import parse_evm_type, parse_tuple_components
from .mappings import (
    generate_input_type,
    generate_output_type,
    generate_tuple_type,
    INPUT_TYPE_MAP,
    OUTPUT_TYPE_MAP,
)

__all__ = [
    # Nodes
    'EvmType',
    'IntegerType',
    'UnsignedIntegerType',
    'AddressType',
    'VoidType',
    'BytesType',
    'BooleanType',
    'StringType',
    'ArrayType',
    'TupleComponent',
    'TupleType',
    'UnrecognizedTypeError',
    # Parsing
    'parse_evm_type',
    'parse_tuple_components',
    # Mappings
    'generate_input_type',
    'generate_output_type',
    'generate_tuple_type',
    'INPUT_TYPE_MAP',
    'OUTPUT_TYPE_MAP',
]

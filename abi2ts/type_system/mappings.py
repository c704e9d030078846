"""
Type mappings from EVM types to TypeScript types.

This module contains the two direction-specific mappings used when
rendering web3 bindings:

- input: values the caller passes in. Integers accept number or string
  since they may exceed Number.MAX_SAFE_INTEGER.
- output: values web3 returns. Integers always come back as decimal strings.

Dispatch is on the exact class of the node. Anything else, including a
subclass of a known variant, raises UnrecognizedTypeError.
"""

from typing import Callable

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
    TupleType,
    UnrecognizedTypeError,
)


# =============================================================================
# TYPE MAPPING CONSTANTS
# =============================================================================

# Scalar EVM types -> TypeScript types for caller-supplied arguments
INPUT_TYPE_MAP = {
    IntegerType: 'number | string',
    UnsignedIntegerType: 'number | string',
    AddressType: 'string',
    BytesType: 'string | number[]',
    BooleanType: 'boolean',
    StringType: 'string',
}

# Scalar EVM types -> TypeScript types for values returned from a call
OUTPUT_TYPE_MAP = {
    IntegerType: 'string',
    UnsignedIntegerType: 'string',
    AddressType: 'string',
    VoidType: 'void',
    BytesType: 'string',
    BooleanType: 'boolean',
    StringType: 'string',
}


# =============================================================================
# TYPE CONVERSION FUNCTIONS
# =============================================================================

def generate_input_type(evm_type: EvmType) -> str:
    """
    Convert an EVM type to the TypeScript type accepted as a method argument.

    Args:
        evm_type: The EvmType node to convert

    Returns:
        The TypeScript type string

    Raises:
        UnrecognizedTypeError: For VoidType or any unsupported node
    """
    kind = type(evm_type)

    if kind in INPUT_TYPE_MAP:
        return INPUT_TYPE_MAP[kind]
    if kind is ArrayType:
        return f'({generate_input_type(evm_type.item_type)})[]'
    if kind is TupleType:
        return generate_tuple_type(evm_type, generate_input_type)

    raise UnrecognizedTypeError(evm_type)


def generate_output_type(evm_type: EvmType) -> str:
    """
    Convert an EVM type to the TypeScript type web3 returns for it.

    Args:
        evm_type: The EvmType node to convert

    Returns:
        The TypeScript type string

    Raises:
        UnrecognizedTypeError: For any unsupported node
    """
    kind = type(evm_type)

    if kind in OUTPUT_TYPE_MAP:
        return OUTPUT_TYPE_MAP[kind]
    if kind is ArrayType:
        return f'({generate_output_type(evm_type.item_type)})[]'
    if kind is TupleType:
        return generate_tuple_type(evm_type, generate_output_type)

    raise UnrecognizedTypeError(evm_type)


def generate_tuple_type(tuple_type: TupleType, generator: Callable[[EvmType], str]) -> str:
    """Render a tuple as an inline object type, keeping component order."""
    if not tuple_type.components:
        return '{}'
    fields = ', '.join(
        f'{component.name or f"arg{index}"}: {generator(component.type)}'
        for index, component in enumerate(tuple_type.components)
    )
    return f'{{ {fields} }}'

"""
EVM type nodes for ABI parameters.

This module contains the dataclasses representing the closed set of ABI
types understood by the code generator. Every node is immutable; composite
nodes (arrays and tuples) hold their children directly.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


# =============================================================================
# BASE NODE
# =============================================================================

@dataclass(frozen=True)
class EvmType:
    """Base class for all EVM type nodes."""
    pass


class UnrecognizedTypeError(TypeError):
    """Raised when a type node falls outside the supported variant set."""

    def __init__(self, evm_type):
        self.evm_type = evm_type
        super().__init__(f'Unrecognized type {evm_type!r}')


# =============================================================================
# SCALAR TYPES
# =============================================================================

@dataclass(frozen=True)
class IntegerType(EvmType):
    """Signed integer (int8 ... int256)."""
    bits: int = 256


@dataclass(frozen=True)
class UnsignedIntegerType(EvmType):
    """Unsigned integer (uint8 ... uint256)."""
    bits: int = 256


@dataclass(frozen=True)
class AddressType(EvmType):
    pass


@dataclass(frozen=True)
class VoidType(EvmType):
    """Absence of a value."""
    pass


@dataclass(frozen=True)
class BytesType(EvmType):
    """Fixed-size bytesN, or dynamic bytes when size is None."""
    size: Optional[int] = None


@dataclass(frozen=True)
class BooleanType(EvmType):
    pass


@dataclass(frozen=True)
class StringType(EvmType):
    pass


# =============================================================================
# COMPOSITE TYPES
# =============================================================================

@dataclass(frozen=True)
class ArrayType(EvmType):
    """Array of item_type; dynamic when size is None."""
    item_type: EvmType
    size: Optional[int] = None


@dataclass(frozen=True)
class TupleComponent:
    """A named member of a tuple."""
    name: str
    type: EvmType


@dataclass(frozen=True)
class TupleType(EvmType):
    """Ordered, named aggregate (a Solidity struct on the wire)."""
    components: Tuple[TupleComponent, ...] = ()

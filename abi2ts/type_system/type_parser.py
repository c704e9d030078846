"""
Parser for raw ABI type signatures.

Turns strings such as 'uint256', 'bytes32[]' or 'tuple[2]' (plus the
'components' list the ABI carries for tuples) into EvmType trees.
"""

import re
from typing import Any, Dict, List, Optional

from .evm_types import (
    EvmType,
    IntegerType,
    UnsignedIntegerType,
    AddressType,
    BytesType,
    BooleanType,
    StringType,
    ArrayType,
    TupleComponent,
    TupleType,
)


_UINT_RE = re.compile(r'^uint(\d*)$')
_INT_RE = re.compile(r'^int(\d*)$')
_BYTES_RE = re.compile(r'^bytes(\d*)$')

# Types whose shape never depends on a size suffix
_FIXED_TYPES = {
    'bool': BooleanType,
    'address': AddressType,
    'string': StringType,
}


def parse_evm_type(raw_type: str, components: Optional[List[Dict[str, Any]]] = None) -> EvmType:
    """
    Parse a raw ABI type signature into an EvmType.

    Args:
        raw_type: The type string from the ABI (e.g., 'uint8[2][]')
        components: Raw tuple components, used when the base type is 'tuple'

    Returns:
        The parsed EvmType node

    Raises:
        ValueError: If the type string is not a known ABI type
    """
    if not isinstance(raw_type, str):
        raise ValueError(f'Unknown type: {raw_type!r}')
    raw_type = raw_type.strip()

    if raw_type.endswith(']'):
        # The last bracket group is the outermost dimension
        open_index = raw_type.rfind('[')
        if open_index <= 0:
            raise ValueError(f'Unknown type: {raw_type}')
        size_raw = raw_type[open_index + 1:-1]
        if size_raw and not size_raw.isdigit():
            raise ValueError(f'Unknown type: {raw_type}')
        size = int(size_raw) if size_raw else None
        return ArrayType(parse_evm_type(raw_type[:open_index], components), size)

    if raw_type in _FIXED_TYPES:
        return _FIXED_TYPES[raw_type]()
    if raw_type == 'byte':
        return BytesType(1)
    if raw_type == 'tuple':
        return TupleType(parse_tuple_components(components or []))

    match = _UINT_RE.match(raw_type)
    if match:
        return UnsignedIntegerType(int(match.group(1) or 256))
    match = _INT_RE.match(raw_type)
    if match:
        return IntegerType(int(match.group(1) or 256))
    match = _BYTES_RE.match(raw_type)
    if match:
        return BytesType(int(match.group(1)) if match.group(1) else None)

    raise ValueError(f'Unknown type: {raw_type}')


def parse_tuple_components(components: List[Dict[str, Any]]) -> tuple:
    """Parse raw tuple components, keeping declared order."""
    return tuple(
        TupleComponent(
            name=component.get('name', ''),
            type=parse_evm_type(component['type'], component.get('components')),
        )
        for component in components
    )

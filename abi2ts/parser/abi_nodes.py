"""
Node definitions for parsed contract ABIs.

This module contains the dataclasses describing one contract's interface
after parsing: its functions, constant functions, state-variable accessors
and events. All nodes are immutable.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..type_system import EvmType


# =============================================================================
# PARAMETERS
# =============================================================================

@dataclass(frozen=True)
class AbiParameter:
    """A function input or output. Unnamed parameters have name None."""
    name: Optional[str]
    type: EvmType


@dataclass(frozen=True)
class EventArgDeclaration:
    """An event parameter."""
    name: Optional[str]
    type: EvmType
    is_indexed: bool = False


# =============================================================================
# DECLARATIONS
# =============================================================================

@dataclass(frozen=True)
class FunctionDeclaration:
    """A state-mutating function."""
    name: str
    inputs: Tuple[AbiParameter, ...] = ()
    outputs: Tuple[AbiParameter, ...] = ()
    payable: bool = False


@dataclass(frozen=True)
class ConstantFunctionDeclaration:
    """A view/pure function that takes arguments or returns several values."""
    name: str
    inputs: Tuple[AbiParameter, ...] = ()
    outputs: Tuple[AbiParameter, ...] = ()


@dataclass(frozen=True)
class ConstantDeclaration:
    """A zero-argument, single-output view function (public state variable getter)."""
    name: str
    output: AbiParameter


@dataclass(frozen=True)
class EventDeclaration:
    """An event definition."""
    name: str
    inputs: Tuple[EventArgDeclaration, ...] = ()
    is_anonymous: bool = False


# =============================================================================
# CONTRACT
# =============================================================================

@dataclass(frozen=True)
class Contract:
    """Root node: the whole parsed interface of one contract."""
    name: str
    functions: Tuple[FunctionDeclaration, ...] = ()
    constant_functions: Tuple[ConstantFunctionDeclaration, ...] = ()
    constants: Tuple[ConstantDeclaration, ...] = ()
    events: Tuple[EventDeclaration, ...] = ()

"""
Code generation context for the web3 typings generator.

Holds the state shared by the generators while one contract is rendered.
"""

from dataclasses import dataclass


@dataclass
class CodeGenerationContext:
    """State threaded through the generators for one output file."""

    # Indentation state
    indent_level: int = 0
    indent_str: str = '  '

    def indent(self) -> str:
        """Return the current indentation string."""
        return self.indent_str * self.indent_level

    def reset_for_contract(self) -> None:
        """Reset state for a new contract."""
        self.indent_level = 0

"""
Import generation for web3 typings.

This module renders the TypeScript import block every generated file
starts with.
"""

from typing import Dict, List


# Module -> names imported from it, in emission order
WEB3_IMPORTS: Dict[str, List[str]] = {
    'web3-eth-contract': ['Contract', 'ContractOptions'],
    'web3-core': ['Transaction', 'EventLog', 'PromiEvent'],
    'web3-eth': ['Block'],
    'events': ['EventEmitter'],
}


class ImportGenerator:
    """
    Generates TypeScript import statements.

    The set of imports is fixed: the web3 Contract base class and the
    types the preamble and event signatures refer to.
    """

    def generate(self) -> str:
        """Generate the import block, followed by a blank line."""
        lines = [
            f'import {{ {", ".join(names)} }} from "{module}";'
            for module, names in WEB3_IMPORTS.items()
        ]
        lines.append('')
        return '\n'.join(lines)

"""
Definition generation for web3 typings.

This module renders the supporting declarations every binding relies on:
the Callback alias, the TransactionObject call shape, and the options
object accepted by event subscriptions.
"""

from typing import List

from .base import BaseGenerator


class DefinitionGenerator(BaseGenerator):
    """
    Generates the fixed supporting declarations.

    This class handles:
    - The Callback<T> type alias
    - The TransactionObject<T> interface (call, send, estimateGas, encodeABI)
    - The event subscription parameter list
    """

    # =========================================================================
    # PREAMBLE
    # =========================================================================

    def generate_preamble(self) -> str:
        """Generate all supporting declarations, separated by blank lines."""
        return '\n'.join([
            self.generate_callback_alias(),
            self.generate_transaction_object(),
        ])

    def generate_callback_alias(self) -> str:
        return 'export type Callback<T> = (error: Error, result: T) => void;\n'

    def generate_transaction_object(self) -> str:
        """Generate the per-call invocation shape returned by every method."""
        lines = ['interface TransactionObject<T> {']
        self.indent_level += 1
        lines.append(f'{self.indent()}arguments: any[];')
        lines.append(f'{self.indent()}call(tx?: Transaction): Promise<T>;')
        lines.append(f'{self.indent()}send(tx?: Transaction): PromiEvent<T>;')
        lines.append(f'{self.indent()}estimateGas(tx?: Transaction): Promise<number>;')
        lines.append(f'{self.indent()}encodeABI(): string;')
        self.indent_level -= 1
        lines.append('}\n')
        return '\n'.join(lines)

    # =========================================================================
    # EVENT SUBSCRIPTIONS
    # =========================================================================

    def generate_subscription_params(self) -> List[str]:
        """Generate the (options?, cb?) parameter lines at one level deeper than current."""
        self.indent_level += 1
        lines = [f'{self.indent()}options?: {{']
        self.indent_level += 1
        lines.append(f'{self.indent()}filter?: object;')
        lines.append(f'{self.indent()}fromBlock?: Block;')
        lines.append(f'{self.indent()}topics?: (null | string)[];')
        self.indent_level -= 1
        lines.append(f'{self.indent()}}},')
        lines.append(f'{self.indent()}cb?: Callback<EventLog>')
        self.indent_level -= 1
        return lines

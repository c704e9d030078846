"""
Code generation module for the ABI to TypeScript generator.

This module provides web3.js typings generation from parsed Contract nodes.
"""

from .context import CodeGenerationContext
from .base import BaseGenerator
from .imports import ImportGenerator
from .definition import DefinitionGenerator
from .function import FunctionGenerator
from .contract import ContractGenerator
from .generator import Web3CodeGenerator, codegen
from .diagnostics import GeneratorDiagnostics, Diagnostic, DiagnosticSeverity

__all__ = [
    'CodeGenerationContext',
    'BaseGenerator',
    'ImportGenerator',
    'DefinitionGenerator',
    'FunctionGenerator',
    'ContractGenerator',
    'Web3CodeGenerator',
    'codegen',
    'GeneratorDiagnostics',
    'Diagnostic',
    'DiagnosticSeverity',
]

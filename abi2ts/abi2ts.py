#!/usr/bin/env python3
"""
ABI to TypeScript Generator

Generates web3.js v1 typings (.d.ts) from contract ABI JSON files, so
contract calls can be type-checked from TypeScript.

Key features:
- Loose input types (number | string) for integers, decimal-string outputs
- Named and positional result fields for multi-output calls
- Event subscription signatures plus allEvents
- Accepts raw ABI lists or truffle/hardhat artifacts

Usage:
    python -m abi2ts build/contracts/ -o types/
"""

from pathlib import Path
from typing import Dict, Optional

from .parser import parse_abi, extract_abi, normalize_name
from .codegen import Web3CodeGenerator, GeneratorDiagnostics


class AbiToTypeScriptTranspiler:
    """Main driver class that orchestrates ABI files into typings files."""

    def __init__(
        self,
        output_dir: str = './types',
        pattern: str = '**/*.json',
        verbose: bool = False,
    ):
        self.output_dir = Path(output_dir)
        self.pattern = pattern
        self.diagnostics = GeneratorDiagnostics(verbose=verbose)

    def transpile_source(self, raw_json: str, name: str, file_path: str = '') -> str:
        """Generate typings for one ABI document."""
        abi = extract_abi(raw_json)
        contract = parse_abi(abi, name, diagnostics=self.diagnostics, file_path=file_path)
        generator = Web3CodeGenerator()
        return generator.generate(contract)

    def transpile_file(self, filepath: str) -> str:
        """Generate typings for one ABI file, naming the contract after the file."""
        path = Path(filepath)
        with open(path, 'r') as f:
            source = f.read()
        return self.transpile_source(source, normalize_name(path.stem), str(path))

    def output_path_for(self, filepath: str) -> Path:
        """Get the .d.ts path written for an ABI file."""
        return self.output_dir / f'{normalize_name(Path(filepath).stem)}.d.ts'

    def transpile_directory(self, source_dir: str) -> Dict[str, str]:
        """Generate typings for every ABI file under a directory.

        Files that fail are reported and left out of the result. When two
        files map to the same output path, the first one in sorted order wins.
        """
        results = {}
        for abi_file in sorted(Path(source_dir).glob(self.pattern)):
            try:
                output_path = str(self.output_path_for(str(abi_file)))
                if output_path in results:
                    print(f"Skipping {abi_file}: {output_path} already generated")
                    self.diagnostics.warn_output_collision(output_path, str(abi_file))
                    continue
                results[output_path] = self.transpile_file(str(abi_file))
            except (ValueError, KeyError, TypeError, AttributeError) as e:
                print(f"Error generating {abi_file}: {e}")
                self.diagnostics.warn_file_skipped(str(e), str(abi_file))
        return results

    def write_output(self, results: Dict[str, str]) -> None:
        """Write generated typings files to disk."""
        for filepath, content in results.items():
            path = Path(filepath)
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w') as f:
                f.write(content)
            print(f"Written: {filepath}")


# =============================================================================
# CLI INTERFACE
# =============================================================================

def main(argv: Optional[list] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(description='Contract ABI to web3 TypeScript typings generator')
    parser.add_argument('input', help='Input ABI JSON file or directory')
    parser.add_argument('-o', '--output', default='types', help='Output directory')
    parser.add_argument('--stdout', action='store_true', help='Print to stdout instead of file')
    parser.add_argument('--pattern', default='**/*.json',
                        help='Glob pattern for ABI files when input is a directory')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Print every diagnostic, not only the summary')

    args = parser.parse_args(argv)

    input_path = Path(args.input)
    transpiler = AbiToTypeScriptTranspiler(args.output, args.pattern, verbose=args.verbose)

    if input_path.is_file():
        ts_code = transpiler.transpile_file(str(input_path))
        if args.stdout:
            print(ts_code)
        else:
            transpiler.write_output({str(transpiler.output_path_for(str(input_path))): ts_code})

    elif input_path.is_dir():
        results = transpiler.transpile_directory(str(input_path))
        if args.stdout:
            for ts_code in results.values():
                print(ts_code)
        else:
            transpiler.write_output(results)
    else:
        print(f"Error: {args.input} is not a valid file or directory")
        return 1

    transpiler.diagnostics.print_summary()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())

"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the application bootstrap
"""
import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from compositor.bootstrap import Application
from compositor.cli.formatters import format_output
from compositor.domain.base.exceptions import CompositorError


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with resource-action structure."""

    parser = argparse.ArgumentParser(
        prog="compositor",
        description="Compositor - assemble component trees from part families",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s families list                              # List registered families
  %(prog)s assemble toolbar.yaml --family light       # Assemble a blueprint
  %(prog)s assemble toolbar.yaml --dispatch apply     # Assemble and run 'apply'
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level (overrides the configured level)')
    parser.add_argument('--format', choices=['json', 'yaml', 'tree'],
                        default='json', help='Output format')

    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    # Families resource
    families_parser = subparsers.add_parser('families', help='Inspect part families')
    families_subparsers = families_parser.add_subparsers(dest='action', help='Family actions')
    families_subparsers.add_parser('list', help='List registered families')

    # Assemble
    assemble_parser = subparsers.add_parser('assemble', help='Assemble a blueprint file')
    assemble_parser.add_argument('blueprint', help='Blueprint file (YAML or JSON)')
    assemble_parser.add_argument('--family', help='Family to build parts from')
    assemble_parser.add_argument('--dispatch', metavar='OPERATION',
                                 help='Operation to run over the assembled tree')

    return parser


def load_blueprint(path: str) -> Dict[str, Any]:
    """Read a blueprint mapping from a YAML or JSON file."""
    file_path = Path(path)
    with file_path.open('r', encoding='utf-8') as f:
        if file_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)
    if not isinstance(data, dict):
        raise CompositorError(f"Blueprint file {path} must contain a mapping")
    return data


def execute_command(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    """Route parsed arguments to the matching command."""
    if args.resource == 'families':
        registry = app.initialize().engine.registry
        families = []
        for name in registry.get_registered_families():
            registration = registry.get_registration(name)
            families.append({"family": name, "roles": registration.capabilities()})
        return {"families": families}

    if args.resource == 'assemble':
        engine = app.engine
        tree = engine.assemble(args.family, load_blueprint(args.blueprint))
        result: Dict[str, Any] = {"tree": tree.to_dict()}
        if args.dispatch:
            result["dispatch"] = engine.dispatch(tree, args.dispatch).to_dict()
        return result

    raise CompositorError(f"Unknown command: {args.resource} {getattr(args, 'action', '') or ''}".strip())


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.resource is None or (args.resource == 'families' and args.action is None):
        parser.print_help(sys.stderr)
        return 1

    overrides = {"logging": {"level": args.log_level}} if args.log_level else None
    app = Application(args.config, overrides=overrides)
    try:
        result = execute_command(args, app)
    except (CompositorError, OSError, yaml.YAMLError, json.JSONDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_output(result, args.format))
    return 0


if __name__ == '__main__':
    sys.exit(main())

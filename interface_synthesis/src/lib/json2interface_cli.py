"""
Command-line interface for json2interface.
"""

import argparse
import sys
from pathlib import Path

from rich.console import Console

from json2interface import DEFAULT_ROOT_INTERFACE_NAME, ParseError, generate

__version__ = "0.1.0"

console = Console(stderr=True)


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="json2interface",
        description="Generate TypeScript interfaces from a sample JSON document",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="JSON file to read (default: standard input)",
    )
    parser.add_argument(
        "-r", "--root-name",
        default=DEFAULT_ROOT_INTERFACE_NAME,
        help=f"Name of the top level interface (default: {DEFAULT_ROOT_INTERFACE_NAME})",
    )
    parser.add_argument(
        "-o", "--output",
        help="Write the interfaces to this file instead of standard output",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version and exit",
    )

    args = parser.parse_args(argv)

    if args.version:
        console.print(f"json2interface version {__version__}")
        return 0

    try:
        if args.file == "-":
            json_data = sys.stdin.read()
        else:
            json_data = Path(args.file).read_text(encoding="utf-8")

        interfaces = generate(json_data, args.root_name)

        if args.output:
            Path(args.output).write_text(interfaces + "\n", encoding="utf-8")
            console.print(f"[bold green]Wrote interfaces to {args.output}[/bold green]")
        else:
            print(interfaces)

    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        return 1
    except ParseError as e:
        console.print(f"[bold red]Invalid JSON: {e}[/bold red]")
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())

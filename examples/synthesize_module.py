#!/usr/bin/env python3
"""
Example script demonstrating how to run the synthesis pass over a module description.
"""
import sys
import logging
from pathlib import Path
from rich.console import Console
from rich.table import Table

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from scriptsynth.core import TypeDatabase, load_module_description, load_settings
from scriptsynth.synthesis import Synthesizer


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)
console = Console()

EXAMPLES_DIR = Path(__file__).parent


def main():
    """Main function for the example."""
    module_path = Path(sys.argv[1]) if len(sys.argv) > 1 else EXAMPLES_DIR / "sample_module.json"
    settings_path = Path(sys.argv[2]) if len(sys.argv) > 2 else EXAMPLES_DIR / "sample_settings.json"

    # Create the type database with builtin value types
    database = TypeDatabase()
    database.register_primitive_types()

    console.print(f"[bold cyan]Loading module description from {module_path}...[/bold cyan]")

    try:
        module = load_module_description(module_path, database)
        settings = load_settings(settings_path)
    except Exception as e:
        console.print(f"[red]Error loading inputs: {e}[/red]")
        return 1

    synthesizer = Synthesizer(database, settings)
    synthesizer.synthesize_module(module)

    # Print statistics
    stats = database.get_statistics()

    stats_table = Table(title="Database Statistics")
    stats_table.add_column("Statistic", style="cyan")
    stats_table.add_column("Value", style="green")

    stats_table.add_row("Types", str(stats["total_types"]))
    stats_table.add_row("Namespaces", str(stats["total_namespaces"]))
    stats_table.add_row("Generated members", str(stats["generated_members"]))
    stats_table.add_row("Free functions", str(stats["free_functions"]))

    console.print(stats_table)

    # Companion namespaces in the order they were merged into the module
    console.print("\n[bold cyan]Companion namespaces:[/bold cyan]")
    for namespace in module.namespaces:
        names = ", ".join(symbol.name for symbol in namespace.symbols) or "(empty)"
        console.print(f"[cyan]{namespace.qualified_namespace}:[/cyan] {names}")

    # Follow the auxiliary links of the settings properties back to their setters
    console.print("\n[bold cyan]Auxiliary links:[/bold cyan]")
    for qualified_name in module.types:
        dbtype = database.get_type(qualified_name)
        for symbol in dbtype.symbols:
            for link in symbol.auxiliary_symbols:
                peers = database.resolve_auxiliary(link)
                resolved = "resolved" if peers else "dangling"
                console.print(f"{dbtype.name}.{symbol.name} -> {link} ({resolved})")

    return 0


if __name__ == "__main__":
    sys.exit(main())

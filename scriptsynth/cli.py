"""
Command-line interface for scriptsynth.
"""
import json
import logging
import sys
from typing import Tuple

import click
from rich.console import Console
from rich.table import Table
from rich.logging import RichHandler

from scriptsynth import __version__
from scriptsynth.core import SynthesisSettings, TypeDatabase, TypeEntity, load_module_description, load_settings
from scriptsynth.synthesis import Synthesizer, expand_template


# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True, console=Console(stderr=True))]
)
logger = logging.getLogger("scriptsynth")
console = Console()


def _symbol_rows(dbtype: TypeEntity, synthesizer: Synthesizer):
    for symbol in dbtype.generated_symbols():
        kind = "property" if symbol.kind == "property" or symbol.is_property else "method"
        yield dbtype.qualified_name, kind, symbol.format_signature(), symbol

    namespace = synthesizer.database.get_companion_namespace(dbtype.qualified_name)
    if namespace is not None:
        for symbol in namespace.symbols:
            yield namespace.qualified_namespace, "function", symbol.format_signature(), symbol

    if dbtype.is_delegate and not dbtype.is_event:
        enclosing = synthesizer.database.get_namespace(dbtype.namespace)
        for symbol in enclosing.symbols:
            if symbol.generated_by == dbtype.qualified_name:
                yield enclosing.qualified_namespace or "<global>", "constructor", symbol.format_signature(), symbol


@click.group()
@click.version_option(__version__)
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
def cli(verbose):
    """scriptsynth - Synthesize implicit symbols for script classes."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@cli.command()
@click.argument('module_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--settings', '-s', 'settings_file', type=click.Path(exists=True, dir_okay=False),
              help='JSON settings file with script flags and project generator rules')
@click.option('--type', '-t', 'type_name', default=None, help='Only show symbols for this type')
@click.option('--json', 'as_json', is_flag=True, help='Print the synthesized symbols as JSON')
def synthesize(module_file, settings_file, type_name, as_json):
    """Synthesize the generated symbols of every class in a module description."""
    # Keep stdout clean for machine-readable output
    logger.setLevel(logging.WARNING if as_json else logging.NOTSET)

    try:
        settings = load_settings(settings_file) if settings_file else SynthesisSettings()

        database = TypeDatabase()
        database.register_primitive_types()
        module = load_module_description(module_file, database)

        synthesizer = Synthesizer(database, settings)
        synthesizer.synthesize_module(module)

        qualified_names = [name for name in module.types if type_name is None or name == type_name]
        if type_name is not None and not qualified_names:
            console.print(f"[red]Error: Type '{type_name}' is not declared in {module_file}[/red]")
            sys.exit(1)

        if as_json:
            output = {}
            for qualified_name in qualified_names:
                dbtype = database.get_type(qualified_name)
                output[qualified_name] = [
                    {"container": container, "kind": kind, **symbol.model_dump(exclude_defaults=True)}
                    for container, kind, _, symbol in _symbol_rows(dbtype, synthesizer)
                ]
            click.echo(json.dumps(output, indent=2))
            return

        for qualified_name in qualified_names:
            dbtype = database.get_type(qualified_name)

            table = Table(title=f"Synthesized symbols for {qualified_name}")
            table.add_column("Container", style="cyan")
            table.add_column("Kind", style="magenta")
            table.add_column("Signature", style="green")
            table.add_column("Links", style="yellow")

            for container, kind, signature, symbol in _symbol_rows(dbtype, synthesizer):
                links = ", ".join(str(link) for link in symbol.auxiliary_symbols)
                table.add_row(container, kind, signature, links)

            console.print(table)

        stats = database.get_statistics()
        console.print(f"[green]Synthesis complete. {stats['generated_members']} generated members and "
                      f"{len(module.global_symbols)} free functions in module {module.module_name}.[/green]")

    except Exception as e:
        console.print(f"[red]Error synthesizing symbols: {e}[/red]")
        sys.exit(1)


@cli.command()
@click.argument('settings_file', type=click.Path(exists=True, dir_okay=False))
def rules(settings_file):
    """List the project generator rules configured in a settings file."""
    try:
        settings = load_settings(settings_file)
    except Exception as e:
        console.print(f"[red]Error loading settings: {e}[/red]")
        sys.exit(1)

    project = settings.project
    state = "[green]enabled[/green]" if project.enable else "[yellow]disabled[/yellow]"
    console.print(f"Project code generation is {state}")

    table = Table(title="Generator Rules")
    table.add_column("Derived From", style="cyan")
    table.add_column("Static Functions", style="green")
    table.add_column("Member Functions", style="green")
    table.add_column("Static Accessors", style="green")
    table.add_column("Member Accessors", style="green")

    for rule in project.generators:
        table.add_row(
            rule.derived_from,
            ", ".join(t.name for t in rule.static_functions),
            ", ".join(t.name for t in rule.member_functions),
            ", ".join(t.name for t in rule.static_accessors),
            ", ".join(t.name for t in rule.member_accessors),
        )

    console.print(table)


@cli.command()
@click.argument('template')
@click.option('--token', '-t', 'tokens', multiple=True, help='Token replacement as key=value, applied in order')
def expand(template, tokens: Tuple[str, ...]):
    """Expand a generator template string with the given tokens."""
    pairs = []
    for token in tokens:
        key, sep, value = token.partition("=")
        if not sep:
            raise click.BadParameter(f"Expected key=value, got '{token}'", param_hint="--token")
        pairs.append((key, value))

    click.echo(expand_template(template, pairs))


if __name__ == '__main__':
    cli()

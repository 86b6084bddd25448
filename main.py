"""Wohnheim-Verwaltung: Haupt-CLI.

Verwendung:
  python main.py setup                    Ersteinrichtung (Default-Zimmer)
  python main.py config show              Konfiguration anzeigen
  python main.py rooms                    Zimmer auflisten
  python main.py rooms --floor 2          Zimmer einer Etage
  python main.py rooms --tag Balkon       Zimmer mit Tag
"""

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich import box
from rich.markup import escape

console = Console()


def _load_config_or_abort():
    """Lädt die Konfiguration oder bricht mit Fehlermeldung ab."""
    from config.manager import ConfigManager
    mgr = ConfigManager()
    if mgr.first_run_check():
        console.print(
            "[red]Keine Konfiguration gefunden.[/red]\n"
            "Führen Sie zunächst [bold]python main.py setup[/bold] aus."
        )
        sys.exit(1)
    try:
        return mgr, mgr.load()
    except ValueError as e:
        console.print(f"[red bold]{e}[/red bold]")
        sys.exit(1)


def _rooms_table(rooms, title: str) -> Table:
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Etage")
    table.add_column("Zimmer")
    table.add_column("Typ")
    table.add_column("Tags")
    table.add_column("Bewohner")
    for room in rooms:
        occupant = room.occupant
        table.add_row(
            str(room.floor),
            str(room.room_number),
            f"{room.room_type} ({room.room_type.description})",
            escape(" ".join(sorted(str(t) for t in room.tags))),
            occupant.name if occupant is not None else "[dim]frei[/dim]",
        )
    return table


# ─── SETUP ────────────────────────────────────────────────────────────────────

@click.command("setup")
def cmd_setup():
    """Ersteinrichtung: Default-Zimmerkonfiguration anlegen."""
    from config.defaults import default_residence_config
    from config.manager import ConfigManager

    mgr = ConfigManager()
    if not mgr.first_run_check():
        console.print("[yellow]Eine Konfiguration existiert bereits.[/yellow]")
        if not click.confirm("Trotzdem neu einrichten?", default=False):
            return

    mgr.save(default_residence_config())
    console.print("[bold green]Einrichtung abgeschlossen![/bold green]")
    console.print("Führen Sie jetzt [bold]python main.py rooms[/bold] aus.")


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anzeigen."""


@cmd_config.command("show")
def config_show():
    """Zeigt die aktuelle Konfiguration an."""
    mgr, config = _load_config_or_abort()
    from models.residence import Residence

    console.print(Panel(
        f"[bold]{config.residence_name}[/bold]  |  "
        f"{len(config.rooms)} Zimmer  |  Etagen: {', '.join(config.floors)}",
        title="Wohnheimkonfiguration",
        border_style="cyan",
    ))
    residence = Residence.from_config(config)
    console.print(_rooms_table(residence.rooms, "Zimmer"))


# ─── ROOMS ────────────────────────────────────────────────────────────────────

@click.command("rooms")
@click.option("--floor", "floor_value", default=None, help="Nur Zimmer dieser Etage.")
@click.option("--tag", "tag_value", default=None, help="Nur Zimmer mit diesem Tag.")
def cmd_rooms(floor_value, tag_value):
    """Listet die Zimmer des Wohnheims auf."""
    mgr, config = _load_config_or_abort()
    from pydantic import ValidationError
    from models.floor import Floor
    from models.residence import Residence
    from models.tag import Tag

    residence = Residence.from_config(config)
    rooms = residence.rooms
    try:
        if floor_value is not None:
            on_floor = residence.rooms_on_floor(Floor(floor_value))
            rooms = [r for r in rooms if r in on_floor]
        if tag_value is not None:
            with_tag = residence.rooms_with_tag(Tag(tag_value))
            rooms = [r for r in rooms if r in with_tag]
    except ValidationError as e:
        console.print(f"[red bold]Ungültiger Filter:[/red bold]\n{e}")
        sys.exit(1)

    if not rooms:
        console.print("[dim]Keine passenden Zimmer.[/dim]")
        return
    console.print(_rooms_table(rooms, residence.name))


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Ausführliche Log-Ausgabe.")
def cli(verbose: bool):
    """Wohnheim-Verwaltung: Zimmer, Typen, Tags und Belegung.

    Starten Sie mit: python main.py setup
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def main():
    """Einstiegspunkt."""
    cli()


# Befehle registrieren
cli.add_command(cmd_setup)
cli.add_command(cmd_config)
cli.add_command(cmd_rooms)


if __name__ == "__main__":
    main()

"""
Utilitaires partages pour les commandes CLI de DVDShelf.

Ce module fournit :
- console : instance Rich Console partagée
- suppress_loguru : context manager pour désactiver/réactiver les logs loguru
- build_container / with_container : container initialisé injecte en premier argument
- session_scope : session de base de données fermée en sortie de bloc
- render_dvd_table / render_stats / render_movie : affichage Rich
"""

import asyncio
import inspect
from contextlib import contextmanager
from functools import wraps

from loguru import logger as loguru_logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from dvdshelf.container import Container
from dvdshelf.core.entities.dvd import Dvd
from dvdshelf.core.ports.api_clients import MovieData
from dvdshelf.infrastructure.persistence.database import get_session
from dvdshelf.services.collection_query import CollectionStats

console = Console()

# get_session est un generateur : on l'expose en context manager
session_scope = contextmanager(get_session)


@contextmanager
def suppress_loguru():
    """
    Context manager pour désactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("dvdshelf")
    try:
        yield
    finally:
        loguru_logger.enable("dvdshelf")


def build_container(requires_db: bool = True) -> Container:
    """Crée un container, avec les tables initialisées si requires_db."""
    container = Container()
    if requires_db:
        container.database.init()
    return container


def with_container(requires_db: bool = True):
    """
    Decorateur qui injecte un container initialisé en premier argument.

    Fonctionne pour les fonctions sync comme async.

    Usage:
        @with_container()
        def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                container = build_container(requires_db)
                return await func(container, *args, **kwargs)
            return async_wrapper

        @wraps(func)
        def wrapper(*args, **kwargs):
            container = build_container(requires_db)
            return func(container, *args, **kwargs)
        return wrapper
    return decorator


def async_command(func):
    """
    Transforme une fonction async en commande sync via asyncio.run().

    Preserve les annotations Typer pour que les options/arguments soient
    correctement interpretes.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        return asyncio.run(func(*args, **kwargs))
    wrapper.__signature__ = inspect.signature(func)
    wrapper.__annotations__ = func.__annotations__
    return wrapper


def _status_label(dvd: Dvd) -> str:
    if dvd.is_owned:
        return "[green]possédé[/green]"
    return "[yellow]souhaité[/yellow]"


def render_dvd_table(dvds: list[Dvd], title: str = "Collection") -> None:
    """Affiche une liste de DVD sous forme de tableau."""
    if not dvds:
        console.print("[yellow]Aucun DVD.[/yellow]")
        return

    table = Table(title=title, show_lines=False)
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Titre", style="bold")
    table.add_column("Annee", justify="right")
    table.add_column("Genre")
    table.add_column("Realisateur")
    table.add_column("Statut")

    for dvd in dvds:
        table.add_row(
            str(dvd.id),
            dvd.title,
            str(dvd.year) if dvd.year is not None else "-",
            dvd.genre or "-",
            dvd.director or "-",
            _status_label(dvd),
        )

    console.print(table)
    console.print(f"[dim]{len(dvds)} DVD(s)[/dim]")


def render_stats(stats: CollectionStats) -> None:
    """Affiche les agrégats de la collection dans un panneau."""
    lines = [
        f"[bold]Total[/bold] : {stats.total}",
        f"[green]Possedes[/green] : {stats.owned_count}",
        f"[yellow]Souhaites[/yellow] : {stats.wishlist_count}",
        f"[cyan]Completion[/cyan] : {stats.completion_rate}%",
    ]
    if stats.oldest_year is not None:
        lines.append(
            f"Annees : {stats.oldest_year} - {stats.newest_year} "
            f"(moyenne {stats.average_year})"
        )
    console.print(Panel("\n".join(lines), title="Statistiques", expand=False))

    for label, ranking in (
        ("Genres", stats.top_genres),
        ("Realisateurs", stats.top_directors),
    ):
        if not ranking:
            continue
        table = Table(title=f"Top {label.lower()}")
        table.add_column(label)
        table.add_column("DVD", justify="right")
        for name, count in ranking:
            table.add_row(name, str(count))
        console.print(table)


def render_movie(movie: MovieData) -> None:
    """Affiche les métadonnées d'un film dans un panneau."""
    lines = [
        f"Annee : {movie.year or '-'}",
        f"Genre : {movie.genre or '-'}",
        f"Realisateur : {movie.director or '-'}",
        f"Affiche : {movie.poster_url or '-'}",
    ]
    if movie.imdb_id:
        lines.append(f"[dim]IMDb : {movie.imdb_id}[/dim]")
    console.print(
        Panel("\n".join(lines), title=f"[bold green]{movie.title}[/bold green]", expand=False)
    )

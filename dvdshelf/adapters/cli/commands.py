"""
Commandes CLI de consultation de la collection et de recherche OMDB.

- list : liste les DVD d'un propriétaire (recherche OU filtres)
- stats : agrégats de la collection d'un propriétaire
- lookup : métadonnées d'un film par titre ou code scanné
"""

from typing import Annotated, Optional

import typer

from dvdshelf.adapters.cli.helpers import (
    async_command,
    console,
    render_dvd_table,
    render_movie,
    render_stats,
    session_scope,
    suppress_loguru,
    with_container,
)
from dvdshelf.core.exceptions import (
    DvdValidationError,
    InvalidApiKeyError,
    MetadataLookupError,
    MovieNotFoundError,
)

OwnerOption = Annotated[
    str,
    typer.Option("--owner", "-o", help="Identifiant du proprietaire de la collection"),
]


def _print_validation_errors(error: DvdValidationError) -> None:
    for field, messages in error.errors.items():
        for message in messages:
            console.print(f"[red]Erreur {field}:[/red] {message}")


def list_dvds(
    owner: OwnerOption,
    search: Annotated[
        Optional[str],
        typer.Option("--search", "-s", help="Recherche dans titre, realisateur, genre"),
    ] = None,
    status: Annotated[
        Optional[str],
        typer.Option("--status", help="Filtre par statut (owned, wishlist)"),
    ] = None,
    genre: Annotated[
        Optional[str],
        typer.Option("--genre", "-g", help="Filtre par genre"),
    ] = None,
    year: Annotated[
        Optional[int],
        typer.Option("--year", "-y", help="Filtre par annee exacte"),
    ] = None,
) -> None:
    """Liste les DVD d'un propriétaire (la recherche ignore les filtres)."""
    _list_dvds(owner, search, status, genre, year)


@with_container()
def _list_dvds(
    container,
    owner: str,
    search: Optional[str],
    status: Optional[str],
    genre: Optional[str],
    year: Optional[int],
) -> None:
    with session_scope(container.engine()) as session:
        service = container.dvd_service(
            repository=container.dvd_repository(session=session)
        )
        try:
            dvds = service.list_dvds(
                owner, search=search, status=status, genre=genre, year=year
            )
        except DvdValidationError as e:
            _print_validation_errors(e)
            raise typer.Exit(1)

    render_dvd_table(dvds, title=f"Collection de {owner}")


def stats(owner: OwnerOption) -> None:
    """Affiche les statistiques de la collection d'un propriétaire."""
    _stats(owner)


@with_container()
def _stats(container, owner: str) -> None:
    with session_scope(container.engine()) as session:
        service = container.dvd_service(
            repository=container.dvd_repository(session=session)
        )
        collection_stats = service.collection_stats(owner)

    if collection_stats.total == 0:
        console.print("[yellow]Collection vide.[/yellow]")
        return
    render_stats(collection_stats)


@async_command
async def lookup(
    term: Annotated[str, typer.Argument(help="Titre du film ou code-barres scanne")],
) -> None:
    """Recherche les métadonnées d'un film sur OMDB."""
    await _lookup(term)


@with_container(requires_db=False)
async def _lookup(container, term: str) -> None:
    client = container.omdb_client()
    service = container.lookup_service()
    try:
        with suppress_loguru():
            movie = await service.lookup(title=term)
    except MovieNotFoundError:
        console.print(f"[yellow]Aucun film trouve pour:[/yellow] {term}")
        raise typer.Exit(1)
    except InvalidApiKeyError:
        console.print(
            "[red]Cle API OMDB absente ou invalide.[/red] "
            "[dim]Definir DVDSHELF_OMDB_API_KEY.[/dim]"
        )
        raise typer.Exit(1)
    except MetadataLookupError as e:
        console.print(f"[red]Echec de la recherche:[/red] {e}")
        raise typer.Exit(1)
    except DvdValidationError as e:
        _print_validation_errors(e)
        raise typer.Exit(1)
    finally:
        await client.close()

    render_movie(movie)

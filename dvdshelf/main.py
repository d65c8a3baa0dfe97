"""
Point d'entrée CLI de DVDShelf.

Configure le logging selon -v / -q et fournit les commandes CLI :
serveur web, configuration, consultation de la collection et recherche OMDB.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import list_dvds, lookup, stats
from .config import Settings
from .container import Container
from .logging_config import configure_logging, console_level

app = typer.Typer(
    name="dvdshelf",
    help="Gestion d'une collection personnelle de DVD",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosité (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """DVDShelf - Collection personnelle de DVD."""
    settings = get_config()
    configure_logging(settings, level=console_level(settings.log_level, verbose, quiet))
    logger.debug("Démarrage de DVDShelf", version=__version__)


# Note: "list" masquerait le builtin, donc on utilise name= explicitement
app.command(name="list")(list_dvds)
app.command()(stats)
app.command()(lookup)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration DVDShelf")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"API OMDB : {'activée' if config.omdb_enabled else 'désactivée'}")
    typer.echo(f"En-tête d'identité : {config.auth_header}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"DVDShelf v{__version__}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web DVDShelf."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("dvdshelf.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()

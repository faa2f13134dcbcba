"""
Main Entry Point

Command line interface for the JSONPlaceholder client:

    placeholder-client users
    placeholder-client open-todos 1
    placeholder-client last-post-comments 1 --output-dir Files
    placeholder-client create-user user.json

Every command sets up logging when it runs, runs one client operation and exits
with status 1 if it raised a ClientError.
"""

import logging
import sys
from pathlib import Path

import typer

from .api import ClientError, PlaceholderClient, User
from .config import config
from .files import FileManager


app = typer.Typer(help="JSONPlaceholder client utility.", no_args_is_help=True)


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Set up logging for the application."""
    # Ensure log directory exists
    config.log.log_directory.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("placeholder_client")
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_format)

    # File handler
    file_handler = logging.FileHandler(
        config.log.log_file_path,
        mode='a',
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(config.log.log_format))

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger


@app.callback()
def cli(
    ctx: typer.Context,
    base_url: str = typer.Option(config.api.base_url, help="API root URL."),
    output_dir: Path = typer.Option(config.file.output_directory, help="Directory for exported files."),
    log_level: str = typer.Option(config.log.log_level, help="Console log level."),
):
    """Build the client shared by all commands."""
    ctx.meta["log_level"] = log_level
    ctx.obj = PlaceholderClient(
        base_url=base_url,
        file_manager=FileManager(output_dir=output_dir)
    )


def _client(ctx: typer.Context) -> PlaceholderClient:
    """Set up logging and return the shared client."""
    setup_logging(ctx.meta["log_level"])
    return ctx.obj


def _run(operation):
    """Run a client operation, mapping failures to exit codes."""
    logger = logging.getLogger("placeholder_client")
    try:
        return operation()
    except ClientError as e:
        logger.error(f"Operation failed ({e.kind.value}): {e}")
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        raise typer.Exit(code=130)


def _read_user(path: Path, client: PlaceholderClient) -> User:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise typer.BadParameter(f"Cannot read {path}: {e}")
    return client.codec.decode(User, text)


@app.command()
def users(ctx: typer.Context):
    """List all users."""
    client = _client(ctx)
    for user in _run(client.list_users):
        typer.echo(f"{user.id}\t{user.username}\t{user.email}")


@app.command()
def user(ctx: typer.Context, user_id: str):
    """Print the raw JSON of a user by ID."""
    client = _client(ctx)
    typer.echo(_run(lambda: client.get_user_by_id(user_id)))


@app.command("user-by-name")
def user_by_name(ctx: typer.Context, username: str):
    """Print the raw JSON of the users with a username."""
    client = _client(ctx)
    typer.echo(_run(lambda: client.get_user_by_username(username)))


@app.command("open-todos")
def open_todos(ctx: typer.Context, user_id: str):
    """List the todos of a user that are not completed."""
    client = _client(ctx)
    for todo in _run(lambda: client.list_open_todos(user_id)):
        typer.echo(f"{todo.id}\t{todo.title}")


@app.command("last-post-comments")
def last_post_comments(ctx: typer.Context, user_id: str):
    """Export the comments of a user's most recent post to a JSON file."""
    client = _client(ctx)
    path = _run(lambda: client.last_post_comments_to_file(user_id))
    typer.echo(str(path))


@app.command("create-user")
def create_user(ctx: typer.Context, user_file: Path):
    """Create a user from a JSON file."""
    client = _client(ctx)
    _run(lambda: client.create_user(_read_user(user_file, client)))


@app.command("update-user")
def update_user(ctx: typer.Context, user_id: str, user_file: Path):
    """Replace a user with the contents of a JSON file."""
    client = _client(ctx)
    _run(lambda: client.update_user(_read_user(user_file, client), user_id))


@app.command("delete-user")
def delete_user(ctx: typer.Context, user_id: str):
    """Delete a user by ID."""
    client = _client(ctx)
    _run(lambda: client.delete_user(user_id))


@app.command()
def ping(ctx: typer.Context):
    """Check that the API is reachable."""
    client = _client(ctx)
    if not client.test_connection():
        raise typer.Exit(code=1)
    typer.echo("ok")


def main():
    """Main entry point for the command line."""
    app()


if __name__ == "__main__":
    main()

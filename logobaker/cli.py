"""
LogoBaker CLI

Command-line interface for the watermark and OGP pipelines.
"""

from pathlib import Path
from typing import Optional

import typer

from logobaker import logger
from logobaker.api import OgpBaker, WatermarkBaker
from logobaker.core.configs import load_ogp_config, load_profiles, load_watermark_config
from logobaker.core.defs import LogoBakerError
from logobaker.utils.image import load_image

app = typer.Typer(
    name="logobaker",
    help="LogoBaker - watermark and social preview image generator",
    add_completion=False,
    no_args_is_help=True,
)


def _fail(e: Exception):
    typer.echo(f"Error: {e}", err=True)
    logger.exception(e)
    raise typer.Exit(1)


@app.command()
def watermark(
    image: Path = typer.Argument(..., help="Image to stamp the logo onto"),
    config: Path = typer.Option(
        Path("config.json"), "-c", "--config", help="Watermark configuration file"
    ),
    profiles: Path = typer.Option(
        Path("profiles.json"), "--profiles", help="Export profile list"
    ),
):
    """
    Stamp the configured logo onto IMAGE and export every profile.

    Example:
        logobaker watermark photo.jpg --config config.json --profiles profiles.json
    """
    try:
        cfg = load_watermark_config(config)
        profile_list = load_profiles(profiles)
        baker = WatermarkBaker(cfg)
        result = baker.bake(image)
        written = baker.export(result, profile_list)
    except LogoBakerError as e:
        _fail(e)

    for item in written:
        typer.echo(f"✓ Saved to: {item.path}")


@app.command()
def ogp(
    elements: str = typer.Option(
        "", "-e", "--elements", help="Comma-separated element files in the source directory"
    ),
    text: str = typer.Option("", "-t", "--text", help="Text to insert"),
    font_size: Optional[float] = typer.Option(
        None, "-p", "--font-size", help="Font size, defaults to the configured fontSize"
    ),
    output: str = typer.Option("ogp", "-o", "--output", help="Output file name"),
    config: Path = typer.Option(
        Path("config.json"), "-c", "--config", help="OGP configuration file"
    ),
):
    """
    Build a social preview image from the configured background and logo.

    Example:
        logobaker ogp -e go.png,python.png -t "Hello" -o hello
    """
    element_list = [name.strip() for name in elements.split(",") if name.strip()]
    try:
        cfg = load_ogp_config(config)
        baker = OgpBaker(cfg)
        result = baker.bake(element_list, text=text, font_size=font_size, base_name=output)
        written = baker.export(result)
    except LogoBakerError as e:
        _fail(e)

    for item in written:
        typer.echo(f"✓ Saved to: {item.path}")


@app.command()
def info(
    image: Path = typer.Argument(..., help="Image file to inspect"),
):
    """
    Display information about an image file.
    """
    try:
        arr, source_type = load_image(image)
    except LogoBakerError as e:
        _fail(e)

    typer.echo(f"Image: {image}")
    typer.echo(f"  Size: {arr.shape[1]} x {arr.shape[0]}")
    typer.echo(f"  Type: {source_type or 'unknown'}")
    typer.echo(f"  Has alpha: {bool((arr[..., 3] < 255).any())}")
    typer.echo(f"  File size: {image.stat().st_size / 1024:.2f} KB")


@app.command()
def version():
    """Show LogoBaker version."""
    from logobaker import __version__
    typer.echo(f"LogoBaker version {__version__}")


def main():
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()

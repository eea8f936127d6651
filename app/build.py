# app/build.py
"""
Freeze the site into static files.

  flask --app api build-site --output public

Every page is rendered through the app itself, so the static output matches
what the server returns.
"""
from __future__ import annotations

import shutil
from pathlib import Path

import click
from flask import Flask

from .services.registry import EXTENSION_KEY
from .services.sitemap import SERVICE_AREAS_PATH, STATIC_PAGES, city_path, hub_path

FILE_ROUTES: tuple[str, ...] = ("/sitemap.xml", "/robots.txt")


def write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def reset_output_dir(p: Path) -> None:
    if p.exists():
        shutil.rmtree(p)
    p.mkdir(parents=True, exist_ok=True)


def page_paths(app: Flask) -> list[str]:
    """
    Every HTML page the site serves: static pages, the service-area index,
    each hub and each (hub, city) pair.
    """
    enumerator = app.extensions[EXTENSION_KEY].pages
    paths = [path for path, _, _ in STATIC_PAGES]
    paths.append(SERVICE_AREAS_PATH)
    paths.extend(hub_path(hub_slug) for hub_slug in enumerator.enumerate_hub_pages())
    paths.extend(city_path(hub_slug, city_slug) for hub_slug, city_slug in enumerator.enumerate_city_pages())
    return paths


def output_file(out: Path, path: str) -> Path:
    if path in FILE_ROUTES:
        return out / path.lstrip("/")
    return out / path.strip("/") / "index.html"


def build_site(app: Flask, out: Path, clean: bool = True) -> int:
    if clean:
        reset_output_dir(out)
    else:
        out.mkdir(parents=True, exist_ok=True)

    if app.static_folder and Path(app.static_folder).is_dir():
        shutil.copytree(app.static_folder, out / "static", dirs_exist_ok=True)

    count = 0
    client = app.test_client()
    for path in [*page_paths(app), *FILE_ROUTES]:
        resp = client.get(path)
        if resp.status_code != 200:
            raise click.ClickException(f"{path} returned {resp.status_code}")
        write_text(output_file(out, path), resp.get_data(as_text=True))
        count += 1

    resp = client.get("/__missing__")
    write_text(out / "404.html", resp.get_data(as_text=True))

    app.logger.info("Built %d files into %s", count, out)
    return count


def register_cli(app: Flask) -> None:
    @app.cli.command("build-site")
    @click.option("--output", "-o", type=click.Path(file_okay=False, path_type=Path), default=None,
                  help="Output directory (defaults to BUILD_OUTPUT_DIR).")
    @click.option("--clean/--no-clean", default=True, help="Empty the output directory first.")
    def build_site_command(output: Path | None, clean: bool) -> None:
        """Render every page, sitemap.xml and robots.txt to static files."""
        out = output or Path(app.config["BUILD_OUTPUT_DIR"])
        count = build_site(app, out, clean=clean)
        click.echo(f"Generated {count} files into: {out.resolve()}")

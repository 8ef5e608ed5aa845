"""Render decoded responses on a Rich console."""

from __future__ import annotations

from dataclasses import asdict

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from vlcremote.domain.models import Browse, Playlist, Status, VLMResult
from vlcremote.ui.cli.commands import CommandResult

# VLC reports volume on a 0-512 scale where 256 is 100%.
VOLUME_FULL_SCALE: int = 256


def format_duration(seconds: int) -> str:
    """Format seconds as ``H:MM:SS`` (or ``M:SS`` under an hour)."""

    if seconds < 0:
        return "--:--"
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def render_status(console: Console, status: Status) -> None:
    table = Table(title="VLC status", show_header=False, title_justify="left")
    table.add_column("field", style="bold cyan")
    table.add_column("value")

    table.add_row("State", status.state or "unknown")
    meta = status.information.meta if status.information else None
    if meta is not None:
        label = " - ".join(
            part for part in (meta.extra.get("artist"), meta.extra.get("title")) if part
        )
        table.add_row("Now playing", escape(label or meta.filename))
    table.add_row("Time", f"{format_duration(status.time)} / {format_duration(status.length)}")
    table.add_row("Volume", f"{round(status.volume * 100 / VOLUME_FULL_SCALE)}%")
    table.add_row("Rate", f"{status.rate:g}x")
    modes = (("loop", status.loop), ("repeat", status.repeat), ("random", status.random))
    flags = [name for name, enabled in modes if enabled]
    table.add_row("Modes", ", ".join(flags) or "-")
    if status.version:
        table.add_row("Version", status.version)
    console.print(table)


def _add_playlist_node(branch: Tree, node: Playlist) -> None:
    for child in node.children:
        if child.children or child.type == "node":
            sub_branch = branch.add(f"[bold]{escape(child.name)}[/bold]")
            _add_playlist_node(sub_branch, child)
            continue
        marker = "[green]▶[/green] " if child.current == "current" else ""
        duration = format_duration(child.duration) if child.duration > 0 else ""
        suffix = f" [dim]({duration})[/dim]" if duration else ""
        _ = branch.add(f"{marker}[{child.id}] {escape(child.name)}{suffix}")


def render_playlist(console: Console, playlist: Playlist) -> None:
    tree = Tree(f"[bold]{escape(playlist.name or 'Playlist')}[/bold]")
    _add_playlist_node(tree, playlist)
    console.print(tree)


def render_browse(console: Console, browse: Browse) -> None:
    table = Table(title="Browse")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Size", justify="right")
    table.add_column("URI", overflow="fold")
    for element in browse.element:
        name = f"[bold blue]{escape(element.name)}/[/bold blue]" if element.is_dir else escape(element.name)
        size = "" if element.is_dir else str(element.size)
        table.add_row(name, element.type, size, escape(element.uri))
    console.print(table)


def render_vlm(console: Console, result: VLMResult) -> None:
    if not result.ok:
        console.print(f"[red]VLM error: {escape(result.error)}[/red]")
        return
    if not result.elements:
        console.print("[green]OK[/green]")
        return
    table = Table(title="VLM elements")
    table.add_column("Kind")
    table.add_column("Name")
    table.add_column("Attributes", overflow="fold")
    for element in result.elements:
        attributes = ", ".join(
            f"{key}={value}" for key, value in element.attributes.items() if key != "name"
        )
        table.add_row(element.kind, escape(element.name), escape(attributes))
    console.print(table)


def render_result(console: Console, result: CommandResult, as_json: bool = False) -> None:
    """Render any facade result, either styled or as JSON."""

    if as_json:
        console.print_json(data=asdict(result))
        return
    if isinstance(result, Status):
        render_status(console, result)
    elif isinstance(result, Playlist):
        render_playlist(console, result)
    elif isinstance(result, Browse):
        render_browse(console, result)
    else:
        render_vlm(console, result)


__all__ = [
    "format_duration",
    "render_browse",
    "render_playlist",
    "render_result",
    "render_status",
    "render_vlm",
]

"""CLI entry point — outline novels from the terminal.

Usage:
  outliner --user me novel create --title "Dune Redux"
  outliner --user me part create NOVEL_ID --title "Part I"
  outliner --user me chapter create NOVEL_ID --part PART_ID --title Arrival
  outliner --user me beat create NOVEL_ID "Paul meets the Fremen" --chapter CHAPTER_ID
  outliner --user me outline NOVEL_ID
  outliner --help

The user may also come from OUTLINER_CLI_USER_ID. Without one, every command
fails the same way an unauthenticated request would.
"""

import asyncio
import logging
import sys
from pathlib import Path

import click
from rich.markup import escape

from actions import (
    ActionContext,
    UserIdentity,
    create_novel,
    update_novel,
    list_novels,
    create_novel_part,
    update_novel_part,
    delete_novel_part,
    list_novel_parts,
    create_novel_chapter,
    update_novel_chapter,
    delete_novel_chapter,
    list_novel_chapters,
    create_novel_beat,
    update_novel_beat,
    delete_novel_beat,
    list_novel_beats,
    require_user,
    resolve_novel,
)
from cli.theme import get_console, app_header, record_panel, records_table, outline_tree
from config.exceptions import OutlinerError
from config.logging_config import setup_logging
from config.settings import Settings
from models.database import Database

console = get_console()
logger = logging.getLogger(__name__)

_NOVEL_COLUMNS = ["id", "title", "genre", "status", "updatedAt"]
_PART_COLUMNS = ["id", "orderIndex", "title", "summary"]
_CHAPTER_COLUMNS = ["id", "orderIndex", "title", "partId", "povCharacter", "wordCountGoal"]
_BEAT_COLUMNS = ["id", "orderIndex", "beatType", "description", "chapterId"]


def _init_logging(settings: Settings, verbose: bool):
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else settings.log_level_value
    setup_logging(level=level, log_dir=settings.log_dir, console_enabled=verbose)


def _present(**fields) -> dict:
    """Drop options the user did not pass, so updates only touch what was given."""
    return {name: value for name, value in fields.items() if value is not None}


def _execute(obj: dict, coro_factory):
    """Open the store, run one coroutine against it, and report outliner errors."""
    db = Database(obj["db_path"])
    user_id = obj["user_id"]
    context = ActionContext(db=db, user=UserIdentity(user_id) if user_id else None)
    try:
        return asyncio.run(coro_factory(context))
    except OutlinerError as e:
        logger.debug("Command failed: %s", e)
        console.print(f"[error]{escape(e.message)}[/]")
        sys.exit(1)
    finally:
        db.close()


def _show_record(obj: dict, title: str, action, payload: dict, key: str):
    result = _execute(obj, lambda ctx: action(ctx, payload))
    console.print(record_panel(title, result["data"][key]))


def _show_list(obj: dict, title: str, action, payload: dict, columns: list[str]):
    result = _execute(obj, lambda ctx: action(ctx, payload))
    data = result["data"]
    if not data["items"]:
        console.print(f"[warning]No {title.lower()} yet.[/]")
        return
    console.print(records_table(f"{title} ({data['total']})", data["items"], columns))


def _show_deleted(obj: dict, what: str, action, payload: dict):
    _execute(obj, lambda ctx: action(ctx, payload))
    console.print(f"[success]{what} deleted.[/]")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--user", "-u", "user_id", default=None, help="Act as this user id (overrides OUTLINER_CLI_USER_ID)")
@click.option("--db", "db_path", default=None, type=click.Path(path_type=Path), help="SQLite database file")
@click.pass_context
def cli(ctx, verbose, user_id, db_path):
    """outliner — plan novels as parts, chapters and beats."""
    settings = Settings()
    _init_logging(settings, verbose)
    ctx.obj = {
        "user_id": user_id or settings.cli_user_id,
        "db_path": db_path or settings.sqlite_db_path,
    }


# ---------------------------------------------------------------------------
# novel commands
# ---------------------------------------------------------------------------

@cli.group()
def novel():
    """Create, update and list your novels."""


@novel.command("create")
@click.option("--title", "-t", required=True, help="Working title")
@click.option("--subtitle", default=None)
@click.option("--genre", "-g", default=None)
@click.option("--audience", "target_audience", default=None, help='e.g. "YA", "Adult"')
@click.option("--status", "-s", default=None, help="idea, outlining, drafting, revising, ...")
@click.option("--logline", "-l", default=None, help="One-sentence pitch")
@click.option("--notes", default=None)
@click.pass_obj
def novel_create(obj, **fields):
    """Create a novel."""
    _show_record(obj, "Novel created", create_novel, _present(**fields), "novel")


@novel.command("update")
@click.argument("novel_id")
@click.option("--title", "-t", default=None)
@click.option("--subtitle", default=None)
@click.option("--genre", "-g", default=None)
@click.option("--audience", "target_audience", default=None)
@click.option("--status", "-s", default=None)
@click.option("--logline", "-l", default=None)
@click.option("--notes", default=None)
@click.pass_obj
def novel_update(obj, novel_id, **fields):
    """Change one or more fields of a novel."""
    _show_record(obj, "Novel updated", update_novel, {"id": novel_id, **_present(**fields)}, "novel")


@novel.command("list")
@click.pass_obj
def novel_list(obj):
    """List your novels."""
    _show_list(obj, "Novels", list_novels, {}, _NOVEL_COLUMNS)


# ---------------------------------------------------------------------------
# part commands
# ---------------------------------------------------------------------------

@cli.group()
def part():
    """Group chapters into parts."""


@part.command("create")
@click.argument("novel_id")
@click.option("--order", "-o", "order_index", default=None, type=int, help="Order index (default 1)")
@click.option("--title", "-t", default=None)
@click.option("--summary", default=None)
@click.pass_obj
def part_create(obj, novel_id, **fields):
    """Add a part to a novel."""
    _show_record(obj, "Part created", create_novel_part, {"novel_id": novel_id, **_present(**fields)}, "part")


@part.command("update")
@click.argument("novel_id")
@click.argument("part_id")
@click.option("--order", "-o", "order_index", default=None, type=int)
@click.option("--title", "-t", default=None)
@click.option("--summary", default=None)
@click.pass_obj
def part_update(obj, novel_id, part_id, **fields):
    """Change one or more fields of a part."""
    payload = {"id": part_id, "novel_id": novel_id, **_present(**fields)}
    _show_record(obj, "Part updated", update_novel_part, payload, "part")


@part.command("delete")
@click.argument("novel_id")
@click.argument("part_id")
@click.pass_obj
def part_delete(obj, novel_id, part_id):
    """Delete a part. Its chapters stay, unfiled."""
    _show_deleted(obj, "Part", delete_novel_part, {"id": part_id, "novel_id": novel_id})


@part.command("list")
@click.argument("novel_id")
@click.pass_obj
def part_list(obj, novel_id):
    """List the parts of a novel."""
    _show_list(obj, "Parts", list_novel_parts, {"novel_id": novel_id}, _PART_COLUMNS)


# ---------------------------------------------------------------------------
# chapter commands
# ---------------------------------------------------------------------------

@cli.group()
def chapter():
    """Outline chapters, optionally inside parts."""


@chapter.command("create")
@click.argument("novel_id")
@click.option("--part", "-p", "part_id", default=None, help="Part to file the chapter under")
@click.option("--order", "-o", "order_index", default=None, type=int)
@click.option("--title", "-t", default=None)
@click.option("--pov", "pov_character", default=None, help="Point-of-view character")
@click.option("--summary", default=None)
@click.option("--goal", "word_count_goal", default=None, type=float, help="Word count goal")
@click.pass_obj
def chapter_create(obj, novel_id, **fields):
    """Add a chapter to a novel."""
    payload = {"novel_id": novel_id, **_present(**fields)}
    _show_record(obj, "Chapter created", create_novel_chapter, payload, "chapter")


@chapter.command("update")
@click.argument("novel_id")
@click.argument("chapter_id")
@click.option("--part", "-p", "part_id", default=None, help="Move the chapter under this part")
@click.option("--unfile", is_flag=True, help="Take the chapter out of its part")
@click.option("--order", "-o", "order_index", default=None, type=int)
@click.option("--title", "-t", default=None)
@click.option("--pov", "pov_character", default=None)
@click.option("--summary", default=None)
@click.option("--goal", "word_count_goal", default=None, type=float)
@click.pass_obj
def chapter_update(obj, novel_id, chapter_id, unfile, **fields):
    """Change one or more fields of a chapter."""
    if unfile and fields["part_id"]:
        raise click.UsageError("--part and --unfile are mutually exclusive")
    payload = {"id": chapter_id, "novel_id": novel_id, **_present(**fields)}
    if unfile:
        payload["part_id"] = None
    _show_record(obj, "Chapter updated", update_novel_chapter, payload, "chapter")


@chapter.command("delete")
@click.argument("novel_id")
@click.argument("chapter_id")
@click.pass_obj
def chapter_delete(obj, novel_id, chapter_id):
    """Delete a chapter together with its beats."""
    _show_deleted(obj, "Chapter and its beats", delete_novel_chapter, {"id": chapter_id, "novel_id": novel_id})


@chapter.command("list")
@click.argument("novel_id")
@click.option("--part", "-p", "part_id", default=None, help="Only chapters in this part")
@click.pass_obj
def chapter_list(obj, novel_id, part_id):
    """List the chapters of a novel."""
    payload = {"novel_id": novel_id, **_present(part_id=part_id)}
    _show_list(obj, "Chapters", list_novel_chapters, payload, _CHAPTER_COLUMNS)


# ---------------------------------------------------------------------------
# beat commands
# ---------------------------------------------------------------------------

@cli.group()
def beat():
    """Record story beats, optionally inside chapters."""


@beat.command("create")
@click.argument("novel_id")
@click.argument("description")
@click.option("--chapter", "-c", "chapter_id", default=None, help="Chapter the beat belongs to")
@click.option("--order", "-o", "order_index", default=None, type=int)
@click.option("--type", "beat_type", default=None, help="inciting-incident, climax, reveal, ...")
@click.option("--viewpoint", default=None, help="POV / emotion notes")
@click.pass_obj
def beat_create(obj, novel_id, description, **fields):
    """Add a beat to a novel."""
    payload = {"novel_id": novel_id, "description": description, **_present(**fields)}
    _show_record(obj, "Beat created", create_novel_beat, payload, "beat")


@beat.command("update")
@click.argument("novel_id")
@click.argument("beat_id")
@click.option("--chapter", "-c", "chapter_id", default=None, help="Move the beat into this chapter")
@click.option("--detach", is_flag=True, help="Take the beat out of its chapter")
@click.option("--order", "-o", "order_index", default=None, type=int)
@click.option("--type", "beat_type", default=None)
@click.option("--description", "-d", default=None)
@click.option("--viewpoint", default=None)
@click.pass_obj
def beat_update(obj, novel_id, beat_id, detach, **fields):
    """Change one or more fields of a beat."""
    if detach and fields["chapter_id"]:
        raise click.UsageError("--chapter and --detach are mutually exclusive")
    payload = {"id": beat_id, "novel_id": novel_id, **_present(**fields)}
    if detach:
        payload["chapter_id"] = None
    _show_record(obj, "Beat updated", update_novel_beat, payload, "beat")


@beat.command("delete")
@click.argument("novel_id")
@click.argument("beat_id")
@click.pass_obj
def beat_delete(obj, novel_id, beat_id):
    """Delete a beat."""
    _show_deleted(obj, "Beat", delete_novel_beat, {"id": beat_id, "novel_id": novel_id})


@beat.command("list")
@click.argument("novel_id")
@click.option("--chapter", "-c", "chapter_id", default=None, help="Only beats in this chapter")
@click.pass_obj
def beat_list(obj, novel_id, chapter_id):
    """List the beats of a novel."""
    payload = {"novel_id": novel_id, **_present(chapter_id=chapter_id)}
    _show_list(obj, "Beats", list_novel_beats, payload, _BEAT_COLUMNS)


# ---------------------------------------------------------------------------
# outline command
# ---------------------------------------------------------------------------

async def _load_outline(context: ActionContext, novel_id: str):
    user = require_user(context)
    match = await resolve_novel(context, novel_id, user.id)

    scope = {"novel_id": novel_id}
    parts = (await list_novel_parts(context, scope))["data"]["items"]
    chapters = (await list_novel_chapters(context, scope))["data"]["items"]
    beats = (await list_novel_beats(context, scope))["data"]["items"]
    return match, parts, chapters, beats


@cli.command()
@click.argument("novel_id")
@click.pass_obj
def outline(obj, novel_id):
    """Show a novel's full outline as a tree."""
    found, parts, chapters, beats = _execute(obj, lambda ctx: _load_outline(ctx, novel_id))
    console.print(app_header(found.title))
    console.print(outline_tree(found, parts, chapters, beats))
    console.print(
        f"\n[stat.label]Parts:[/] [stat.value]{len(parts)}[/]  "
        f"[muted]|[/]  [stat.label]Chapters:[/] [stat.value]{len(chapters)}[/]  "
        f"[muted]|[/]  [stat.label]Beats:[/] [stat.value]{len(beats)}[/]"
    )


def main():
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()

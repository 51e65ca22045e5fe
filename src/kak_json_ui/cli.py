"""CLI entry point for kak-json-ui."""

from pathlib import Path
from typing import Annotated

import typer
from mm_clikit import TyperPlus

from kak_json_ui.app_context import AppContext
from kak_json_ui.commands.decode import decode
from kak_json_ui.commands.encode import keys, menu_select, mouse_move, mouse_press, mouse_release, resize, scroll
from kak_json_ui.config import Config
from kak_json_ui.log import setup_logging
from kak_json_ui.output import Output

app = TyperPlus(package_name="kak-json-ui")


@app.callback()
def callback(
    ctx: typer.Context,
    *,
    json_output: Annotated[bool, typer.Option("--json", help="Output results as JSON.")] = False,
    data_dir: Annotated[Path | None, typer.Option("--data-dir", help="Data directory path.")] = None,
) -> None:
    """Decode and encode kakoune JSON UI messages."""
    cfg = Config.build(data_dir)
    cfg.data_dir.mkdir(parents=True, exist_ok=True)
    setup_logging(cfg.log_path, cfg.log_level)
    ctx.obj = AppContext(out=Output(json_mode=json_output), cfg=cfg)


# Editor → frontend
app.command(aliases=["d"])(decode)

# Frontend → editor
app.command()(keys)
app.command()(resize)
app.command()(scroll)
app.command("mouse-move")(mouse_move)
app.command("mouse-press")(mouse_press)
app.command("mouse-release")(mouse_release)
app.command("menu-select")(menu_select)

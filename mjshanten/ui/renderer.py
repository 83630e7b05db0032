"""Rich rendering of session replies."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from mjshanten.core.tile import ALL_TILES_34
from mjshanten.engine.command import OutputFormat
from mjshanten.engine.session import ReplyType, SessionReply
from mjshanten.rules.shanten import ShantenResult
from mjshanten.ui.i18n import t, shanten_label, translate_shape
from mjshanten.ui.tile_display import (
    groups_to_rich_text, tiles_to_rich_text,
)

SHANTEN_STYLES = {-1: "bold magenta", 0: "bold green", 1: "bold cyan"}


class Renderer:
    """Prints session replies in the configured output format."""

    def __init__(self, console: Console):
        self.console = console

    def render(self, reply: SessionReply, output_format: OutputFormat):
        if reply.reply_type in (ReplyType.EMPTY, ReplyType.EXIT):
            return
        if output_format == OutputFormat.JSON:
            self.console.print_json(data=reply.to_dict())
            return

        if reply.reply_type == ReplyType.RESULT:
            self.render_result(reply)
        elif reply.reply_type == ReplyType.ERROR:
            self.render_error(reply)
        elif reply.reply_type == ReplyType.HELP:
            self.console.print(Text(t("help.text")))
        elif reply.reply_type == ReplyType.HISTORY:
            self.render_history(reply)
        else:
            self.console.print(f"  [dim]{t('msg.setting', setting=reply.message)}[/dim]")

    def render_result(self, reply: SessionReply):
        result = reply.result
        body = Text()
        body.append(shanten_label(result.shanten),
                    style=SHANTEN_STYLES.get(result.shanten, "bold"))
        body.append(f"   {t('label.shape')}: {translate_shape(result.achieved_by.value)}")
        body.append(f"   {t('label.k')}: {result.k}\n")
        body.append_text(_by_shape_line(result))
        body.append_text(_decomposition_text(result))

        if reply.useful_tiles is not None:
            body.append("\n")
            label = t("label.waits") if result.is_tenpai else t("label.useful_tiles")
            body.append(f"{label}: ", style="bold")
            if reply.useful_tiles:
                body.append_text(tiles_to_rich_text(u.tile for u in reply.useful_tiles))
                total = sum(u.remaining for u in reply.useful_tiles)
                body.append(f"  ({t('label.useful_total', n=total)})")
            elif result.is_tenpai:
                # Tenpai on tiles whose every copy is already in view
                body.append(t("label.waits_exhausted"), style="dim")
            else:
                body.append(t("label.none"), style="dim")

        self.console.print(Panel(body, title=Text(str(reply.hand)), border_style="cyan"))

    def render_error(self, reply: SessionReply):
        title = t(f"error.{reply.error_tag}")
        self.console.print(f"  [red]{t('error.title')}: {title}[/red]")
        self.console.print(f"  [dim]{escape(reply.message)}[/dim]")

    def render_history(self, reply: SessionReply):
        self.console.print(f"  [bold]{t('label.history')}[/bold]")
        if not reply.history:
            self.console.print(f"    [dim]{t('history.empty')}[/dim]")
            return
        for i, entry in enumerate(reply.history, 1):
            if entry.error is not None:
                self.console.print(f"    {i}. {escape(entry.input)}  [red]{entry.error}[/red]")
            else:
                self.console.print(f"    {i}. {escape(entry.input)}  {shanten_label(entry.shanten)}")


def _by_shape_line(result: ShantenResult) -> Text:
    if len(result.by_shape) < 2:
        return Text()
    parts = [f"{translate_shape(tag.value)} {s}" for tag, s in result.by_shape.items()]
    return Text(f"{t('label.by_shape')}: " + " / ".join(parts) + "\n", style="dim")


def _decomposition_text(result: ShantenResult) -> Text:
    d = result.decomposition
    text = Text()
    rows = [
        ("label.melds", groups_to_rich_text(m.tiles for m in d.melds) if d.melds else None),
        ("label.sets", groups_to_rich_text(b.tiles for b in d.sets) if d.sets else None),
        ("label.head", tiles_to_rich_text(d.head.tiles) if d.head else None),
        ("label.partials", groups_to_rich_text(b.tiles for b in d.partials) if d.partials else None),
    ]
    if d.isolated:
        rows.append(("label.isolated", tiles_to_rich_text(ALL_TILES_34[i] for i in d.isolated)))
    for key, value in rows:
        if value is None:
            continue
        text.append(f"{t(key)}: ")
        text.append_text(value)
        text.append("\n")
    text.rstrip()
    return text

from typing import Optional

import typer
from rich.console import Console
from rich.text import Text

from rawprompt.completion import AbsPathExpander
from rawprompt.config import load_settings
from rawprompt.domain import EndOfInput
from rawprompt.editor import LineEditor
from rawprompt.logger import default_log_file, get_logger, setup_logger

EXIT_WORDS = {"exit", "quit"}

console = Console()

cli = typer.Typer(
    name="rawprompt",
    help="Raw-mode line editor with tab completion of absolute paths",
    epilog="""
    Examples:
    $ rawprompt --prompt "$ "
    """,
    add_completion=False,
)


def build_editor(prompt: str) -> LineEditor:
    editor = LineEditor(prompt=prompt)
    editor.register(AbsPathExpander())
    return editor


def run_repl(editor: LineEditor, out: Console) -> int:
    """Read lines until EOT or an exit word. Returns the number of lines read."""
    logger = get_logger("main")
    count = 0
    while True:
        try:
            line = editor.read_line()
        except EndOfInput:
            out.print()
            logger.info("End of input, leaving")
            break
        except Exception:
            logger.exception("read_line failed")
            raise

        if line.strip().lower() in EXIT_WORDS:
            break
        count += 1
        out.print(Text(line, style="bold cyan"))

    return count


@cli.command()
def main(
    prompt: Optional[str] = typer.Option(None, "--prompt", "-p", help="Prompt text (default: $RAWPROMPT_PROMPT or '> ')"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging (to $RAWPROMPT_LOG_FILE or the per-user state dir)"),
):
    """Edit lines interactively; Tab completes absolute paths, Ctrl-D quits."""
    settings = load_settings()
    debug = debug or settings.debug
    log_file = settings.log_file
    if log_file is None and debug:
        log_file = default_log_file()
    setup_logger(
        log_file=log_file,
        log_level="DEBUG" if debug else settings.log_level,
    )
    logger = get_logger("main")
    logger.info("Starting rawprompt")

    editor = build_editor(prompt if prompt is not None else settings.prompt)
    count = run_repl(editor, console)
    logger.info(f"Session ended after {count} line(s)")


def run():
    """Entry point for the rawprompt command."""
    cli()


if __name__ == "__main__":
    run()

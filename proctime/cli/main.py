from __future__ import annotations

import logging

import typer
from rich.console import Console

from proctime.config import Config
from proctime.core.launcher import launch
from proctime.errors import PTError
from proctime.utils.proc import read_invocation


logger = logging.getLogger(__name__)
err_console = Console(stderr=True, highlight=False)

app = typer.Typer(name="proctime", help="Run a command and report its real, system and user time", add_completion=False)


def _setup_logging(level: str) -> None:
	logging.basicConfig(
		level=getattr(logging, level.upper(), logging.WARNING),
		format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
	)


# Every token after the program name belongs to the child, so no options of our own
@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True, "help_option_names": []})
def run(ctx: typer.Context):
	cfg = Config()
	_setup_logging(cfg.log_level)
	logger.debug("Child arguments as parsed by the CLI: %s", ctx.args)
	try:
		code = launch(read_invocation(), cfg)
	except PTError as e:
		logger.debug("Launch failed", exc_info=True)
		err_console.print(str(e), style="red", markup=False)
		raise typer.Exit(code=e.exit_code)
	raise typer.Exit(code=code)


def main() -> None:
	app()


if __name__ == "__main__":
	main()

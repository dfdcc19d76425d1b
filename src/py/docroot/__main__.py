import argparse
import asyncio
import sys

from . import config
from .bridge import fetch
from .filesystem import FilesystemHandler
from .status import OK
from .utils.logging import Logging, event


async def render(handler: FilesystemHandler, paths: list[str]) -> int:
	failed: int = 0
	for path in paths:
		sink = await fetch(handler, path)
		event("Response", sink.status, Path=path, Length=len(sink.body))
		sys.stdout.buffer.write(sink.payload())
		sys.stdout.buffer.write(b"\n")
		failed += 0 if sink.status == OK else 1
	sys.stdout.flush()
	return failed


def main(args: list[str] | None = None) -> int:
	oparser = argparse.ArgumentParser(
		prog="docroot",
		description="Serves paths from a document root, writing the HTTP responses to stdout",
	)
	oparser.add_argument(
		"-r",
		"--root",
		default=config.ROOT,
		help="Document root (defaults to $DOCROOT_ROOT)",
	)
	oparser.add_argument(
		"-l",
		"--log-level",
		default=config.LOG_LEVEL,
		choices=["debug", "info", "warning", "error"],
	)
	oparser.add_argument("paths", nargs="*", default=[""], help="Request paths")
	options = oparser.parse_args(args)
	Logging.SetLevel(options.log_level)
	handler = FilesystemHandler(options.root or None)
	failed = asyncio.run(render(handler, options.paths or [""]))
	return 1 if failed else 0


if __name__ == "__main__":
	sys.exit(main())

# EOF

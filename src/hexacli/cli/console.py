"""CLI console helpers with optional Rich support.

Diagnostics (errors, usage) go to stderr through Rich when it is
installed and fall back to plain ``print`` otherwise.  Command results
go to stdout through :func:`echo`, never through Rich, so entries are
printed byte-for-byte (no markup, wrapping, or tab expansion).

Optional UI dependencies are imported lazily so bootstrap paths
(``--help``, ``--version``) keep working without Rich.
"""

from __future__ import annotations

import sys
from typing import Any

from hexacli.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible stderr proxy with Rich fallback."""

	def print(self, *objects: object, style: str | None = None) -> None:
		"""Render with Rich when available, else plain stderr print.

		Markup and emoji codes are disabled: messages may embed user
		data or paths such as ``[Errno 2]`` that must not be read as
		Rich tags.
		"""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(
			*objects,
			style=style,
			markup=False,
			emoji=False,
			highlight=False,
			soft_wrap=True,
		)


console = _ConsoleProxy()


def echo(line: str = "") -> None:
	"""Write one result line to stdout verbatim.

	Lines read from a store with undecodable bytes carry lone
	surrogates; when the text stream refuses them the line is written
	as the store's original UTF-8 bytes through the binary buffer.
	"""
	text = line + "\n"
	stream = sys.stdout
	try:
		stream.write(text)
		return
	except UnicodeEncodeError:
		pass

	raw = text.encode("utf-8", "surrogateescape")
	buffer = getattr(stream, "buffer", None)
	if buffer is None:
		stream.write(raw.decode("utf-8", "replace"))
		return
	stream.flush()
	buffer.write(raw)
	buffer.flush()

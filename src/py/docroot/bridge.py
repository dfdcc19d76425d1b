from typing import Any

from .model import Handler, Started
from .sink import BufferSink


async def fetch(handler: Handler, path: str, sink: BufferSink | None = None) -> BufferSink:
	"""Processes `path` with the given handler into a buffer sink, waiting
	for any streamed body to be fully copied."""
	res: BufferSink = sink if sink is not None else BufferSink()
	result: Any = handler.process(res, path)
	if isinstance(result, Started):
		await result.copier.wait()
	return res


# EOF

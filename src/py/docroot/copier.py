import asyncio
from enum import Enum
from typing import BinaryIO, Callable, NamedTuple

from .config import CHUNK_SIZE
from .sink import Sink
from .utils.logging import debug, exception, logged, warning

# -----------------------------------------------------------------------------
#
# COPIER
#
# -----------------------------------------------------------------------------
# The copier moves bytes from a readable source to a sink as a sequence of
# read/write/drain steps. It always ends with exactly one `CopyResult`, and
# releases its source exactly once, whatever the outcome.


class CopyStatus(Enum):
	Completed = 0
	Failed = 1  # An I/O error happened mid-transfer
	Aborted = 2  # The sink was closed or the copy was cancelled


class CopyResult(NamedTuple):
	status: CopyStatus
	copied: int
	error: BaseException | None = None


class ByteCopier:
	"""Asynchronously copies all the bytes of `source` to `sink`."""

	__slots__ = [
		"source",
		"sink",
		"chunkSize",
		"task",
		"done",
		"isReleased",
		"_callbacks",
	]

	def __init__(self, source: BinaryIO, sink: Sink, chunkSize: int = CHUNK_SIZE):
		self.source: BinaryIO = source
		self.sink: Sink = sink
		self.chunkSize: int = chunkSize
		self.task: asyncio.Task[None] | None = None
		self.done: asyncio.Future[CopyResult] | None = None
		self.isReleased: bool = False
		self._callbacks: list[Callable[[CopyResult], None]] = []

	@property
	def isStarted(self) -> bool:
		return self.task is not None

	def start(self) -> "ByteCopier":
		"""Schedules the copy on the running loop and returns immediately."""
		if self.task is not None:
			raise RuntimeError("Copier was already started")
		loop = asyncio.get_running_loop()
		self.done = loop.create_future()
		self.task = loop.create_task(self._run())
		self.task.add_done_callback(self._onTaskDone)
		return self

	def onFinished(self, callback: Callable[[CopyResult], None]) -> "ByteCopier":
		"""Registers a callback invoked once with the copy result. Callbacks
		registered after completion are invoked right away."""
		if self.done is not None and self.done.done():
			self._notify(callback, self.done.result())
		else:
			self._callbacks.append(callback)
		return self

	async def wait(self) -> CopyResult:
		if self.done is None:
			raise RuntimeError("Copier was not started")
		return await asyncio.shield(self.done)

	def cancel(self) -> bool:
		return self.task.cancel() if self.task else False

	async def _run(self) -> None:
		status: CopyStatus = CopyStatus.Completed
		error: BaseException | None = None
		copied: int = 0
		try:
			while chunk := self.source.read(self.chunkSize):
				if not self.sink.write(chunk):
					status = CopyStatus.Aborted
					break
				copied += len(chunk)
				if not await self.sink.drain():
					status = CopyStatus.Aborted
					break
		except asyncio.CancelledError:
			status = CopyStatus.Aborted
			raise
		except OSError as e:
			status, error = CopyStatus.Failed, e
			warning("Copy failed", Error=str(e), Copied=copied)
		except Exception as e:
			status, error = CopyStatus.Failed, exception(e, "Copy failed")
		finally:
			self._finish(CopyResult(status, copied, error))

	def _onTaskDone(self, task: "asyncio.Task[None]") -> None:
		# A task cancelled before its first step never runs `_run`
		if self.done is not None and not self.done.done():
			self._finish(CopyResult(CopyStatus.Aborted, 0))

	def _finish(self, result: CopyResult) -> None:
		if self.done is not None and self.done.done():
			return
		self._release()
		logged(debug) and debug(
			"Copy finished", Status=result.status.name, Copied=result.copied
		)
		if self.done is not None and not self.done.done():
			self.done.set_result(result)
		callbacks, self._callbacks = self._callbacks, []
		for callback in callbacks:
			self._notify(callback, result)

	def _release(self) -> None:
		if self.isReleased:
			return
		self.isReleased = True
		try:
			self.source.close()
		except OSError as e:
			warning("Could not close copy source", Error=str(e))

	def _notify(self, callback: Callable[[CopyResult], None], result: CopyResult):
		try:
			callback(result)
		except Exception as e:
			exception(e, "Copy callback failed")


# EOF

"""
Static File Server Example

Embeds a `FilesystemHandler` behind a `Router` in a bare asyncio server.
Only the request line is looked at: this is a demonstration of the sink
contract, not an HTTP implementation.

Usage:
    python fileserver.py [ROOT]

Test with:
    curl -i http://localhost:8000/files/
    curl -i http://localhost:8000/files/README.md
"""

import asyncio
import sys

from docroot import FilesystemHandler, Router, Started, StreamSink
from docroot.utils.logging import event, info

router = Router()
router.addRoute("/files/", FilesystemHandler(sys.argv[1] if len(sys.argv) > 1 else "."))
router.addRoute("/health$", lambda sink, path: sink.write("OK") and sink.close())


async def onClient(reader: asyncio.StreamReader, writer: asyncio.StreamWriter):
	line = (await reader.readline()).decode("latin-1").split()
	# Skips the request headers
	while (await reader.readline()) not in (b"\r\n", b"\n", b""):
		pass
	sink = StreamSink(writer)
	if len(line) != 3:
		sink.writeError(400)
		return
	method, path, _ = line
	event(method, path)
	result = router.process(sink, path.split("?", 1)[0])
	if isinstance(result, Started):
		await result.copier.wait()
	await sink.drain()
	sink.close()


async def main(port: int = 8000):
	server = await asyncio.start_server(onClient, "127.0.0.1", port)
	info("Serving files", icon="🚀", Port=port)
	async with server:
		await server.serve_forever()


if __name__ == "__main__":
	try:
		asyncio.run(main())
	except KeyboardInterrupt:
		event("ManualShutdown")

# EOF

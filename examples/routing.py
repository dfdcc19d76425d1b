"""
Nested Routing Example

Routers strip the matched prefix before delegating, so nested routers only
see the part of the path that concerns them.

Usage:
    python routing.py
"""

import asyncio

from docroot import BufferSink, Router, fetch


def echo(name: str):
	def handler(sink: BufferSink, path: str):
		sink.setHeader("Content-Type", "text/plain")
		sink.write(f"{name}: {path!r}")
		sink.close()

	return handler


api = Router()
api.addRoute(r"v(\d+)/users/", echo("users"))
api.addRoute(r"v(\d+)/", echo("api"))

root = Router()
root.addRoute("api/", api)
root.addRoute("", echo("fallback"))


async def main():
	for path in ("api/v1/users/42", "api/v2/status", "api/nope", "about"):
		sink = await fetch(root, path)
		print(f"{path:20s} {sink.status} {bytes(sink.body).decode()}")


if __name__ == "__main__":
	asyncio.run(main())

# EOF

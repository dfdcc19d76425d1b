from os import getenv

DEFAULT_ENCODING: str = "utf8"

# Document root used by the command line when none is given
ROOT: str | None = getenv("DOCROOT_ROOT") or None

# Size of the chunks read from files and written to sinks
CHUNK_SIZE: int = int(getenv("DOCROOT_CHUNK_SIZE", 64_000))

LOG_LEVEL: str = getenv("DOCROOT_LOG_LEVEL", "info").lower()

# EOF

__version__: str = "0.1.0"

from .model import (  # NOQA: F401
	Handler,
	FunctionHandler,
	ResolvedPath,
	TraversalDenied,
	RouteNotMatched,
	RootNotConfigured,
	OpenFailed,
	Listed,
	Started,
)
from .sink import Sink, BufferSink, StreamSink  # NOQA: F401
from .copier import ByteCopier, CopyResult, CopyStatus  # NOQA: F401
from .mime import MimeTable  # NOQA: F401
from .resolver import PathResolver  # NOQA: F401
from .listing import DirectoryRenderer  # NOQA: F401
from .streamer import FileStreamer  # NOQA: F401
from .filesystem import FilesystemHandler  # NOQA: F401
from .routing import Route, Router  # NOQA: F401
from .bridge import fetch  # NOQA: F401

# EOF

# Reason phrases for the statuses this package produces or forwards
HTTP_STATUS: dict[int, str] = {
	200: "OK",
	204: "No Content",
	301: "Moved Permanently",
	302: "Found",
	304: "Not Modified",
	400: "Bad Request",
	401: "Unauthorized",
	403: "Forbidden",
	404: "Not Found",
	405: "Method Not Allowed",
	500: "Internal Server Error",
	501: "Not Implemented",
	503: "Service Unavailable",
}

OK: int = 200
FORBIDDEN: int = 403
NOT_FOUND: int = 404
INTERNAL_SERVER_ERROR: int = 500


def reason(status: int) -> str:
	return HTTP_STATUS.get(status, "Unknown Status")


# EOF

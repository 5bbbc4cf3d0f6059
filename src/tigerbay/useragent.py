"""Library version and the User-Agent header sent with every request."""

VERSION = "0.1.0"

USER_AGENT = f"tigerbay-python (+https://github.com/mrzen/tigerbay-python v{VERSION})"

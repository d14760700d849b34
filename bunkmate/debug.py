# ABOUTME: Verbose debug output gated on the DEBUG environment variable
# ABOUTME: Prints tagged lines to stdout so they show up in container logs

from bunkmate.config import Config


def debug_log(message: str, category: str = "DEBUG") -> None:
    """Print a tagged debug line when Config.DEBUG is enabled."""
    if not Config.DEBUG:
        return
    print(f"[{category}] {message}", flush=True)

# ABOUTME: Debug logging helper gated on the DEBUG environment flag
# ABOUTME: Prints tagged lines to stdout so they show up in container logs

from paintingguessr.config import Config


def debug_log(message: str, category: str = "APP") -> None:
    """Print a debug line when DEBUG=true, otherwise do nothing."""
    if not Config.DEBUG:
        return
    print(f"[DEBUG][{category}] {message}", flush=True)

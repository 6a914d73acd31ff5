from datetime import datetime, timezone
from pathlib import Path


def append_log(
    log_path: Path,
    domain: str,
    level: str,
    message: str,
    max_size_bytes: int | None = None,
) -> None:
    """Append a timestamped entry to the logfile.

    Args:
        log_path: Path to the logfile
        domain: Domain name (e.g., 'open', 'handler')
        level: Log level (DEBUG, INFO, WARN, ERROR)
        message: Log message
        max_size_bytes: Start the logfile over once it is larger than this
    """
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        if max_size_bytes is not None and log_path.exists() and log_path.stat().st_size > max_size_bytes:
            log_path.unlink()
        with log_path.open("a", encoding="utf-8") as fh:
            fh.write(f"[{timestamp}] [{domain}] {level}: {message}\n")
    except OSError:
        pass  # Logging should never raise

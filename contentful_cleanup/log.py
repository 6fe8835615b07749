"""Run log written next to the command's output."""

from datetime import datetime

from .errors import FileIOFailed

# ============================================
# LOGGING
# ============================================

class CleanupLogger:
    def __init__(self, filepath: str = "cleanup_log.txt", command: str = ""):
        self.filepath = filepath
        self.command = command
        try:
            self.file = open(filepath, 'a', encoding='utf-8')
        except OSError as e:
            raise FileIOFailed(f"Cannot open log file {filepath}: {e}", path=filepath, cause=e) from e
        self.log(f"\n{'='*60}")
        self.log(f"{command or 'Run'} started at {datetime.now().isoformat()}")
        self.log(f"{'='*60}")

    def log(self, message: str):
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.file.write(f"[{timestamp}] {message}\n")
        self.file.flush()

    def close(self):
        if self.file.closed:
            return
        self.log(f"{self.command or 'Run'} ended at {datetime.now().isoformat()}")
        self.file.close()

    def __enter__(self) -> "CleanupLogger":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

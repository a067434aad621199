import os
from datetime import datetime

# ---------------- Configuration Constants ----------------

READ_BUFFER_SIZE = int(os.getenv("SPLITJOIN_BUFFER_SIZE", 1024 * 1024))  # bytes per read
DEFAULT_TIMEOUT = int(os.getenv("SPLITJOIN_TIMEOUT", 5))  # default HTTP timeout in seconds
NODE_URL = os.getenv("SPLITJOIN_NODE_URL", "http://localhost:5001")
LOG_DIR = os.getenv("SPLITJOIN_LOG_DIR", os.path.join(os.path.dirname(__file__), "logs"))

# ---------------- Shared Logging Function ----------------

def log(message, context="SPLITJOIN"):
    timestamp = datetime.now().strftime("[%Y-%m-%d %H:%M:%S]")
    formatted = f"[{context}] {timestamp} {message}"

    os.makedirs(LOG_DIR, exist_ok=True)
    log_file = os.path.join(LOG_DIR, f"{context.lower()}.log")

    with open(log_file, "a") as f:
        f.write(formatted + "\n")

    print(formatted)

# ---------------- Public API ----------------

__all__ = ["READ_BUFFER_SIZE", "DEFAULT_TIMEOUT", "NODE_URL", "LOG_DIR", "log"]

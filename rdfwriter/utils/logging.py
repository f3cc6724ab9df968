import logging
import re
import sys
from pathlib import Path

ANSI_ESCAPE = re.compile(r"\033\[[0-9;]*m")


def strip_ansi_codes(text: str) -> str:
    """Remove ANSI escape codes from text.

    Removes sequences like [31m, [1;33m, etc.
    """
    return ANSI_ESCAPE.sub("", text)


class ColoredFormatter(logging.Formatter):
    """Logging formatter that adds colors and icons based on level and logger name."""

    # ANSI Escape Codes
    RESET = "\033[0m"
    BOLD = "\033[1m"

    COLORS = {
        "DEBUG": "\033[37m",  # White
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[1;31m",  # Bold Red
    }

    # Icons and colors per component
    COMPONENT_THEMES = {
        "rdfwriter.triples.graph": ("🕸️ ", "\033[1;36m"),  # Bold Cyan
        "rdfwriter.triples.ordering": ("🔢", "\033[1;34m"),  # Bold Blue
        "rdfwriter.triples.renderer": ("🏷️ ", "\033[1;35m"),  # Bold Magenta
        "rdfwriter.triples.serializer": ("📝", "\033[1;32m"),  # Bold Green
        "rdfwriter.triples.validator": ("✅", "\033[1;33m"),  # Bold Yellow
        "rdfwriter.loaders": ("📂", "\033[1;36m"),  # Bold Cyan
        "rdfwriter.main": ("🚀", "\033[1;32m"),  # Bold Green
        "__main__": ("🚀", "\033[1;32m"),  # Bold Green
        "root": ("⚙️ ", "\033[1;90m"),  # Dark Gray
    }

    def format(self, record):
        icon, component_color = "•", self.BOLD
        for name, theme in self.COMPONENT_THEMES.items():
            if record.name.startswith(name):
                icon, component_color = theme
                break

        level_color = self.COLORS.get(record.levelname, self.RESET)
        level_name = f"{level_color}{record.levelname:8}{self.RESET}"

        short_name = record.name.split(".")[-1]
        component = f"{component_color}{icon} {short_name:12}{self.RESET}"

        message = record.getMessage()
        if record.levelno >= logging.WARNING:
            message = f"{level_color}{message}{self.RESET}"

        timestamp = self.formatTime(record, self.datefmt)
        return f"{timestamp} | {level_name} | {component} | {message}"


class PlainFormatter(logging.Formatter):
    """Plain text formatter for file logging (no ANSI codes)."""

    def format(self, record):
        timestamp = self.formatTime(record, self.datefmt)
        short_name = record.name.split(".")[-1]
        message = strip_ansi_codes(record.getMessage())
        return f"{timestamp} | {record.levelname:8} | {short_name:12} | {message}"


# Global file handler reference (to allow adding it later)
_file_handler: logging.FileHandler | None = None


def setup_colored_logging(level=logging.INFO, log_file: str | Path | None = None):
    """
    Sets up global logging with the ColoredFormatter.

    Logs go to stderr so documents written to stdout stay clean.

    Args:
        level: Logging level (default: INFO)
        log_file: Optional path to log file for persistent logging
    """
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ColoredFormatter(datefmt="%H:%M:%S"))

    root_logger = logging.getLogger()
    root_logger.handlers = []  # Clear existing handlers
    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)

    if log_file:
        add_file_handler(log_file, level)

    # Silence noisy loggers
    logging.getLogger("rdflib").setLevel(logging.WARNING)


def add_file_handler(log_file: str | Path, level=logging.DEBUG) -> logging.FileHandler:
    """
    Add a file handler to the root logger.

    Args:
        log_file: Path to the log file
        level: Logging level for file (default: DEBUG for maximum detail)

    Returns:
        The created FileHandler
    """
    global _file_handler

    if _file_handler:
        remove_file_handler()

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    _file_handler = logging.FileHandler(str(log_path), mode="w", encoding="utf-8")
    _file_handler.setLevel(level)
    _file_handler.setFormatter(PlainFormatter(datefmt="%Y-%m-%d %H:%M:%S"))

    logging.getLogger().addHandler(_file_handler)
    logging.info("File logging enabled: %s", log_path)

    return _file_handler


def remove_file_handler() -> None:
    """Remove the file handler from the root logger."""
    global _file_handler

    if _file_handler:
        logging.getLogger().removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None


def get_file_handler() -> logging.FileHandler | None:
    """Get the current file handler (if any)."""
    return _file_handler

import logging, json, sys, time, os

JSON_FORMAT = json.dumps({
    "ts": "%(asctime)s",
    "level": "%(levelname)s",
    "name": "%(name)s",
    "msg": "%(message)s"
})


def _json_formatter():
    formatter = logging.Formatter(fmt=JSON_FORMAT, datefmt="%Y-%m-%dT%H:%M:%SZ")
    formatter.converter = time.gmtime  # UTC
    return formatter


def get_logger(name="alexandria", level=logging.INFO, to_file=None, stream=None):
    """JSON-lines logger for the alex tools.

    Console output goes to ``stream`` (stderr by default); stdout is left
    to key text. Handlers are attached once per logger name, later calls
    only change the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = _json_formatter()
    console = logging.StreamHandler(stream or sys.stderr)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if to_file:
        # Ensure the directory exists before writing
        os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
        file_handler = logging.FileHandler(to_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def cli_logger(settings, debug=False):
    """Logger for one CLI run; ``debug`` overrides the configured level."""
    level = logging.DEBUG if debug else settings.log_level
    return get_logger("alexandria.cli", level=level, to_file=settings.log_file)

"""
Logging Configuration
Sets up the planner's loggers.

The Store reports every request at INFO. The model layer (sites, links,
disjoint-set forest) explains each individual rejection at DEBUG, which is
usually too chatty for a running session, so it gets its own level.
"""
import logging
import os
import sys
import tempfile
from typing import Optional

PACKAGE_LOGGER = "pipelineplanner"
MODEL_LOGGER = "pipelineplanner.model"

# Default file for `python -m pipelineplanner --log`
DEFAULT_LOG_FILE: str = os.path.join(tempfile.gettempdir(), "pipelineplanner.log")


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    model_level: Optional[int] = None,
) -> logging.Logger:
    """
    Configures the 'pipelineplanner' namespace logger.

    Args:
        level: Level of the Store/controller messages and of the handlers.
        log_file: Optional path to save logs to a file.
        model_level: Level of the model layer's per-rejection diagnostics.
            Defaults to `level`. Pass logging.DEBUG together with
            level=logging.INFO to see why sites or links were refused.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    model_logger = logging.getLogger(MODEL_LOGGER)

    effective_model_level = level if model_level is None else model_level
    logger.setLevel(level)
    model_logger.setLevel(effective_model_level)

    # Only our own handlers are replaced; handlers on the root logger stay
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Handlers must let the more verbose of the two levels through
    handler_level = min(level, effective_model_level)
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    targets: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        targets.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in targets:
        handler.setLevel(handler_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(
        f"Logging initialized (planner: {logging.getLevelName(level)}, "
        f"model: {logging.getLevelName(effective_model_level)}"
        + (f", file: {log_file}" if log_file else "") + ")."
    )
    return logger

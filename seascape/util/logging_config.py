
import logging

from pathlib import Path

def setup_logging(log_level: str = "INFO", log_to_file: bool = False) -> None:
    """
    Configure logging for the seascape generator.
    - Console handler for real-time output.
    - Optional file handler for persistent logs.
    - Custom formatter with timestamps, levels and messages.
    """

    # Create logger
    logger = logging.getLogger()
    logger.setLevel(log_level)

    if logger.hasHandlers():
        logger.handlers.clear()

    # logger format
    formatter = logging.Formatter('(%(asctime)s) [%(levelname)s] <%(filename)s> %(message)s')

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler (optional, logs to project root)
    if log_to_file:
        log_dir = Path(__file__).parent.parent.parent / "logs"
        log_dir.mkdir(exist_ok=True)
        file_handler = logging.FileHandler(log_dir / "seascape.log")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Panda3D only needs to report warnings while we generate geometry
    logging.getLogger('panda3d').setLevel(logging.WARNING)

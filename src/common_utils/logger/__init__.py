from common_utils.logger.logger import logger, setup_logger, get_logger

__all__ = ["logger", "setup_logger", "get_logger"]

import logging

from frame_stats.utils.logger import get_logger


def test_get_logger_attaches_single_handler():
    logger = get_logger("frame_stats.test_logger", "debug")
    again = get_logger("frame_stats.test_logger", "error")

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_default_name():
    assert get_logger().name == "frame_stats"

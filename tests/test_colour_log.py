import io
import logging

from colorama import Back, Fore, Style

from colour_log import ColourFormatter, colour_for, configure_logging
from constants import DETAIL


def test_colour_for_level_bands():
    assert colour_for(logging.DEBUG) == Fore.LIGHTBLACK_EX
    assert colour_for(DETAIL) == Fore.LIGHTBLACK_EX
    assert colour_for(logging.INFO) == ''
    assert colour_for(logging.WARNING) == Fore.GREEN
    assert colour_for(logging.ERROR) == Fore.LIGHTYELLOW_EX
    assert colour_for(logging.CRITICAL) == Back.RED + Fore.LIGHTWHITE_EX
    assert colour_for(60) == ''


def test_formatter_wraps_message():
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "oops", None, None)

    assert ColourFormatter("%(message)s").format(record) == Fore.LIGHTYELLOW_EX + "oops" + Style.RESET_ALL


def test_configure_logging_filters_by_level():
    stream = io.StringIO()
    configure_logging(logging.INFO, stream=stream)
    logger = logging.getLogger("test_colour_log")

    logger.log(DETAIL, "hidden")
    logger.info("shown")

    assert "hidden" not in stream.getvalue()
    assert stream.getvalue() == "shown" + Style.RESET_ALL + "\n"
    assert logging.getLevelName(DETAIL) == "DETAIL"

import logging

import pytest

from colour_log import ColourFormatter


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, ColourFormatter):
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("CAT\nat\na\nact\ncats\ndog\n", encoding="utf-8")
    return path

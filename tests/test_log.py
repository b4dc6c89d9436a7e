import logging

from text_rle.log import get_logger, init_logger
from text_rle.RLE import RLECompressor


def test_init_logger_levels():
    assert init_logger("text_rle_test").level == logging.INFO
    assert init_logger("text_rle_test", debug=True).level == logging.DEBUG
    assert len(get_logger("text_rle_test").handlers) == 1


def test_compressor_logs_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="text_rle"):
        RLECompressor().compress_text("AAB")
    assert "RLE compressed 3 chars into 3 chars" in caplog.text

import re

from swegeodesy.utils.logging import clear_warnings, warn_once


def test_warn_once(caplog):
    clear_warnings()
    warn_once('test')
    assert 'test' in caplog.text

    warn_once('test')
    assert len(re.findall('test', caplog.text)) == 1


def test_clear_warnings(caplog):
    clear_warnings()
    warn_once('repeated')
    clear_warnings()
    warn_once('repeated')
    assert len(re.findall('repeated', caplog.text)) == 2

import io
import logging

from polygraph.core.logging_utils import LEVEL_ENV, configure_logging, get_logger, parse_level


def test_parse_level():
    assert parse_level('warning') == logging.WARNING
    assert parse_level(' Debug ') == logging.DEBUG
    assert parse_level(15) == 15
    assert parse_level('nope') == logging.INFO
    assert parse_level(None, default=logging.ERROR) == logging.ERROR


def test_get_logger_prefixes_namespace():
    assert get_logger('dual').name == 'polygraph.dual'
    assert get_logger('polygraph.editor').name == 'polygraph.editor'
    assert get_logger('tmp', level='error').level == logging.ERROR
    assert get_logger('tmp').level == logging.NOTSET
    assert logging.getLogger('polygraph').propagate is False


def test_configure_logging_sets_level_and_redirects():
    out = io.StringIO()
    log = configure_logging('warning', stream=out, fmt='%(levelname)s|%(message)s')
    assert log.name == 'polygraph'
    assert log.level == logging.WARNING
    get_logger('ops').info("hidden")
    get_logger('ops').warning("shown")
    assert out.getvalue() == 'WARNING|shown\n'


def test_level_taken_from_environment(monkeypatch):
    log = logging.getLogger('polygraph')
    saved = list(log.handlers)
    for h in saved:
        log.removeHandler(h)
    log.setLevel(logging.NOTSET)
    monkeypatch.setenv(LEVEL_ENV, 'debug')
    try:
        get_logger('env')
        assert log.level == logging.DEBUG
        assert len(log.handlers) == 1
    finally:
        for h in list(log.handlers):
            log.removeHandler(h)
        for h in saved:
            log.addHandler(h)

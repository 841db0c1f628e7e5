import logging

from mollweide import LOGGER


def test_logger():
    assert LOGGER.name == 'mollweide'
    assert LOGGER.level == logging.WARNING
    assert any(
        handler.formatter._fmt == '[%(levelname)s] %(name)s: %(message)s'
        for handler in LOGGER.handlers
    )


def test_child_loggers_propagate(caplog):
    logging.getLogger('mollweide.projection.Mollweide').warning('child warning')
    assert 'child warning' in caplog.text

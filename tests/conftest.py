import logging

import pytest

import pandoc_jekyll.core as core


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    for handler in list(core.LOG.handlers):
        core.LOG.removeHandler(handler)
    core.LOG.propagate = True
    core.LOG.setLevel(logging.NOTSET)

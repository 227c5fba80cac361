"""Shared fixtures for rustcja tests."""

import logging

import pytest

from rustcja.debuglog import PACKAGE_LOGGER
from rustcja.phrases.table import PhraseTable


@pytest.fixture
def sample_table():
    """Small phrase table mirroring common borrow-checker messages."""
    return PhraseTable.from_pairs(
        [
            ("hello", "こんにちは"),
            ("error: {$name}", "エラー: {$name}"),
            ("borrow of moved value", "移動された値の借用"),
            (
                "move occurs because `{$name}` has type `{$ty}`, "
                "which does not implement the `Copy` trait",
                "`{$ty}` 型の `{$name}` は `Copy` トレイトを実装していないので、移動します",
            ),
        ]
    )


@pytest.fixture
def borrow_table():
    """Phrase table for a full borrow-of-moved-value diagnostic."""
    return PhraseTable.from_pairs(
        [
            ("borrow of moved value", "移動された値の借用"),
            ("value moved here", "ここで値を移動"),
            ("value borrowed here after move", "移動後の値をここで借用"),
            (
                "consider cloning the value if the performance cost is acceptable",
                "複製コストが許容できるなら、クローンすることを検討してください",
            ),
        ]
    )


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Detach debug-log file handlers added during a test."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)

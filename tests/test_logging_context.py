import logging

from utils.logging_context import configure_logging, current_context, log_context, set_session_id

LOGGER_NAME = "tests.logging_context"


def test_log_context_sets_and_restores_fields(caplog) -> None:
    configure_logging()
    logger = logging.getLogger(LOGGER_NAME)

    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        with log_context(session_id="abc", wizard_step="company", operation="navigate") as context:
            assert context.wizard_step == "company"
            with log_context(operation="publish"):
                logger.info("nested")
            logger.info("inside")
        logger.info("outside")

    nested, inside, outside = caplog.records
    assert (nested.session_id, nested.wizard_step, nested.operation) == ("abc", "company", "publish")
    assert (inside.session_id, inside.wizard_step, inside.operation) == ("abc", "company", "navigate")
    assert (outside.wizard_step, outside.operation) == ("-", "-")


def test_blank_values_are_normalised(caplog) -> None:
    configure_logging()
    logger = logging.getLogger(LOGGER_NAME)

    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        with log_context(wizard_step="  "):
            logger.info("blank")

    assert caplog.records[0].wizard_step == "-"


def test_set_session_id_binds_until_changed(caplog) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    set_session_id("s-1")
    try:
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            logger.info("bound")
        assert caplog.records[0].session_id == "s-1"
    finally:
        set_session_id(None)
    assert current_context().session_id == "-"

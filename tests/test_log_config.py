import logging

from loguru import logger

from assistants_runs import CreateRunRequest, Tool
from assistants_runs.log_config import InterceptHandler, configure_logging


def test_stdlib_records_are_routed_through_loguru():
    messages = []
    configure_logging(level="DEBUG", json_logging=False)
    sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
    try:
        assert any(isinstance(handler, InterceptHandler) for handler in logging.getLogger().handlers)
        CreateRunRequest("asst_123", tools=[Tool.from_function("lookup")], tool_choice="look")
    finally:
        logger.remove(sink_id)
        logging.basicConfig(handlers=[logging.StreamHandler()], level=logging.WARNING, force=True)

    assert any("resolved to function 'lookup'" in str(message) for message in messages)


def test_settings_read_environment(monkeypatch):
    import importlib

    from assistants_runs import settings

    monkeypatch.setenv("DISABLE_JSON_LOGGING", "True")
    monkeypatch.setenv("ASSISTANTS_RUNS_LOG_LEVEL", "warning")
    try:
        importlib.reload(settings)
        assert settings.DISABLE_JSON_LOGGING is True
        assert settings.LOG_LEVEL == "WARNING"
    finally:
        monkeypatch.undo()
        importlib.reload(settings)


def test_records_keep_their_call_site():
    messages = []
    configure_logging(level="DEBUG", json_logging=False)
    sink_id = logger.add(messages.append, level="DEBUG", format="{name} {function} {message}")
    try:
        CreateRunRequest("asst_123", tools=[Tool.from_function("lookup")], tool_choice="look")
    finally:
        logger.remove(sink_id)
        logging.basicConfig(handlers=[logging.StreamHandler()], level=logging.WARNING, force=True)

    assert any(
        str(message).startswith("assistants_runs.model.assistants_api_tool_choice_option resolve ")
        for message in messages
    )

import logging

import pytest

from assistants_runs import FunctionObject, Tool


@pytest.fixture(autouse=True)
def configure_logging():
    logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(levelname)s - %(message)s')


@pytest.fixture
def weather_tool() -> Tool:
    return Tool.from_function(
        name="get_current_weather",
        description="Get the current weather in a given location",
        parameters={
            "type": "object",
            "properties": {
                "location": {"type": "string", "description": "The city and state, e.g. San Francisco, CA"},
                "unit": {"type": "string", "enum": ["celsius", "fahrenheit"]},
            },
            "required": ["location"],
        },
    )


@pytest.fixture
def time_tool() -> Tool:
    return Tool(type="function", function=FunctionObject(name="get_current_time", description="Get the current time"))


@pytest.fixture
def tools(weather_tool, time_tool):
    return [weather_tool, time_tool]

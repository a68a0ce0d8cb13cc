import pytest

from assistants_runs import CreateRunRequest, InvalidArgumentError, Tool
from assistants_runs.model import AssistantsApiToolChoiceOption, AssistantsNamedToolChoice, ToolChoiceMode


@pytest.mark.parametrize("choice", ["auto", "none", "required"])
def test_reserved_literals_pass_through(tools, choice):
    request = CreateRunRequest("asst_123", tools=tools, tool_choice=choice)
    assert request.tool_choice.actual_instance == ToolChoiceMode(choice)
    assert request.to_dict()["tool_choice"] == choice


def test_named_tool_becomes_function_reference(tools):
    request = CreateRunRequest("asst_123", tools=tools, tool_choice="get_current_time")
    assert isinstance(request.tool_choice.actual_instance, AssistantsNamedToolChoice)
    assert request.tool_choice.function_name == "get_current_time"
    assert request.to_dict()["tool_choice"] == {"type": "function", "function": {"name": "get_current_time"}}


def test_partial_name_matches_first_tool_containing_it(tools):
    request = CreateRunRequest("asst_123", tools=tools, tool_choice="weather")
    assert request.tool_choice_value == {"type": "function", "function": {"name": "get_current_weather"}}

    request = CreateRunRequest("asst_123", tools=tools, tool_choice="get_current")
    assert request.tool_choice.function_name == "get_current_weather"


@pytest.mark.parametrize("choice", [None, "", "   "])
def test_tools_without_choice_default_to_auto(tools, choice):
    request = CreateRunRequest("asst_123", tools=tools, tool_choice=choice)
    assert request.tool_choice_value == "auto"


@pytest.mark.parametrize("tool_list", [None, []])
@pytest.mark.parametrize("choice", [None, "auto", "required", "get_current_weather", "missing"])
def test_no_tools_leaves_choice_unset(tool_list, choice):
    request = CreateRunRequest("asst_123", tools=tool_list, tool_choice=choice)
    assert request.tool_choice is None
    assert "tool_choice" not in request.to_dict()


def test_unmatched_choice_is_invalid_argument(tools):
    with pytest.raises(InvalidArgumentError, match="'send_email' was not found") as exc_info:
        CreateRunRequest("asst_123", tools=tools, tool_choice="send_email")
    assert exc_info.value.argument == "tool_choice"
    assert exc_info.value.value == "send_email"
    assert isinstance(exc_info.value, ValueError)


def test_non_function_tools_are_not_matched():
    tools = [Tool.code_interpreter(), Tool.file_search()]
    with pytest.raises(InvalidArgumentError):
        CreateRunRequest("asst_123", tools=tools, tool_choice="file_search")

    request = CreateRunRequest("asst_123", tools=tools)
    assert request.tool_choice_value == "auto"


def test_literal_wins_over_tool_with_same_name():
    tools = [Tool.from_function(name="auto_reply")]
    request = CreateRunRequest("asst_123", tools=tools, tool_choice="auto")
    assert request.tool_choice_value == "auto"


def test_tool_choice_option_from_dict():
    assert AssistantsApiToolChoiceOption.from_dict("none").actual_instance == ToolChoiceMode.NONE

    option = AssistantsApiToolChoiceOption.from_json('{"type": "function", "function": {"name": "lookup"}}')
    assert option.function_name == "lookup"
    assert option.to_json() == '{"type": "function", "function": {"name": "lookup"}}'


def test_tool_choice_option_positional_arguments():
    with pytest.raises(ValueError, match="only 1 is allowed"):
        AssistantsApiToolChoiceOption("auto", "none")
    with pytest.raises(ValueError, match="keyword arguments cannot be used"):
        AssistantsApiToolChoiceOption("auto", actual_instance="none")


def test_tool_choice_option_for_non_function_tool():
    option = AssistantsApiToolChoiceOption.from_dict({"type": "file_search"})
    assert option.function_name is None
    assert option.to_dict() == {"type": "file_search"}

    with pytest.raises(ValueError, match="must set `function.name`"):
        AssistantsApiToolChoiceOption.from_dict({"type": "function"})
    with pytest.raises(ValueError, match="must be one of enum values"):
        AssistantsApiToolChoiceOption.from_dict({"type": "web_browser"})


def test_function_on_non_function_tool_is_rejected():
    with pytest.raises(ValueError, match="cannot define `function`"):
        CreateRunRequest("asst_123", tools=[{"type": "file_search", "function": {"name": "search"}}], tool_choice="search")

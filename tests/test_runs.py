from unittest.mock import AsyncMock, MagicMock

import pytest

from assistants_runs import CreateRunRequest, create_run, create_run_async


def test_create_run_passes_wire_body(tools):
    client = MagicMock()
    request = CreateRunRequest("asst_123", tools=tools, tool_choice="weather", metadata={"k": "v"})

    run = create_run(client, "thread_abc", request)

    assert run is client.beta.threads.runs.create.return_value
    client.beta.threads.runs.create.assert_called_once_with(thread_id="thread_abc", **request.to_dict())
    kwargs = client.beta.threads.runs.create.call_args.kwargs
    assert kwargs["stream"] is False
    assert kwargs["tool_choice"] == {"type": "function", "function": {"name": "get_current_weather"}}
    assert "response_format" not in kwargs


def test_create_run_sets_transport_fields():
    client = MagicMock()
    request = CreateRunRequest("asst_123")

    create_run(client, "thread_abc", request, stream=True, assistant_id="asst_456")

    assert request.stream is True
    assert request.assistant_id == "asst_456"
    client.beta.threads.runs.create.assert_called_once_with(thread_id="thread_abc", assistant_id="asst_456", stream=True)


@pytest.mark.asyncio
async def test_create_run_async():
    client = MagicMock()
    client.beta.threads.runs.create = AsyncMock(return_value="run")
    request = CreateRunRequest("asst_123", model="gpt-4o-mini")

    run = await create_run_async(client, "thread_abc", request, stream=True)

    assert run == "run"
    client.beta.threads.runs.create.assert_awaited_once_with(
        thread_id="thread_abc", assistant_id="asst_123", model="gpt-4o-mini", stream=True
    )

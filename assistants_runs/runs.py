import logging
from typing import Optional

from openai import AsyncOpenAI, OpenAI

from assistants_runs.model.create_run_request import CreateRunRequest

logger = logging.getLogger(__name__)


def _prepare(request: CreateRunRequest, stream: bool, assistant_id: Optional[str]) -> dict:
    if assistant_id is not None and assistant_id != request.assistant_id:
        logger.info(f"rebinding run request from assistant {request.assistant_id} to {assistant_id}")
        request.assistant_id = assistant_id
    request.stream = stream
    return request.to_dict()


def create_run(client: OpenAI, thread_id: str, request: CreateRunRequest, stream: bool = False,
               assistant_id: Optional[str] = None):
    """Create a run on ``thread_id`` through the openai client.

    The returned value is whatever ``client.beta.threads.runs.create`` returns:
    a Run, or a Stream of events when ``stream`` is set.
    """
    body = _prepare(request, stream, assistant_id)
    logger.debug(f"creating run on thread {thread_id} with {body}")
    return client.beta.threads.runs.create(thread_id=thread_id, **body)


async def create_run_async(client: AsyncOpenAI, thread_id: str, request: CreateRunRequest, stream: bool = False,
                           assistant_id: Optional[str] = None):
    body = _prepare(request, stream, assistant_id)
    logger.debug(f"creating run on thread {thread_id} with {body}")
    return await client.beta.threads.runs.create(thread_id=thread_id, **body)

"""GraphQL documents sent to the PixAI endpoint.

Each builder returns the `{"query", "variables"}` pair accepted by
`GraphQLTransport.execute`.
"""

CREATE_GENERATION_TASK = (
    "mutation createGenerationTask($parameters: JSONObject!) "
    "{ createGenerationTask(parameters: $parameters) { id } }"
)

TASK_STATUS = "query getTaskById($id: ID!) { task(id: $id) { id status } }"

TASK_OUTPUTS = "query getTaskById($id: ID!) { task(id: $id) { outputs } }"

MEDIA_URLS = "query getMediaById($id: String!) { media(id: $id) { urls { variant url } } }"


def create_task(parameters: dict):
    return CREATE_GENERATION_TASK, {"parameters": parameters}


def task_status(job_id: str):
    return TASK_STATUS, {"id": job_id}


def task_outputs(job_id: str):
    return TASK_OUTPUTS, {"id": job_id}


def media_urls(media_id: str):
    return MEDIA_URLS, {"id": media_id}

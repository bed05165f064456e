"""Field extraction from GraphQL `data` objects."""

from pixai.errors import MalformedResponse


def dig(data, *path, job_id=None):
    """Walk nested objects along `path` and return the final value.

    Raises `MalformedResponse` naming the dotted path when any step is absent
    or not an object.
    """
    current = data
    for depth, key in enumerate(path):
        if not isinstance(current, dict) or current.get(key) is None:
            dotted = ".".join(path[: depth + 1])
            raise MalformedResponse(f"Response is missing '{dotted}'", job_id=job_id)
        current = current[key]
    return current

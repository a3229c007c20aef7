"""Schema validation for the remote project payload."""

from __future__ import annotations

import json
from functools import cache
from importlib import resources

import pydantic
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from stackblitz_zip.errors import MalformedResponseError
from stackblitz_zip.types import ProjectTree, RemoteFile

# Errors at these depths mean the file collection itself is missing or empty
_ENVELOPE_DEPTH = len(("project", "appFiles"))


@cache
def _project_validator() -> Draft202012Validator:
    with resources.files("stackblitz_zip.schema").joinpath("project.schema.json").open(
        "r", encoding="utf-8"
    ) as f:
        return Draft202012Validator(json.load(f))


def validate_project_response(data: object) -> None:
    try:
        _project_validator().validate(data)
    except ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        summary = (
            "No files found in project data"
            if len(exc.absolute_path) <= _ENVELOPE_DEPTH
            else "Malformed project data"
        )
        raise MalformedResponseError(f"{summary} ({location}: {exc.message})") from exc


def parse_project_tree(body: bytes) -> ProjectTree:
    """Decode and validate a raw response body into an ordered file tree."""
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise MalformedResponseError(f"Response is not valid JSON: {exc}") from exc
    validate_project_response(data)
    tree: ProjectTree = {}
    for path, entry in data["project"]["appFiles"].items():
        try:
            tree[path] = RemoteFile.model_validate(entry)
        except pydantic.ValidationError as exc:
            raise MalformedResponseError(f"Malformed project data ({path}: {exc})") from exc
    return tree

"""Initial data provider for the project store.

The seed is a JSON array of project records, read either from a local file
or fetched over HTTP(S)::

    [{"projectName": "...", "projectIdentifier": "...", "description": "...",
      "start_date": "2024-01-05T09:00", "end_date": "2024-02-01T17:30"}]
"""

import json
from pathlib import Path

import requests

from .store import LoadFailure, Project

RECORD_FIELDS = ('projectName', 'projectIdentifier', 'description', 'start_date', 'end_date')


def _is_url(source):
    return str(source).startswith(('http://', 'https://'))


def _read_payload(source, timeout):
    if _is_url(source):
        try:
            response = requests.get(source, timeout=timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as exc:
            raise LoadFailure(f"could not fetch {source}: {exc}") from exc
        except ValueError as exc:
            raise LoadFailure(f"malformed JSON from {source}: {exc}") from exc

    path = Path(source)
    try:
        return json.loads(path.read_text(encoding='utf-8'))
    except OSError as exc:
        raise LoadFailure(f"could not read {path}: {exc}") from exc
    except ValueError as exc:
        raise LoadFailure(f"malformed JSON in {path}: {exc}") from exc


def load_projects(source, timeout=None):
    """Return the list of :class:`Project` records found at ``source``."""
    payload = _read_payload(source, timeout)
    if not isinstance(payload, list):
        raise LoadFailure(f"expected a JSON array of projects, got {type(payload).__name__}")

    projects = []
    for index, record in enumerate(payload):
        if not isinstance(record, dict):
            raise LoadFailure(f"project #{index} is not an object")
        for name in RECORD_FIELDS:
            if name not in record:
                raise LoadFailure(f"project #{index} is missing field {name!r}")
            if not isinstance(record[name], str):
                raise LoadFailure(f"project #{index} field {name!r} is not text")
        projects.append(Project.from_record(record))
    return projects

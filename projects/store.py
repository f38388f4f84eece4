"""In-memory project store backing the project management page."""

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class ProjectError(Exception):
    """Base class for project store errors."""


class DuplicateIdentifier(ProjectError):
    """Raised when a project is added with an identifier already in use."""

    def __init__(self, identifier):
        super().__init__(f"A project with identifier {identifier!r} already exists")
        self.identifier = identifier


class LoadFailure(ProjectError):
    """Raised when the initial project data cannot be read."""


@dataclass(frozen=True)
class Project:
    """A single project record.

    Timestamps are kept as the text they were supplied in (normally ISO 8601
    as produced by a ``datetime-local`` input).
    """

    name: str
    identifier: str
    description: str
    start_time: str
    end_time: str

    @classmethod
    def from_record(cls, record):
        """Build a project from a seed record using its wire field names."""
        return cls(
            name=record['projectName'],
            identifier=record['projectIdentifier'],
            description=record['description'],
            start_time=record['start_date'],
            end_time=record['end_date'],
        )

    def to_record(self):
        """Return the project using the seed record field names."""
        return {
            'projectName': self.name,
            'projectIdentifier': self.identifier,
            'description': self.description,
            'start_date': self.start_time,
            'end_date': self.end_time,
        }


class SortCriterion(Enum):
    """Orderings offered by the sort selector."""

    NONE = 'none'
    NAME_ASC = 'name-asc'
    NAME_DESC = 'name-desc'
    DATE_ASC = 'date-asc'
    DATE_DESC = 'date-desc'

    @classmethod
    def parse(cls, value):
        """Accept a criterion or its string value; blank means no sorting."""
        if isinstance(value, cls):
            return value
        if not value:
            return cls.NONE
        return cls(value)


# criterion -> (sort key, descending)
_SORT_RULES = {
    SortCriterion.NAME_ASC: (lambda p: p.name, False),
    SortCriterion.NAME_DESC: (lambda p: p.name, True),
    # Compares the stored text, not the parsed timestamp.
    SortCriterion.DATE_ASC: (lambda p: p.start_time, False),
    SortCriterion.DATE_DESC: (lambda p: p.start_time, True),
}


class ProjectStore:
    """Holds the project list and the active sort criterion."""

    def __init__(self, projects=()):
        self._projects = list(projects)
        self.sort_criterion = SortCriterion.NONE

    def __len__(self):
        return len(self._projects)

    def __iter__(self):
        return iter(tuple(self._projects))

    @property
    def projects(self):
        """Snapshot of the collection in its current order."""
        return tuple(self._projects)

    def load(self, provider):
        """Replace the collection with whatever ``provider()`` returns.

        A :class:`LoadFailure` is logged and leaves the collection empty, as
        does a provider that raises ``TypeError``/``ValueError`` or returns
        something that is not iterable.
        """
        try:
            loaded = list(provider())
        except (LoadFailure, TypeError, ValueError) as exc:
            logger.warning("Error loading initial projects: %s", exc)
            self._projects = []
            return
        self._projects = loaded
        logger.info("Loaded %d initial projects", len(loaded))

    def add(self, project):
        """Append ``project`` and re-sort by the active criterion.

        Raises :class:`DuplicateIdentifier` without touching the collection
        when the identifier is already taken.
        """
        if any(p.identifier == project.identifier for p in self._projects):
            logger.info("Rejected duplicate project identifier %r", project.identifier)
            raise DuplicateIdentifier(project.identifier)
        self._projects.append(project)
        self._resort()

    def remove(self, identifier):
        """Drop every project with ``identifier``; unknown ones are ignored."""
        self._projects = [p for p in self._projects if p.identifier != identifier]

    def set_sort_criterion(self, criterion):
        """Make ``criterion`` active and re-sort the whole collection."""
        self.sort_criterion = SortCriterion.parse(criterion)
        self._resort()

    def search(self, term):
        """Yield projects whose name contains ``term``, ignoring case."""
        needle = (term or '').lower()
        for project in tuple(self._projects):
            if needle in project.name.lower():
                yield project

    def _resort(self):
        rule = _SORT_RULES.get(self.sort_criterion)
        if rule is None:
            return
        key, descending = rule
        self._projects.sort(key=key, reverse=descending)


class FormVisibility:
    """Hidden/visible toggle for the project creation form.

    The flag lives in ``state`` (a plain dict by default, the Flask session
    in the web layer) so each visitor gets their own toggle.
    """

    KEY = 'show_project_form'

    def __init__(self, state=None):
        self._state = {} if state is None else state

    @property
    def visible(self):
        """Whether the form is currently shown; starts hidden."""
        return bool(self._state.get(self.KEY, False))

    def toggle(self):
        """Flip between hidden and visible and return the new state."""
        self._state[self.KEY] = not self.visible
        return self.visible

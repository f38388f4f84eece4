"""Project management module."""

from datetime import datetime

from flask import (
    Blueprint,
    current_app,
    flash,
    redirect,
    render_template,
    request,
    session,
    url_for,
)

from .store import DuplicateIdentifier, FormVisibility, Project, SortCriterion

project_bp = Blueprint('project', __name__, url_prefix='/project')

# Form field name -> label shown when it is left blank
FORM_FIELDS = {
    'projectName': 'Project Name',
    'projectIdentifier': 'Project ID',
    'projectDescription': 'Project Description',
    'startDate': 'Start Date',
    'endDate': 'End Date',
}

SORT_OPTIONS = [
    (SortCriterion.NONE, 'None'),
    (SortCriterion.NAME_ASC, 'Name (A-Z)'),
    (SortCriterion.NAME_DESC, 'Name (Z-A)'),
    (SortCriterion.DATE_ASC, 'Start Date (Earliest)'),
    (SortCriterion.DATE_DESC, 'Start Date (Latest)'),
]

DUPLICATE_ID_MESSAGE = 'A project with the same ID already exists. Please enter a unique ID.'


def _store():
    """Return the project store attached to the running app."""
    return current_app.extensions['projects']['store']


def _form():
    """Return the creation form toggle for the current visitor."""
    return FormVisibility(session)


def _back_to_list():
    """Redirect to the project list, keeping the current search term."""
    term = request.form.get('q') or request.args.get('q') or None
    return redirect(url_for('project.index', q=term))


@project_bp.app_template_filter('project_datetime')
def format_timestamp(value):
    """Render a stored timestamp as ``MM/DD/YYYY, HH:MM`` (24-hour).

    Values carrying an offset (including a trailing ``Z``) are shown in local
    time; naive values are shown as stored.
    """
    if isinstance(value, str) and value.endswith(('Z', 'z')):
        value = value[:-1] + '+00:00'
    try:
        moment = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return 'Invalid Date'
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.strftime('%m/%d/%Y, %H:%M')


@project_bp.route('/')
def index():
    """Render the project management dashboard."""
    store = _store()
    term = request.args.get('q', '')
    return render_template(
        'project.html',
        projects=list(store.search(term)),
        search_term=term,
        sort_options=SORT_OPTIONS,
        sort_criterion=store.sort_criterion,
        show_form=_form().visible,
    )


@project_bp.route('/add', methods=['POST'])
def add():
    """Create a project from the submitted form."""
    values = {name: request.form.get(name, '').strip() for name in FORM_FIELDS}
    missing = [FORM_FIELDS[name] for name, value in values.items() if not value]
    if missing:
        flash(f"Please fill in: {', '.join(missing)}", 'error')
        return _back_to_list()

    project = Project(
        name=values['projectName'],
        identifier=values['projectIdentifier'],
        description=values['projectDescription'],
        start_time=values['startDate'],
        end_time=values['endDate'],
    )
    try:
        _store().add(project)
    except DuplicateIdentifier:
        flash(DUPLICATE_ID_MESSAGE, 'error')
    return _back_to_list()


@project_bp.route('/delete/<path:identifier>', methods=['POST'])
def delete(identifier):
    """Delete the project with the given identifier."""
    _store().remove(identifier)
    return _back_to_list()


@project_bp.route('/sort', methods=['POST'])
def sort():
    """Apply the sort option picked in the selector."""
    try:
        _store().set_sort_criterion(request.form.get('sort', ''))
    except ValueError:
        flash('Unknown sort option.', 'error')
    return _back_to_list()


@project_bp.route('/toggle-form', methods=['POST'])
def toggle_form():
    """Show or hide the project creation form."""
    _form().toggle()
    return _back_to_list()

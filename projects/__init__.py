"""Module registration for the project manager."""

# Blueprint instances for each module are created in their respective files
from .project import project_bp

# List of all blueprints to be registered in the main app
blueprints = [
    project_bp,
]
